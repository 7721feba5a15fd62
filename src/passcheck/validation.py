"""
Pluggable password validation run before a breach check.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from typing import Callable

from passcheck.exceptions import ValidationError

# Returns None when the password is acceptable
Validator = Callable[[str], ValidationError | None]

DEFAULT_MIN_LENGTH = 6


def min_length(length: int, message: str | None = None) -> Validator:
    """Build a validator enforcing a minimum password length.

    Args:
        length: Minimum number of characters
        message: Error message (default: "Password must be at least N characters")

    Returns:
        Validator callable
    """
    if length < 0:
        raise ValueError(f"Minimum length must be non-negative, got {length}")

    error_message = message or f"Password must be at least {length} characters"

    def _validate(pwd: str) -> ValidationError | None:
        if len(pwd) < length:
            return ValidationError(error_message)
        return None

    return _validate


def chain(*validators: Validator) -> Validator:
    """Combine validators; the first error wins."""
    def _validate(pwd: str) -> ValidationError | None:
        for validator in validators:
            error = validator(pwd)
            if error is not None:
                return error
        return None

    return _validate


default_validator = min_length(DEFAULT_MIN_LENGTH)

"""
Error types raised by passcheck.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class PasscheckError(Exception):
    """Base class for passcheck errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PasscheckError):
    """Candidate password rejected before hashing."""


class NetworkError(PasscheckError):
    """Range query failed (transport error, bad status or unreadable body)."""

    DEFAULT_MESSAGE = "Error checking breach status"

    def __init__(self, message: str = DEFAULT_MESSAGE, status: int | None = None):
        super().__init__(message)
        self.status = status

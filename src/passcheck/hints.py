"""
Client-side password improvement hints.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import re
from typing import Callable

RECOMMENDED_LENGTH = 10

UPPERCASE_HINT = "Add an uppercase letter"
LOWERCASE_HINT = "Add a lowercase letter"
NUMBER_HINT = "Include a number"
SYMBOL_HINT = "Add a symbol"
LENGTH_HINT = f"Use {RECOMMENDED_LENGTH}+ characters"

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^A-Za-z0-9]")

# (hint, predicate that fires the hint), in display order
HINT_RULES: tuple[tuple[str, Callable[[str], bool]], ...] = (
    (UPPERCASE_HINT, lambda pwd: not _UPPER.search(pwd)),
    (LOWERCASE_HINT, lambda pwd: not _LOWER.search(pwd)),
    (NUMBER_HINT, lambda pwd: not _DIGIT.search(pwd)),
    (SYMBOL_HINT, lambda pwd: not _SYMBOL.search(pwd)),
    (LENGTH_HINT, lambda pwd: len(pwd) < RECOMMENDED_LENGTH),
)


def evaluate_hints(pwd: str) -> list[str]:
    """Get improvement suggestions for a candidate password.

    Every rule is checked independently, so an empty string yields all
    five hints.

    Args:
        pwd: Candidate password

    Returns:
        Hints in fixed priority order (empty when nothing to improve)
    """
    return [hint for hint, fires in HINT_RULES if fires(pwd)]

"""
passcheck - password strength hints and Pwned Passwords breach checking.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "1.0.0"

from passcheck.exceptions import PasscheckError, ValidationError, NetworkError
from passcheck.models import Verdict, CheckResult
from passcheck.hints import evaluate_hints
from passcheck.checker import BreachChecker, match_suffix, check_password_sync
from passcheck.client import PwnedPasswordsClient
from passcheck.session import CheckerSession

__all__ = [
    "__version__",
    "PasscheckError",
    "ValidationError",
    "NetworkError",
    "Verdict",
    "CheckResult",
    "evaluate_hints",
    "BreachChecker",
    "match_suffix",
    "check_password_sync",
    "PwnedPasswordsClient",
    "CheckerSession",
]

"""
Data models for breach check results.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class Verdict(str, Enum):
    """Tri-state breach check outcome."""

    UNKNOWN = "unknown"
    CLEAN = "clean"
    BREACHED = "breached"


class CheckStage(str, Enum):
    """Stages a single breach check passes through."""

    IDLE = "idle"
    VALIDATING = "validating"
    VALIDATION_FAILED = "validation_failed"
    HASHING = "hashing"
    QUERYING = "querying"
    QUERY_FAILED = "query_failed"
    MATCHED = "matched"
    CLEAN = "clean"
    BREACHED = "breached"

    @property
    def is_terminal(self) -> bool:
        return self in (
            CheckStage.VALIDATION_FAILED,
            CheckStage.QUERY_FAILED,
            CheckStage.CLEAN,
            CheckStage.BREACHED,
        )


@dataclass
class CheckResult:
    """Result of checking a password against Pwned Passwords."""

    verdict: Verdict = Verdict.UNKNOWN
    occurrences: int = 0
    checked_at: datetime = field(default_factory=datetime.now)
    # Never store the actual password!
    hash_prefix: str = ""  # Only first 5 chars of SHA-1

    @property
    def is_breached(self) -> bool:
        """Check if password was found in breaches."""
        return self.verdict == Verdict.BREACHED

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "verdict": self.verdict.value,
            "is_breached": self.is_breached,
            "occurrences": self.occurrences,
            "hash_prefix": self.hash_prefix,
            "checked_at": self.checked_at.isoformat(),
        }

"""
Password digests for k-anonymity range queries.

Only the 5 character prefix of the digest is ever sent to the API.
The suffix is matched locally against the range response.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import hashlib
import re
from dataclasses import dataclass
from typing import Callable

PREFIX_LENGTH = 5
DIGEST_LENGTH = 40

# Takes raw bytes, returns a hex digest
Hasher = Callable[[bytes], str]

_HEX_DIGEST = re.compile(rf"^[0-9A-F]{{{DIGEST_LENGTH}}}$")


def sha1_hex(data: bytes) -> str:
    """SHA-1 hex digest, as used by Pwned Passwords."""
    return hashlib.sha1(data).hexdigest()


@dataclass(frozen=True)
class Digest:
    """Uppercase hex digest split for a range query."""

    value: str

    @property
    def prefix(self) -> str:
        return self.value[:PREFIX_LENGTH]

    @property
    def suffix(self) -> str:
        return self.value[PREFIX_LENGTH:]

    def __repr__(self) -> str:
        # Suffix stays out of reprs and tracebacks
        return f"Digest(prefix={self.prefix!r})"


def compute_digest(pwd: str, hasher: Hasher = sha1_hex) -> Digest:
    """Hash a password and render it as 40 uppercase hex characters.

    Args:
        pwd: Password to hash (UTF-8 encoded first)
        hasher: 160-bit hash function returning hex

    Returns:
        Digest with prefix/suffix split

    Raises:
        ValueError: If the hasher does not produce 40 hex characters
    """
    value = hasher(pwd.encode("utf-8")).upper()
    if not _HEX_DIGEST.match(value):
        raise ValueError(
            f"Hasher must return {DIGEST_LENGTH} hex characters, got {len(value)}"
        )
    return Digest(value)

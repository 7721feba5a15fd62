"""
Breach checking with k-anonymity range queries.

Each check is a fresh validate -> hash -> query -> match cycle. Nothing
is cached between calls and failed queries are never retried.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from passcheck.client import PwnedPasswordsClient
from passcheck.config import PasscheckConfig
from passcheck.digest import Hasher, compute_digest, sha1_hex
from passcheck.exceptions import NetworkError
from passcheck.models import CheckResult, CheckStage, Verdict
from passcheck.validation import Validator, default_validator, min_length

logger = logging.getLogger(__name__)

# Takes a 5 character prefix, returns the range response body
Fetcher = Callable[[str], Awaitable[str]]


def match_suffix(body: str, suffix: str) -> tuple[bool, int]:
    """Look for a digest suffix in a range response.

    Args:
        body: Newline-separated SUFFIX:COUNT lines
        suffix: 35 character digest suffix

    Returns:
        Tuple of (found, count); count is 0 if missing or unparseable
    """
    suffix = suffix.upper()
    size = len(suffix)

    for line in body.splitlines():
        line = line.strip()
        if line[:size].upper() != suffix:
            continue
        _, _, count = line[size:].partition(":")
        try:
            return True, int(count)
        except ValueError:
            return True, 0

    return False, 0


class BreachChecker:
    """Checks passwords against a breach corpus through a range fetcher."""

    def __init__(
        self,
        fetch: Fetcher,
        validator: Validator = default_validator,
        hasher: Hasher = sha1_hex,
    ):
        """Initialize checker.

        Args:
            fetch: Async callable returning the range body for a prefix
            validator: Runs before any hashing or network call
            hasher: 160-bit hash function returning hex
        """
        self.fetch = fetch
        self.validator = validator
        self.hasher = hasher

    def _enter(self, stage: CheckStage) -> None:
        logger.debug(f"Breach check stage: {stage.value}")

    async def check(self, pwd: str) -> CheckResult:
        """Check if a password has been exposed in data breaches.

        Args:
            pwd: Password to check (NOT stored or logged)

        Returns:
            CheckResult with a CLEAN or BREACHED verdict

        Raises:
            ValidationError: If the validator rejects the password
            NetworkError: If the range query fails
        """
        self._enter(CheckStage.IDLE)
        self._enter(CheckStage.VALIDATING)
        error = self.validator(pwd)
        if error is not None:
            self._enter(CheckStage.VALIDATION_FAILED)
            raise error

        self._enter(CheckStage.HASHING)
        digest = compute_digest(pwd, self.hasher)

        self._enter(CheckStage.QUERYING)
        try:
            body = await self.fetch(digest.prefix)
        except NetworkError:
            self._enter(CheckStage.QUERY_FAILED)
            raise
        except Exception as e:
            self._enter(CheckStage.QUERY_FAILED)
            raise NetworkError() from e

        if not isinstance(body, str):
            self._enter(CheckStage.QUERY_FAILED)
            raise NetworkError()

        self._enter(CheckStage.MATCHED)
        found, count = match_suffix(body, digest.suffix)

        if found:
            self._enter(CheckStage.BREACHED)
            verdict = Verdict.BREACHED
        else:
            self._enter(CheckStage.CLEAN)
            verdict = Verdict.CLEAN

        return CheckResult(verdict=verdict, occurrences=count, hash_prefix=digest.prefix)


def build_checker(config: PasscheckConfig, client: Fetcher) -> BreachChecker:
    """Build a checker using a client and the configured minimum length."""
    return BreachChecker(client, validator=min_length(config.min_length))


def check_password_sync(pwd: str, config: PasscheckConfig | None = None) -> CheckResult:
    """Synchronous wrapper for checking password exposure.

    Args:
        pwd: Password to check
        config: Settings (default: loaded from environment)

    Returns:
        CheckResult
    """
    config = config or PasscheckConfig.from_env()

    async def _check():
        async with PwnedPasswordsClient(config) as client:
            return await build_checker(config, client).check(pwd)

    return asyncio.run(_check())

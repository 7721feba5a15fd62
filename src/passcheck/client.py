"""
Pwned Passwords range API client.

Implements the k-anonymity range endpoint: the client sends only a
5 character SHA-1 prefix and receives every known suffix sharing it.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
import re

import aiohttp

from passcheck.config import PasscheckConfig
from passcheck.exceptions import NetworkError

logger = logging.getLogger(__name__)

_PREFIX = re.compile(r"^[0-9A-Fa-f]{5}$")


class PwnedPasswordsClient:
    """Client for the Pwned Passwords range API.

    Usable directly as a fetcher: ``await client(prefix)`` returns the
    raw ``SUFFIX:COUNT`` response body.
    """

    def __init__(
        self,
        config: PasscheckConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        """Initialize client.

        Args:
            config: Settings (default: loaded from environment)
            session: Existing HTTP session to borrow instead of creating one
        """
        self.config = config or PasscheckConfig.from_env()
        self._session = session
        self._owns_session = session is None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session exists."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close HTTP session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "PwnedPasswordsClient":
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def range_url(self, prefix: str) -> str:
        """Build the range query URL for a hash prefix."""
        if not _PREFIX.match(prefix):
            raise ValueError("Range prefix must be 5 hex characters")
        return f"{self.config.api_base}/range/{prefix.upper()}"

    async def fetch_range(self, prefix: str) -> str:
        """Fetch all hash suffixes sharing a prefix.

        Args:
            prefix: First 5 characters of the uppercase SHA-1 digest

        Returns:
            Response body of newline-separated SUFFIX:COUNT lines

        Raises:
            NetworkError: On transport failure or a non-200 response
        """
        url = self.range_url(prefix)
        session = await self._ensure_session()

        timeout = None
        if self.config.timeout:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)

        logger.debug(f"Querying range {prefix.upper()}")

        try:
            async with session.get(
                url,
                headers={"User-Agent": self.config.user_agent},
                timeout=timeout,
            ) as response:
                if response.status != 200:
                    logger.warning(f"Range query for {prefix.upper()} returned HTTP {response.status}")
                    raise NetworkError(status=response.status)
                return await response.text()

        except asyncio.TimeoutError as e:
            logger.warning("Range query timed out")
            raise NetworkError() from e
        except (aiohttp.ClientError, UnicodeDecodeError) as e:
            logger.warning(f"Range query failed: {e}")
            raise NetworkError() from e

    __call__ = fetch_range

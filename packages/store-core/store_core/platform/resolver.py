"""
Platform directory resolvers.

A resolver names the relative directory stores use for the current
runtime environment. Exactly one resolver is active per process; see
``selection`` for how it is chosen.
"""
from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..errors import IdentityUnavailableError
from .identity import IdentitySource

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM_DIRECTORY = ""
EDITOR_PLATFORM_DIRECTORY = "Editor"


class PlatformDirectoryResolver(ABC):
    """Interface for platform directory policies."""

    @abstractmethod
    def resolve(self) -> str:
        """Return the platform directory, without waiting."""
        ...

    async def resolve_async(self) -> str:
        """Return the platform directory, suspending if the policy needs to wait."""
        return self.resolve()


class DefaultPlatformResolver(PlatformDirectoryResolver):
    """Production builds: stores live in the root directory."""

    def resolve(self) -> str:
        return DEFAULT_PLATFORM_DIRECTORY


class EditorPlatformResolver(PlatformDirectoryResolver):
    """Development/editor runs: stores live under a fixed debug directory."""

    def __init__(self, directory: str = EDITOR_PLATFORM_DIRECTORY):
        self.directory = directory

    def resolve(self) -> str:
        return self.directory


class IdentityPlatformResolver(PlatformDirectoryResolver):
    """
    Identity-bound builds: stores live under the logged-in account id.

    ``resolve()`` checks the identity source once. ``resolve_async()`` polls
    it every ``poll_interval`` seconds until a logged-in session appears or
    ``timeout`` seconds pass. Both raise IdentityUnavailableError on failure.
    A ``timeout`` of None waits forever.
    """

    def __init__(
        self,
        identity_source: IdentitySource,
        poll_interval: float = 0.05,
        timeout: Optional[float] = 30.0,
    ):
        self.identity_source = identity_source
        self.poll_interval = poll_interval
        self.timeout = timeout

    def _logged_in_account(self) -> Optional[str]:
        session = self.identity_source.current()
        if session is None or not session.is_logged_in:
            return None
        return str(session.account_id)

    def resolve(self) -> str:
        account = self._logged_in_account()
        if account is None:
            logger.error("Getting platform directory for the current identity failed: not logged in")
            raise IdentityUnavailableError("No logged-in identity available")
        return account

    async def resolve_async(self) -> str:
        loop = asyncio.get_running_loop()
        deadline = None if self.timeout is None else loop.time() + self.timeout
        while True:
            account = self._logged_in_account()
            if account is not None:
                return account
            if deadline is not None and loop.time() >= deadline:
                logger.error(
                    f"Getting platform directory for the current identity failed: "
                    f"no login after {self.timeout}s"
                )
                raise IdentityUnavailableError(f"No logged-in identity after {self.timeout}s")
            await asyncio.sleep(self.poll_interval)

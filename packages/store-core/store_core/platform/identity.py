"""
Identity sources for identity-bound platform directories.

The host game owns the actual session object (a storefront client, an
online account, ...). It exposes it through an IdentitySource so the
resolver can wait for a login without knowing the concrete type.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class IdentitySession(Protocol):
    """A live user session."""
    is_logged_in: bool
    account_id: Any


class IdentitySource(ABC):
    """Interface for looking up the current session, if any."""

    @abstractmethod
    def current(self) -> Optional[IdentitySession]:
        """Return the live session, or None if none exists yet."""
        ...


class StaticIdentitySource(IdentitySource):
    """Holds a session the host sets once it becomes available."""

    def __init__(self, session: Optional[IdentitySession] = None):
        self._session = session

    def set_session(self, session: Optional[IdentitySession]) -> None:
        self._session = session

    def current(self) -> Optional[IdentitySession]:
        return self._session

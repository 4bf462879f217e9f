"""
Versioned capability for stored payloads.

Payload types opt in by providing the three methods below; no base class
is required. The store checks for the capability with ``isinstance``
against the runtime-checkable protocol.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Versioned(Protocol):
    """Protocol for payloads that can report and upgrade their schema version."""

    def current_version(self) -> int:
        """Version the payload was stored with."""
        ...

    def latest_version(self) -> int:
        """Version the running code expects."""
        ...

    def upgrade(self) -> None:
        """Mutate the payload in place to the latest version."""
        ...


def is_outdated(value: Any) -> bool:
    """True if ``value`` is Versioned and older than its latest version."""
    if not isinstance(value, Versioned):
        return False
    # the protocol check only sees attribute names, not whether they are methods
    if not all(callable(getattr(value, name)) for name in ("current_version", "latest_version", "upgrade")):
        return False
    return value.current_version() < value.latest_version()


def upgrade_if_outdated(value: Any) -> bool:
    """Upgrade an outdated payload once. Returns True if ``upgrade()`` ran."""
    if not is_outdated(value):
        return False
    value.upgrade()
    return True

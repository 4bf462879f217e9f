"""Error types shared across the store package."""
from __future__ import annotations

from enum import Enum


class StoreErrorKind(str, Enum):
    """Why a store operation did not produce a value."""
    NOT_FOUND = "not_found"
    READ_FAILURE = "read_failure"
    WRITE_FAILURE = "write_failure"
    MALFORMED_CONTENT = "malformed_content"
    IDENTITY_UNAVAILABLE = "identity_unavailable"


class StoreError(Exception):
    """Base class for store exceptions."""


class ConfigError(StoreError):
    """Invalid store or platform configuration."""


class IdentityUnavailableError(StoreError):
    """No logged-in identity was available to name the platform directory."""

"""
Versioned Store Core Library.

Provides persistence helpers for game data:
- VersionedStore for saving/loading one typed value as a JSON file
- Optional schema-version upgrade on load (Versioned capability)
- Platform directory resolution (default, editor, identity-bound)
- Pluggable file access (local disk, in-memory)
"""

__version__ = "0.1.0"

from .errors import ConfigError, IdentityUnavailableError, StoreError, StoreErrorKind
from .persistence import FileAccess, InMemoryFileAccess, LocalFileAccess, ReadResult
from .platform import (
    PlatformDirectoryResolver,
    configure_platform_resolver,
    get_platform_directory,
    get_platform_directory_async,
)
from .store import LoadResult, StoreDescriptor, StoreFormat, Versioned, VersionedStore

__all__ = [
    "__version__",
    # Store
    "VersionedStore",
    "LoadResult",
    "StoreDescriptor",
    "StoreFormat",
    "Versioned",
    # Persistence
    "FileAccess",
    "ReadResult",
    "LocalFileAccess",
    "InMemoryFileAccess",
    # Platform
    "PlatformDirectoryResolver",
    "configure_platform_resolver",
    "get_platform_directory",
    "get_platform_directory_async",
    # Errors
    "StoreError",
    "StoreErrorKind",
    "ConfigError",
    "IdentityUnavailableError",
]

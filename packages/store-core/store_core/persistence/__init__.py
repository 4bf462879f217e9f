"""
Store Persistence - file access port and its implementations.
"""
from .interfaces import FileAccess, ReadResult
from .fs_store import LocalFileAccess, get_store_home
from .memory_store import InMemoryFileAccess

__all__ = [
    # Interfaces
    "FileAccess",
    "ReadResult",
    # Implementations
    "LocalFileAccess",
    "InMemoryFileAccess",
    # Utils
    "get_store_home",
]

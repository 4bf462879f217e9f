"""
Store Persistence Interfaces.

Abstract file access port used by VersionedStore. Paths are relative
strings; each implementation decides what they are relative to.
"""
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class ReadResult:
    """Outcome of a text read."""
    content: Optional[str] = None
    success: bool = False


class FileAccess(ABC):
    """
    Interface for byte-level store I/O.

    Implementations provide the blocking primitives. The async forms run
    them in a worker thread by default; backends with native async I/O
    (or test doubles) override them.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file exists."""
        pass

    @abstractmethod
    def read_text(self, path: str) -> ReadResult:
        """Read a whole file as UTF-8 text."""
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """Write UTF-8 text, replacing any existing content."""
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """Delete a file."""
        pass

    async def exists_async(self, path: str) -> bool:
        return await asyncio.to_thread(self.exists, path)

    async def read_text_async(self, path: str) -> ReadResult:
        return await asyncio.to_thread(self.read_text, path)

    async def write_text_async(self, path: str, content: str) -> None:
        await asyncio.to_thread(self.write_text, path, content)

    async def delete_async(self, path: str) -> None:
        await asyncio.to_thread(self.delete, path)

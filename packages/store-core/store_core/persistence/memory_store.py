"""
In-memory FileAccess (no persistence). Useful for tests and tooling dry runs.
"""
from __future__ import annotations

import asyncio
from typing import Dict, List, Tuple

from .interfaces import FileAccess, ReadResult


class InMemoryFileAccess(FileAccess):
    """Trivial in-process file backend that records every call."""

    def __init__(self, files: Dict[str, str] | None = None):
        self.files: Dict[str, str] = dict(files or {})
        self.calls: List[Tuple[str, str]] = []
        self.fail_reads = False
        self.fail_writes = False

    def _norm(self, path: str) -> str:
        return path.replace("\\", "/")

    def exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        return self._norm(path) in self.files

    def read_text(self, path: str) -> ReadResult:
        self.calls.append(("read_text", path))
        if self.fail_reads or self._norm(path) not in self.files:
            return ReadResult()
        return ReadResult(content=self.files[self._norm(path)], success=True)

    def write_text(self, path: str, content: str) -> None:
        self.calls.append(("write_text", path))
        if self.fail_writes:
            raise OSError(f"write refused: {path}")
        self.files[self._norm(path)] = content

    def delete(self, path: str) -> None:
        self.calls.append(("delete", path))
        self.files.pop(self._norm(path), None)

    # Each async form yields once so callers interleave like real I/O.

    async def exists_async(self, path: str) -> bool:
        await asyncio.sleep(0)
        return self.exists(path)

    async def read_text_async(self, path: str) -> ReadResult:
        await asyncio.sleep(0)
        return self.read_text(path)

    async def write_text_async(self, path: str, content: str) -> None:
        await asyncio.sleep(0)
        self.write_text(path, content)

    async def delete_async(self, path: str) -> None:
        await asyncio.sleep(0)
        self.delete(path)

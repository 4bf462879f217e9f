"""
VersionedStore — save, load and delete one typed value as a file.

All files are saved in a relative directory; the platform variants ask
the active PlatformDirectoryResolver for it (e.g. ``Editor`` during
development, the account id for identity-bound builds).

Usage:
    store = VersionedStore(Profile, StoreDescriptor(file_name="profile"))

    store.save(profile, "saves")
    result = store.load("saves")
    if result.found:
        profile = result.value

    profile = await store.load_from_platform_directory_async()
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, Iterator, Optional, Type, TypeVar

from ..errors import IdentityUnavailableError, StoreErrorKind
from ..persistence import FileAccess, LocalFileAccess
from ..platform.resolver import PlatformDirectoryResolver
from ..platform.selection import get_platform_resolver
from ..services.config_service import get_store_settings
from .codec import EncodeError, MalformedContentError, codec_for
from .descriptor import StoreDescriptor
from .versioned import upgrade_if_outdated

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LoadResult(Generic[T]):
    """
    Outcome of a load.

    Attributes:
        value: The loaded payload, or None when nothing was loaded
        found: True when a value was read and decoded
        path: Relative store path that was used
        error: Why nothing was loaded
        upgraded: True when the payload's ``upgrade()`` ran
    """
    value: Optional[T] = None
    found: bool = False
    path: str = ""
    error: Optional[StoreErrorKind] = None
    upgraded: bool = False

    def __iter__(self) -> Iterator[Any]:
        # value, found = store.load()
        yield self.value
        yield self.found


class VersionedStore(Generic[T]):
    """
    Generic store for saving and loading one payload type.

    Args:
        payload_type: Type the file content decodes into
        descriptor: File name, format and extension of the store
        file_access: I/O backend (default: LocalFileAccess at STORE_HOME)
        resolver: Platform directory policy (default: the process-wide one)
    """

    def __init__(
        self,
        payload_type: Type[T] | Any,
        descriptor: Optional[StoreDescriptor] = None,
        file_access: Optional[FileAccess] = None,
        resolver: Optional[PlatformDirectoryResolver] = None,
    ):
        self.payload_type = payload_type
        self.descriptor = descriptor or StoreDescriptor()
        self.file_access = file_access or LocalFileAccess()
        self._resolver = resolver
        self._codec = codec_for(self.descriptor.format, payload_type)

    @classmethod
    def from_config(
        cls,
        name: str,
        payload_type: Type[T] | Any,
        file_access: Optional[FileAccess] = None,
        resolver: Optional[PlatformDirectoryResolver] = None,
    ) -> "VersionedStore[T]":
        """Build a store from the ``stores.<name>`` config section."""
        settings = get_store_settings(name)
        if not settings:
            settings = {"file_name": name}
        return cls(payload_type, StoreDescriptor.from_dict(settings), file_access, resolver)

    @property
    def resolver(self) -> PlatformDirectoryResolver:
        return self._resolver or get_platform_resolver()

    # ── paths ─────────────────────────────────────────────────────────────

    def file_name_with_extension(self) -> str:
        return self.descriptor.file_name_with_extension()

    def store_path(self, directory: Optional[str] = None) -> str:
        """Relative path of the store file in ``directory`` (root when empty)."""
        name = self.file_name_with_extension()
        if not directory:
            return name
        return str(Path(directory) / name)

    # ── load ──────────────────────────────────────────────────────────────

    def _decode(self, path: str, content: Optional[str]) -> LoadResult[T]:
        try:
            data = self._codec.decode(content or "")
        except MalformedContentError as e:
            logger.error(f"Store - Malformed content in {path}. Load unsuccessful: {e}")
            return LoadResult(path=path, error=StoreErrorKind.MALFORMED_CONTENT)

        upgraded = upgrade_if_outdated(data)
        if upgraded:
            logger.info(f"Store - Upgraded {path} to version {data.latest_version()}")
        return LoadResult(value=data, found=True, path=path, upgraded=upgraded)

    def load(self, directory: Optional[str] = None) -> LoadResult[T]:
        """
        Load the value from the given (relative) directory.

        Returns a LoadResult; a missing or unreadable file is reported through
        ``found``/``error``, never raised.
        """
        path = self.store_path(directory)

        if not self.file_access.exists(path):
            logger.warning(f"Store - Store not found for {path}. Load unsuccessful.")
            return LoadResult(path=path, error=StoreErrorKind.NOT_FOUND)

        read = self.file_access.read_text(path)
        if not read.success:
            logger.warning(f"Store - Failed to read store for {path}. Load unsuccessful.")
            return LoadResult(path=path, error=StoreErrorKind.READ_FAILURE)

        return self._decode(path, read.content)

    def load_value(self, directory: Optional[str] = None) -> Optional[T]:
        """Load and return only the value (None when nothing was loaded)."""
        return self.load(directory).value

    async def load_async(self, directory: Optional[str] = None) -> LoadResult[T]:
        """Same as ``load``; the existence check completes before the read starts."""
        path = self.store_path(directory)

        if not await self.file_access.exists_async(path):
            logger.warning(f"Store - Store not found for {path}. Load unsuccessful.")
            return LoadResult(path=path, error=StoreErrorKind.NOT_FOUND)

        read = await self.file_access.read_text_async(path)
        if not read.success:
            logger.warning(f"Store - Failed to read store for {path}. Load unsuccessful.")
            return LoadResult(path=path, error=StoreErrorKind.READ_FAILURE)

        return self._decode(path, read.content)

    def load_from_platform_directory(self) -> LoadResult[T]:
        try:
            directory = self.resolver.resolve()
        except IdentityUnavailableError as e:
            logger.error(f"Store - Platform directory unavailable. Load unsuccessful: {e}")
            return LoadResult(error=StoreErrorKind.IDENTITY_UNAVAILABLE)
        return self.load(directory)

    async def load_from_platform_directory_async(self) -> LoadResult[T]:
        try:
            directory = await self.resolver.resolve_async()
        except IdentityUnavailableError as e:
            logger.error(f"Store - Platform directory unavailable. Load unsuccessful: {e}")
            return LoadResult(error=StoreErrorKind.IDENTITY_UNAVAILABLE)
        return await self.load_async(directory)

    # ── save ──────────────────────────────────────────────────────────────

    def save(self, data: T, directory: Optional[str] = None) -> bool:
        """
        Save ``data`` to the given (relative) directory, overwriting the file.

        Returns False if encoding or the write failed.
        """
        path = self.store_path(directory)
        try:
            text = self._codec.encode(data)
            self.file_access.write_text(path, text)
        except (EncodeError, OSError) as e:
            logger.error(f"Store - Failed to write store for {path}: {e}")
            return False
        return True

    async def save_async(self, data: T, directory: Optional[str] = None) -> bool:
        path = self.store_path(directory)
        try:
            text = self._codec.encode(data)
            await self.file_access.write_text_async(path, text)
        except (EncodeError, OSError) as e:
            logger.error(f"Store - Failed to write store for {path}: {e}")
            return False
        return True

    def save_to_platform_directory(self, data: T) -> bool:
        try:
            directory = self.resolver.resolve()
        except IdentityUnavailableError as e:
            logger.error(f"Store - Platform directory unavailable. Save unsuccessful: {e}")
            return False
        return self.save(data, directory)

    async def save_to_platform_directory_async(self, data: T) -> bool:
        try:
            directory = await self.resolver.resolve_async()
        except IdentityUnavailableError as e:
            logger.error(f"Store - Platform directory unavailable. Save unsuccessful: {e}")
            return False
        return await self.save_async(data, directory)

    # ── delete ────────────────────────────────────────────────────────────

    def delete_store(self, directory: Optional[str] = None) -> bool:
        """
        Delete the store file from the given (relative) directory.

        A missing file is a no-op. Returns True if a file was deleted.
        """
        path = self.store_path(directory)

        if not self.file_access.exists(path):
            logger.warning(f"Store - Store not found for {path}. Delete unsuccessful.")
            return False

        try:
            self.file_access.delete(path)
        except OSError as e:
            logger.error(f"Store - Failed to delete store for {path}: {e}")
            return False
        logger.info(f"Store - Deleted store for file at {path}")
        return True

    async def delete_store_async(self, directory: Optional[str] = None) -> bool:
        path = self.store_path(directory)

        if not await self.file_access.exists_async(path):
            logger.warning(f"Store - Store not found for {path}. Delete unsuccessful.")
            return False

        try:
            await self.file_access.delete_async(path)
        except OSError as e:
            logger.error(f"Store - Failed to delete store for {path}: {e}")
            return False
        logger.info(f"Store - Deleted store for file at {path}")
        return True

    def delete_store_from_platform_directory(self) -> bool:
        try:
            directory = self.resolver.resolve()
        except IdentityUnavailableError as e:
            logger.error(f"Store - Platform directory unavailable. Delete unsuccessful: {e}")
            return False
        return self.delete_store(directory)

    async def delete_store_from_platform_directory_async(self) -> bool:
        try:
            directory = await self.resolver.resolve_async()
        except IdentityUnavailableError as e:
            logger.error(f"Store - Platform directory unavailable. Delete unsuccessful: {e}")
            return False
        return await self.delete_store_async(directory)

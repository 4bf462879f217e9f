"""
Store descriptors: the file name, format and extension of one store,
independent of the directory it lives in.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..errors import ConfigError


class StoreFormat(str, Enum):
    """Serialization format of a store file."""
    JSON = "json"


_DEFAULT_EXTENSIONS: Dict[StoreFormat, str] = {
    StoreFormat.JSON: "json",
}


def default_extension(store_format: StoreFormat) -> str:
    """Return the file extension (without a dot) for a format."""
    return _DEFAULT_EXTENSIONS[store_format]


@dataclass
class StoreDescriptor:
    """
    Configuration describing one store.

    Attributes:
        file_name: Base file name, without extension
        format: Serialization format
        extension_override: Replaces the format's default extension when set.
            Don't lead it with a ``.``.
    """
    file_name: str = "Untitled"
    format: StoreFormat = StoreFormat.JSON
    extension_override: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.format, StoreFormat):
            try:
                self.format = StoreFormat(self.format)
            except ValueError:
                valid = [f.value for f in StoreFormat]
                raise ConfigError(f"Unknown store format '{self.format}'. Valid: {valid}")

    @property
    def extension(self) -> str:
        if self.extension_override:
            return self.extension_override
        return default_extension(self.format)

    def file_name_with_extension(self) -> str:
        return f"{self.file_name}.{self.extension}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_name": self.file_name,
            "format": self.format.value,
            "extension": self.extension_override,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "StoreDescriptor":
        return cls(
            file_name=d.get("file_name", "Untitled"),
            format=d.get("format", StoreFormat.JSON.value),
            extension_override=d.get("extension") or None,
        )

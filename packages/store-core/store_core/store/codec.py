"""
Text codecs for store payloads.

JSON encoding goes through pydantic's TypeAdapter, so any type pydantic
understands (BaseModel, dataclasses, TypedDict, builtins, containers)
can be stored without a custom naming policy.
"""
from __future__ import annotations

from typing import Any, Dict, Generic, Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .descriptor import StoreFormat

T = TypeVar("T")


class MalformedContentError(ValueError):
    """Stored text could not be decoded into the payload type."""


class EncodeError(ValueError):
    """A payload could not be encoded as text."""


class JsonCodec(Generic[T]):
    """Encode/decode one payload type as a JSON document."""

    def __init__(self, payload_type: Type[T] | Any, indent: int | None = 2):
        self.payload_type = payload_type
        self.indent = indent
        self._adapter: TypeAdapter[T] = TypeAdapter(payload_type)

    def encode(self, value: T) -> str:
        try:
            return self._adapter.dump_json(value, indent=self.indent).decode("utf-8")
        except PydanticSerializationError as e:
            raise EncodeError(str(e)) from e

    def decode(self, text: str) -> T:
        try:
            return self._adapter.validate_json(text)
        except ValidationError as e:
            raise MalformedContentError(str(e)) from e


_CODECS: Dict[StoreFormat, type] = {
    StoreFormat.JSON: JsonCodec,
}


def codec_for(store_format: StoreFormat, payload_type: Type[T] | Any) -> JsonCodec[T]:
    """Return the codec instance for a format and payload type."""
    return _CODECS[store_format](payload_type)

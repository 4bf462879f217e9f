"""
Versioned stores: one typed value per JSON file.
"""
from .behavior import LoadResult, VersionedStore
from .codec import JsonCodec, MalformedContentError, codec_for
from .descriptor import StoreDescriptor, StoreFormat, default_extension
from .versioned import Versioned, is_outdated, upgrade_if_outdated

__all__ = [
    "VersionedStore",
    "LoadResult",
    "StoreDescriptor",
    "StoreFormat",
    "default_extension",
    "JsonCodec",
    "MalformedContentError",
    "codec_for",
    "Versioned",
    "is_outdated",
    "upgrade_if_outdated",
]

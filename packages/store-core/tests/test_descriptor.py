"""Tests for store descriptors and file name derivation."""
import pytest

from store_core.errors import ConfigError
from store_core.store import StoreDescriptor, StoreFormat, default_extension


class TestStoreDescriptor:
    def test_defaults(self):
        d = StoreDescriptor()
        assert d.file_name == "Untitled"
        assert d.format == StoreFormat.JSON
        assert d.extension_override is None
        assert d.file_name_with_extension() == "Untitled.json"

    def test_json_extension(self):
        d = StoreDescriptor(file_name="profile")
        assert d.file_name_with_extension() == "profile.json"

    def test_extension_override(self):
        d = StoreDescriptor(file_name="profile", extension_override="dat")
        assert d.file_name_with_extension() == "profile.dat"

    def test_empty_override_uses_default(self):
        d = StoreDescriptor(file_name="profile", extension_override="")
        assert d.file_name_with_extension() == "profile.json"

    def test_format_from_string(self):
        d = StoreDescriptor(file_name="x", format="json")
        assert d.format is StoreFormat.JSON

    def test_unknown_format_raises(self):
        with pytest.raises(ConfigError, match="Unknown store format"):
            StoreDescriptor(file_name="x", format="xml")

    def test_default_extension(self):
        assert default_extension(StoreFormat.JSON) == "json"

    def test_from_dict_roundtrip(self):
        d = {"file_name": "settings", "format": "json", "extension": "cfg"}
        desc = StoreDescriptor.from_dict(d)
        assert desc.file_name_with_extension() == "settings.cfg"
        assert desc.to_dict() == d

    def test_from_dict_defaults(self):
        desc = StoreDescriptor.from_dict({})
        assert desc.file_name_with_extension() == "Untitled.json"

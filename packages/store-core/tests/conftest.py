"""Shared fixtures: isolate config and the process-wide resolver per test."""
import pytest

from store_core.platform import reset_platform_resolver
from store_core.services.config_service import clear_config_cache


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    monkeypatch.setenv("STORE_CONFIG_PATH", str(tmp_path / "no-config.yaml"))
    monkeypatch.setenv("STORE_HOME", str(tmp_path / "home"))
    clear_config_cache()
    reset_platform_resolver()
    yield
    clear_config_cache()
    reset_platform_resolver()


@pytest.fixture
def write_config(monkeypatch, tmp_path):
    """Write a YAML config and point STORE_CONFIG_PATH at it."""
    def _write(text: str):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv("STORE_CONFIG_PATH", str(path))
        clear_config_cache()
        return path
    return _write

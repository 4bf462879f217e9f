"""Tests for the vstore CLI."""
import json

import pytest
from click.testing import CliRunner

from store_core.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def root(tmp_path):
    return str(tmp_path / "data")


class TestStoreCommands:
    def test_path_defaults_to_editor_directory(self, runner):
        res = runner.invoke(cli, ["store", "path", "profile"])
        assert res.exit_code == 0
        assert res.output.strip() == "Editor/profile.json"

    def test_path_uses_configured_descriptor(self, runner, write_config):
        write_config("stores:\n  settings:\n    file_name: game\n    extension: cfg\n")
        res = runner.invoke(cli, ["store", "path", "settings", "--dir", ""])
        assert res.output.strip() == "game.cfg"

    def test_save_then_show(self, runner, root, tmp_path):
        value = tmp_path / "value.json"
        value.write_text(json.dumps({"name": "Ada", "level": 3}))
        res = runner.invoke(cli, ["store", "save", "profile", "--json", str(value), "--root", root])
        assert res.exit_code == 0, res.output
        assert (tmp_path / "data" / "Editor" / "profile.json").is_file()

        res = runner.invoke(cli, ["store", "show", "profile", "--root", root])
        assert res.exit_code == 0
        assert json.loads(res.output) == {"name": "Ada", "level": 3}

    def test_show_missing(self, runner, root):
        res = runner.invoke(cli, ["store", "show", "profile", "--root", root])
        assert res.exit_code == 1
        assert "not_found" in res.output

    def test_save_invalid_json(self, runner, root, tmp_path):
        value = tmp_path / "value.json"
        value.write_text("{oops")
        res = runner.invoke(cli, ["store", "save", "profile", "--json", str(value), "--root", root])
        assert res.exit_code == 1

    def test_delete_requires_confirmation(self, runner, root, tmp_path):
        value = tmp_path / "value.json"
        value.write_text("{}")
        runner.invoke(cli, ["store", "save", "profile", "--json", str(value), "--root", root])

        res = runner.invoke(cli, ["store", "delete", "profile", "--root", root], input="n\n")
        assert "Cancelled" in res.output
        assert (tmp_path / "data" / "Editor" / "profile.json").exists()

        res = runner.invoke(cli, ["store", "delete", "profile", "--root", root], input="y\n")
        assert "Deleted store" in res.output
        assert not (tmp_path / "data" / "Editor" / "profile.json").exists()

    def test_delete_missing_is_noop(self, runner, root):
        res = runner.invoke(cli, ["store", "delete", "profile", "--root", root, "--yes"])
        assert res.exit_code == 0
        assert "No store" in res.output


class TestPlatformDir:
    def test_default_policy_is_root(self, runner):
        res = runner.invoke(cli, ["platform-dir"])
        assert res.exit_code == 0
        assert res.output.strip() == "(root)"

    def test_editor_policy(self, runner, write_config):
        write_config("platform:\n  policy: editor\n  editor_directory: Dev\n")
        res = runner.invoke(cli, ["platform-dir"])
        assert res.output.strip() == "Dev"

    def test_bad_policy(self, runner, write_config):
        write_config("platform:\n  policy: console\n")
        res = runner.invoke(cli, ["platform-dir"])
        assert res.exit_code == 1

    def test_version(self, runner):
        res = runner.invoke(cli, ["--version"])
        assert "vstore" in res.output

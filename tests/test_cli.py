"""
WOLFY — CLI Tests.
"""

import pytest
from click.testing import CliRunner

from wolfy import __version__, config
from wolfy.cli import cli

MANIFEST = """\
apps:
  - {id: chrome, name: Google Chrome, path: /usr/bin/google-chrome}
  - {id: code, name: Visual Studio Code, path: /usr/bin/code}
  - {id: ff, name: Firefox, path: /usr/bin/firefox}
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def paths(tmp_path):
    manifest = tmp_path / "apps.yaml"
    manifest.write_text(MANIFEST)
    return ["--manifest", str(manifest), "--history", str(tmp_path / "history.tsv")]


@pytest.fixture
def history_opt(tmp_path):
    return ["--history", str(tmp_path / "history.tsv")]


class TestGroup:
    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("search", "launch", "history", "history-clear", "freq"):
            assert name in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestSearchCommand:
    def test_finds_items(self, runner, paths):
        result = runner.invoke(cli, ["search", "vsc", *paths])
        assert result.exit_code == 0
        assert "Visual Studio Code" in result.output
        assert "Firefox" not in result.output

    def test_no_matches(self, runner, paths):
        result = runner.invoke(cli, ["search", "zzz", *paths])
        assert result.exit_code == 0
        assert "No matches." in result.output

    def test_browse_lists_every_item(self, runner, paths):
        result = runner.invoke(cli, ["search", "--limit", "1", *paths])
        assert result.exit_code == 0
        assert "Most used" in result.output
        for name in ("Firefox", "Google Chrome", "Visual Studio Code"):
            assert name in result.output

    def test_invalid_environment_setting(self, runner, paths, monkeypatch):
        monkeypatch.setenv("WOLFY_MAX_RESULTS", "many")
        result = runner.invoke(cli, ["search", "code", *paths])
        assert result.exit_code == 1
        assert "WOLFY_MAX_RESULTS" in result.output
        assert "Traceback" not in result.output

    def test_exact(self, runner, paths):
        result = runner.invoke(cli, ["search", "vsc", "--exact", *paths])
        assert result.exit_code == 0
        assert "No matches." in result.output

    def test_missing_manifest(self, runner, tmp_path):
        result = runner.invoke(cli, ["search", "x", "--manifest", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "Cannot read manifest" in result.output

    def test_default_paths_from_environment(self, runner, tmp_path, monkeypatch):
        manifest = tmp_path / "env-apps.yaml"
        manifest.write_text(MANIFEST)
        monkeypatch.setenv("WOLFY_MANIFEST", str(manifest))
        monkeypatch.setenv("WOLFY_HISTORY", str(tmp_path / "env-history.tsv"))
        config.reload()
        result = runner.invoke(cli, ["search", "firefox"])
        assert result.exit_code == 0
        assert "Firefox" in result.output


class TestLaunchCommand:
    def test_launch_records(self, runner, paths, history_opt):
        result = runner.invoke(cli, ["launch", "ff", *paths])
        assert result.exit_code == 0
        assert "count 1" in result.output

        result = runner.invoke(cli, ["history", *history_opt])
        assert result.exit_code == 0
        assert "ff" in result.output

        result = runner.invoke(cli, ["freq", *history_opt])
        assert result.exit_code == 0
        assert "1.000" in result.output

    def test_launch_boosts_browse_order(self, runner, paths):
        runner.invoke(cli, ["launch", "code", *paths])
        result = runner.invoke(cli, ["search", *paths])
        assert result.output.index("Visual Studio Code") < result.output.index("Firefox")

    def test_invalid_environment_setting(self, runner, paths, monkeypatch):
        monkeypatch.setenv("WOLFY_HISTORY_WEIGHT", "lots")
        result = runner.invoke(cli, ["launch", "ff", *paths])
        assert result.exit_code == 1
        assert "WOLFY_HISTORY_WEIGHT" in result.output

    def test_unknown_item(self, runner, paths):
        result = runner.invoke(cli, ["launch", "nope", *paths])
        assert result.exit_code == 1
        assert "Item not found" in result.output


class TestHistoryCommands:
    def test_invalid_environment_setting(self, runner, history_opt, monkeypatch):
        monkeypatch.setenv("WOLFY_HISTORY_MAX_ENTRIES", "0")
        for command in ("history", "freq"):
            result = runner.invoke(cli, [command, *history_opt])
            assert result.exit_code == 1
            assert "history_max_entries" in result.output

    def test_empty_history(self, runner, history_opt):
        result = runner.invoke(cli, ["history", *history_opt])
        assert result.exit_code == 0
        assert "No launches recorded yet." in result.output

    def test_clear(self, runner, paths, history_opt):
        runner.invoke(cli, ["launch", "chrome", *paths])
        result = runner.invoke(cli, ["history-clear", "--yes", *history_opt])
        assert result.exit_code == 0
        assert "History cleared" in result.output

        result = runner.invoke(cli, ["freq", *history_opt])
        assert "No launches recorded yet." in result.output

    def test_clear_requires_confirmation(self, runner, paths, history_opt):
        runner.invoke(cli, ["launch", "chrome", *paths])
        result = runner.invoke(cli, ["history-clear", *history_opt], input="n\n")
        assert result.exit_code != 0
        result = runner.invoke(cli, ["freq", *history_opt])
        assert "1.000" in result.output

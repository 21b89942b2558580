"""Tests for cli.py — global flags, argparse wiring, and command dispatch."""

import io
import json

import pytest

from things_cli import commands, config
from things_cli.cli import _emit_cli_error, _extract_global_flags, build_parser, main
from things_cli.client import ThingsClient
from things_cli.exceptions import CliError, LaunchError, ValidationError
from things_cli.launcher import RecordingLauncher

# ---------------------------------------------------------------------------
# _extract_global_flags
# ---------------------------------------------------------------------------


class TestExtractGlobalFlags:
    def test_no_flags(self):
        fmt, activate, dry_run, verbose, timeout, remaining = _extract_global_flags(["version"])
        assert fmt == "json"
        assert activate is False
        assert dry_run is False
        assert verbose is False
        assert timeout is None
        assert remaining == ["version"]

    def test_flags_anywhere(self):
        fmt, activate, dry_run, verbose, timeout, remaining = _extract_global_flags(
            ["add", "--dry-run", "--title", "x", "--format", "text", "--activate", "-v"]
        )
        assert fmt == "text"
        assert activate is True
        assert dry_run is True
        assert verbose is True
        assert remaining == ["add", "--title", "x"]

    def test_timeout(self):
        *_, timeout, remaining = _extract_global_flags(["--timeout", "2.5", "version"])
        assert timeout == 2.5
        assert remaining == ["version"]

    @pytest.mark.parametrize("value", ["0", "-1", "soon"])
    def test_bad_timeout(self, value):
        with pytest.raises(CliError, match="--timeout"):
            _extract_global_flags(["--timeout", value, "version"])

    def test_version_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _extract_global_flags(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("things-cli ")

    def test_invalid_format(self):
        with pytest.raises(CliError, match="Invalid format"):
            _extract_global_flags(["--format", "xml"])


# ---------------------------------------------------------------------------
# build_parser
# ---------------------------------------------------------------------------


class TestParser:
    def test_repeatable_lists(self):
        ns = build_parser().parse_args(
            ["add", "--title", "T", "--tag", "a", "--tag", "b", "--checklist-item", "x"]
        )
        assert ns.tags == ["a", "b"]
        assert ns.checklist_items == ["x"]

    def test_tri_state_booleans(self):
        parser = build_parser()
        assert parser.parse_args(["add"]).completed is None
        assert parser.parse_args(["add", "--completed"]).completed is True
        assert parser.parse_args(["add", "--no-completed"]).completed is False

    def test_update_empty_string_kept(self):
        ns = build_parser().parse_args(["update", "--auth-token", "t", "--id", "x", "--notes", ""])
        assert ns.notes == ""
        assert ns.title is None

    def test_unknown_argument_raises_cli_error(self):
        with pytest.raises(CliError, match="unrecognized arguments"):
            build_parser().parse_args(["show", "--bogus"])


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    def test_dry_run_add(self, capsys):
        main(["--dry-run", "add", "--title", "Plan trip", "--tag", "Travel", "--tag", "Planning"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["ok"] is True
        assert payload["dry_run"] is True
        assert payload["url"] == "things:///add?tags=Travel%2CPlanning&title=Plan%20trip"

    def test_text_format(self, capsys):
        main(["--dry-run", "--format", "text", "version"])
        assert capsys.readouterr().out.strip() == "Would dispatch things:///version"

    def test_search_positional(self, capsys):
        main(["--dry-run", "search", "milk"])
        assert json.loads(capsys.readouterr().out)["url"] == "things:///search?query=milk"

    def test_update_clear_field(self, capsys):
        main(["--dry-run", "update", "--auth-token", "t", "--id", "x", "--deadline", ""])
        url = json.loads(capsys.readouterr().out)["url"]
        assert url == "things:///update?auth-token=t&deadline=&id=x"

    def test_show_id_precedence(self, capsys):
        main(["--dry-run", "show", "--id", "today", "--query", "Work"])
        assert json.loads(capsys.readouterr().out)["url"] == "things:///show?id=today"

    def test_json_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO('[ {"type": "to-do"} ]'))
        main(["--dry-run", "json", "--data", "-"])
        url = json.loads(capsys.readouterr().out)["url"]
        assert url == "things:///json?data=%5B%7B%22type%22%3A%22to-do%22%7D%5D"

    def test_json_from_file(self, capsys, tmp_path):
        payload = tmp_path / "import.json"
        payload.write_text('[{"type": "project"}]')
        main(["--dry-run", "json", "--file", str(payload), "--reveal"])
        url = json.loads(capsys.readouterr().out)["url"]
        assert url.endswith("&reveal=true")

    def test_validation_error_exit_code(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--dry-run", "update", "--id", "todo-id", "--title", "x"])
        assert exc_info.value.code == 1
        payload = json.loads(capsys.readouterr().err)
        assert payload["ok"] is False
        assert payload["error"]["type"] == "validation"
        assert "authToken" in payload["error"]["message"]

    def test_launch_error_exit_code(self, capsys, monkeypatch):
        client = ThingsClient(launcher=RecordingLauncher(error=RuntimeError("boom")))
        monkeypatch.setattr(commands, "_make_client", lambda: client)
        with pytest.raises(SystemExit) as exc_info:
            main(["add", "--title", "x"])
        assert exc_info.value.code == 4
        assert "boom" in json.loads(capsys.readouterr().err)["error"]["message"]

    def test_activate_flag_sets_config(self, monkeypatch):
        seen = {}

        def _fake(ns):
            seen["activate"] = config.ACTIVATE

        monkeypatch.setattr("things_cli.cli.cmd_version", _fake)
        main(["--activate", "version"])
        assert seen == {"activate": True}

    def test_no_args_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "Usage: things-cli" in capsys.readouterr().out


class TestMakeClient:
    def test_dry_run_uses_recording_launcher(self, monkeypatch):
        monkeypatch.setattr(config, "RUNTIME_DRY_RUN", True)
        assert isinstance(commands._make_client().launcher, RecordingLauncher)

    def test_activate_passed_through(self, monkeypatch):
        monkeypatch.setattr(config, "ACTIVATE", True)
        assert commands._make_client().launcher.activate is True


class TestEmitCliError:
    def test_text_format(self, capsys):
        _emit_cli_error(ValidationError("provide id or query"), "text")
        assert capsys.readouterr().err.strip() == "provide id or query"

    def test_json_launch_error(self, capsys):
        _emit_cli_error(LaunchError("launch failed"), "json")
        payload = json.loads(capsys.readouterr().err)
        assert payload["error"] == {"type": "launch", "message": "launch failed", "exit_code": 4}

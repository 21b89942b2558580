"""Tests for launcher.py — OpenLauncher process handling and RecordingLauncher.

OpenLauncher is pointed at a small Python script instead of ``open`` so the
tests run anywhere.
"""

import sys
import threading

import pytest

from things_cli import config
from things_cli.exceptions import LaunchCancelled, LaunchError
from things_cli.launcher import OpenLauncher, RecordingLauncher


@pytest.fixture
def fake_opener(tmp_path):
    """Write an executable opener that behaves according to its URL argument."""
    script = tmp_path / "fake_open.py"
    script.write_text(
        "import sys, time\n"
        "url = sys.argv[-1]\n"
        "with open(sys.argv[0] + '.log', 'a') as f:\n"
        "    f.write(' '.join(sys.argv[1:]) + '\\n')\n"
        "if 'fail' in url:\n"
        "    sys.stderr.write('LSOpenURLsWithRole() failed')\n"
        "    sys.exit(1)\n"
        "if 'slow' in url:\n"
        "    time.sleep(30)\n"
        "if 'noisy' in url:\n"
        "    sys.stderr.write('x' * 262144)\n"
        "    sys.exit(2)\n"
    )
    wrapper = tmp_path / "fake_open"
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n')
    wrapper.chmod(0o755)
    return wrapper, tmp_path / "fake_open.py.log"


_posix_only = pytest.mark.skipif(sys.platform == "win32", reason="needs /bin/sh")


class TestOpenLauncherArgv:
    def test_background_by_default(self):
        assert OpenLauncher().argv("things:///version") == ["open", "-g", "things:///version"]

    def test_activate_drops_background_flag(self):
        assert OpenLauncher(activate=True).argv("things:///version") == [
            "open",
            "things:///version",
        ]

    def test_opener_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "OPEN_COMMAND", "xdg-open")
        assert OpenLauncher().argv("x")[0] == "xdg-open"


@_posix_only
class TestOpenLauncherProcess:
    def test_success(self, fake_opener):
        opener, log = fake_opener
        OpenLauncher(opener=str(opener)).launch("things:///add?title=ok")
        assert log.read_text().strip() == "-g things:///add?title=ok"

    def test_non_zero_exit(self, fake_opener):
        opener, _ = fake_opener
        with pytest.raises(LaunchError) as exc_info:
            OpenLauncher(opener=str(opener)).launch("things:///fail")
        assert "exit status 1" in str(exc_info.value)
        assert "LSOpenURLsWithRole" in str(exc_info.value)
        assert exc_info.value.target == "things:///fail"
        assert not isinstance(exc_info.value, LaunchCancelled)

    def test_large_stderr_drained(self, fake_opener):
        opener, _ = fake_opener
        with pytest.raises(LaunchError) as exc_info:
            OpenLauncher(opener=str(opener)).launch("things:///noisy", timeout=10)
        assert not isinstance(exc_info.value, LaunchCancelled)
        assert "exit status 2" in str(exc_info.value)

    def test_missing_opener(self, tmp_path):
        with pytest.raises(LaunchError, match="cannot run"):
            OpenLauncher(opener=str(tmp_path / "nope")).launch("things:///version")

    def test_pre_cancelled_never_spawns(self, fake_opener):
        opener, log = fake_opener
        event = threading.Event()
        event.set()
        with pytest.raises(LaunchCancelled, match="before start"):
            OpenLauncher(opener=str(opener)).launch("things:///version", cancel=event)
        assert not log.exists()

    def test_timeout(self, fake_opener):
        opener, _ = fake_opener
        with pytest.raises(LaunchCancelled, match="timed out"):
            OpenLauncher(opener=str(opener)).launch("things:///slow", timeout=0.3)

    def test_cancel_while_running(self, fake_opener):
        opener, _ = fake_opener
        event = threading.Event()
        timer = threading.Timer(0.3, event.set)
        timer.start()
        try:
            with pytest.raises(LaunchCancelled, match="launch canceled"):
                OpenLauncher(opener=str(opener)).launch("things:///slow", cancel=event)
        finally:
            timer.cancel()


class TestRecordingLauncher:
    def test_records_in_order(self):
        launcher = RecordingLauncher()
        launcher.launch("things:///a")
        launcher.launch("things:///b")
        assert launcher.calls == ["things:///a", "things:///b"]

    def test_configured_error_after_recording(self):
        launcher = RecordingLauncher(error=LaunchError("boom"))
        with pytest.raises(LaunchError, match="boom"):
            launcher.launch("things:///a")
        assert launcher.calls == ["things:///a"]

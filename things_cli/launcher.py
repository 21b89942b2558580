"""
Launchers hand a finished ``things:///`` URL to the operating system.

``OpenLauncher`` shells out to macOS ``open``; ``RecordingLauncher`` keeps a
list of targets and never touches the system (tests and ``--dry-run``).
"""

from __future__ import annotations

import subprocess
import threading
import time
from typing import Protocol

from things_cli import config
from things_cli.exceptions import LaunchCancelled, LaunchError

_POLL_INTERVAL_SECONDS = 0.05


class Launcher(Protocol):
    def launch(
        self,
        target: str,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        """Open *target*. Raise LaunchError on failure, LaunchCancelled on cancel."""
        ...


class OpenLauncher:
    """Launch URLs with ``open`` (``open -g`` unless *activate* is set).

    ``open`` returns as soon as Launch Services has taken the URL, so the
    process normally exits well inside any deadline. While it runs the
    launcher polls, and kills the child as soon as *cancel* is set or
    *timeout* seconds have passed.
    """

    def __init__(self, activate: bool = False, opener: str | None = None):
        self.activate = activate
        self.opener = opener or config.OPEN_COMMAND

    def argv(self, target: str) -> list[str]:
        args = [self.opener]
        if not self.activate:
            args.append("-g")
        args.append(target)
        return args

    def launch(
        self,
        target: str,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        if cancel is not None and cancel.is_set():
            raise LaunchCancelled("launch canceled before start", target=target)

        try:
            proc = subprocess.Popen(
                self.argv(target),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise LaunchError(f"cannot run {self.opener!r}: {e}", target=target) from e

        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            try:
                _, stderr_bytes = proc.communicate(timeout=_POLL_INTERVAL_SECONDS)
                break
            except subprocess.TimeoutExpired:
                pass
            if cancel is not None and cancel.is_set():
                _kill(proc)
                raise LaunchCancelled("launch canceled", target=target)
            if deadline is not None and time.monotonic() >= deadline:
                _kill(proc)
                raise LaunchCancelled(f"launch timed out after {timeout}s", target=target)

        stderr = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
        if proc.returncode != 0:
            detail = f": {stderr}" if stderr else ""
            raise LaunchError(f"exit status {proc.returncode}{detail}", target=target)


def _kill(proc):
    proc.kill()
    proc.communicate()


class RecordingLauncher:
    """Record every target in ``calls`` and optionally fail with *error*."""

    def __init__(self, error: Exception | None = None):
        self.calls: list[str] = []
        self.error = error

    def launch(
        self,
        target: str,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        self.calls.append(target)
        if self.error is not None:
            raise self.error

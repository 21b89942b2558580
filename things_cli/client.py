"""
ThingsClient — public Python API for driving Things through its URL scheme.

Single entry point for programmatic use, the CLI and the MCP server.
Every command method validates its request, builds a ``things:///`` URL,
hands it to the launcher once and returns the URL.
"""

from __future__ import annotations

import json
import sys
import time

from things_cli import config
from things_cli._utils import _mask_token
from things_cli.builders import (
    build_add,
    build_add_project,
    build_json,
    build_search,
    build_show,
    build_update,
    build_update_project,
    build_version,
)
from things_cli.encoding import build_target
from things_cli.exceptions import (
    DispatchContractError,
    LaunchCancelled,
    LaunchError,
    ValidationError,
)
from things_cli.launcher import OpenLauncher
from things_cli.models import (
    AddProjectRequest,
    AddRequest,
    JsonRequest,
    SearchRequest,
    ShowRequest,
    UpdateProjectRequest,
    UpdateRequest,
    VersionRequest,
)

# ---------------------------------------------------------------------------
# Logging helpers
# ---------------------------------------------------------------------------

_SECRET_KEYS = ("auth-token",)


def _sanitize_target_for_log(target):
    """Mask auth tokens in a target URL before logging."""
    base, sep, query = target.partition("?")
    if not sep:
        return target
    pairs = []
    for pair in query.split("&"):
        key, eq, value = pair.partition("=")
        if key in _SECRET_KEYS and eq:
            pair = f"{key}={_mask_token(value)}"
        pairs.append(pair)
    return base + "?" + "&".join(pairs)


def _log_launch_event(**fields):
    """Emit structured launch logs to stderr when enabled."""
    if not config.LAUNCH_LOG_ENABLED:
        return
    print("[LAUNCH] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _as_request(cls, request, fields):
    """Accept a request instance, a dict, or keyword fields."""
    if request is not None and fields:
        raise ValidationError("pass either a request or keyword fields, not both")
    if isinstance(request, cls):
        return request
    if request is None:
        request = fields
    if isinstance(request, dict):
        return cls.from_dict(request)
    raise ValidationError(f"expected {cls.__name__} or dict, got {type(request).__name__}")


# ---------------------------------------------------------------------------
# ThingsClient
# ---------------------------------------------------------------------------


class ThingsClient:
    """Validate, encode and dispatch Things URL-scheme commands.

    Args:
        activate: Bring Things to the foreground when launching. Defaults to
            ``config.ACTIVATE``. Ignored when *launcher* is given.
        launcher: Anything with ``launch(target, timeout=None, cancel=None)``.
            Defaults to an :class:`OpenLauncher`.

    Command methods accept a request dataclass, a dict (camelCase or
    snake_case keys), or keyword fields, plus optional ``timeout`` (seconds)
    and ``cancel`` (``threading.Event``) forwarded to the launcher.
    """

    def __init__(self, activate=None, launcher=None):
        if launcher is None:
            if activate is None:
                activate = config.ACTIVATE
            launcher = OpenLauncher(activate=activate)
        self.launcher = launcher

    def dispatch(self, command, params, timeout=None, cancel=None):
        """Build the target URL for *command*, launch it, and return it."""
        if not command:
            raise DispatchContractError("command required")

        target = build_target(command, params, scheme=config.SCHEME)
        started = time.monotonic()
        try:
            self.launcher.launch(target, timeout=timeout, cancel=cancel)
        except Exception as e:
            _log_launch_event(
                event="launch",
                command=command,
                target=_sanitize_target_for_log(target),
                outcome="cancelled" if isinstance(e, LaunchCancelled) else "error",
                error=str(e),
                elapsed_ms=round((time.monotonic() - started) * 1000, 1),
            )
            error_cls = LaunchCancelled if isinstance(e, LaunchCancelled) else LaunchError
            raise error_cls(f"launch {target!r}: {e}", target=target) from e

        _log_launch_event(
            event="launch",
            command=command,
            target=_sanitize_target_for_log(target),
            outcome="ok",
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )
        return target

    def _run(self, builder, request, timeout, cancel):
        command, params = builder(request)
        return self.dispatch(command, params, timeout=timeout, cancel=cancel)

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------

    def add(self, request=None, *, timeout=None, cancel=None, **fields):
        """Create to-dos. Needs title, titles, use_clipboard or show_quick_entry."""
        req = _as_request(AddRequest, request, fields)
        return self._run(build_add, req, timeout, cancel)

    def add_project(self, request=None, *, timeout=None, cancel=None, **fields):
        """Create a project, optionally with to-dos."""
        req = _as_request(AddProjectRequest, request, fields)
        return self._run(build_add_project, req, timeout, cancel)

    def update(self, request=None, *, timeout=None, cancel=None, **fields):
        """Update a to-do. Needs auth_token, id and at least one field.

        Optional string fields distinguish ``None`` (leave as-is) from ``""``
        (clear the value in Things).
        """
        req = _as_request(UpdateRequest, request, fields)
        return self._run(build_update, req, timeout, cancel)

    def update_project(self, request=None, *, timeout=None, cancel=None, **fields):
        """Update a project. Same rules as :meth:`update`."""
        req = _as_request(UpdateProjectRequest, request, fields)
        return self._run(build_update_project, req, timeout, cancel)

    def show(self, request=None, *, timeout=None, cancel=None, **fields):
        """Reveal an item or list by id, or by query when no id is given."""
        req = _as_request(ShowRequest, request, fields)
        return self._run(build_show, req, timeout, cancel)

    def search(self, request=None, *, timeout=None, cancel=None, **fields):
        """Open the search UI, optionally pre-filled with a query."""
        req = _as_request(SearchRequest, request, fields)
        return self._run(build_search, req, timeout, cancel)

    def version(self, request=None, *, timeout=None, cancel=None, **fields):
        req = _as_request(VersionRequest, request, fields)
        return self._run(build_version, req, timeout, cancel)

    def json(self, request=None, *, timeout=None, cancel=None, **fields):
        """Import a JSON payload (compacted before encoding)."""
        req = _as_request(JsonRequest, request, fields)
        return self._run(build_json, req, timeout, cancel)

"""
Command implementations for things-cli.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Validation and URL building live in client.py (ThingsClient). These thin
wrappers handle argparse → request fields and output formatting.
"""

import json
import sys

from things_cli import config
from things_cli.client import ThingsClient
from things_cli.exceptions import ValidationError
from things_cli.launcher import RecordingLauncher

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_client():
    """ThingsClient honoring --dry-run (records instead of launching)."""
    if config.RUNTIME_DRY_RUN:
        return ThingsClient(launcher=RecordingLauncher())
    return ThingsClient(activate=config.ACTIVATE)


def _fields(ns, names):
    """Collect argparse values for *names*, skipping unset (None) ones."""
    out = {}
    for name in names:
        value = getattr(ns, name, None)
        if value is not None:
            out[name] = value
    return out


def output_dispatch(url, fmt="json"):
    """Print a dispatch confirmation."""
    if fmt == "json":
        payload = {"ok": True, "url": url, "message": f"Dispatched {url}"}
        if config.RUNTIME_DRY_RUN:
            payload["dry_run"] = True
        print(json.dumps(payload, ensure_ascii=False))
        return
    prefix = "Would dispatch" if config.RUNTIME_DRY_RUN else "Dispatched"
    print(f"{prefix} {url}")


def _run(ns, method, names):
    client = _make_client()
    url = getattr(client, method)(timeout=ns.timeout, **_fields(ns, names))
    output_dispatch(url, ns.format)


def _read_data(ns):
    """Return JSON text from --data (``-`` reads stdin) or --file."""
    if ns.data is not None and ns.file is not None:
        raise ValidationError("use either --data or --file, not both")
    if ns.file is not None:
        try:
            with open(ns.file, encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise ValidationError(f"cannot read {ns.file}: {e.strerror}") from e
    if ns.data == "-":
        return sys.stdin.read()
    return ns.data


# ---------------------------------------------------------------------------
# Create commands
# ---------------------------------------------------------------------------

_ADD_FIELDS = (
    "title",
    "titles",
    "notes",
    "when",
    "deadline",
    "tags",
    "checklist_items",
    "use_clipboard",
    "list_name",
    "list_id",
    "heading",
    "heading_id",
    "completed",
    "canceled",
    "show_quick_entry",
    "reveal",
    "creation_date",
    "completion_date",
)

_ADD_PROJECT_FIELDS = (
    "title",
    "notes",
    "when",
    "deadline",
    "tags",
    "area",
    "area_id",
    "to_dos",
    "completed",
    "canceled",
    "reveal",
    "creation_date",
    "completion_date",
)


def cmd_add(ns):
    _run(ns, "add", _ADD_FIELDS)


def cmd_add_project(ns):
    _run(ns, "add_project", _ADD_PROJECT_FIELDS)


def cmd_json(ns):
    client = _make_client()
    url = client.json(
        timeout=ns.timeout,
        data=_read_data(ns),
        **_fields(ns, ("auth_token", "reveal")),
    )
    output_dispatch(url, ns.format)


# ---------------------------------------------------------------------------
# Update commands
# ---------------------------------------------------------------------------

_UPDATE_COMMON_FIELDS = (
    "auth_token",
    "id",
    "title",
    "notes",
    "prepend_notes",
    "append_notes",
    "when",
    "deadline",
    "tags",
    "add_tags",
    "completed",
    "canceled",
    "reveal",
    "duplicate",
    "creation_date",
    "completion_date",
)

_UPDATE_FIELDS = _UPDATE_COMMON_FIELDS + (
    "checklist_items",
    "prepend_checklist_items",
    "append_checklist_items",
    "list_name",
    "list_id",
    "heading",
    "heading_id",
)

_UPDATE_PROJECT_FIELDS = _UPDATE_COMMON_FIELDS + ("area", "area_id")


def cmd_update(ns):
    _run(ns, "update", _UPDATE_FIELDS)


def cmd_update_project(ns):
    _run(ns, "update_project", _UPDATE_PROJECT_FIELDS)


# ---------------------------------------------------------------------------
# Navigation commands
# ---------------------------------------------------------------------------


def cmd_show(ns):
    _run(ns, "show", ("id", "query", "filter"))


def cmd_search(ns):
    _run(ns, "search", ("query",))


def cmd_version(ns):
    _run(ns, "version", ())

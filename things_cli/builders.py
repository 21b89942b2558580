"""
Command builders: validate a request model and turn it into URL params.

Every ``build_*`` function returns ``(command, params)`` where *params* is a
flat ``dict[str, str]`` with hyphenated keys. List fields are pre-joined
(commas for tags/filters, newlines for multi-line content) so the mapping
never holds more than one value per key.
"""

from __future__ import annotations

import json
import re

from things_cli._utils import _join_commas, _join_lines
from things_cli.exceptions import ValidationError
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
# Param helpers
# ---------------------------------------------------------------------------


def _set_string(params: dict[str, str], key: str, value: str) -> None:
    if value:
        params[key] = value


def _set_optional(params: dict[str, str], key: str, value: str | None) -> None:
    """Set *key* whenever *value* was provided, including an empty string."""
    if value is not None:
        params[key] = value


def _set_bool(params: dict[str, str], key: str, value: bool | None) -> None:
    if value is not None:
        params[key] = "true" if value else "false"


def _set_lines(params: dict[str, str], key: str, values: list[str]) -> None:
    if values:
        params[key] = _join_lines(values)


def _set_commas(params: dict[str, str], key: str, values: list[str]) -> None:
    if values:
        params[key] = _join_commas(values)


def _require_identity(auth_token: str, item_id: str) -> dict[str, str]:
    if not auth_token:
        raise ValidationError("authToken is required")
    if not item_id:
        raise ValidationError("id is required")
    return {"auth-token": auth_token, "id": item_id}


def _require_update_fields(params: dict[str, str]) -> None:
    # auth-token and id are always present at this point.
    if len(params) <= 2:
        raise ValidationError("provide at least one field to update")


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


def build_add(req: AddRequest) -> tuple[str, dict[str, str]]:
    """Build ``add`` params. Needs a title, titles, useClipboard or showQuickEntry."""
    if not (req.title or req.titles or req.use_clipboard or req.show_quick_entry):
        raise ValidationError(
            "provide at least one of title, titles, useClipboard, or showQuickEntry"
        )

    params: dict[str, str] = {}
    _set_string(params, "title", req.title)
    _set_lines(params, "titles", req.titles)
    _set_string(params, "notes", req.notes)
    _set_string(params, "when", req.when)
    _set_string(params, "deadline", req.deadline)
    _set_commas(params, "tags", req.tags)
    _set_lines(params, "checklist-items", req.checklist_items)
    _set_string(params, "use-clipboard", req.use_clipboard)
    _set_string(params, "list", req.list_name)
    _set_string(params, "list-id", req.list_id)
    _set_string(params, "heading", req.heading)
    _set_string(params, "heading-id", req.heading_id)
    _set_bool(params, "completed", req.completed)
    _set_bool(params, "canceled", req.canceled)
    _set_bool(params, "show-quick-entry", req.show_quick_entry)
    _set_bool(params, "reveal", req.reveal)
    _set_string(params, "creation-date", req.creation_date)
    _set_string(params, "completion-date", req.completion_date)
    return "add", params


def build_add_project(req: AddProjectRequest) -> tuple[str, dict[str, str]]:
    params: dict[str, str] = {}
    _set_string(params, "title", req.title)
    _set_string(params, "notes", req.notes)
    _set_string(params, "when", req.when)
    _set_string(params, "deadline", req.deadline)
    _set_commas(params, "tags", req.tags)
    _set_string(params, "area", req.area)
    _set_string(params, "area-id", req.area_id)
    _set_lines(params, "to-dos", req.to_dos)
    _set_bool(params, "completed", req.completed)
    _set_bool(params, "canceled", req.canceled)
    _set_bool(params, "reveal", req.reveal)
    _set_string(params, "creation-date", req.creation_date)
    _set_string(params, "completion-date", req.completion_date)
    return "add-project", params


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------


def _set_common_update(params, req):
    """Fields shared by ``update`` and ``update-project``, in scheme order."""
    _set_optional(params, "title", req.title)
    _set_optional(params, "notes", req.notes)
    _set_optional(params, "prepend-notes", req.prepend_notes)
    _set_optional(params, "append-notes", req.append_notes)
    _set_optional(params, "when", req.when)
    _set_optional(params, "deadline", req.deadline)
    _set_commas(params, "tags", req.tags)
    _set_commas(params, "add-tags", req.add_tags)


def _set_update_flags(params, req):
    _set_bool(params, "completed", req.completed)
    _set_bool(params, "canceled", req.canceled)
    _set_bool(params, "reveal", req.reveal)
    _set_bool(params, "duplicate", req.duplicate)
    _set_optional(params, "creation-date", req.creation_date)
    _set_optional(params, "completion-date", req.completion_date)


def build_update(req: UpdateRequest) -> tuple[str, dict[str, str]]:
    """Build ``update`` params. Requires authToken, id and one changed field."""
    params = _require_identity(req.auth_token, req.id)
    _set_common_update(params, req)
    _set_lines(params, "checklist-items", req.checklist_items)
    _set_lines(params, "prepend-checklist-items", req.prepend_checklist_items)
    _set_lines(params, "append-checklist-items", req.append_checklist_items)
    _set_optional(params, "list", req.list_name)
    _set_optional(params, "list-id", req.list_id)
    _set_optional(params, "heading", req.heading)
    _set_optional(params, "heading-id", req.heading_id)
    _set_update_flags(params, req)
    _require_update_fields(params)
    return "update", params


def build_update_project(req: UpdateProjectRequest) -> tuple[str, dict[str, str]]:
    """Build ``update-project`` params. Same identity rules as :func:`build_update`."""
    params = _require_identity(req.auth_token, req.id)
    _set_common_update(params, req)
    _set_optional(params, "area", req.area)
    _set_optional(params, "area-id", req.area_id)
    _set_update_flags(params, req)
    _require_update_fields(params)
    return "update-project", params


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


def build_show(req: ShowRequest) -> tuple[str, dict[str, str]]:
    """Build ``show`` params. When both id and query are given, id wins."""
    if not req.id and not req.query:
        raise ValidationError("provide id or query")

    params: dict[str, str] = {}
    _set_string(params, "id", req.id)
    if not req.id:
        _set_string(params, "query", req.query)
    _set_commas(params, "filter", req.filter)
    return "show", params


def build_search(req: SearchRequest) -> tuple[str, dict[str, str]]:
    params: dict[str, str] = {}
    _set_string(params, "query", req.query)
    return "search", params


def build_version(req: VersionRequest | None = None) -> tuple[str, dict[str, str]]:
    return "version", {}


# ---------------------------------------------------------------------------
# JSON import
# ---------------------------------------------------------------------------

_JSON_STRING_OR_SPACE = re.compile(r'("(?:\\.|[^"\\])*")|[ \t\n\r]+')


def _reject_constant(name):
    raise ValueError(f"invalid literal {name}")


def _validate_json_text(text: str) -> None:
    try:
        json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ValidationError(f"data must be valid JSON: {e.msg} at position {e.pos}") from None
    except ValueError as e:
        raise ValidationError(f"data must be valid JSON: {e}") from None


def _compact_json(data) -> str:
    """Validate *data* and return it as compact JSON text.

    Text payloads keep their exact tokens: only whitespace outside string
    literals is dropped. Decoded lists and dicts are serialized compactly.
    """
    if data is None or data == "" or data == b"":
        raise ValidationError("data is required")
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    if isinstance(data, str):
        if not data.strip():
            raise ValidationError("data is required")
        _validate_json_text(data)
        return _JSON_STRING_OR_SPACE.sub(lambda m: m.group(1) or "", data)
    try:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"data must be valid JSON: {e}") from None


def build_json(req: JsonRequest) -> tuple[str, dict[str, str]]:
    """Build ``json`` params from a payload compacted to minimal whitespace."""
    compact = _compact_json(req.data)

    params: dict[str, str] = {}
    _set_string(params, "auth-token", req.auth_token)
    params["data"] = compact
    _set_bool(params, "reveal", req.reveal)
    return "json", params

"""
Typed request models, one per Things URL-scheme command.

Field conventions:
  - ``str`` fields treat ``""`` as "not provided".
  - ``str | None`` fields (update commands) are tri-state: ``None`` leaves the
    value untouched, ``""`` clears it, anything else sets it.
  - ``bool | None`` fields are omitted when ``None``.
  - ``list[str]`` fields are omitted when empty.
"""

from __future__ import annotations

import types
import typing
from dataclasses import dataclass, field, fields
from typing import Any

from things_cli._utils import _camel_case
from things_cli.exceptions import ValidationError


def _field_kind(hint):
    """Classify a resolved type hint as str, optional_str, bool, list, or any."""
    if hint is str:
        return "str"
    origin = typing.get_origin(hint)
    if origin is list:
        return "list"
    if origin in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if args == [bool]:
            return "bool"
        if args == [str]:
            return "optional_str"
    return "any"


def _coerce(value, kind, name):
    if kind == "any":
        return value
    if value is None:
        if kind == "str":
            return ""
        if kind == "list":
            return []
        return None
    if kind in ("str", "optional_str"):
        if not isinstance(value, str):
            raise ValidationError(f"{name} must be a string, got {type(value).__name__}")
        return value
    if kind == "bool":
        if not isinstance(value, bool):
            raise ValidationError(f"{name} must be a boolean, got {type(value).__name__}")
        return value
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{name} must be a list of strings")
    return list(value)


class _RequestMixin:
    """Shared ``from_dict`` constructor for request dataclasses."""

    @classmethod
    def from_dict(cls, data):
        """Build a request from a dict with camelCase or snake_case keys.

        Raises ValidationError for unknown keys or wrongly-typed values.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError(f"expected an object, got {type(data).__name__}")
        hints = typing.get_type_hints(cls)
        by_key = {}
        labels = {}
        for f in fields(cls):
            label = f.metadata.get("alias", _camel_case(f.name))
            labels[f.name] = label
            by_key[f.name] = f.name
            by_key[label] = f.name
        kwargs = {}
        for key, value in data.items():
            name = by_key.get(key)
            if name is None:
                raise ValidationError(f"unknown field '{key}'")
            kwargs[name] = _coerce(value, _field_kind(hints[name]), labels[name])
        return cls(**kwargs)


@dataclass(frozen=True)
class AddRequest(_RequestMixin):
    """Create one or more to-dos (``things:///add``)."""

    title: str = ""
    titles: list[str] = field(default_factory=list)
    notes: str = ""
    when: str = ""
    deadline: str = ""
    tags: list[str] = field(default_factory=list)
    checklist_items: list[str] = field(default_factory=list)
    use_clipboard: str = ""
    list_name: str = field(default="", metadata={"alias": "list"})
    list_id: str = ""
    heading: str = ""
    heading_id: str = ""
    completed: bool | None = None
    canceled: bool | None = None
    show_quick_entry: bool | None = None
    reveal: bool | None = None
    creation_date: str = ""
    completion_date: str = ""


@dataclass(frozen=True)
class AddProjectRequest(_RequestMixin):
    """Create a project (``things:///add-project``)."""

    title: str = ""
    notes: str = ""
    when: str = ""
    deadline: str = ""
    tags: list[str] = field(default_factory=list)
    area: str = ""
    area_id: str = ""
    to_dos: list[str] = field(default_factory=list)
    completed: bool | None = None
    canceled: bool | None = None
    reveal: bool | None = None
    creation_date: str = ""
    completion_date: str = ""


@dataclass(frozen=True)
class UpdateRequest(_RequestMixin):
    """Modify an existing to-do (``things:///update``)."""

    auth_token: str = ""
    id: str = ""
    title: str | None = None
    notes: str | None = None
    prepend_notes: str | None = None
    append_notes: str | None = None
    when: str | None = None
    deadline: str | None = None
    tags: list[str] = field(default_factory=list)
    add_tags: list[str] = field(default_factory=list)
    checklist_items: list[str] = field(default_factory=list)
    prepend_checklist_items: list[str] = field(default_factory=list)
    append_checklist_items: list[str] = field(default_factory=list)
    list_name: str | None = field(default=None, metadata={"alias": "list"})
    list_id: str | None = None
    heading: str | None = None
    heading_id: str | None = None
    completed: bool | None = None
    canceled: bool | None = None
    reveal: bool | None = None
    duplicate: bool | None = None
    creation_date: str | None = None
    completion_date: str | None = None


@dataclass(frozen=True)
class UpdateProjectRequest(_RequestMixin):
    """Modify an existing project (``things:///update-project``)."""

    auth_token: str = ""
    id: str = ""
    title: str | None = None
    notes: str | None = None
    prepend_notes: str | None = None
    append_notes: str | None = None
    when: str | None = None
    deadline: str | None = None
    tags: list[str] = field(default_factory=list)
    add_tags: list[str] = field(default_factory=list)
    area: str | None = None
    area_id: str | None = None
    completed: bool | None = None
    canceled: bool | None = None
    reveal: bool | None = None
    duplicate: bool | None = None
    creation_date: str | None = None
    completion_date: str | None = None


@dataclass(frozen=True)
class ShowRequest(_RequestMixin):
    """Navigate to a list, project, area, tag or to-do (``things:///show``)."""

    id: str = ""
    query: str = ""
    filter: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SearchRequest(_RequestMixin):
    query: str = ""


@dataclass(frozen=True)
class VersionRequest(_RequestMixin):
    pass


@dataclass(frozen=True)
class JsonRequest(_RequestMixin):
    """Import structured data (``things:///json``).

    ``data`` is JSON text, or an already-decoded list/dict.
    """

    auth_token: str = ""
    data: Any = None
    reveal: bool | None = None

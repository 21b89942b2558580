"""Create tools: to-dos, projects, and JSON imports (3 tools)."""

from __future__ import annotations

from typing import Any

from things_cli.mcp_server._core import _call, _drop_unset, _finalize_tool_result


def things_add(
    title: str | None = None,
    titles: list[str] | None = None,
    notes: str | None = None,
    when: str | None = None,
    deadline: str | None = None,
    tags: list[str] | None = None,
    checklist_items: list[str] | None = None,
    use_clipboard: str | None = None,
    list: str | None = None,
    list_id: str | None = None,
    heading: str | None = None,
    heading_id: str | None = None,
    completed: bool | None = None,
    canceled: bool | None = None,
    show_quick_entry: bool | None = None,
    reveal: bool | None = None,
    creation_date: str | None = None,
    completion_date: str | None = None,
) -> dict:
    """Create new to-dos in Things using the URL scheme.

    Args:
        title: To-do title. One of title, titles, use_clipboard or
            show_quick_entry is required.
        titles: Several titles; creates one to-do per entry.
        when: today, tomorrow, evening, anytime, someday, a date or date time.
        tags: Tag names (must already exist in Things).
        checklist_items: One checklist item per entry.
        use_clipboard: replace-title, replace-notes or replace-checklist-items.
        list: Project or area title to add into (list_id takes precedence).

    Returns:
        Dict with ok, url and message.
    """
    return _finalize_tool_result(
        _call(
            "add",
            **_drop_unset(
                {
                    "title": title,
                    "titles": titles,
                    "notes": notes,
                    "when": when,
                    "deadline": deadline,
                    "tags": tags,
                    "checklist_items": checklist_items,
                    "use_clipboard": use_clipboard,
                    "list_name": list,
                    "list_id": list_id,
                    "heading": heading,
                    "heading_id": heading_id,
                    "completed": completed,
                    "canceled": canceled,
                    "show_quick_entry": show_quick_entry,
                    "reveal": reveal,
                    "creation_date": creation_date,
                    "completion_date": completion_date,
                }
            ),
        )
    )


def things_add_project(
    title: str | None = None,
    notes: str | None = None,
    when: str | None = None,
    deadline: str | None = None,
    tags: list[str] | None = None,
    area: str | None = None,
    area_id: str | None = None,
    to_dos: list[str] | None = None,
    completed: bool | None = None,
    canceled: bool | None = None,
    reveal: bool | None = None,
    creation_date: str | None = None,
    completion_date: str | None = None,
) -> dict:
    """Create new projects in Things.

    Args:
        to_dos: Titles of to-dos to create inside the project.
        area: Area title to file the project under (area_id takes precedence).
    """
    return _finalize_tool_result(
        _call(
            "add_project",
            **_drop_unset(
                {
                    "title": title,
                    "notes": notes,
                    "when": when,
                    "deadline": deadline,
                    "tags": tags,
                    "area": area,
                    "area_id": area_id,
                    "to_dos": to_dos,
                    "completed": completed,
                    "canceled": canceled,
                    "reveal": reveal,
                    "creation_date": creation_date,
                    "completion_date": completion_date,
                }
            ),
        )
    )


def things_json(
    data: Any,
    auth_token: str | None = None,
    reveal: bool | None = None,
) -> dict:
    """Invoke the Things JSON command for complex imports.

    Args:
        data: JSON array of to-do/project objects, as text or structured JSON.
        auth_token: Required by Things when the payload contains updates.
    """
    return _finalize_tool_result(
        _call(
            "json",
            **_drop_unset({"data": data, "auth_token": auth_token, "reveal": reveal}),
        )
    )


def register(mcp):
    """Register all create tools with the FastMCP instance."""
    mcp.tool(name="things-add")(things_add)
    mcp.tool(name="things-add-project")(things_add_project)
    mcp.tool(name="things-json")(things_json)

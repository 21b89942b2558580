"""Update tools: modify existing to-dos and projects (2 tools).

Optional string fields are tri-state: omit to leave unchanged, pass ``""``
to clear the value in Things.
"""

from __future__ import annotations

from things_cli.mcp_server._core import _call, _drop_unset, _finalize_tool_result


def things_update(
    auth_token: str,
    id: str,
    title: str | None = None,
    notes: str | None = None,
    prepend_notes: str | None = None,
    append_notes: str | None = None,
    when: str | None = None,
    deadline: str | None = None,
    tags: list[str] | None = None,
    add_tags: list[str] | None = None,
    checklist_items: list[str] | None = None,
    prepend_checklist_items: list[str] | None = None,
    append_checklist_items: list[str] | None = None,
    list: str | None = None,
    list_id: str | None = None,
    heading: str | None = None,
    heading_id: str | None = None,
    completed: bool | None = None,
    canceled: bool | None = None,
    reveal: bool | None = None,
    duplicate: bool | None = None,
    creation_date: str | None = None,
    completion_date: str | None = None,
) -> dict:
    """Update existing to-dos in Things.

    Args:
        auth_token: Things URL-scheme authorization token (Settings > General).
        id: To-do ID.
        tags: Replaces all tags. Use add_tags to append.
    """
    return _finalize_tool_result(
        _call(
            "update",
            **_drop_unset(
                {
                    "auth_token": auth_token,
                    "id": id,
                    "title": title,
                    "notes": notes,
                    "prepend_notes": prepend_notes,
                    "append_notes": append_notes,
                    "when": when,
                    "deadline": deadline,
                    "tags": tags,
                    "add_tags": add_tags,
                    "checklist_items": checklist_items,
                    "prepend_checklist_items": prepend_checklist_items,
                    "append_checklist_items": append_checklist_items,
                    "list_name": list,
                    "list_id": list_id,
                    "heading": heading,
                    "heading_id": heading_id,
                    "completed": completed,
                    "canceled": canceled,
                    "reveal": reveal,
                    "duplicate": duplicate,
                    "creation_date": creation_date,
                    "completion_date": completion_date,
                }
            ),
        )
    )


def things_update_project(
    auth_token: str,
    id: str,
    title: str | None = None,
    notes: str | None = None,
    prepend_notes: str | None = None,
    append_notes: str | None = None,
    when: str | None = None,
    deadline: str | None = None,
    tags: list[str] | None = None,
    add_tags: list[str] | None = None,
    area: str | None = None,
    area_id: str | None = None,
    completed: bool | None = None,
    canceled: bool | None = None,
    reveal: bool | None = None,
    duplicate: bool | None = None,
    creation_date: str | None = None,
    completion_date: str | None = None,
) -> dict:
    """Update existing projects in Things."""
    return _finalize_tool_result(
        _call(
            "update_project",
            **_drop_unset(
                {
                    "auth_token": auth_token,
                    "id": id,
                    "title": title,
                    "notes": notes,
                    "prepend_notes": prepend_notes,
                    "append_notes": append_notes,
                    "when": when,
                    "deadline": deadline,
                    "tags": tags,
                    "add_tags": add_tags,
                    "area": area,
                    "area_id": area_id,
                    "completed": completed,
                    "canceled": canceled,
                    "reveal": reveal,
                    "duplicate": duplicate,
                    "creation_date": creation_date,
                    "completion_date": completion_date,
                }
            ),
        )
    )


def register(mcp):
    """Register all update tools with the FastMCP instance."""
    mcp.tool(name="things-update")(things_update)
    mcp.tool(name="things-update-project")(things_update_project)

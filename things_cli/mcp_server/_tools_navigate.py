"""Navigation tools: show, search, version (3 tools)."""

from __future__ import annotations

from things_cli.mcp_server._core import _call, _drop_unset, _finalize_tool_result


def things_show(
    id: str | None = None,
    query: str | None = None,
    filter: list[str] | None = None,
) -> dict:
    """Open Things lists, projects, or tags.

    Args:
        id: Item ID or built-in list (inbox, today, anytime, upcoming,
            someday, logbook, ...). Takes precedence over query.
        query: Name of an area, project, tag or built-in list.
        filter: Tag names to filter the shown list by.
    """
    return _finalize_tool_result(
        _call("show", **_drop_unset({"id": id, "query": query, "filter": filter}))
    )


def things_search(query: str | None = None) -> dict:
    """Open the Things search UI, optionally with a query."""
    return _finalize_tool_result(_call("search", **_drop_unset({"query": query})))


def things_version() -> dict:
    """Reveal the Things app and URL scheme version dialog."""
    return _finalize_tool_result(_call("version"))


def register(mcp):
    """Register all navigation tools with the FastMCP instance."""
    mcp.tool(name="things-show")(things_show)
    mcp.tool(name="things-search")(things_search)
    mcp.tool(name="things-version")(things_version)

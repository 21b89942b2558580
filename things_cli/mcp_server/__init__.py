"""MCP server exposing ThingsClient methods as tools.

Package structure:
  __init__.py         — FastMCP init, register() calls, re-exports
  __main__.py         — ``python -m things_cli.mcp_server`` entry point
  _core.py            — Client caching, _call dispatcher, response contract
  _tools_create.py    — things_add, things_add_project, things_json
  _tools_update.py    — things_update, things_update_project
  _tools_navigate.py  — things_show, things_search, things_version

Run: python -m things_cli.mcp_server [--activate]
Requires: python -m pip install .[mcp]
"""

from __future__ import annotations

import argparse

from mcp.server.fastmcp import FastMCP

from things_cli.mcp_server import _tools_create, _tools_navigate, _tools_update

mcp = FastMCP(
    "things",
    instructions=(
        "Things 3 URL-scheme tools. Commands are fire-and-forget: the result "
        "is the dispatched things:/// URL, not data read back from Things. "
        "Update tools need the URL-scheme auth token and the item ID. "
        "For update tools, omit a field to leave it unchanged and pass an "
        "empty string to clear it."
    ),
)

for _mod in [_tools_create, _tools_update, _tools_navigate]:
    _mod.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

# _core
from things_cli.mcp_server._core import (  # noqa: E402, F401
    _call,
    _client,
    _contract_error,
    _finalize_tool_result,
    _get_client,
)

# _tools_create
from things_cli.mcp_server._tools_create import (  # noqa: E402, F401
    things_add,
    things_add_project,
    things_json,
)

# _tools_navigate
from things_cli.mcp_server._tools_navigate import (  # noqa: E402, F401
    things_search,
    things_show,
    things_version,
)

# _tools_update
from things_cli.mcp_server._tools_update import (  # noqa: E402, F401
    things_update,
    things_update_project,
)


def main(argv=None):
    """Run the MCP server (stdio transport)."""
    parser = argparse.ArgumentParser(prog="things-mcp")
    parser.add_argument(
        "--activate",
        action="store_true",
        help="bring Things to the foreground when launching URLs",
    )
    args = parser.parse_args(argv)
    if args.activate:
        from things_cli.client import ThingsClient
        from things_cli.mcp_server import _core

        _core._client = ThingsClient(activate=True)
    mcp.run()

"""Core helpers: client caching, _call dispatcher, response contract."""

from __future__ import annotations

from things_cli import (
    CliError,
    DispatchContractError,
    LaunchCancelled,
    LaunchError,
    ThingsClient,
    ValidationError,
)
from things_cli.config import CONTRACT_SCHEMA_VERSION, MCP_RESPONSE_MODE

_client: ThingsClient | None = None


def _get_client() -> ThingsClient:
    """Return a cached ThingsClient, creating one on first use."""
    global _client
    if _client is None:
        _client = ThingsClient()
    return _client


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope with legacy compatibility fields."""
    return {
        "ok": False,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "type": error_type,  # legacy
        "error": message,  # legacy
        "error_detail": {
            "type": error_type,
            "message": message,
        },
    }


def _success(url: str) -> dict:
    return {"ok": True, "url": url, "message": f"Dispatched {url}"}


def _finalize_tool_result(result: dict) -> dict:
    """Finalize tool response based on configured MCP response mode.

    Modes:
        - legacy (default): flat dict with ok/schema_version added.
        - envelope: success payload moved under ``data``.
    """
    out = dict(result)
    out.setdefault("schema_version", CONTRACT_SCHEMA_VERSION)
    if out.get("ok") is False or MCP_RESPONSE_MODE != "envelope":
        return out
    data = dict(out)
    data.pop("ok", None)
    data.pop("schema_version", None)
    return {
        "ok": True,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "data": data,
    }


_ALLOWED_METHODS = {
    "add",
    "add_project",
    "update",
    "update_project",
    "show",
    "search",
    "version",
    "json",
}


def _drop_unset(fields: dict) -> dict:
    """Drop ``None`` values so request defaults apply."""
    return {k: v for k, v in fields.items() if v is not None}


def _call(method_name: str, **kwargs) -> dict:
    """Call a ThingsClient method, converting exceptions to error dicts."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}", "error")
    try:
        client = _get_client()
        url = getattr(client, method_name)(**kwargs)
    except ValidationError as e:
        return _contract_error(str(e), "validation")
    except DispatchContractError as e:
        return _contract_error(str(e), "contract")
    except LaunchCancelled as e:
        return _contract_error(str(e), "cancelled")
    except LaunchError as e:
        return _contract_error(str(e), "launch")
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
    return _success(url)

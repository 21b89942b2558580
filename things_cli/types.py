"""Typed response definitions for the MCP tools and CLI JSON output.

These TypedDicts document the shape of dicts returned to callers.
They are optional — runtime behavior is unchanged (plain dicts).
"""

from __future__ import annotations

from typing import TypedDict


class DispatchResult(TypedDict):
    """Successful dispatch as returned by MCP tools and ``--format json``."""

    ok: bool
    url: str
    message: str


class ErrorDetail(TypedDict):
    type: str
    message: str


class ErrorEnvelope(TypedDict):
    """Failed dispatch. ``type``/``error`` mirror ``error_detail``."""

    ok: bool
    schema_version: str
    type: str
    error: str
    error_detail: ErrorDetail

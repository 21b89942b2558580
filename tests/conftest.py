"""
Shared test fixtures for things-cli tests.
Patches the config module so no test reads a real .env or launches Things.
"""

import pytest


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from things_cli import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "ACTIVATE", False)
    monkeypatch.setattr(config, "LAUNCH_LOG_ENABLED", False)
    monkeypatch.setattr(config, "OPEN_COMMAND", "open")
    monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "legacy")
    monkeypatch.setattr(config, "RUNTIME_DRY_RUN", False)

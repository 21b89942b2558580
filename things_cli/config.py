"""
things-cli shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Keys that may also come from the process environment (overrides .env).
_ENV_KEYS = (
    "THINGS_ACTIVATE",
    "THINGS_LAUNCH_LOG",
    "THINGS_OPEN_COMMAND",
    "THINGS_MCP_RESPONSE_MODE",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _ENV_KEYS:
        if key in os.environ:
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(key, choices, default):
    """Return the env value if it is one of *choices*, else *default*."""
    raw = env.get(key)
    if raw is None:
        return default
    raw = raw.strip().lower()
    return raw if raw in choices else default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

SCHEME = "things"
CONTRACT_SCHEMA_VERSION = "1.0"

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env)
# ---------------------------------------------------------------------------

env = load_env()

ACTIVATE = _env_bool("THINGS_ACTIVATE", False)
LAUNCH_LOG_ENABLED = _env_bool("THINGS_LAUNCH_LOG", False)
OPEN_COMMAND = env.get("THINGS_OPEN_COMMAND", "") or "open"
MCP_RESPONSE_MODE = _env_choice("THINGS_MCP_RESPONSE_MODE", {"legacy", "envelope"}, "legacy")

# ---------------------------------------------------------------------------
# Runtime flags (set by the CLI)
# ---------------------------------------------------------------------------

RUNTIME_DRY_RUN = False

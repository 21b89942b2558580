"""
things-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — base for every error the engine raises."""

    exit_code = 1


class ValidationError(CliError):
    """Exit code 1 — required input missing or malformed. Raised before any launch."""

    exit_code = 1


class DispatchContractError(CliError):
    """Exit code 3 — an empty command name reached the dispatcher."""

    exit_code = 3


class LaunchError(CliError):
    """Exit code 4 — the external launch failed.

    ``target`` is the URL that was attempted, so the failure can be reproduced
    by hand (e.g. ``open -g '<target>'``).
    """

    exit_code = 4

    def __init__(self, message, target=None):
        super().__init__(message)
        self.target = target


class LaunchCancelled(LaunchError):
    """Launch was canceled or ran past its deadline before the opener returned."""

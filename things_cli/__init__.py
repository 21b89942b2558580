"""things-cli — drive the Things to-do manager through its URL scheme."""

from things_cli.client import ThingsClient
from things_cli.config import VERSION
from things_cli.encoding import encode_query
from things_cli.exceptions import (
    CliError,
    DispatchContractError,
    LaunchCancelled,
    LaunchError,
    ValidationError,
)
from things_cli.launcher import Launcher, OpenLauncher, RecordingLauncher
from things_cli.models import (
    AddProjectRequest,
    AddRequest,
    JsonRequest,
    SearchRequest,
    ShowRequest,
    UpdateProjectRequest,
    UpdateRequest,
    VersionRequest,
)
from things_cli.types import DispatchResult, ErrorEnvelope

__all__ = [
    "VERSION",
    "ThingsClient",
    "encode_query",
    "CliError",
    "DispatchContractError",
    "LaunchCancelled",
    "LaunchError",
    "ValidationError",
    "Launcher",
    "OpenLauncher",
    "RecordingLauncher",
    "AddProjectRequest",
    "AddRequest",
    "JsonRequest",
    "SearchRequest",
    "ShowRequest",
    "UpdateProjectRequest",
    "UpdateRequest",
    "VersionRequest",
    "DispatchResult",
    "ErrorEnvelope",
]

"""Tests for exception hierarchy and package re-exports."""

from things_cli.exceptions import (
    CliError,
    DispatchContractError,
    LaunchCancelled,
    LaunchError,
    ValidationError,
)


class TestExceptionHierarchy:
    def test_all_are_cli_errors(self):
        for cls in (ValidationError, DispatchContractError, LaunchError, LaunchCancelled):
            assert issubclass(cls, CliError)

    def test_cancelled_is_launch_error(self):
        assert issubclass(LaunchCancelled, LaunchError)

    def test_validation_is_not_launch_error(self):
        assert not issubclass(ValidationError, LaunchError)

    def test_exit_codes(self):
        assert CliError.exit_code == 1
        assert ValidationError.exit_code == 1
        assert DispatchContractError.exit_code == 3
        assert LaunchError.exit_code == 4
        assert LaunchCancelled.exit_code == 4


class TestLaunchErrorAttrs:
    def test_target(self):
        err = LaunchError("launch failed", target="things:///version")
        assert err.target == "things:///version"
        assert str(err) == "launch failed"

    def test_default_target(self):
        assert LaunchError("x").target is None


class TestReExports:
    def test_init_re_exports(self):
        from things_cli import CliError as InitCliError
        from things_cli import LaunchError as InitLaunchError
        from things_cli import ValidationError as InitValidationError

        assert InitCliError is CliError
        assert InitLaunchError is LaunchError
        assert InitValidationError is ValidationError

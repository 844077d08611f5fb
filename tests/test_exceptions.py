"""Tests for MH-AC-WIFI-1 exceptions."""

from custom_components.mhacwifi1.infrastructure.errors import (
    AcwmAuthError,
    AcwmCommandError,
    AcwmConnectionError,
    AcwmDecodeError,
    AcwmDeviceError,
    AcwmError,
)
from custom_components.mhacwifi1.models import CommandResult


def test_hierarchy():
    """Test every client error derives from AcwmError."""
    for error_class in (
        AcwmConnectionError,
        AcwmDecodeError,
        AcwmCommandError,
        AcwmAuthError,
        AcwmDeviceError,
    ):
        assert issubclass(error_class, AcwmError)

    assert issubclass(AcwmAuthError, AcwmCommandError)
    assert issubclass(AcwmDeviceError, AcwmCommandError)
    assert not issubclass(AcwmConnectionError, AcwmCommandError)


def test_command_error_keeps_result():
    """Test code, message and status are taken from the result."""
    result = CommandResult(success=False, error={"code": 7, "message": "busy"}, status=500)
    error = AcwmDeviceError(result, "identify")

    assert error.result is result
    assert error.command == "identify"
    assert error.code == 7
    assert error.message == "busy"
    assert error.status == 500
    assert str(error) == "identify failed with code 7: busy (HTTP 500)"


def test_command_error_without_command():
    result = CommandResult(success=False, error={"code": 3})
    error = AcwmAuthError(result)

    assert error.command is None
    assert str(error) == "command failed with code 3:  (HTTP 200)"


def test_plain_errors_carry_message():
    error = AcwmConnectionError("getinfo failed: ClientConnectionError: reset")

    assert str(error) == "getinfo failed: ClientConnectionError: reset"

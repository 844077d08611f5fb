"""Custom exceptions for the MH-AC-WIFI-1 integration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import CommandResult


class AcwmError(Exception):
    """Base exception for MH-AC-WIFI-1."""


class AcwmConnectionError(AcwmError):
    """Raised when the device cannot be reached or drops the connection."""


class AcwmDecodeError(AcwmError):
    """Raised when a response body cannot be decompressed or parsed."""


class AcwmCommandError(AcwmError):
    """Raised when the device answers a command with success=false.

    The complete result is kept so callers can tell causes apart by
    ``code``, ``message`` and transport ``status``.
    """

    def __init__(self, result: CommandResult, command: str | None = None):
        self.result = result
        self.command = command
        super().__init__(
            f"{command or 'command'} failed with code {result.error_code}: "
            f"{result.error_message} (HTTP {result.status})"
        )

    @property
    def code(self) -> int | None:
        return self.result.error_code

    @property
    def message(self) -> str:
        return self.result.error_message

    @property
    def status(self) -> int:
        return self.result.status


class AcwmAuthError(AcwmCommandError):
    """Raised when the login command is rejected."""


class AcwmDeviceError(AcwmCommandError):
    """Raised when any other command is rejected by the device."""

"""Data models for the MH-AC-WIFI-1 integration.

This module provides Pydantic models for the structured data exchanged with
the device: command results, data point values and the static device
reference. It also includes the temperature conversion helpers used by the
entity platforms.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .constants import ERROR_SESSION_INVALID, TEMPERATURE_SCALE


# Base model for all MH-AC-WIFI-1 data models
class AcwmModel(BaseModel):
    """Base model for all MH-AC-WIFI-1 data structures."""

    model_config = {"validate_assignment": True, "populate_by_name": True}


# Temperature helpers
def device_to_celsius(raw_value: Any) -> float | None:
    """Convert a device temperature (tenths of a degree) to degrees Celsius.

    Example:
        >>> device_to_celsius(215)
        21.5
        >>> device_to_celsius("-15")
        -1.5
    """
    if raw_value is None:
        return None
    try:
        return int(raw_value) / TEMPERATURE_SCALE
    except (TypeError, ValueError):
        return None


def celsius_to_device(celsius: float) -> int:
    """Convert degrees Celsius to the device representation.

    Example:
        >>> celsius_to_device(22.5)
        225
    """
    return round(celsius * TEMPERATURE_SCALE)


class CommandError(AcwmModel):
    """Error record of a rejected command."""

    code: int
    message: str = ""


class CommandResult(AcwmModel):
    """Outcome of one ``/api.cgi`` command.

    Attributes:
        success: Whether the device accepted the command.
        data: Command specific payload on success.
        error: Error record when success is False.
        status: HTTP status code of the response, whatever the body says.

    Example:
        >>> result = CommandResult.from_response(
        ...     {"success": False, "error": {"code": 1, "message": "bad session"}}, 200
        ... )
        >>> result.is_session_expired
        True
    """

    success: bool
    data: dict[str, Any] | None = None
    error: CommandError | None = None
    status: int = Field(default=200, description="HTTP status code of the response")

    @classmethod
    def from_response(cls, body: Any, status: int) -> CommandResult:
        """Build a result from a decoded response body.

        Raises:
            ValueError: If the body is not a JSON object.
            pydantic.ValidationError: If the body does not have the expected shape.
        """
        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object, got {type(body).__name__}")
        return cls.model_validate({**body, "status": status})

    @property
    def error_code(self) -> int | None:
        return self.error.code if self.error else None

    @property
    def error_message(self) -> str:
        return self.error.message if self.error else ""

    @property
    def is_session_expired(self) -> bool:
        return not self.success and self.error_code == ERROR_SESSION_INVALID


class DataPointValue(AcwmModel):
    """Value of a single data point as reported by ``getdatapointvalue``."""

    uid: int
    value: int | float | str
    status: int | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> DataPointValue:
        return cls.model_validate(raw)


def parse_datapoint_values(dpval: Any) -> dict[int, Any]:
    """Flatten a ``dpval`` payload into ``{uid: value}``.

    The device answers a single-uid read with one object and an ``all`` read
    with a list of objects.
    """
    if dpval is None:
        return {}
    items = dpval if isinstance(dpval, list) else [dpval]
    values = {}
    for item in items:
        point = DataPointValue.from_api(item)
        values[point.uid] = point.value
    return values


class DeviceReference(AcwmModel):
    """Static device descriptor loaded from ``data.json``.

    The descriptor is read-only configuration data; the model is frozen so
    nothing mutates it after load.
    """

    model_config = {"frozen": True}

    data: Any

    def get(self, key: str, default: Any = None) -> Any:
        if isinstance(self.data, dict):
            return self.data.get(key, default)
        return default

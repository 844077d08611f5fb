"""Constants and Enums for the MH-AC-WIFI-1 integration."""

from __future__ import annotations

from enum import IntEnum

from homeassistant.components.climate import (
    FAN_AUTO,
    FAN_HIGH,
    FAN_LOW,
    FAN_MEDIUM,
    FAN_TOP,
    HVACMode,
)
from pydantic import BaseModel, Field

# Integration Domain
DOMAIN = "mhacwifi1"

# Supported Platforms
PLATFORMS = ["climate", "sensor", "switch"]

MANUFACTURER = "Mitsubishi Heavy Industries"
DEFAULT_MODEL = "MH-AC-WIFI-1"

# Config entry keys
CONF_POLLING_INTERVAL = "polling_interval"
CONF_REQUEST_TIMEOUT = "request_timeout"
CONF_RETRY_ATTEMPTS = "retry_attempts"
CONF_RETRY_DELAY = "retry_delay"

# --- Wire protocol ---

API_PATH = "/api.cgi"
REFERENCE_PATH = "/js/data/data.json"

CMD_LOGIN = "login"
CMD_LOGOUT = "logout"
CMD_GET_INFO = "getinfo"
CMD_GET_CURRENT_CONFIG = "getcurrentconfig"
CMD_GET_AVAILABLE_DATAPOINTS = "getavailabledatapoints"
CMD_GET_DATAPOINT_VALUE = "getdatapointvalue"
CMD_SET_DATAPOINT_VALUE = "setdatapointvalue"
CMD_IDENTIFY = "identify"
CMD_REBOOT = "reboot"

SESSION_FIELD = "sessionID"

# uid value that asks the device for every data point at once
ALL_DATAPOINTS = "all"

# error.code reported when the session id is unknown or expired
ERROR_SESSION_INVALID = 1


class APIDefaults(BaseModel):
    """Default values for API configuration.

    Immutable configuration values for timeouts, retry policy and polling.
    These values can be overridden when instantiating AcwmAPI or from the
    options flow.
    """

    model_config = {"frozen": True}

    REQUEST_TIMEOUT: int = Field(default=10, description="Timeout for a single HTTP request in seconds")
    RETRY_DELAY: float = Field(default=0.1, description="Fixed delay between retry attempts in seconds")
    RETRY_ATTEMPTS: int = Field(default=5, description="Total attempts for retry-wrapped commands")
    POLLING_INTERVAL: int = Field(default=30, description="Polling interval for the coordinator in seconds")
    DEFAULT_USERNAME: str = Field(default="admin", description="Factory default web interface user")
    DEFAULT_PASSWORD: str = Field(default="admin", description="Factory default web interface password")


# Create a default instance for easy access
API_DEFAULTS = APIDefaults()


# --- Data points ---


class DataPoint(IntEnum):
    """Data point uids used by the climate adapter."""

    POWER = 1
    USER_MODE = 2
    FAN_SPEED = 4
    SETPOINT = 9
    RETURN_TEMPERATURE = 10
    REMOTE_DISABLE = 12
    MIN_SETPOINT = 35
    MAX_SETPOINT = 36
    OUTDOOR_TEMPERATURE = 37


class UserMode(IntEnum):
    """Operating modes reported by data point 2."""

    AUTO = 0
    HEAT = 1
    DRY = 2
    FAN = 3
    COOL = 4


class FanSpeed(IntEnum):
    """Fan speed values for data point 4 (0 lets the unit decide)."""

    AUTO = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    TOP = 4


# Temperatures are exchanged as tenths of a degree Celsius
TEMPERATURE_SCALE = 10

DEFAULT_MIN_TEMP = 18.0
DEFAULT_MAX_TEMP = 30.0

# Raw-unit distance between return temperature and setpoint at which an AUTO
# mode unit is assumed to be actively heating or cooling
AUTO_ACTION_THRESHOLD = 10

HVAC_MODE_MAPPING = {
    UserMode.AUTO: HVACMode.AUTO,
    UserMode.HEAT: HVACMode.HEAT,
    UserMode.DRY: HVACMode.DRY,
    UserMode.FAN: HVACMode.FAN_ONLY,
    UserMode.COOL: HVACMode.COOL,
}

# OFF is handled separately via the power data point
HVAC_MODE_REVERSE_MAPPING = {v: k for k, v in HVAC_MODE_MAPPING.items()}

FAN_MODE_MAPPING = {
    FanSpeed.AUTO: FAN_AUTO,
    FanSpeed.LOW: FAN_LOW,
    FanSpeed.MEDIUM: FAN_MEDIUM,
    FanSpeed.HIGH: FAN_HIGH,
    FanSpeed.TOP: FAN_TOP,
}

FAN_MODE_REVERSE_MAPPING = {v: k for k, v in FAN_MODE_MAPPING.items()}

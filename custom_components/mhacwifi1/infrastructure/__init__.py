"""Infrastructure layer for the MH-AC-WIFI-1 integration.

This package contains core infrastructure components:
- The api_command decorator
- Validation logic
- Error definitions
"""

from .api import api_command, extract_response
from .errors import (
    AcwmAuthError,
    AcwmCommandError,
    AcwmConnectionError,
    AcwmDecodeError,
    AcwmDeviceError,
    AcwmError,
)
from .validation import (
    validate_datapoint_value,
    validate_host,
    validate_retry_policy,
    validate_uid,
)

__all__ = [
    # API decorator
    "api_command",
    "extract_response",
    # Errors
    "AcwmError",
    "AcwmConnectionError",
    "AcwmDecodeError",
    "AcwmCommandError",
    "AcwmAuthError",
    "AcwmDeviceError",
    # Validation
    "validate_host",
    "validate_uid",
    "validate_datapoint_value",
    "validate_retry_policy",
]

"""Input validation for the MH-AC-WIFI-1 integration.

This module provides validation functions used by the config flow, the
options flow and the services before anything is sent to the device:
- Hostnames and IP addresses
- Data point uids and raw values
- Retry policy settings

Every validator returns a ``(is_valid, error_message)`` tuple.
"""

from __future__ import annotations

import ipaddress
import re

# Data point values travel as 16-bit integers on the device side
MIN_DATAPOINT_VALUE = -32768
MAX_DATAPOINT_VALUE = 65535


def validate_host(host: str) -> tuple[bool, str | None]:
    """Validate a host string for safety and correctness.

    Rejects URL schemes, shell metacharacters and loopback, link-local or
    multicast addresses. The device is always addressed by a bare hostname
    or IP address.

    Args:
        host: Hostname or IP address to validate.

    Returns:
        Tuple of (is_valid, error_message).

    Example:
        >>> validate_host("192.168.1.50")
        (True, None)
        >>> validate_host("http://192.168.1.50")
        (False, "Host should not include URL scheme")
    """
    host = host.strip()

    if not host:
        return False, "Host cannot be empty"

    if re.search(r"[;&|`$]", host):
        return False, "Invalid characters in hostname"

    if "://" in host:
        return False, "Host should not include URL scheme"

    try:
        ip = ipaddress.ip_address(host)
        if ip.is_loopback or ip.is_link_local or ip.is_multicast:
            return False, "Invalid IP address range"
        return True, None
    except ValueError:
        pass

    hostname_pattern = re.compile(
        r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.[A-Za-z0-9-]{1,63})*\.?$"
    )
    if not hostname_pattern.match(host):
        return False, "Invalid hostname format"

    return True, None


def validate_uid(uid: int) -> tuple[bool, str | None]:
    """Validate a data point uid.

    The device catalog is not consulted; this only rejects values that can
    never be a uid.

    Example:
        >>> validate_uid(9)
        (True, None)
        >>> validate_uid(0)
        (False, "uid must be a positive integer")
    """
    if isinstance(uid, bool) or not isinstance(uid, int) or uid <= 0:
        return False, "uid must be a positive integer"
    return True, None


def validate_datapoint_value(value: int) -> tuple[bool, str | None]:
    """Validate a raw value before it is written to a data point."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False, "Value must be an integer"
    if not MIN_DATAPOINT_VALUE <= value <= MAX_DATAPOINT_VALUE:
        return False, f"Value must be between {MIN_DATAPOINT_VALUE} and {MAX_DATAPOINT_VALUE}"
    return True, None


def validate_retry_policy(attempts: int, delay: float) -> tuple[bool, str | None]:
    """Validate retry settings from the options flow.

    Example:
        >>> validate_retry_policy(5, 0.1)
        (True, None)
        >>> validate_retry_policy(0, 0.1)
        (False, "At least one attempt is required")
    """
    if attempts < 1:
        return False, "At least one attempt is required"
    if delay < 0:
        return False, "Delay cannot be negative"
    return True, None

"""Service handlers for the MH-AC-WIFI-1 integration.

This module contains all service call handlers:
- identify: Flash the LED of a unit
- reboot: Restart the WiFi interface of a unit
- set_datapoint: Write a raw value to any data point
"""

import logging

import homeassistant.helpers.device_registry as dr
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import HomeAssistantError

from .acwm_api import AcwmAPI
from .constants import DOMAIN
from .infrastructure import AcwmError, validate_datapoint_value, validate_uid

_LOGGER = logging.getLogger(__name__)

SERVICE_IDENTIFY = "identify"
SERVICE_REBOOT = "reboot"
SERVICE_SET_DATAPOINT = "set_datapoint"


def _get_api_for_device(hass: HomeAssistant, device_id: str) -> AcwmAPI:
    """Resolve a device registry id to the client of its config entry."""
    dev_reg = dr.async_get(hass)
    device = dev_reg.async_get(device_id)
    if not device:
        raise HomeAssistantError(f"Device {device_id} not found")

    entries = hass.data.get(DOMAIN, {})
    for entry_id in device.config_entries:
        if entry_id in entries:
            return entries[entry_id]["api"]

    raise HomeAssistantError(f"Device {device_id} does not belong to {DOMAIN}")


async def async_register_services(hass: HomeAssistant, domain: str = DOMAIN):
    """Register all MH-AC-WIFI-1 services.

    Args:
        hass: Home Assistant instance
        domain: Integration domain (default: mhacwifi1)
    """
    if hass.services.has_service(domain, SERVICE_IDENTIFY):
        return

    async def handle_identify_service(call: ServiceCall):
        """Handle identify service call."""
        api = _get_api_for_device(hass, call.data["device_id"])
        try:
            await api.async_identify()
        except AcwmError as e:
            _LOGGER.error("Identify failed: %s", e)
            raise HomeAssistantError(f"Identify failed: {e}") from e
        _LOGGER.info("Identify triggered on %s", api.base_url)

    async def handle_reboot_service(call: ServiceCall):
        """Handle reboot service call."""
        api = _get_api_for_device(hass, call.data["device_id"])
        try:
            await api.async_reboot()
        except AcwmError as e:
            _LOGGER.error("Reboot failed: %s", e)
            raise HomeAssistantError(f"Reboot failed: {e}") from e
        _LOGGER.info("Reboot triggered on %s", api.base_url)

    async def handle_set_datapoint_service(call: ServiceCall):
        """Handle set_datapoint service call."""
        # number selectors deliver floats
        try:
            uid = int(call.data["uid"])
            value = int(call.data["value"])
        except (TypeError, ValueError) as e:
            _LOGGER.error("Invalid set_datapoint call %s: %s", call.data, e)
            raise HomeAssistantError(f"uid and value must be integers: {e}") from e

        is_valid, error_message = validate_uid(uid)
        if not is_valid:
            _LOGGER.error("Invalid uid %s: %s", uid, error_message)
            raise HomeAssistantError(f"Invalid uid: {error_message}")

        is_valid, error_message = validate_datapoint_value(value)
        if not is_valid:
            _LOGGER.error("Invalid value %s: %s", value, error_message)
            raise HomeAssistantError(f"Invalid value: {error_message}")

        api = _get_api_for_device(hass, call.data["device_id"])
        try:
            await api.async_set_data_point_value(uid, value)
        except AcwmError as e:
            _LOGGER.error("Setting data point %s failed: %s", uid, e)
            raise HomeAssistantError(f"Setting data point {uid} failed: {e}") from e
        _LOGGER.info("Data point %s set to %s", uid, value)

    hass.services.async_register(domain, SERVICE_IDENTIFY, handle_identify_service)
    hass.services.async_register(domain, SERVICE_REBOOT, handle_reboot_service)
    hass.services.async_register(domain, SERVICE_SET_DATAPOINT, handle_set_datapoint_service)

    _LOGGER.debug("Registered MH-AC-WIFI-1 services: identify, reboot, set_datapoint")

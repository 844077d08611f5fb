import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST, CONF_PASSWORD, CONF_USERNAME
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryAuthFailed, ConfigEntryNotReady
from homeassistant.helpers import config_validation as cv

from .acwm_api import AcwmAPI
from .constants import (
    API_DEFAULTS,
    CONF_POLLING_INTERVAL,
    CONF_REQUEST_TIMEOUT,
    CONF_RETRY_ATTEMPTS,
    CONF_RETRY_DELAY,
    DOMAIN,
    PLATFORMS,
)
from .coordinator import AcwmDataPointCoordinator
from .infrastructure import AcwmAuthError, AcwmError
from .services import async_register_services

CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)

_LOGGER = logging.getLogger(__name__)


async def async_setup(hass: HomeAssistant, config: dict):
    return True  # configured through the UI only


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry):
    options = entry.options
    api = AcwmAPI(
        f"http://{entry.data[CONF_HOST]}",
        entry.data[CONF_USERNAME],
        entry.data[CONF_PASSWORD],
        request_timeout=options.get(CONF_REQUEST_TIMEOUT, API_DEFAULTS.REQUEST_TIMEOUT),
        retry_attempts=options.get(CONF_RETRY_ATTEMPTS, API_DEFAULTS.RETRY_ATTEMPTS),
        retry_delay=options.get(CONF_RETRY_DELAY, API_DEFAULTS.RETRY_DELAY),
    )

    # The descriptor is informational only; the unit is usable without it
    try:
        await api.async_init()
    except AcwmError as e:
        _LOGGER.warning("Device reference could not be loaded: %s", e)

    try:
        info = await api.async_get_info()
        await api.async_login()
    except AcwmAuthError as e:
        await api.close()
        raise ConfigEntryAuthFailed(f"Login rejected by {entry.data[CONF_HOST]}: {e}") from e
    except AcwmError as e:
        await api.close()
        raise ConfigEntryNotReady(f"Cannot connect to {entry.data[CONF_HOST]}: {e}") from e

    coordinator = AcwmDataPointCoordinator(
        hass,
        api,
        config_entry=entry,
        polling_interval=options.get(CONF_POLLING_INTERVAL, API_DEFAULTS.POLLING_INTERVAL),
    )
    try:
        await coordinator.async_config_entry_first_refresh()
    except (ConfigEntryNotReady, ConfigEntryAuthFailed):
        await api.close()
        raise

    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = {
        "api": api,
        "coordinator": coordinator,
        "info": info,
    }

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    await async_register_services(hass)
    entry.async_on_unload(entry.add_update_listener(async_reload_entry))
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry):
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        api = hass.data[DOMAIN].pop(entry.entry_id)["api"]
        try:
            await api.async_logout()
        except AcwmError as e:
            _LOGGER.debug("Logout on unload failed: %s", e)
        await api.close()
    return unload_ok


async def async_reload_entry(hass: HomeAssistant, entry: ConfigEntry):
    await hass.config_entries.async_reload(entry.entry_id)

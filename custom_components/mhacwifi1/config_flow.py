import logging

import voluptuous as vol
from homeassistant.config_entries import ConfigEntry, ConfigFlow, OptionsFlow
from homeassistant.const import CONF_HOST, CONF_PASSWORD, CONF_USERNAME

from .acwm_api import AcwmAPI
from .constants import (
    API_DEFAULTS,
    CONF_POLLING_INTERVAL,
    CONF_REQUEST_TIMEOUT,
    CONF_RETRY_ATTEMPTS,
    CONF_RETRY_DELAY,
    DOMAIN,
)
from .infrastructure import (
    AcwmAuthError,
    AcwmError,
    validate_host,
    validate_retry_policy,
)

_LOGGER = logging.getLogger(__name__)


async def async_validate_device(api: AcwmAPI) -> dict:
    """Check that the unit answers and accepts the credentials.

    Returns:
        The ``getinfo`` block of the unit.
    """
    info = await api.async_get_info()
    await api.async_login()
    try:
        await api.async_logout()
    except AcwmError as e:
        _LOGGER.debug("Logout after validation failed: %s", e)
    return info


class AcwmConfigFlow(ConfigFlow, domain=DOMAIN):
    VERSION = 1

    async def async_step_user(self, user_input=None):
        errors = {}

        if user_input is not None:
            host = user_input[CONF_HOST].strip()
            is_valid, error_message = validate_host(host)

            if not is_valid:
                _LOGGER.warning("Invalid host %s: %s", host, error_message)
                errors[CONF_HOST] = "invalid_host"
            else:
                api = AcwmAPI(
                    f"http://{host}",
                    user_input[CONF_USERNAME],
                    user_input[CONF_PASSWORD],
                )
                try:
                    info = await async_validate_device(api)
                except AcwmAuthError:
                    errors["base"] = "invalid_auth"
                except AcwmError as e:
                    _LOGGER.warning("Cannot connect to %s: %s", host, e)
                    errors["base"] = "cannot_connect"
                else:
                    await self.async_set_unique_id(info.get("sn") or host)
                    self._abort_if_unique_id_configured()
                    return self.async_create_entry(
                        title=f"MH-AC-WIFI-1 @ {host}",
                        data={
                            CONF_HOST: host,
                            CONF_USERNAME: user_input[CONF_USERNAME],
                            CONF_PASSWORD: user_input[CONF_PASSWORD],
                        },
                    )
                finally:
                    await api.close()

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_HOST): str,
                    vol.Required(CONF_USERNAME, default=API_DEFAULTS.DEFAULT_USERNAME): str,
                    vol.Required(CONF_PASSWORD, default=API_DEFAULTS.DEFAULT_PASSWORD): str,
                }
            ),
            errors=errors,
        )

    @classmethod
    def async_get_options_flow(cls, entry: ConfigEntry):
        return AcwmOptionsFlow(entry)


class AcwmOptionsFlow(OptionsFlow):
    def __init__(self, entry):
        self.entry = entry

    async def async_step_init(self, user_input=None):
        errors = {}

        if user_input is not None:
            is_valid, error_message = validate_retry_policy(
                user_input[CONF_RETRY_ATTEMPTS], user_input[CONF_RETRY_DELAY]
            )
            if is_valid:
                return self.async_create_entry(title="", data=user_input)
            _LOGGER.warning("Invalid retry policy: %s", error_message)
            errors["base"] = "invalid_retry_policy"

        options = self.entry.options
        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                {
                    vol.Optional(
                        CONF_POLLING_INTERVAL,
                        default=options.get(CONF_POLLING_INTERVAL, API_DEFAULTS.POLLING_INTERVAL),
                    ): vol.All(vol.Coerce(int), vol.Range(min=5, max=3600)),
                    vol.Optional(
                        CONF_REQUEST_TIMEOUT,
                        default=options.get(CONF_REQUEST_TIMEOUT, API_DEFAULTS.REQUEST_TIMEOUT),
                    ): vol.All(vol.Coerce(int), vol.Range(min=1, max=120)),
                    vol.Optional(
                        CONF_RETRY_ATTEMPTS,
                        default=options.get(CONF_RETRY_ATTEMPTS, API_DEFAULTS.RETRY_ATTEMPTS),
                    ): vol.All(vol.Coerce(int), vol.Range(min=1, max=20)),
                    vol.Optional(
                        CONF_RETRY_DELAY,
                        default=options.get(CONF_RETRY_DELAY, API_DEFAULTS.RETRY_DELAY),
                    ): vol.All(vol.Coerce(float), vol.Range(min=0, max=10)),
                }
            ),
            errors=errors,
        )

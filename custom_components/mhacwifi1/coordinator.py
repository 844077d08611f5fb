import logging
from datetime import timedelta

from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .constants import API_DEFAULTS
from .infrastructure.errors import AcwmError

_LOGGER = logging.getLogger(__name__)


class AcwmDataPointCoordinator(DataUpdateCoordinator):
    """Polls every data point of the unit in a single ``all`` read.

    ``data`` is a ``{uid: raw value}`` dict shared by all entities.
    """

    def __init__(self, hass, api, config_entry=None, polling_interval: int = API_DEFAULTS.POLLING_INTERVAL):
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name="MH-AC-WIFI-1 Data Points",
            update_interval=timedelta(seconds=polling_interval),
        )
        self.api = api

    async def _async_update_data(self):
        try:
            return await self.api.async_get_data_point_values()
        except AcwmError as e:
            _LOGGER.warning("Error fetching data point values: %s", e)
            raise UpdateFailed(f"Error fetching data point values: {e}") from e

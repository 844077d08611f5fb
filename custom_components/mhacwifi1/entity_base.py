"""Base entity mixin for all MH-AC-WIFI-1 entities.

Provides shared functionality for the climate, sensor and switch platforms:
device info built from the ``getinfo`` block and data point access through
the coordinator.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.device_registry import DeviceInfo

from .constants import DEFAULT_MODEL, DOMAIN, MANUFACTURER
from .infrastructure.errors import AcwmError

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry

    from .acwm_api import AcwmAPI
    from .coordinator import AcwmDataPointCoordinator

_LOGGER = logging.getLogger(__name__)


class AcwmBaseEntity:
    """Mixin providing common functionality for all MH-AC-WIFI-1 entities.

    Subclasses set ``_api``, ``_entry`` and ``_info`` and inherit from
    ``CoordinatorEntity`` so that ``coordinator`` is available::

        class MySensor(AcwmBaseEntity, CoordinatorEntity, SensorEntity):
            ...
    """

    _api: AcwmAPI
    _entry: ConfigEntry
    _info: dict[str, Any] | None
    coordinator: AcwmDataPointCoordinator

    @property
    def device_info(self) -> DeviceInfo:
        """Return device information for the entity registry."""
        info = self._info or {}
        return DeviceInfo(
            identifiers={(DOMAIN, info.get("sn") or self._entry.entry_id)},
            name=self._entry.title,
            manufacturer=MANUFACTURER,
            model=info.get("deviceModel") or DEFAULT_MODEL,
            sw_version=info.get("fwVersion"),
        )

    def _get_datapoint(self, uid: int) -> Any:
        """Return the last polled raw value of a data point, or None."""
        data = self.coordinator.data
        if not data:
            return None
        return data.get(uid)

    async def _async_set_datapoint(self, uid: int, value: Any) -> None:
        """Write a data point and refresh the coordinator."""
        try:
            await self._api.async_set_data_point_value(uid, value)
        except AcwmError as e:
            _LOGGER.error("Error setting data point %s to %s: %s", uid, value, e)
            raise HomeAssistantError(f"Error setting data point {uid}: {e}") from e

        # keep the state consistent until the next poll
        if self.coordinator.data is not None:
            self.coordinator.data[uid] = value
        await self.coordinator.async_request_refresh()

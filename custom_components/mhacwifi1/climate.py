"""Climate platform for the MH-AC-WIFI-1 integration."""
import logging
from typing import Any

from homeassistant.components.climate import (
    ClimateEntity,
    ClimateEntityFeature,
    HVACAction,
    HVACMode,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .constants import (
    AUTO_ACTION_THRESHOLD,
    DEFAULT_MAX_TEMP,
    DEFAULT_MIN_TEMP,
    DOMAIN,
    FAN_MODE_MAPPING,
    FAN_MODE_REVERSE_MAPPING,
    HVAC_MODE_MAPPING,
    HVAC_MODE_REVERSE_MAPPING,
    DataPoint,
    UserMode,
)
from .coordinator import AcwmDataPointCoordinator
from .entity_base import AcwmBaseEntity
from .models import celsius_to_device, device_to_celsius

_LOGGER = logging.getLogger(__name__)

USER_MODE_ACTIONS = {
    UserMode.HEAT: HVACAction.HEATING,
    UserMode.COOL: HVACAction.COOLING,
    UserMode.DRY: HVACAction.DRYING,
    UserMode.FAN: HVACAction.FAN,
}


def estimate_auto_action(current: Any, setpoint: Any) -> HVACAction:
    """Guess what a unit in AUTO mode is doing.

    The unit does not report it, so the return temperature is compared with
    the setpoint (both raw, tenths of a degree).
    """
    if current is None or setpoint is None:
        return HVACAction.IDLE
    current = int(current)
    setpoint = int(setpoint)
    if current <= setpoint - AUTO_ACTION_THRESHOLD:
        return HVACAction.HEATING
    if current >= setpoint + AUTO_ACTION_THRESHOLD:
        return HVACAction.COOLING
    return HVACAction.IDLE


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the MH-AC-WIFI-1 climate entity."""
    data = hass.data[DOMAIN][config_entry.entry_id]

    async_add_entities(
        [
            AcwmClimate(
                data["coordinator"],
                data["api"],
                data.get("info"),
                config_entry,
            )
        ]
    )


class AcwmClimate(AcwmBaseEntity, CoordinatorEntity[AcwmDataPointCoordinator], ClimateEntity):
    """Air conditioner exposed as a climate entity."""

    def __init__(self, coordinator, api, info, entry):
        """Initialize the climate entity."""
        super().__init__(coordinator)
        self._api = api
        self._info = info
        self._entry = entry

        self._attr_unique_id = f"{entry.entry_id}_climate"
        self._attr_name = None  # Use device name
        self._attr_has_entity_name = True
        self._attr_translation_key = "climate"

        self._attr_temperature_unit = UnitOfTemperature.CELSIUS
        self._attr_precision = 0.1
        self._attr_target_temperature_step = 1.0

        self._attr_supported_features = (
            ClimateEntityFeature.TARGET_TEMPERATURE
            | ClimateEntityFeature.FAN_MODE
            | ClimateEntityFeature.TURN_ON
            | ClimateEntityFeature.TURN_OFF
        )
        self._attr_hvac_modes = [HVACMode.OFF, *HVAC_MODE_REVERSE_MAPPING]
        self._attr_fan_modes = list(FAN_MODE_REVERSE_MAPPING)

    @property
    def current_temperature(self) -> float | None:
        return device_to_celsius(self._get_datapoint(DataPoint.RETURN_TEMPERATURE))

    @property
    def target_temperature(self) -> float | None:
        return device_to_celsius(self._get_datapoint(DataPoint.SETPOINT))

    @property
    def min_temp(self) -> float:
        value = device_to_celsius(self._get_datapoint(DataPoint.MIN_SETPOINT))
        return value if value is not None else DEFAULT_MIN_TEMP

    @property
    def max_temp(self) -> float:
        value = device_to_celsius(self._get_datapoint(DataPoint.MAX_SETPOINT))
        return value if value is not None else DEFAULT_MAX_TEMP

    def _is_on(self) -> bool:
        return self._get_datapoint(DataPoint.POWER) == 1

    def _user_mode(self) -> UserMode | None:
        value = self._get_datapoint(DataPoint.USER_MODE)
        try:
            return UserMode(int(value))
        except (TypeError, ValueError):
            return None

    @property
    def hvac_mode(self) -> HVACMode | None:
        if self.coordinator.data is None:
            return None
        if not self._is_on():
            return HVACMode.OFF
        mode = self._user_mode()
        # unknown modes fall back to AUTO, same as the unit's own remote
        return HVAC_MODE_MAPPING.get(mode, HVACMode.AUTO)

    @property
    def hvac_action(self) -> HVACAction | None:
        if self.coordinator.data is None:
            return None
        if not self._is_on():
            return HVACAction.OFF

        mode = self._user_mode()
        if mode in USER_MODE_ACTIONS:
            return USER_MODE_ACTIONS[mode]

        action = estimate_auto_action(
            self._get_datapoint(DataPoint.RETURN_TEMPERATURE),
            self._get_datapoint(DataPoint.SETPOINT),
        )
        _LOGGER.debug("AUTO mode, estimated action: %s", action)
        return action

    @property
    def fan_mode(self) -> str | None:
        value = self._get_datapoint(DataPoint.FAN_SPEED)
        if value is None:
            return None
        try:
            return FAN_MODE_MAPPING.get(int(value))
        except (TypeError, ValueError):
            return None

    async def async_set_temperature(self, **kwargs: Any) -> None:
        """Set the target temperature."""
        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            return
        await self._async_set_datapoint(DataPoint.SETPOINT, celsius_to_device(temperature))

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Set the HVAC mode; OFF only switches the power data point."""
        if hvac_mode == HVACMode.OFF:
            await self._async_set_datapoint(DataPoint.POWER, 0)
            return

        user_mode = HVAC_MODE_REVERSE_MAPPING.get(hvac_mode)
        if user_mode is None:
            _LOGGER.error("Unsupported HVAC mode: %s", hvac_mode)
            return

        await self._async_set_datapoint(DataPoint.USER_MODE, int(user_mode))
        if not self._is_on():
            await self._async_set_datapoint(DataPoint.POWER, 1)

    async def async_set_fan_mode(self, fan_mode: str) -> None:
        speed = FAN_MODE_REVERSE_MAPPING.get(fan_mode)
        if speed is None:
            _LOGGER.error("Unsupported fan mode: %s", fan_mode)
            return
        await self._async_set_datapoint(DataPoint.FAN_SPEED, int(speed))

    async def async_turn_on(self) -> None:
        await self._async_set_datapoint(DataPoint.POWER, 1)

    async def async_turn_off(self) -> None:
        await self._async_set_datapoint(DataPoint.POWER, 0)

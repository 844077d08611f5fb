import logging

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .constants import DOMAIN
from .coordinator import AcwmDataPointCoordinator
from .entities.base import SensorDefinition
from .entities.sensor_definitions import DATAPOINT_SENSORS
from .entity_base import AcwmBaseEntity
from .models import device_to_celsius

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
):
    data = hass.data[DOMAIN][entry.entry_id]

    async_add_entities(
        AcwmDataPointSensor(
            coordinator=data["coordinator"],
            api=data["api"],
            definition=definition,
            info=data.get("info"),
            entry=entry,
        )
        for definition in DATAPOINT_SENSORS
    )


class AcwmDataPointSensor(AcwmBaseEntity, CoordinatorEntity[AcwmDataPointCoordinator], SensorEntity):
    """Sensor showing a single data point."""

    def __init__(self, coordinator, api, definition: SensorDefinition, info=None, entry=None):
        super().__init__(coordinator)
        self._api = api
        self._definition = definition
        self._info = info
        self._entry = entry
        self._attr_unique_id = f"{entry.entry_id}_sensor_{definition.uid}"
        self._attr_translation_key = definition.translation_key
        self._attr_has_entity_name = True
        self._attr_native_unit_of_measurement = definition.unit
        self._attr_device_class = (
            SensorDeviceClass(definition.device_class) if definition.device_class else None
        )
        self._attr_state_class = (
            SensorStateClass(definition.state_class) if definition.state_class else None
        )

    @property
    def native_value(self):
        raw = self._get_datapoint(self._definition.uid)
        if self._definition.is_temperature:
            return device_to_celsius(raw)
        return raw

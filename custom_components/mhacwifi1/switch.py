import logging

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .constants import DOMAIN
from .coordinator import AcwmDataPointCoordinator
from .entities.base import SwitchDefinition
from .entities.switch_definitions import SWITCHES
from .entity_base import AcwmBaseEntity

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
):
    data = hass.data[DOMAIN][entry.entry_id]

    async_add_entities(
        AcwmDataPointSwitch(
            coordinator=data["coordinator"],
            api=data["api"],
            definition=definition,
            info=data.get("info"),
            entry=entry,
        )
        for definition in SWITCHES
    )


class AcwmDataPointSwitch(AcwmBaseEntity, CoordinatorEntity[AcwmDataPointCoordinator], SwitchEntity):
    """Switch writing 1/0 to a data point."""

    def __init__(self, coordinator, api, definition: SwitchDefinition, info=None, entry=None):
        super().__init__(coordinator)
        self._api = api
        self._definition = definition
        self._info = info
        self._entry = entry
        self._attr_unique_id = f"{entry.entry_id}_switch_{definition.uid}"
        self._attr_translation_key = definition.translation_key
        self._attr_has_entity_name = True
        self._attr_icon = definition.icon

    @property
    def is_on(self) -> bool | None:
        value = self._get_datapoint(self._definition.uid)
        if value is None:
            return None
        return value == 1

    async def async_turn_on(self, **kwargs):
        await self._async_set_datapoint(self._definition.uid, 1)

    async def async_turn_off(self, **kwargs):
        await self._async_set_datapoint(self._definition.uid, 0)

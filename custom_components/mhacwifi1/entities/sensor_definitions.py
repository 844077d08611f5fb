from ..constants import DataPoint
from .base import SensorDefinition

DATAPOINT_SENSORS = [
    SensorDefinition(
        uid=DataPoint.OUTDOOR_TEMPERATURE,
        name="Outdoor Temperature",
        translation_key="outdoor_temperature",
        unit="°C",
        device_class="temperature",
        state_class="measurement",
        is_temperature=True,
    ),
    SensorDefinition(
        uid=DataPoint.RETURN_TEMPERATURE,
        name="Return Air Temperature",
        translation_key="return_temperature",
        unit="°C",
        device_class="temperature",
        state_class="measurement",
        is_temperature=True,
    ),
]

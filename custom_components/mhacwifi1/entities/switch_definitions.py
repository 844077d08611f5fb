from ..constants import DataPoint
from .base import SwitchDefinition

SWITCHES = [
    SwitchDefinition(
        uid=DataPoint.REMOTE_DISABLE,
        name="Remote Control Lock",
        translation_key="remote_control_lock",
        icon="mdi:lock",
    ),
]

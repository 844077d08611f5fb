"""Base classes for entity definitions."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DataPointEntityDefinition(BaseModel):
    """Base class for entities backed by a single data point.

    Attributes:
        uid: Data point uid read from the coordinator.
        name: Display name for the entity (fallback if translation missing).
        translation_key: Key for i18n translations.
    """

    model_config = {"frozen": True}

    uid: int = Field(..., description="Data point uid")
    name: str = Field(..., description="Display name for the entity (fallback if translation missing)")
    translation_key: str = Field(..., description="Key for i18n translations")


class SensorDefinition(DataPointEntityDefinition):
    """Read-only data point exposed as a sensor."""

    unit: str | None = None
    device_class: str | None = None
    state_class: str | None = None
    is_temperature: bool = Field(default=False, description="Value is in tenths of a degree")


class SwitchDefinition(DataPointEntityDefinition):
    """On/off data point exposed as a switch (1 = on, 0 = off)."""

    icon: str | None = None

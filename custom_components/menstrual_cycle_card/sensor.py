"""Sensor platform for the cycle card."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from homeassistant.components.sensor import SensorEntity, SensorEntityDescription

from .entity import CycleCardEntity

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .coordinator import CycleCardUpdateCoordinator
    from .data import CycleCardConfigEntry

ENTITY_DESCRIPTIONS: tuple[SensorEntityDescription, ...] = (
    SensorEntityDescription(
        key="cycle_phase",
        name="Cycle Phase",
    ),
    SensorEntityDescription(
        key="cycle_status",
        name="Cycle Status",
        icon="mdi:message-text-clock-outline",
    ),
)


async def async_setup_entry(
    _hass: HomeAssistant,
    entry: CycleCardConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up sensor entities."""
    async_add_entities(
        CycleCardSensor(entry.runtime_data.coordinator, description)
        for description in ENTITY_DESCRIPTIONS
    )


class CycleCardSensor(CycleCardEntity, SensorEntity):
    """Sensor exposing the cycle card view."""

    def __init__(
        self,
        coordinator: CycleCardUpdateCoordinator,
        description: SensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        self.entity_description = description
        self._attr_unique_id = f"{coordinator.config_entry.entry_id}_{description.key}"

    @property
    def native_value(self) -> str | None:
        """Return the state of the sensor."""
        view = self.coordinator.data
        if view is None:
            return None
        if self.entity_description.key == "cycle_phase":
            return view.phase_badge.label
        if self.entity_description.key == "cycle_status":
            return view.status_line
        return None

    @property
    def icon(self) -> str | None:
        view = self.coordinator.data
        if self.entity_description.key == "cycle_phase" and view is not None:
            return view.phase_badge.icon
        return super().icon

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Publish the full view on the phase sensor for dashboard renderers."""
        view = self.coordinator.data
        if self.entity_description.key != "cycle_phase" or view is None:
            return None
        return view.as_dict()

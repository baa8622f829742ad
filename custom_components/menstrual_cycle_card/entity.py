"""Base entity for the cycle card."""

from __future__ import annotations

from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import ATTRIBUTION
from .coordinator import CycleCardUpdateCoordinator


class CycleCardEntity(CoordinatorEntity[CycleCardUpdateCoordinator]):
    """Base entity class for this integration."""

    _attr_attribution = ATTRIBUTION
    _attr_has_entity_name = True

    def __init__(self, coordinator: CycleCardUpdateCoordinator) -> None:
        """Initialize the base entity."""
        super().__init__(coordinator)
        self._attr_device_info = DeviceInfo(
            identifiers={
                (
                    coordinator.config_entry.domain,
                    coordinator.config_entry.entry_id,
                )
            },
            name=coordinator.data.title if coordinator.data else None,
        )

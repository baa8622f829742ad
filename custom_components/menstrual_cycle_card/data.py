"""Custom types for menstrual_cycle_card."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from homeassistant.config_entries import ConfigEntry

if TYPE_CHECKING:
    from homeassistant.loader import Integration

    from .coordinator import CycleCardUpdateCoordinator

    class CycleCardConfigEntry(ConfigEntry["CycleCardData"]):
        """Config entry type for this integration."""
else:
    CycleCardConfigEntry = ConfigEntry


@dataclass
class CycleCardData:
    """Runtime data for the integration."""

    coordinator: CycleCardUpdateCoordinator
    integration: Integration

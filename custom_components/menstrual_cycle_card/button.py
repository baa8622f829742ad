"""Buttons for logging a period start or end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from homeassistant.components.button import ButtonEntity, ButtonEntityDescription

from .actions import LogAction
from .entity import CycleCardEntity

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .coordinator import CycleCardUpdateCoordinator
    from .data import CycleCardConfigEntry


@dataclass(frozen=True, kw_only=True)
class LogButtonEntityDescription(ButtonEntityDescription):
    action: LogAction


ENTITY_DESCRIPTIONS: tuple[LogButtonEntityDescription, ...] = (
    LogButtonEntityDescription(
        key="log_period_start",
        name="Log Period Start",
        icon="mdi:water-plus",
        action=LogAction.START,
    ),
    LogButtonEntityDescription(
        key="log_period_end",
        name="Log Period End",
        icon="mdi:water-check",
        action=LogAction.END,
    ),
)


async def async_setup_entry(
    _hass: HomeAssistant,
    entry: CycleCardConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up button entities."""
    async_add_entities(
        CycleCardLogButton(entry.runtime_data.coordinator, description)
        for description in ENTITY_DESCRIPTIONS
    )


class CycleCardLogButton(CycleCardEntity, ButtonEntity):
    """Button submitting one log action."""

    entity_description: LogButtonEntityDescription

    def __init__(
        self,
        coordinator: CycleCardUpdateCoordinator,
        description: LogButtonEntityDescription,
    ) -> None:
        """Initialize the button."""
        super().__init__(coordinator)
        self.entity_description = description
        self._attr_unique_id = f"{coordinator.config_entry.entry_id}_{description.key}"

    @property
    def available(self) -> bool:
        """Only the button matching the current period state can be pressed."""
        view = self.coordinator.data
        if not super().available or view is None or view.log_button is None:
            return False
        button = view.log_button
        return (
            button.visible
            and not button.disabled
            and button.action is self.entity_description.action
        )

    async def async_press(self) -> None:
        await self.coordinator.async_log(self.entity_description.action)

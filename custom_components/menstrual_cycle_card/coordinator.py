"""Coordinator keeping the cycle card view in sync with the tracker."""

from __future__ import annotations

from collections.abc import Mapping
from functools import partial
from typing import TYPE_CHECKING, Any

from homeassistant.core import CALLBACK_TYPE, callback
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import entity_registry as er
from homeassistant.helpers.event import async_call_later, async_track_state_change_event
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from .actions import ActionSubmitter, LogAction, SubmissionState
from .const import (
    ATTR_TRACKER,
    DOMAIN,
    LOGGER,
    SERVICE_LOG_PERIOD_END,
    SERVICE_LOG_PERIOD_START,
    TRACKER_DOMAIN,
)
from .state import StateReader
from .view_model import CycleCardView, build_view_model

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import Event, EventStateChangedData, HomeAssistant

    from .entities import TrackerEntities


async def async_resolve_tracker_scope(hass: HomeAssistant, entity_id: str) -> str:
    """Return the config entry id of the tracker owning entity_id."""
    entry = er.async_get(hass).async_get(entity_id)
    if entry is None or not entry.config_entry_id:
        raise HomeAssistantError(f"{entity_id} is not registered to a tracker")
    return entry.config_entry_id


class CycleCardUpdateCoordinator(DataUpdateCoordinator[CycleCardView]):
    """Rebuild the card view whenever a tracker entity changes."""

    def __init__(
        self,
        hass: HomeAssistant,
        *,
        config_entry: ConfigEntry,
        entities: TrackerEntities,
        options: Mapping[str, Any],
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            logger=LOGGER,
            config_entry=config_entry,
            name=DOMAIN,
            update_interval=None,
        )
        self.entities = entities
        self._options = options
        self._reader = StateReader(hass)
        self.submitter = ActionSubmitter(
            entities.period_active,
            resolve_scope=partial(async_resolve_tracker_scope, hass),
            call_action=self._async_call_log_service,
            call_later=partial(async_call_later, hass),
            on_change=self._handle_submission_change,
        )

    def build_view(self) -> CycleCardView:
        return build_view_model(
            self._reader, self.entities, self._options, self.submitter.state
        )

    async def _async_update_data(self) -> CycleCardView:
        return self.build_view()

    @callback
    def async_start_tracking(self) -> CALLBACK_TYPE:
        """Follow state changes of every tracker entity; returns the unsubscriber."""
        return async_track_state_change_event(
            self.hass, self.entities.all_ids, self._handle_state_change
        )

    @callback
    def _handle_state_change(self, _event: Event[EventStateChangedData]) -> None:
        self.async_set_updated_data(self.build_view())

    @callback
    def _handle_submission_change(self, _state: SubmissionState) -> None:
        self.async_set_updated_data(self.build_view())

    async def async_log(self, action: LogAction) -> bool:
        """Log a period start or end through the tracker integration."""
        return await self.submitter.async_submit(action)

    async def _async_call_log_service(self, action: LogAction, scope: str | None) -> None:
        service = (
            SERVICE_LOG_PERIOD_START if action is LogAction.START else SERVICE_LOG_PERIOD_END
        )
        await self.hass.services.async_call(
            TRACKER_DOMAIN,
            service,
            {ATTR_TRACKER: scope} if scope else {},
            blocking=True,
        )

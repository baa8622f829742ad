"""Tests for the sensor and button surfaces and the tracker bindings."""

from __future__ import annotations

from datetime import datetime
from functools import partial
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from homeassistant.exceptions import HomeAssistantError

from custom_components.menstrual_cycle_card.actions import (
    ActionSubmitter,
    LogAction,
    SubmissionStage,
    SubmissionState,
)
from custom_components.menstrual_cycle_card.button import (
    ENTITY_DESCRIPTIONS as BUTTONS,
    CycleCardLogButton,
)
from custom_components.menstrual_cycle_card.coordinator import (
    CycleCardUpdateCoordinator,
    async_resolve_tracker_scope,
)
from custom_components.menstrual_cycle_card.sensor import (
    ENTITY_DESCRIPTIONS as SENSORS,
    CycleCardSensor,
)
from custom_components.menstrual_cycle_card.state import StateReader
from custom_components.menstrual_cycle_card.view_model import build_view_model
from tests.conftest import make_hass, tracker_states


def make_coordinator(view) -> MagicMock:
    coordinator = MagicMock()
    coordinator.data = view
    coordinator.config_entry.domain = "menstrual_cycle_card"
    coordinator.config_entry.entry_id = "card1"
    coordinator.last_update_success = True
    coordinator.async_log = AsyncMock(return_value=True)
    return coordinator


@pytest.fixture
def idle_view(entities, reader_for):
    return build_view_model(reader_for(tracker_states()), entities, {}, SubmissionState())


# ---------------------------------------------------------------------------
# Sensors
# ---------------------------------------------------------------------------


class TestSensors:
    def test_phase_sensor_publishes_view(self, idle_view) -> None:
        sensor = CycleCardSensor(make_coordinator(idle_view), SENSORS[0])

        assert sensor.unique_id == "card1_cycle_phase"
        assert sensor.native_value == "Follicular"
        assert sensor.icon == "mdi:sprout"
        assert sensor.extra_state_attributes["status_line"] == "Next period in 19 days"

    def test_status_sensor(self, idle_view) -> None:
        sensor = CycleCardSensor(make_coordinator(idle_view), SENSORS[1])

        assert sensor.native_value == "Next period in 19 days"
        assert sensor.extra_state_attributes is None


# ---------------------------------------------------------------------------
# Buttons
# ---------------------------------------------------------------------------


class TestLogButtons:
    def test_only_matching_button_is_available(self, idle_view) -> None:
        coordinator = make_coordinator(idle_view)
        start, end = (CycleCardLogButton(coordinator, d) for d in BUTTONS)

        assert start.available is True
        assert end.available is False

    def test_busy_submitter_makes_buttons_unavailable(self, entities, reader_for) -> None:
        view = build_view_model(
            reader_for(tracker_states()),
            entities,
            {},
            SubmissionState(SubmissionStage.COOLING_DOWN, LogAction.START),
        )
        start = CycleCardLogButton(make_coordinator(view), BUTTONS[0])

        assert start.available is False

    @pytest.mark.asyncio
    async def test_press_submits_action(self, idle_view) -> None:
        coordinator = make_coordinator(idle_view)
        button = CycleCardLogButton(coordinator, BUTTONS[1])

        await button.async_press()

        coordinator.async_log.assert_awaited_once_with(LogAction.END)


# ---------------------------------------------------------------------------
# Tracker bindings
# ---------------------------------------------------------------------------


class TestTrackerBindings:
    @pytest.mark.asyncio
    async def test_scope_is_config_entry_of_tracker(self) -> None:
        registry = MagicMock()
        registry.async_get.return_value = SimpleNamespace(config_entry_id="tracker1")
        with patch(
            "custom_components.menstrual_cycle_card.coordinator.er.async_get",
            return_value=registry,
        ):
            scope = await async_resolve_tracker_scope(MagicMock(), "binary_sensor.alex_period_active")

        assert scope == "tracker1"
        registry.async_get.assert_called_once_with("binary_sensor.alex_period_active")

    @pytest.mark.asyncio
    async def test_unregistered_entity_raises(self) -> None:
        registry = MagicMock()
        registry.async_get.return_value = None
        with (
            patch(
                "custom_components.menstrual_cycle_card.coordinator.er.async_get",
                return_value=registry,
            ),
            pytest.raises(HomeAssistantError),
        ):
            await async_resolve_tracker_scope(MagicMock(), "binary_sensor.ghost_period_active")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("action", "scope", "service", "data"),
        [
            (LogAction.START, "tracker1", "log_period_start", {"tracker": "tracker1"}),
            (LogAction.END, None, "log_period_end", {}),
        ],
    )
    async def test_log_service_call(self, action, scope, service, data) -> None:
        fake = MagicMock()
        fake.hass.services.async_call = AsyncMock(return_value=None)

        await CycleCardUpdateCoordinator._async_call_log_service(fake, action, scope)

        fake.hass.services.async_call.assert_awaited_once_with(
            "menstrual_cycle_tracker", service, data, blocking=True
        )


# ---------------------------------------------------------------------------
# Rebuilds on pushes and submission transitions
# ---------------------------------------------------------------------------


def make_rebuilding_coordinator(entities, reader, submitter_state=None):
    """A stand-in carrying the real rebuild methods of the coordinator."""
    fake = SimpleNamespace(
        entities=entities,
        _reader=reader,
        _options={},
        submitter=SimpleNamespace(state=submitter_state or SubmissionState()),
        async_set_updated_data=MagicMock(),
    )
    fake.build_view = partial(CycleCardUpdateCoordinator.build_view, fake)
    return fake


class TestRebuilds:
    def test_state_push_rebuilds_from_current_states(self, entities) -> None:
        hass = make_hass(tracker_states())
        fake = make_rebuilding_coordinator(entities, StateReader(hass))

        CycleCardUpdateCoordinator._handle_state_change(fake, MagicMock())
        first = fake.async_set_updated_data.call_args.args[0]

        hass.states.get.side_effect = make_hass(tracker_states(active=True)).states.get
        CycleCardUpdateCoordinator._handle_state_change(fake, MagicMock())
        second = fake.async_set_updated_data.call_args.args[0]

        assert first.log_button.action is LogAction.START
        assert second.log_button.action is LogAction.END

    @pytest.mark.asyncio
    async def test_submission_transitions_rebuild_the_view(self, entities) -> None:
        fake = make_rebuilding_coordinator(
            entities, StateReader(make_hass(tracker_states()))
        )
        scheduler = MagicMock()
        submitter = ActionSubmitter(
            entities.period_active,
            resolve_scope=AsyncMock(return_value="tracker1"),
            call_action=AsyncMock(return_value=None),
            call_later=scheduler,
            on_change=lambda state: CycleCardUpdateCoordinator._handle_submission_change(
                fake, state
            ),
        )
        fake.submitter = submitter

        await submitter.async_submit(LogAction.START)
        _, finish = scheduler.call_args.args
        finish(datetime(2026, 10, 18, 12, 0))

        buttons = [c.args[0].log_button for c in fake.async_set_updated_data.call_args_list]
        assert [(b.disabled, b.confirmed) for b in buttons] == [
            (True, False),
            (True, True),
            (False, False),
        ]
        assert submitter.state.is_idle

"""Shared fixtures for the cycle card tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from homeassistant.core import State

from custom_components.menstrual_cycle_card.entities import TrackerEntities, derive_entities
from custom_components.menstrual_cycle_card.state import StateReader

PERIOD_ACTIVE = "binary_sensor.alex_period_active"


def make_hass(states: dict[str, tuple[str, dict[str, Any]]]) -> MagicMock:
    """Build a hass stand-in whose state machine holds the given states."""
    objects = {
        entity_id: State(entity_id, value, attributes)
        for entity_id, (value, attributes) in states.items()
    }
    hass = MagicMock()
    hass.states.get.side_effect = objects.get
    return hass


def tracker_states(
    *,
    active: bool = False,
    phase: str = "Follicular",
    cycle_day: str = "9",
    period_length: str = "5",
    cycle_length: str = "28",
    next_period: str = "2026-11-05",
    days_until: int | None = 19,
    days_overdue: int | None = -1,
    fertile: str = "No",
    pms: bool = False,
    period_attrs: dict[str, Any] | None = None,
    symptoms: list[Any] | None = None,
) -> dict[str, tuple[str, dict[str, Any]]]:
    """States of a realistic tracker named Alex."""
    return {
        PERIOD_ACTIVE: (
            "on" if active else "off",
            {"friendly_name": "Alex Period Active", **(period_attrs or {})},
        ),
        "sensor.alex_current_phase": (phase, {}),
        "sensor.alex_cycle_day": (cycle_day, {}),
        "sensor.alex_next_period": (
            next_period,
            {"days_until_next_period": days_until, "days_overdue": days_overdue},
        ),
        "sensor.alex_period_length": (period_length, {}),
        "sensor.alex_cycle_length": (cycle_length, {}),
        "sensor.alex_fertile_window": (fertile, {"is_pms_window": pms}),
        "sensor.alex_todays_symptoms": (
            str(len(symptoms or [])),
            {"symptoms": symptoms or []},
        ),
    }


@pytest.fixture
def entities() -> TrackerEntities:
    return derive_entities(PERIOD_ACTIVE)


@pytest.fixture
def reader_for():
    """Return a factory building a StateReader over tracker states."""

    def _factory(states: dict[str, tuple[str, dict[str, Any]]]) -> StateReader:
        return StateReader(make_hass(states))

    return _factory

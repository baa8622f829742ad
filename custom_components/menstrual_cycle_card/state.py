"""Point-in-time reads from the Home Assistant state machine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from homeassistant.const import STATE_UNAVAILABLE, STATE_UNKNOWN

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

_MISSING_STATES = {STATE_UNKNOWN, STATE_UNAVAILABLE}


class StateReader:
    """Read entity states and attributes, returning None for anything absent."""

    def __init__(self, hass: HomeAssistant) -> None:
        self.hass = hass

    def state(self, entity_id: str) -> str | None:
        state = self.hass.states.get(entity_id)
        if state is None or state.state in _MISSING_STATES:
            return None
        return state.state

    def attr(self, entity_id: str, name: str) -> Any | None:
        state = self.hass.states.get(entity_id)
        if state is None:
            return None
        return state.attributes.get(name)


def as_int(value: Any) -> int | None:
    """Return value if it is an integer (or an integral string), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        return parse_int(value)
    return None


def parse_int(value: str | None) -> int | None:
    """Parse a sensor state such as ``"28"`` or ``"28.0"``."""
    if value is None:
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None

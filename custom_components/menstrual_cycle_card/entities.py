"""Entity id derivation for a menstrual cycle tracker."""

from __future__ import annotations

from dataclasses import astuple, dataclass

_PERIOD_ACTIVE_SUFFIX = "_period_active"


@dataclass(frozen=True)
class TrackerEntities:
    """Entity ids of one tracker, all anchored on its period_active sensor."""

    period_active: str
    current_phase: str
    cycle_day: str
    next_period: str
    period_length: str
    cycle_length: str
    fertile_window: str
    todays_symptoms: str

    @property
    def all_ids(self) -> list[str]:
        """Return every tracked entity id, canonical first."""
        return list(astuple(self))


def derive_entities(period_active_id: str) -> TrackerEntities:
    """Derive the sibling sensor ids from a period_active entity id.

    ``binary_sensor.alex_period_active`` yields ``sensor.alex_current_phase``,
    ``sensor.alex_cycle_day`` and so on. Ids that do not follow the naming
    scheme still produce well-formed ids; they simply point at entities that
    do not exist.
    """
    if not isinstance(period_active_id, str) or not period_active_id.strip():
        raise ValueError("A period active entity id is required")

    canonical = period_active_id.strip()
    _, _, object_id = canonical.rpartition(".")
    slug = object_id.removesuffix(_PERIOD_ACTIVE_SUFFIX)

    def _sensor(field: str) -> str:
        return f"sensor.{slug}_{field}"

    return TrackerEntities(
        period_active=canonical,
        current_phase=_sensor("current_phase"),
        cycle_day=_sensor("cycle_day"),
        next_period=_sensor("next_period"),
        period_length=_sensor("period_length"),
        cycle_length=_sensor("cycle_length"),
        fertile_window=_sensor("fertile_window"),
        todays_symptoms=_sensor("todays_symptoms"),
    )

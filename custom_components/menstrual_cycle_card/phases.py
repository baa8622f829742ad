"""Cycle phase partitioning."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .const import LUTEAL_PHASE_DAYS


class Phase(StrEnum):
    """Cycle phases as reported by the tracker's current phase sensor."""

    MENSTRUAL = "Menstrual"
    FOLLICULAR = "Follicular"
    OVULATION = "Ovulation"
    LUTEAL = "Luteal"
    UNKNOWN = "Unknown"

    @classmethod
    def from_state(cls, value: str | None) -> Phase:
        if value is None:
            return cls.UNKNOWN
        for phase in cls:
            if phase.value.lower() == value.strip().lower():
                return phase
        return cls.UNKNOWN


@dataclass(frozen=True)
class PhaseMeta:
    color: str
    icon: str


PHASE_META: dict[Phase, PhaseMeta] = {
    Phase.MENSTRUAL: PhaseMeta(color="#e57373", icon="mdi:water"),
    Phase.FOLLICULAR: PhaseMeta(color="#66bb6a", icon="mdi:sprout"),
    Phase.OVULATION: PhaseMeta(color="#ffca28", icon="mdi:egg-outline"),
    Phase.LUTEAL: PhaseMeta(color="#ab47bc", icon="mdi:moon-waning-crescent"),
    Phase.UNKNOWN: PhaseMeta(color="var(--secondary-text-color)", icon="mdi:help-circle-outline"),
}


@dataclass(frozen=True)
class PhaseSegment:
    """An inclusive range of cycle days spent in one phase."""

    phase: Phase
    start_day: int
    end_day: int

    @property
    def days(self) -> int:
        return self.end_day - self.start_day + 1

    def width(self, cycle_length: int) -> float:
        """Share of the cycle covered by this segment."""
        return self.days / cycle_length


def compute_phase_segments(cycle_length: int, period_length: int) -> list[PhaseSegment]:
    """Split days ``1..cycle_length`` into consecutive phase segments.

    Ovulation is a four day window ending the day after the anchor day
    ``cycle_length - 14``. It never starts before the period has ended, and
    phases that end up with no days are left out, so short cycles lose the
    follicular phase first. For 28/5 this yields menstrual 1-5, follicular
    6-11, ovulation 12-15 and luteal 16-28.
    """
    if cycle_length <= 0:
        return []
    period_length = max(0, period_length)

    anchor = cycle_length - LUTEAL_PHASE_DAYS
    ovulation_start = max(period_length + 1, anchor - 2)
    ovulation_end = max(anchor + 1, ovulation_start - 1)

    candidates = (
        PhaseSegment(Phase.MENSTRUAL, 1, min(period_length, cycle_length)),
        PhaseSegment(Phase.FOLLICULAR, period_length + 1, ovulation_start - 1),
        PhaseSegment(Phase.OVULATION, ovulation_start, ovulation_end),
        PhaseSegment(Phase.LUTEAL, ovulation_end + 1, cycle_length),
    )
    return [seg for seg in candidates if seg.end_day >= seg.start_day]

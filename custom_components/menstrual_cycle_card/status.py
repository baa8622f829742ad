"""Status headline for the cycle card."""

from __future__ import annotations

from dataclasses import dataclass

from .phases import Phase


@dataclass(frozen=True)
class CycleStatus:
    """Scalar cycle readings; None means the reading was unavailable."""

    is_active: bool
    current_phase: Phase = Phase.UNKNOWN
    day_of_cycle: int | None = None
    days_until_next: int | None = None
    days_overdue: int | None = None
    days_active_in_period: int | None = None
    days_left_of_period: int | None = None
    days_period_end_overdue: int | None = None


def pluralize(count: int, word: str) -> str:
    """Return ``"1 day"`` or ``"N days"``."""
    return f"{count} {word}{'' if count == 1 else 's'}"


def compose_status_line(status: CycleStatus) -> str | None:
    """Describe where in the cycle the subject is.

    Returns None when there is nothing to say, which callers must treat as
    "no status line" rather than an empty one.
    """
    if status.is_active:
        day = status.days_active_in_period if status.days_active_in_period is not None else "?"
        left = status.days_left_of_period
        end_overdue = status.days_period_end_overdue
        if left is not None and left > 0:
            return f"Day {day} · {pluralize(left, 'day')} remaining"
        if end_overdue == 0:
            return f"Day {day} · Expected to end today"
        if end_overdue is not None and end_overdue > 0:
            return f"Day {day} · {pluralize(end_overdue, 'day')} longer than usual"
        return f"Day {day}"

    overdue = status.days_overdue
    if overdue == 0:
        return "Period due today"
    if overdue is not None and overdue > 0:
        return f"Period {pluralize(overdue, 'day')} overdue"
    until = status.days_until_next
    if until is not None and until > 0:
        return f"Next period in {pluralize(until, 'day')}"
    return None


def describe_next_period(
    next_period: str | None,
    days_until: int | None,
    days_overdue: int | None,
) -> str:
    """Value for the "Next period" row."""
    if days_overdue == 0:
        return "Due today"
    if days_overdue is not None and days_overdue > 0:
        label = f"{pluralize(days_overdue, 'day')} overdue"
        if next_period:
            label += f" · was {next_period}"
        return label
    if next_period and days_until is not None and days_until > 0:
        return f"{next_period} · in {pluralize(days_until, 'day')}"
    return next_period or "-"

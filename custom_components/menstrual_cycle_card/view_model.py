"""Assemble the render-ready cycle card view model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any

from .actions import LogAction, SubmissionState
from .const import (
    ATTR_DAYS_ACTIVE,
    ATTR_DAYS_LEFT_OF_PERIOD,
    ATTR_DAYS_OVERDUE,
    ATTR_DAYS_PERIOD_END_OVERDUE,
    ATTR_DAYS_UNTIL_NEXT_PERIOD,
    ATTR_IS_PMS_WINDOW,
    ATTR_LAST_PERIOD_END,
    ATTR_LAST_PERIOD_START,
    ATTR_SYMPTOMS,
    CONF_SHOW_CYCLE_BAR,
    CONF_SHOW_FERTILE_WINDOW,
    CONF_SHOW_LAST_PERIOD,
    CONF_SHOW_LOG_BUTTONS,
    CONF_SHOW_NEXT_PERIOD,
    CONF_SHOW_PMS_WINDOW,
    CONF_SHOW_STATS,
    CONF_SHOW_SYMPTOMS,
    CONF_TITLE,
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    DEFAULT_TITLE,
    SECTION_DEFAULTS,
)
from .entities import TrackerEntities
from .phases import PHASE_META, Phase, compute_phase_segments
from .state import StateReader, as_int, parse_int
from .status import CycleStatus, compose_status_line, describe_next_period, pluralize

_FRIENDLY_NAME_SUFFIX = " period active"
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class PhaseBadge:
    label: str
    phase: Phase
    color: str
    icon: str


@dataclass(frozen=True)
class SegmentView:
    phase: Phase
    start_day: int
    end_day: int
    width: float
    color: str


@dataclass(frozen=True)
class InfoRow:
    label: str
    value: str
    emphasized: bool = False
    icon: str | None = None
    entity_id: str | None = None


@dataclass(frozen=True)
class SymptomChip:
    label: str
    severity: str | None = None


@dataclass(frozen=True)
class LogButtonState:
    visible: bool
    action: LogAction | None
    label: str
    disabled: bool
    confirmed: bool


@dataclass(frozen=True)
class CycleCardView:
    """Everything a renderer needs to draw the card."""

    title: str
    phase_badge: PhaseBadge
    status_line: str | None
    cycle_day_label: str | None
    segments: list[SegmentView] = field(default_factory=list)
    info_rows: list[InfoRow] = field(default_factory=list)
    symptom_chips: list[SymptomChip] = field(default_factory=list)
    log_button: LogButtonState | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def read_cycle_status(reader: StateReader, entities: TrackerEntities) -> CycleStatus:
    """Collect the scalar readings the status line is built from."""
    cycle_day = parse_int(reader.state(entities.cycle_day))
    return CycleStatus(
        is_active=reader.state(entities.period_active) == "on",
        current_phase=Phase.from_state(reader.state(entities.current_phase)),
        day_of_cycle=cycle_day if cycle_day and cycle_day > 0 else None,
        days_until_next=as_int(
            reader.attr(entities.next_period, ATTR_DAYS_UNTIL_NEXT_PERIOD)
        ),
        days_overdue=as_int(reader.attr(entities.next_period, ATTR_DAYS_OVERDUE)),
        days_active_in_period=as_int(
            reader.attr(entities.period_active, ATTR_DAYS_ACTIVE)
        ),
        days_left_of_period=as_int(
            reader.attr(entities.period_active, ATTR_DAYS_LEFT_OF_PERIOD)
        ),
        days_period_end_overdue=as_int(
            reader.attr(entities.period_active, ATTR_DAYS_PERIOD_END_OVERDUE)
        ),
    )


def format_short_date(value: Any) -> str:
    """Format an ISO date as ``Jan 15``; unparsable values pass through."""
    if not value:
        return "-"
    if isinstance(value, date):
        parsed = value
    else:
        try:
            parsed = date.fromisoformat(str(value)[:10])
        except ValueError:
            return str(value)
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}"


def _title(options: Mapping[str, Any], friendly_name: Any) -> str:
    if title := options.get(CONF_TITLE):
        return str(title)
    if isinstance(friendly_name, str) and friendly_name:
        if friendly_name.lower().endswith(_FRIENDLY_NAME_SUFFIX):
            friendly_name = friendly_name[: -len(_FRIENDLY_NAME_SUFFIX)]
        if friendly_name:
            return friendly_name
    return DEFAULT_TITLE


def _symptom_chips(raw: Any) -> list[SymptomChip]:
    if not isinstance(raw, list):
        return []
    chips: list[SymptomChip] = []
    for item in raw:
        if isinstance(item, Mapping):
            label = item.get("symptom")
            severity = item.get("severity")
            if label:
                chips.append(
                    SymptomChip(label=str(label), severity=str(severity) if severity else None)
                )
        elif isinstance(item, str) and item:
            chips.append(SymptomChip(label=item))
    return chips


def _log_button(is_active: bool, submission: SubmissionState) -> LogButtonState:
    action = LogAction.END if is_active else LogAction.START
    confirmed = submission.is_confirmed(action)
    if action is LogAction.START:
        label = "Period start logged" if confirmed else "Log Period Start"
    else:
        label = "Period end logged" if confirmed else "Log Period End"
    return LogButtonState(
        visible=True,
        action=action,
        label=label,
        disabled=not submission.is_idle,
        confirmed=confirmed,
    )


def build_view_model(
    reader: StateReader,
    entities: TrackerEntities,
    options: Mapping[str, Any],
    submission: SubmissionState,
) -> CycleCardView:
    """Build the card view from the current entity states.

    Every read goes through ``reader`` so the result always reflects the
    state machine at call time. The submission state is only read.
    """

    def show(key: str) -> bool:
        return bool(options.get(key, SECTION_DEFAULTS[key]))

    status = read_cycle_status(reader, entities)
    phase_label = reader.state(entities.current_phase) or Phase.UNKNOWN.value
    meta = PHASE_META[status.current_phase]
    period_length = parse_int(reader.state(entities.period_length))
    if period_length is None:
        period_length = DEFAULT_PERIOD_LENGTH
    cycle_length = parse_int(reader.state(entities.cycle_length))
    if cycle_length is None or cycle_length <= 0:
        cycle_length = DEFAULT_CYCLE_LENGTH

    segments: list[SegmentView] = []
    if show(CONF_SHOW_CYCLE_BAR):
        segments = [
            SegmentView(
                phase=seg.phase,
                start_day=seg.start_day,
                end_day=seg.end_day,
                width=round(seg.width(cycle_length), 4),
                color=PHASE_META[seg.phase].color,
            )
            for seg in compute_phase_segments(cycle_length, period_length)
        ]

    rows: list[InfoRow] = []
    if show(CONF_SHOW_NEXT_PERIOD):
        rows.append(
            InfoRow(
                label="Next period",
                value=describe_next_period(
                    reader.state(entities.next_period),
                    status.days_until_next,
                    status.days_overdue,
                ),
                emphasized=status.days_overdue is not None and status.days_overdue >= 0,
                icon="mdi:calendar-clock",
                entity_id=entities.next_period,
            )
        )
    if show(CONF_SHOW_FERTILE_WINDOW):
        fertile = reader.state(entities.fertile_window) == "Yes"
        rows.append(
            InfoRow(
                label="Fertile window",
                value="Yes, ovulation window" if fertile else "No",
                emphasized=fertile,
                icon="mdi:flower-outline",
                entity_id=entities.fertile_window,
            )
        )
    if show(CONF_SHOW_PMS_WINDOW):
        pms = reader.attr(entities.fertile_window, ATTR_IS_PMS_WINDOW) is True
        rows.append(
            InfoRow(
                label="PMS window",
                value="Yes, within 5 days" if pms else "No",
                emphasized=pms,
                icon="mdi:emoticon-sad-outline",
                entity_id=entities.fertile_window,
            )
        )
    last_start = reader.attr(entities.period_active, ATTR_LAST_PERIOD_START)
    last_end = reader.attr(entities.period_active, ATTR_LAST_PERIOD_END)
    if show(CONF_SHOW_LAST_PERIOD) and (last_start or last_end):
        rows.append(
            InfoRow(
                label="Last period",
                value=f"{format_short_date(last_start)} → {format_short_date(last_end)}",
                icon="mdi:calendar-range",
                entity_id=entities.period_active,
            )
        )
    if show(CONF_SHOW_STATS):
        rows.append(
            InfoRow(
                label="Avg cycle / period",
                value=f"{pluralize(cycle_length, 'day')} / {pluralize(period_length, 'day')}",
                icon="mdi:chart-bar",
                entity_id=entities.cycle_length,
            )
        )

    chips: list[SymptomChip] = []
    if show(CONF_SHOW_SYMPTOMS):
        chips = _symptom_chips(reader.attr(entities.todays_symptoms, ATTR_SYMPTOMS))

    if show(CONF_SHOW_LOG_BUTTONS):
        log_button = _log_button(status.is_active, submission)
    else:
        log_button = LogButtonState(
            visible=False, action=None, label="", disabled=True, confirmed=False
        )

    return CycleCardView(
        title=_title(options, reader.attr(entities.period_active, "friendly_name")),
        phase_badge=PhaseBadge(
            label=phase_label,
            phase=status.current_phase,
            color=meta.color,
            icon=meta.icon,
        ),
        status_line=compose_status_line(status),
        cycle_day_label=(
            f"Day {status.day_of_cycle} of {cycle_length}" if status.day_of_cycle else None
        ),
        segments=segments,
        info_rows=rows,
        symptom_chips=chips,
        log_button=log_button,
    )

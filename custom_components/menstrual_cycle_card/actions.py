"""Submission of log period actions, one at a time."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from homeassistant.core import CALLBACK_TYPE, callback

from .const import LOG_COOLDOWN_SECONDS, LOGGER


class LogAction(StrEnum):
    START = "start"
    END = "end"


class SubmissionStage(StrEnum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    COOLING_DOWN = "cooling_down"


@dataclass(frozen=True)
class SubmissionState:
    """Where the submitter is, and for which action."""

    stage: SubmissionStage = SubmissionStage.IDLE
    action: LogAction | None = None

    @property
    def is_idle(self) -> bool:
        return self.stage is SubmissionStage.IDLE

    def is_confirmed(self, action: LogAction) -> bool:
        return self.stage is SubmissionStage.COOLING_DOWN and self.action is action


IDLE = SubmissionState()

ScopeResolver = Callable[[str], Awaitable[str | None]]
ActionCaller = Callable[[LogAction, str | None], Awaitable[Any]]
CallLater = Callable[[float, Callable[[datetime], None]], CALLBACK_TYPE]


class ActionSubmitter:
    """Run log actions so that at most one is in flight or cooling down.

    Submissions made while another one is submitting or cooling down are
    dropped without error. The tracker scope is resolved lazily on the first
    submission and cached; if it cannot be resolved the action is still sent,
    just without a scope.
    """

    def __init__(
        self,
        canonical_id: str,
        *,
        resolve_scope: ScopeResolver,
        call_action: ActionCaller,
        call_later: CallLater,
        cooldown: float = LOG_COOLDOWN_SECONDS,
        on_change: Callable[[SubmissionState], None] | None = None,
    ) -> None:
        self._canonical_id = canonical_id
        self._resolve_scope = resolve_scope
        self._call_action = call_action
        self._call_later = call_later
        self._cooldown = cooldown
        self._on_change = on_change
        self._state = IDLE
        self._scope: str | None = None
        self._cancel_cooldown: CALLBACK_TYPE | None = None

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def scope(self) -> str | None:
        return self._scope

    def _set_state(self, state: SubmissionState) -> None:
        LOGGER.debug(
            "%s: log action %s -> %s",
            self._canonical_id,
            self._state.stage,
            state.stage,
        )
        self._state = state
        if self._on_change is not None:
            self._on_change(state)

    async def async_submit(self, action: LogAction) -> bool:
        """Submit action; return False if another submission holds the lock."""
        if not self._state.is_idle:
            LOGGER.debug(
                "%s: ignoring %s, %s already %s",
                self._canonical_id,
                action,
                self._state.action,
                self._state.stage,
            )
            return False
        self._set_state(SubmissionState(SubmissionStage.SUBMITTING, action))

        try:
            if self._scope is None:
                self._scope = await self._async_lookup_scope()
            await self._call_action(action, self._scope)
        except asyncio.CancelledError:
            LOGGER.debug("%s: log period %s cancelled", self._canonical_id, action)
            self._set_state(IDLE)
            raise
        except Exception:
            LOGGER.exception("%s: failed to log period %s", self._canonical_id, action)
            self._set_state(IDLE)
            return False

        self._set_state(SubmissionState(SubmissionStage.COOLING_DOWN, action))
        self._cancel_cooldown = self._call_later(self._cooldown, self._cooldown_finished)
        return True

    async def _async_lookup_scope(self) -> str | None:
        try:
            scope = await self._resolve_scope(self._canonical_id)
        except Exception:
            LOGGER.debug(
                "%s: could not resolve tracker scope, logging without it",
                self._canonical_id,
                exc_info=True,
            )
            return None
        if not scope:
            LOGGER.debug("%s: no tracker scope found", self._canonical_id)
            return None
        return scope

    @callback
    def _cooldown_finished(self, _now: datetime) -> None:
        self._cancel_cooldown = None
        self._set_state(IDLE)

    @callback
    def async_shutdown(self) -> None:
        """Drop a pending cool-down timer when the card is unloaded."""
        if self._cancel_cooldown is not None:
            self._cancel_cooldown()
            self._cancel_cooldown = None

"""Interval timer controller - owns a TimerState and fires phase callbacks"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from . import engine
from app.utils.datetime_helper import format_duration
from .domain import Phase, TimerState

if TYPE_CHECKING:
    from app.features.history.domain import SessionRecord
    from app.features.history.recorder import SessionRecorder

logger = logging.getLogger(__name__)

PhaseCallback = Callable[[], None]


class IntervalTimer:
    """
    Study/break interval timer.

    Wraps the pure engine functions around a single owned state. Completion
    callbacks fire synchronously: on natural expiry from tick() and on skip().
    When a recorder is attached, every phase start is logged, and a second
    completed record is appended only when a phase expires naturally.
    """

    def __init__(
        self,
        state: Optional[TimerState] = None,
        on_study_complete: Optional[PhaseCallback] = None,
        on_break_complete: Optional[PhaseCallback] = None,
        recorder: Optional[SessionRecorder] = None,
    ):
        self._state = state or TimerState.initial()
        self.on_study_complete = on_study_complete
        self.on_break_complete = on_break_complete
        self._recorder = recorder
        self._current_start: Optional[SessionRecord] = None
        if self._state.running:
            # resumed mid-phase: the phase still needs a start for its completion to link to
            self._record_start()

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state.running

    def start(self) -> TimerState:
        if self._state.running:
            return self._state
        self._state = engine.start(self._state)
        if self._current_start is None:
            self._record_start()
        logger.info(f"Timer started in {self._state.phase.value} phase, {format_duration(self._state.remaining_seconds)} left")
        return self._state

    def pause(self) -> TimerState:
        self._state = engine.pause(self._state)
        return self._state

    def reset(self) -> TimerState:
        self._state = engine.reset(self._state)
        self._current_start = None
        return self._state

    def skip(self) -> TimerState:
        self._state, ended = engine.skip(self._state)
        self._current_start = None
        logger.info(f"Skipped {ended.value} phase")
        self._fire(ended)
        return self._state

    def tick(self) -> TimerState:
        self._state, ended = engine.tick(self._state)
        if ended is not None:
            logger.info(f"{ended.value.capitalize()} phase complete, switching to {self._state.phase.value}")
            if self._recorder is not None and self._current_start is not None:
                self._recorder.record_completion(self._current_start)
            self._current_start = None
            self._fire(ended)
            if self._state.running:
                self._record_start()
        return self._state

    def set_study_duration(self, seconds: int) -> TimerState:
        self._state = self._apply_duration(engine.set_study_duration, seconds)
        return self._state

    def set_break_duration(self, seconds: int) -> TimerState:
        self._state = self._apply_duration(engine.set_break_duration, seconds)
        return self._state

    def _apply_duration(self, setter, seconds: int) -> TimerState:
        new_state = setter(self._state, seconds)
        if new_state.remaining_seconds != self._state.remaining_seconds:
            # the abandoned start stays in the log as incomplete
            self._current_start = None
        return new_state

    def _record_start(self) -> None:
        if self._recorder is None:
            return
        phase = self._state.phase
        self._current_start = self._recorder.record_start(phase, self._state.duration_of(phase))

    def _fire(self, ended: Phase) -> None:
        callback = self.on_study_complete if ended is Phase.STUDY else self.on_break_complete
        if callback is not None:
            callback()

"""
Interval timer engine.

Pure transition functions over TimerState. Nothing here owns state or
schedules work: callers pass the current state in and keep the returned one.
Functions that can end a phase also return the phase that ended (or None).
"""
from typing import Optional, Tuple

from .domain import Phase, TimerState

Transition = Tuple[TimerState, Optional[Phase]]


def start(state: TimerState) -> TimerState:
    if state.running:
        return state
    return state.model_copy(update={"running": True})


def pause(state: TimerState) -> TimerState:
    """Stop the countdown. A countdown longer than a since-shortened phase is cut to it."""
    if not state.running:
        return state
    return state.model_copy(update={
        "running": False,
        "remaining_seconds": min(state.remaining_seconds, state.duration_of(state.phase)),
    })


def reset(state: TimerState) -> TimerState:
    return state.model_copy(update={
        "running": False,
        "phase": Phase.STUDY,
        "remaining_seconds": state.study_duration_seconds,
    })


def _flip(state: TimerState) -> TimerState:
    target = state.phase.other
    return state.model_copy(update={
        "phase": target,
        "remaining_seconds": state.duration_of(target),
    })


def skip(state: TimerState) -> Transition:
    """Pause and jump to the other phase. The skipped phase counts as ended."""
    ended = state.phase
    return _flip(pause(state)), ended


def tick(state: TimerState) -> Transition:
    """
    Advance a running timer by one second.

    When the countdown reaches zero the phase flips, the new phase's full
    duration becomes the remaining time and the ended phase is returned.
    A paused timer is returned unchanged.
    """
    if not state.running:
        return state, None

    remaining = state.remaining_seconds - 1
    if remaining > 0:
        return state.model_copy(update={"remaining_seconds": remaining}), None

    return _flip(state), state.phase


def set_study_duration(state: TimerState, seconds: int) -> TimerState:
    """Change the study duration. A paused study phase restarts from it."""
    if seconds <= 0:
        raise ValueError("study duration must be positive")
    update = {"study_duration_seconds": seconds}
    if not state.running and state.phase is Phase.STUDY:
        update["remaining_seconds"] = seconds
    return state.model_copy(update=update)


def set_break_duration(state: TimerState, seconds: int) -> TimerState:
    """Change the break duration. A paused break phase restarts from it."""
    if seconds <= 0:
        raise ValueError("break duration must be positive")
    update = {"break_duration_seconds": seconds}
    if not state.running and state.phase is Phase.BREAK:
        update["remaining_seconds"] = seconds
    return state.model_copy(update=update)

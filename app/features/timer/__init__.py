"""Interval timer feature module"""

from app.features.timer.domain import (
    Phase,
    TimerState,
    DEFAULT_STUDY_DURATION,
    DEFAULT_BREAK_DURATION,
    STUDY_DURATION_OPTIONS,
    BREAK_DURATION_OPTIONS,
)
from app.features.timer.service import IntervalTimer
from app.features.timer.runner import run_timer

__all__ = [
    "Phase",
    "TimerState",
    "DEFAULT_STUDY_DURATION",
    "DEFAULT_BREAK_DURATION",
    "STUDY_DURATION_OPTIONS",
    "BREAK_DURATION_OPTIONS",
    "IntervalTimer",
    "run_timer",
]

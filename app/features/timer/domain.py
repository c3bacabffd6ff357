"""Timer domain models"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Phase(str, Enum):
    """Timer phase"""
    STUDY = "study"
    BREAK = "break"

    @property
    def other(self) -> "Phase":
        return Phase.BREAK if self is Phase.STUDY else Phase.STUDY


DEFAULT_STUDY_DURATION = 7200  # 2 hours
DEFAULT_BREAK_DURATION = 300  # 5 minutes

STUDY_DURATION_OPTIONS = (3600, 5400, 7200, 9000, 10800)
BREAK_DURATION_OPTIONS = (300, 600, 900, 1200)


class TimerState(BaseModel):
    """Snapshot of the interval timer. Operations return a new instance."""
    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.STUDY
    remaining_seconds: int = Field(default=DEFAULT_STUDY_DURATION, ge=0)
    running: bool = False
    study_duration_seconds: int = Field(default=DEFAULT_STUDY_DURATION, gt=0)
    break_duration_seconds: int = Field(default=DEFAULT_BREAK_DURATION, gt=0)

    @model_validator(mode="after")
    def _remaining_within_phase(self) -> "TimerState":
        """
        A paused countdown never exceeds its phase duration.

        A running countdown is exempt: shortening a duration mid-phase keeps
        the countdown as is until the next phase boundary or pause.
        """
        if not self.running and self.remaining_seconds > self.duration_of(self.phase):
            raise ValueError("remaining_seconds exceeds the current phase duration")
        return self

    @classmethod
    def initial(
        cls,
        study_duration_seconds: int = DEFAULT_STUDY_DURATION,
        break_duration_seconds: int = DEFAULT_BREAK_DURATION,
    ) -> "TimerState":
        return cls(
            phase=Phase.STUDY,
            remaining_seconds=study_duration_seconds,
            running=False,
            study_duration_seconds=study_duration_seconds,
            break_duration_seconds=break_duration_seconds,
        )

    def duration_of(self, phase: Phase) -> int:
        if phase is Phase.STUDY:
            return self.study_duration_seconds
        return self.break_duration_seconds

    @property
    def is_fresh(self) -> bool:
        """True when nothing of the current phase has elapsed yet"""
        return self.remaining_seconds == self.duration_of(self.phase)

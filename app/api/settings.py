from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import logging

from app.features.timer import (
    BREAK_DURATION_OPTIONS,
    DEFAULT_BREAK_DURATION,
    DEFAULT_STUDY_DURATION,
    STUDY_DURATION_OPTIONS,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/settings", tags=["settings"])


class TimerSettings(BaseModel):
    """User-facing timer settings. Durations come from fixed option lists."""
    model_config = ConfigDict(populate_by_name=True)

    study_duration: int = Field(default=DEFAULT_STUDY_DURATION, alias="studyDuration")
    break_duration: int = Field(default=DEFAULT_BREAK_DURATION, alias="breakDuration")
    play_notification: bool = Field(default=True, alias="playNotification")
    selected_playlist_id: Optional[str] = Field(default=None, alias="selectedPlaylistId")
    selected_playlist_name: Optional[str] = Field(default=None, alias="selectedPlaylistName")

    @field_validator("study_duration")
    @classmethod
    def _study_duration_option(cls, v: int) -> int:
        if v not in STUDY_DURATION_OPTIONS:
            raise ValueError(f"studyDuration must be one of {STUDY_DURATION_OPTIONS}")
        return v

    @field_validator("break_duration")
    @classmethod
    def _break_duration_option(cls, v: int) -> int:
        if v not in BREAK_DURATION_OPTIONS:
            raise ValueError(f"breakDuration must be one of {BREAK_DURATION_OPTIONS}")
        return v


@router.get("", response_model=TimerSettings)
async def get_settings():
    """Default timer settings (settings are not stored per user)"""
    return TimerSettings()


@router.post("", response_model=TimerSettings)
async def save_settings(settings: TimerSettings):
    """Validate and echo the submitted settings"""
    logger.info(
        f"Settings saved: study={settings.study_duration}s, break={settings.break_duration}s, "
        f"playlist={settings.selected_playlist_id}"
    )
    return settings

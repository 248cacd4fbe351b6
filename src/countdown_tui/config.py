from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator

from .shared import TICK_INTERVAL

class TimerConfig(BaseModel):
    duration_minutes: PositiveInt = 1
    tick_interval: timedelta = TICK_INTERVAL
    exit_on_timeout: bool = True
    start_paused: bool = False

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('tick_interval')
    @classmethod
    def sub_second(cls, v: timedelta) -> timedelta:
        if not timedelta(0) < v < timedelta(seconds=1):
            raise ValueError(f'tick_interval must be sub-second, got {v}')
        return v

    @property
    def total_duration(self) -> timedelta:
        return timedelta(minutes=self.duration_minutes)

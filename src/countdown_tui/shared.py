from __future__ import annotations

from dataclasses import dataclass
from abc import ABC
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, model_validator

TICK_INTERVAL = timedelta(milliseconds=100)
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'
BIG_TEXT_STYLE = 'bold magenta on #FAFAFA'
TIMES_UP = "Time's up!"

class TimerState(BaseModel):
    total_duration: timedelta
    remaining: timedelta
    running: bool = False
    timed_out: bool = False
    quitting: bool = False

    model_config = ConfigDict(
        frozen=True,
    )

    @classmethod
    def fresh(cls, total_duration: timedelta) -> TimerState:
        return cls(total_duration=total_duration, remaining=total_duration)

    @model_validator(mode='after')
    def check_invariants(self) -> TimerState:
        if self.total_duration <= timedelta(0):
            raise ValueError(f'total_duration must be positive, got {self.total_duration}')
        if not timedelta(0) <= self.remaining <= self.total_duration:
            raise ValueError(
                f'remaining {self.remaining} is outside [0, {self.total_duration}]'
            )
        if self.timed_out != (self.remaining == timedelta(0)):
            raise ValueError('timed_out must hold exactly when remaining is zero')
        if self.timed_out and self.running:
            raise ValueError('a timed-out timer cannot be running')
        return self

class Command:
    '''
    What a key press asks the engine to do.
    '''
    class Base(ABC):
        pass

    @dataclass(frozen=True)
    class StartStop(Base):
        pass

    @dataclass(frozen=True)
    class Reset(Base):
        pass

    @dataclass(frozen=True)
    class Quit(Base):
        pass

class Event:
    class Base(ABC):
        pass

    @dataclass(frozen=True)
    class Tick(Base):
        elapsed: timedelta

    @dataclass(frozen=True)
    class KeyPress(Base):
        command: Command.Base

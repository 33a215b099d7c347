from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from .timer_engine import TimerEngine, TimerEvent

log = logging.getLogger(__name__)

class Lap(BaseModel):
    total_ms: int = Field(ge=0)
    delta_ms: int

    model_config = ConfigDict(
        frozen=True,
    )

class LapRecorder:
    def __init__(self, engine: TimerEngine | None = None) -> None:
        '''
        With an `engine`, laps are cleared whenever it resets.
        '''
        self.engine = engine
        self.__laps: list[Lap] = []
        if engine is not None:
            engine.subscribe(self.onTimerEvent)

    def onTimerEvent(self, event: TimerEvent) -> None:
        if event is TimerEvent.RESET:
            self.clear()

    def recordLap(self, current_total_ms: int) -> Lap:
        '''
        The caller guarantees `current_total_ms` never decreases
        between laps of one session.
        '''
        last = self.__laps[-1].total_ms if self.__laps else 0
        assert 0 <= last <= current_total_ms, (last, current_total_ms)
        lap = Lap(
            total_ms=current_total_ms,
            delta_ms=current_total_ms - last,
        )
        self.__laps.append(lap)
        log.debug('lap #%d: %s', len(self.__laps), lap)
        return lap

    def lap(self) -> Lap:
        assert self.engine is not None
        return self.recordLap(self.engine.elapsed())

    def clear(self) -> None:
        self.__laps.clear()

    def all(self) -> tuple[Lap, ...]:
        return tuple(self.__laps)

    @property
    def count(self) -> int:
        return len(self.__laps)

    def __len__(self) -> int:
        return len(self.__laps)

from __future__ import annotations

import time
import logging
import typing as tp
from enum import Enum

log = logging.getLogger(__name__)

Clock = tp.Callable[[], int]    # monotonic milliseconds

def monotonicMs() -> int:
    return time.monotonic_ns() // 1_000_000

class TimerEvent(Enum):
    STARTED = 'started'
    STOPPED = 'stopped'
    RESET = 'reset'

class TimerEngine:
    '''
    Tracks elapsed time across start/stop cycles.
    Elapsed time is always derived from clock deltas, never from
    how often somebody asks for it.
    '''

    def __init__(self, clock: Clock = monotonicMs) -> None:
        self.clock = clock
        self.is_running = False
        self.accumulated_ms = 0
        self.run_start_ms: int | None = None
        self.has_started = False
        self.__subscribers: list[tp.Callable[[TimerEvent], None]] = []

    def subscribe(self, callback: tp.Callable[[TimerEvent], None]) -> None:
        self.__subscribers.append(callback)

    def notify(self, event: TimerEvent) -> None:
        log.debug('%s at %d ms', event.value, self.elapsed())
        for callback in self.__subscribers:
            callback(event)

    def start(self) -> None:
        if self.is_running:
            return
        self.run_start_ms = self.clock()
        self.is_running = True
        self.has_started = True
        self.notify(TimerEvent.STARTED)

    def stop(self) -> None:
        if not self.is_running:
            return
        assert self.run_start_ms is not None
        self.accumulated_ms += self.clock() - self.run_start_ms
        self.run_start_ms = None
        self.is_running = False
        self.notify(TimerEvent.STOPPED)

    def reset(self) -> None:
        if not self.has_started:
            return
        self.is_running = False
        self.has_started = False
        self.accumulated_ms = 0
        self.run_start_ms = None
        self.notify(TimerEvent.RESET)

    def elapsed(self) -> int:
        if self.is_running:
            assert self.run_start_ms is not None
            return self.accumulated_ms + (self.clock() - self.run_start_ms)
        return self.accumulated_ms

import pytest

from stopwatch_tui.timer_engine import TimerEngine
from stopwatch_tui.lap_recorder import LapRecorder


class FakeClock:
    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock(now=1_000_000)


@pytest.fixture
def engine(clock):
    return TimerEngine(clock=clock)


@pytest.fixture
def recorder(engine):
    return LapRecorder(engine)

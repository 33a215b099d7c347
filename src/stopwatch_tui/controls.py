from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .timer_engine import TimerEngine
from .lap_recorder import LapRecorder

class Controls(BaseModel):
    '''
    Which operations the user may trigger right now.
    '''
    start: bool
    stop: bool
    reset: bool
    lap: bool
    clear_laps: bool

    model_config = ConfigDict(
        frozen=True,
    )

    @classmethod
    def of(cls, engine: TimerEngine, recorder: LapRecorder) -> Controls:
        return availableControls(
            engine.is_running, engine.has_started, recorder.count,
        )

def availableControls(
    is_running: bool, has_started: bool, lap_count: int,
) -> Controls:
    return Controls(
        start=not is_running,
        stop=is_running,
        reset=is_running or has_started,
        lap=is_running,
        clear_laps=lap_count > 0,
    )

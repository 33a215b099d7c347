from .UI import UI as StopwatchUI
from .timer_engine import TimerEngine, TimerEvent, monotonicMs
from .lap_recorder import Lap, LapRecorder
from .controls import Controls, availableControls
from .persistent import ThemeStore, ThemePreference
from .config import StopwatchConfig, initConfig

__all__ = [
    "StopwatchUI", "TimerEngine", "TimerEvent", "monotonicMs",
    "Lap", "LapRecorder", "Controls", "availableControls",
    "ThemeStore", "ThemePreference", "StopwatchConfig", "initConfig",
]

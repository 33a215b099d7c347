from .config import initConfig, initLogging
from .timer_engine import TimerEngine
from .lap_recorder import LapRecorder
from .persistent import ThemeStore
from .UI import UI

def main() -> None:
    config = initConfig()
    initLogging(config)
    engine = TimerEngine()
    UI(
        engine=engine,
        laps=LapRecorder(engine),
        theme_store=ThemeStore(config.settings_path),
        tick_ms=config.tick_ms,
    ).run()

if __name__ == '__main__':
    main()

import os
import logging
import typing as tp

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from textual.logging import TextualHandler

log = logging.getLogger(__name__)

LogLevel = tp.Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

class StopwatchConfig(BaseModel):
    tick_ms: int = Field(default=10, gt=0)  # re-render cadence only
    settings_path: str = '~/.stopwatch_tui.json'
    log_level: LogLevel = 'WARNING'

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def upperLogLevel(cls, v: tp.Any) -> tp.Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

ENV_KEYS = {
    'tick_ms': 'STOPWATCH_TICK_MS',
    'settings_path': 'STOPWATCH_SETTINGS_PATH',
    'log_level': 'STOPWATCH_LOG_LEVEL',
}

def initConfig(load_env_file: bool = True) -> StopwatchConfig:
    if load_env_file:
        dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))

    raw = {
        field: os.getenv(key)
        for field, key in ENV_KEYS.items()
        if os.getenv(key) is not None
    }
    return StopwatchConfig.model_validate(raw)

def initLogging(config: StopwatchConfig) -> None:
    '''
    Log records go to the textual devtools console
    (`textual console`), never onto the screen.
    '''
    logging.basicConfig(
        level=config.log_level,
        handlers=[TextualHandler()],
        force=True,
    )
    log.debug('%s', config)

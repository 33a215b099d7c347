from __future__ import annotations

import os
import json
import logging
import typing as tp

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)

ThemeName = tp.Literal['dark', 'light']

TEXTUAL_THEMES: dict[str, str] = {
    'dark':  'textual-dark',
    'light': 'textual-light',
}

class ThemePreference(BaseModel):
    theme: ThemeName = 'dark'

    model_config = ConfigDict(
        frozen=True,
    )

    def toggled(self) -> ThemePreference:
        return ThemePreference(
            theme='light' if self.theme == 'dark' else 'dark',
        )

    def textualTheme(self) -> str:
        return TEXTUAL_THEMES[self.theme]

class ThemeStore:
    '''
    Theme preference on disk. Only the theme survives a restart;
    elapsed time and laps never do.
    '''

    def __init__(self, /, path: str) -> None:
        self.path = os.path.expanduser(path)

    def load(self) -> ThemePreference:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw: dict = json.load(f)
        except FileNotFoundError:
            return ThemePreference()
        return ThemePreference.model_validate(raw)

    def save(self, pref: ThemePreference) -> None:
        os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(pref.model_dump(), f, indent=2)
        log.info('saved theme %r to %s', pref.theme, self.path)

    def toggle(self) -> ThemePreference:
        pref = self.load().toggled()
        self.save(pref)
        return pref

from __future__ import annotations

import typing as tp

from textual.widget import Widget

class TimeParts(tp.NamedTuple):
    h: str
    m: str
    s: str
    cs: str

def splitTime(ms: int) -> TimeParts:
    total_seconds = ms // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    centis = (ms % 1000) // 10  # 0..99
    return TimeParts(
        h=f'{hours:02d}',
        m=f'{minutes:02d}',
        s=f'{seconds:02d}',
        cs=f'{centis:02d}',
    )

def formatTime(ms: int) -> str:
    h, m, s, cs = splitTime(ms)
    return f'{h}:{m}:{s}.{cs}'

def formatDelta(ms: int) -> str:
    return '+' + formatTime(ms)

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w

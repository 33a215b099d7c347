from textual.reactive import reactive
from textual.widgets import DataTable

from .lap_recorder import Lap
from .shared import formatTime, formatDelta

class LapTable(DataTable):
    laps: reactive[tuple[Lap, ...]] = reactive((), init=False)

    def __init__(self, *args, **kw) -> None:
        super().__init__(*args, cursor_type='row', zebra_stripes=True, **kw)

    def on_mount(self) -> None:
        self.add_columns('#', 'Time', 'Delta')

    def watch_laps(self, _, new_laps: tuple[Lap, ...]) -> None:
        self.clear()
        for i, lap in enumerate(new_laps):
            self.add_row(
                f'#{i + 1}',
                formatTime(lap.total_ms),
                formatDelta(lap.delta_ms),
            )
        if new_laps:
            self.move_cursor(row=len(new_laps) - 1)

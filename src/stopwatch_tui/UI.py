from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.timer import Timer
from textual.widgets import Button, Digits, Footer, Header

from .shared import formatTime, titled
from .timer_engine import TimerEngine, TimerEvent
from .lap_recorder import LapRecorder
from .controls import Controls
from .lap_table import LapTable
from .persistent import ThemeStore, ThemePreference

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("space", "start_stop", "Start/Stop"),
        Binding("r", "reset_timer", "Reset"),
        Binding("l", "lap", "Lap"),
        Binding("c", "clear_laps", "Clear laps"),
        Binding("t", "flip_theme", "Theme"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        engine: TimerEngine,
        laps: LapRecorder,
        theme_store: ThemeStore,
        tick_ms: int = 10,
    ) -> None:
        '''
        `tick_ms`: how often the clock is redrawn while running.
        It has no say in how much time is counted.
        '''
        super().__init__()

        self.engine = engine
        self.laps = laps
        self.theme_store = theme_store
        self.tick_ms = tick_ms

        self.theme_pref: ThemePreference = theme_store.load()
        self.ticker: Timer | None = None

        self.title = "Stopwatch"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)

        with Container(id="clock-pane"):
            yield titled(Digits(formatTime(0), id="clock"), 'Elapsed', skip_bottom=False)
        with Horizontal(id="controls"):
            yield Button("Start", id="start-btn", variant="success")
            yield Button("Stop", id="stop-btn", variant="error")
            yield Button("Reset", id="reset-btn")
            yield Button("Lap", id="lap-btn", variant="primary")
            yield Button("Clear laps", id="clear-laps-btn")
            yield Button("Theme", id="theme-btn")
        yield titled(LapTable(id="lap-table"), 'Laps', skip_bottom=False)

        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.theme = self.theme_pref.textualTheme()
        self.ticker = self.set_interval(
            self.tick_ms / 1000, self.renderElapsed, pause=True,
        )
        self.engine.subscribe(self.onTimerEvent)
        if self.engine.is_running:
            self.ticker.resume()
        self.myUpdate()
        self.query_one("#lap-table", LapTable).focus()

    def onTimerEvent(self, event: TimerEvent) -> None:
        assert self.ticker is not None
        match event:
            case TimerEvent.STARTED:
                self.ticker.resume()
            case TimerEvent.STOPPED | TimerEvent.RESET:
                self.ticker.pause()
        self.myUpdate()

    def currentControls(self) -> Controls:
        return Controls.of(self.engine, self.laps)

    def action_start_stop(self) -> None:
        if self.engine.is_running:
            self.engine.stop()
        else:
            self.engine.start()

    @on(Button.Pressed, '#start-btn')
    def action_start(self) -> None:
        self.engine.start()

    @on(Button.Pressed, '#stop-btn')
    def action_stop(self) -> None:
        self.engine.stop()

    @on(Button.Pressed, '#reset-btn')
    def action_reset_timer(self) -> None:
        self.engine.reset()

    @on(Button.Pressed, '#lap-btn')
    def action_lap(self) -> None:
        if not self.currentControls().lap:
            return
        self.laps.lap()
        self.myUpdate()

    @on(Button.Pressed, '#clear-laps-btn')
    def action_clear_laps(self) -> None:
        if not self.currentControls().clear_laps:
            return
        self.laps.clear()
        self.myUpdate()

    @on(Button.Pressed, '#theme-btn')
    def action_flip_theme(self) -> None:
        self.theme_pref = self.theme_store.toggle()
        self.theme = self.theme_pref.textualTheme()

    def renderElapsed(self) -> None:
        clock: Digits = self.query_one('#clock', Digits)
        clock.update(formatTime(self.engine.elapsed()))

    def myUpdate(self) -> None:
        self.renderElapsed()
        controls = self.currentControls()
        for btn_id, allowed in (
            ('#start-btn', controls.start),
            ('#stop-btn', controls.stop),
            ('#reset-btn', controls.reset),
            ('#lap-btn', controls.lap),
            ('#clear-laps-btn', controls.clear_laps),
        ):
            self.query_one(btn_id, Button).disabled = not allowed
        lapTable: LapTable = self.query_one('#lap-table', LapTable)
        lapTable.laps = self.laps.all()

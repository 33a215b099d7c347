"""Drives the app headlessly through textual's pilot."""

import asyncio
import json

from textual.widgets import Button, Digits

from stopwatch_tui.UI import UI
from stopwatch_tui.lap_recorder import Lap, LapRecorder
from stopwatch_tui.lap_table import LapTable
from stopwatch_tui.persistent import ThemeStore, ThemePreference


def makeApp(engine, tmp_path) -> UI:
    return UI(
        engine=engine,
        laps=LapRecorder(engine),
        theme_store=ThemeStore(str(tmp_path / "settings.json")),
        tick_ms=10,
    )


def disabled(app: UI) -> dict[str, bool]:
    return {
        name: app.query_one(f"#{name}-btn", Button).disabled
        for name in ("start", "stop", "reset", "lap", "clear-laps")
    }


def test_initial_screen(engine, tmp_path):
    async def main():
        app = makeApp(engine, tmp_path)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            assert app.query_one("#clock", Digits).value == "00:00:00.00"
            assert disabled(app) == {
                "start": False, "stop": True, "reset": True,
                "lap": True, "clear-laps": True,
            }
            assert app.query_one(LapTable).row_count == 0
            assert app.theme == "textual-dark"
    asyncio.run(main())


def test_run_lap_stop_reset(engine, clock, tmp_path):
    async def main():
        app = makeApp(engine, tmp_path)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.press("space")
            assert engine.is_running
            assert disabled(app)["start"] and not disabled(app)["stop"]

            clock.advance(1500)
            await pilot.press("l")
            clock.advance(2200)
            await pilot.press("l")
            await pilot.pause()
            assert app.laps.all() == (
                Lap(total_ms=1500, delta_ms=1500),
                Lap(total_ms=3700, delta_ms=2200),
            )
            table = app.query_one(LapTable)
            assert table.row_count == 2
            assert [str(c) for c in table.get_row_at(1)] == [
                "#2", "00:00:03.70", "+00:00:02.20",
            ]

            await pilot.press("space")
            await pilot.pause()
            assert not engine.is_running
            assert engine.elapsed() == 3700
            assert app.query_one("#clock", Digits).value == "00:00:03.70"
            assert disabled(app) == {
                "start": False, "stop": True, "reset": False,
                "lap": True, "clear-laps": False,
            }

            # laps are blocked while stopped
            await pilot.press("l")
            assert len(app.laps) == 2

            await pilot.press("r")
            await pilot.pause()
            assert engine.elapsed() == 0
            assert app.laps.all() == ()
            assert table.row_count == 0
            assert app.query_one("#clock", Digits).value == "00:00:00.00"
            assert disabled(app)["reset"]
    asyncio.run(main())


def test_clear_laps_keeps_time(engine, clock, tmp_path):
    async def main():
        app = makeApp(engine, tmp_path)
        async with app.run_test(size=(100, 40)) as pilot:
            app.action_start()
            clock.advance(10)
            app.action_lap()
            await pilot.pause()
            assert not disabled(app)["clear-laps"]
            await pilot.press("c")
            await pilot.pause()
            assert len(app.laps) == 0
            assert disabled(app)["clear-laps"]
            assert engine.is_running
            assert engine.elapsed() == 10
    asyncio.run(main())


def test_ticker_redraws_while_running(engine, clock, tmp_path):
    async def main():
        app = makeApp(engine, tmp_path)
        async with app.run_test(size=(100, 40)) as pilot:
            app.action_start()
            clock.advance(61_230)
            await pilot.pause(0.1)
            assert app.query_one("#clock", Digits).value == "00:01:01.23"
            app.action_stop()
            clock.advance(5_000)
            await pilot.pause(0.1)
            assert app.query_one("#clock", Digits).value == "00:01:01.23"
    asyncio.run(main())


def test_theme_toggle_persists(engine, tmp_path):
    async def main():
        app = makeApp(engine, tmp_path)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.press("t")
            await pilot.pause()
            assert app.theme == "textual-light"
    asyncio.run(main())
    saved = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
    assert saved == {"theme": "light"}


def test_theme_restored(engine, tmp_path):
    ThemeStore(str(tmp_path / "settings.json")).save(ThemePreference(theme="light"))

    async def main():
        app = makeApp(engine, tmp_path)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            assert app.theme == "textual-light"
    asyncio.run(main())

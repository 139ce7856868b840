"""The terminal front end: reads keys and draws the editor."""

from __future__ import annotations

import curses
from typing import Any, Sequence

from vimlite.command import QuitRequested
from vimlite.keys import get_key_action
from vimlite.mode import Mode
from vimlite.state import EditorState


class Tui:
    """Draws an :class:`EditorState` on a curses window and feeds it keys."""

    def __init__(self, window: Any, command_window: Any | None = None) -> None:
        self.window = window
        if command_window is None:
            height, width = window.getmaxyx()
            beg_y, beg_x = window.getbegyx()
            command_window = curses.newwin(1, width, beg_y + height - 1, beg_x)
        self.command_window = command_window

        max_y, max_x = window.getmaxyx()
        self.state = EditorState(max_x=max_x, max_y=max_y)

        window.erase()
        self._draw(window, self.state.buffer.contents)
        self._move(0, 0)
        window.refresh()
        self.state.cursor_y, self.state.cursor_x = 0, 0

    @staticmethod
    def _draw(window: Any, text: str) -> None:
        if not text:
            return
        try:
            window.addstr(text)
        except curses.error:
            pass

    def _move(self, y: int, x: int) -> None:
        try:
            self.window.move(y, x)
        except curses.error:
            pass

    def run(self) -> None:
        """Read and handle keys until a quit is requested."""
        while True:
            ch = self.window.getch()
            if ch < 0:
                continue
            action, trigger = get_key_action(self.state.mode, ch)
            self.state.handle_action(action, trigger, ch)
            self.refresh()

    def refresh(self) -> None:
        """Redraw the screen if the state asks for it."""
        state = self.state
        if not state.must_refresh:
            return
        self.window.erase()
        self._draw(self.window, state.buffer.contents)
        self.window.refresh()
        if state.mode in (Mode.NORMAL, Mode.INSERT):
            self._move(state.cursor_y, state.cursor_x)

        self.command_window.erase()
        self._draw(
            self.command_window, state.command_view.line(state.mode is Mode.COMMAND)
        )
        self.command_window.refresh()
        state.must_refresh = False


def _run(stdscr: Any) -> None:
    Tui(stdscr).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the editor on the terminal."""
    try:
        curses.wrapper(_run)
    except QuitRequested:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
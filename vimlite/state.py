"""Editor state: buffer, cursor, mode and the effect of each action."""

from __future__ import annotations

from dataclasses import dataclass, field

from vimlite.buffer import Buffer, BufferError
from vimlite.command import (
    CommandType,
    UnknownCommandError,
    execute_quit_command,
    parse_command,
)
from vimlite.command_view import CommandView
from vimlite.keys import Action, ActionTrigger
from vimlite.mode import Mode

TAB_TEXT = "    "

_RECOVERABLE = (BufferError, UnknownCommandError)


def _as_char(ch: str | int) -> str:
    return ch if isinstance(ch, str) else chr(ch)


@dataclass
class EditorState:
    """Everything the editor knows between two key presses."""

    max_x: int
    max_y: int
    buffer: Buffer = field(default_factory=Buffer)
    attached_buffers: list[Buffer] = field(default_factory=list)
    cursor_x: int = 0
    cursor_y: int = 0
    mode: Mode = Mode.NORMAL
    command_view: CommandView = field(default_factory=CommandView)
    must_refresh: bool = False

    def __post_init__(self) -> None:
        if not any(buf is self.buffer for buf in self.attached_buffers):
            self.attached_buffers.append(self.buffer)

    # -- errors and commands -------------------------------------------------

    def write_error(self, err: BaseException | str) -> None:
        """Show ``err`` on the status line and fall back to normal mode."""
        self.command_view.set_status(f"Error: {err}")
        self.mode = Mode.NORMAL
        self.must_refresh = True

    def execute_command(self, cmd: CommandType) -> None:
        """Carry out ``cmd``; quitting raises :class:`QuitRequested`."""
        if cmd is CommandType.QUIT:
            execute_quit_command()

    # -- cursor positions ----------------------------------------------------

    def line_end_cursor_pos(self) -> tuple[int, int]:
        """Return ``(y, x)`` of the end of the cursor's line."""
        try:
            x = self.buffer.line_end_x(self.cursor_y)
        except BufferError as err:
            raise BufferError(f"get line end pos: {err}") from err
        return self.cursor_y, x

    def line_start_cursor_pos(self) -> tuple[int, int]:
        """Return ``(y, x)`` of the first non-tab column of the cursor's line."""
        try:
            x = self.buffer.line_start_x(self.cursor_y)
        except BufferError as err:
            raise BufferError(f"get line start pos: {err}") from err
        return self.cursor_y, x

    def prev_cursor_pos(self, warp_to_prev_line: bool) -> tuple[int, int]:
        """Return ``(y, x)`` one column to the left.

        At column 0 with ``warp_to_prev_line`` the cursor itself is moved to
        the end of the line above, if there is one.
        """
        if self.cursor_x - 1 < 0:
            if warp_to_prev_line:
                self.cursor_y -= 1
                try:
                    _, x = self.line_end_cursor_pos()
                except BufferError:
                    self.cursor_y += 1
                else:
                    self.cursor_x = x
            return self.cursor_y, self.cursor_x
        return self.cursor_y, self.cursor_x - 1

    def next_cursor_pos(self, must_tab: bool) -> tuple[int, int]:
        """Return ``(y, x)`` after typing a character or a tab."""
        inc = len(TAB_TEXT) if must_tab else 1
        if self.cursor_x + inc > self.max_x:
            return self.cursor_y + 1, 1
        return self.cursor_y, self.cursor_x + inc

    # -- motions -------------------------------------------------------------

    def move_cursor_left(self) -> None:
        """Move one column left, stopping at column 0."""
        if self.cursor_x - 1 < 0:
            return
        self.cursor_x -= 1

    def _clamp_to_line(self, undo_step: int) -> None:
        try:
            _, x_end = self.line_end_cursor_pos()
            _, x_start = self.line_start_cursor_pos()
        except BufferError:
            self.cursor_y += undo_step
            return
        self.cursor_x = max(min(self.cursor_x, x_end), x_start)

    def move_cursor_down(self) -> None:
        """Move one line down, keeping the column inside the new line."""
        if self.cursor_y + 1 > self.max_y:
            return
        self.cursor_y += 1
        self._clamp_to_line(-1)

    def move_cursor_up(self) -> None:
        """Move one line up, keeping the column inside the new line."""
        if self.cursor_y - 1 < 0:
            return
        self.cursor_y -= 1
        self._clamp_to_line(1)

    def move_cursor_right(self) -> None:
        """Move one column right, stopping on the last character."""
        try:
            _, x_end = self.line_end_cursor_pos()
        except BufferError:
            return
        if self.cursor_x + 1 >= x_end:
            return
        self.cursor_x += 1

    def move_cursor_next_word(self) -> None:
        """Move to the start of the next word."""
        try:
            x, y = self.buffer.next_word_pos(self.cursor_x, self.cursor_y)
        except BufferError as err:
            raise BufferError(f"move cursor next word: {err}") from err
        self.cursor_x, self.cursor_y = x, y

    def move_cursor_next_word_end(self) -> None:
        """Move to the end of the next word."""
        try:
            x, y = self.buffer.next_word_end_pos(self.cursor_x, self.cursor_y)
        except BufferError as err:
            raise BufferError(f"move cursor next word end: {err}") from err
        self.cursor_x, self.cursor_y = x, y

    # -- actions -------------------------------------------------------------

    def handle_action(
        self, action: Action, trigger: ActionTrigger, ch: str | int
    ) -> None:
        """Apply ``action`` for key ``ch``; errors go to the status line."""
        try:
            changed = self._apply(action, trigger, ch)
        except _RECOVERABLE as err:
            self.write_error(err)
            return
        if changed:
            self.must_refresh = True

    def _enter_insert_mode(self, trigger: ActionTrigger) -> None:
        self.mode = Mode.INSERT
        if trigger is ActionTrigger.APPEND:
            self.cursor_y, self.cursor_x = self.next_cursor_pos(False)
        elif trigger is ActionTrigger.LINE_END_APPEND:
            self.cursor_y, self.cursor_x = self.line_end_cursor_pos()
        elif trigger is ActionTrigger.LINE_START_INSERT:
            self.cursor_y, self.cursor_x = self.line_start_cursor_pos()
        elif trigger is ActionTrigger.NEXT_LINE_INSERT:
            y, x = self.line_end_cursor_pos()
            self.buffer.write_char("\n", x, y)
            self.cursor_x, self.cursor_y = 0, y + 1
        elif trigger is ActionTrigger.PREV_LINE_INSERT:
            y, x = self.line_start_cursor_pos()
            self.buffer.write_char("\n", x, y)
            self.cursor_x, self.cursor_y = 0, y
        self.command_view.set_status("-- INSERT --")

    def _apply(self, action: Action, trigger: ActionTrigger, ch: str | int) -> bool:
        motions = {
            Action.MOVE_CURSOR_LEFT: self.move_cursor_left,
            Action.MOVE_CURSOR_DOWN: self.move_cursor_down,
            Action.MOVE_CURSOR_UP: self.move_cursor_up,
            Action.MOVE_CURSOR_RIGHT: self.move_cursor_right,
            Action.MOVE_CURSOR_NEXT_WORD: self.move_cursor_next_word,
            Action.MOVE_CURSOR_NEXT_WORD_END: self.move_cursor_next_word_end,
        }

        if action is Action.NORMAL_MODE_CHANGE:
            self.mode = Mode.NORMAL
            self.cursor_y, self.cursor_x = self.prev_cursor_pos(False)
            self.command_view.clear()
        elif action is Action.COMMAND_MODE_CHANGE:
            self.mode = Mode.COMMAND
            self.command_view.clear()
        elif action is Action.INSERT_MODE_CHANGE:
            self._enter_insert_mode(trigger)
        elif action is Action.ERASE_LAST_FROM_COMMAND:
            if not self.command_view.erase_last():
                self.mode = Mode.NORMAL
        elif action is Action.EXECUTE_COMMAND:
            self.execute_command(parse_command(self.command_view.command))
        elif action is Action.GOTO_NEXT_LINE:
            self.buffer.write_char("\n", self.cursor_x, self.cursor_y)
            self.cursor_x = 0
            self.cursor_y += 1
        elif action in motions:
            motions[action]()
        elif action is Action.INSERT_BACKSPACE_CHAR:
            y, x = self.cursor_y, self.cursor_x
            self.cursor_y, self.cursor_x = self.prev_cursor_pos(True)
            self.buffer.delete_char(x, y)
        elif action is Action.UNKNOWN:
            if self.mode is Mode.COMMAND:
                self.command_view.append(_as_char(ch))
            elif self.mode is Mode.INSERT:
                must_tab = trigger is ActionTrigger.MUST_TAB
                text = TAB_TEXT if must_tab else _as_char(ch)
                for c in text:
                    self.buffer.write_char(c, self.cursor_x, self.cursor_y)
                self.cursor_y, self.cursor_x = self.next_cursor_pos(must_tab)
            else:
                return False
        return True
"""Mapping of key presses to editor actions."""

from __future__ import annotations

from enum import Enum, auto

from vimlite.mode import Mode

KEY_BACKSPACE = 263
DELETE = 127
ESCAPE = 27


class Action(Enum):
    """What a key press asks the editor to do."""

    INSERT_MODE_CHANGE = auto()
    NORMAL_MODE_CHANGE = auto()
    VISUAL_MODE_CHANGE = auto()
    COMMAND_MODE_CHANGE = auto()

    MOVE_CURSOR_LEFT = auto()
    MOVE_CURSOR_DOWN = auto()
    MOVE_CURSOR_UP = auto()
    MOVE_CURSOR_RIGHT = auto()
    MOVE_CURSOR_NEXT_WORD = auto()
    MOVE_CURSOR_NEXT_WORD_END = auto()

    ERASE_LAST_FROM_COMMAND = auto()
    EXECUTE_COMMAND = auto()

    INSERT_BACKSPACE_CHAR = auto()

    GOTO_NEXT_LINE = auto()

    UNKNOWN = auto()


class ActionTrigger(Enum):
    """A modifier telling how an action is to be carried out."""

    APPEND = auto()
    LINE_END_APPEND = auto()
    LINE_START_INSERT = auto()
    NEXT_LINE_INSERT = auto()
    PREV_LINE_INSERT = auto()
    MUST_TAB = auto()
    NONE = auto()


_UNKNOWN = (Action.UNKNOWN, ActionTrigger.NONE)

_NORMAL_KEYS: dict[int, tuple[Action, ActionTrigger]] = {
    ord(key): value
    for key, value in {
        ":": (Action.COMMAND_MODE_CHANGE, ActionTrigger.NONE),
        "i": (Action.INSERT_MODE_CHANGE, ActionTrigger.NONE),
        "I": (Action.INSERT_MODE_CHANGE, ActionTrigger.LINE_START_INSERT),
        "v": (Action.VISUAL_MODE_CHANGE, ActionTrigger.NONE),
        "a": (Action.INSERT_MODE_CHANGE, ActionTrigger.APPEND),
        "A": (Action.INSERT_MODE_CHANGE, ActionTrigger.LINE_END_APPEND),
        "o": (Action.INSERT_MODE_CHANGE, ActionTrigger.NEXT_LINE_INSERT),
        "O": (Action.INSERT_MODE_CHANGE, ActionTrigger.PREV_LINE_INSERT),
        "h": (Action.MOVE_CURSOR_LEFT, ActionTrigger.NONE),
        "j": (Action.MOVE_CURSOR_DOWN, ActionTrigger.NONE),
        "k": (Action.MOVE_CURSOR_UP, ActionTrigger.NONE),
        "l": (Action.MOVE_CURSOR_RIGHT, ActionTrigger.NONE),
        "w": (Action.MOVE_CURSOR_NEXT_WORD, ActionTrigger.NONE),
        "e": (Action.MOVE_CURSOR_NEXT_WORD_END, ActionTrigger.NONE),
    }.items()
}


def _key_code(ch: str | int) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return int(ch)


def get_key_action(current_mode: Mode, ch: str | int) -> tuple[Action, ActionTrigger]:
    """Return the action and trigger for key ``ch`` pressed in ``current_mode``.

    ``ch`` is either a one-character string or a curses key code.
    """
    code = _key_code(ch)

    if current_mode is Mode.NORMAL:
        return _NORMAL_KEYS.get(code, _UNKNOWN)

    if code == ord("\n"):
        if current_mode is Mode.COMMAND:
            return Action.EXECUTE_COMMAND, ActionTrigger.NONE
        if current_mode is Mode.INSERT:
            return Action.GOTO_NEXT_LINE, ActionTrigger.NONE
    elif code == ord("\t"):
        if current_mode is Mode.INSERT:
            return Action.UNKNOWN, ActionTrigger.MUST_TAB
    elif code in (KEY_BACKSPACE, DELETE):
        if current_mode is Mode.COMMAND:
            return Action.ERASE_LAST_FROM_COMMAND, ActionTrigger.NONE
        if current_mode is Mode.INSERT:
            return Action.INSERT_BACKSPACE_CHAR, ActionTrigger.NONE
    elif code == ESCAPE:
        if current_mode in (Mode.COMMAND, Mode.INSERT):
            return Action.NORMAL_MODE_CHANGE, ActionTrigger.NONE

    return _UNKNOWN
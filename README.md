# vimlite

A small modal text editor for the terminal. It edits a single in-memory
buffer with a handful of vi-style keys. It uses the standard `curses`
module, so it runs where Python ships with curses (Linux, macOS and other
POSIX systems).

## Running

Install the package, then start the editor:

    vimlite

The same entry point can be started with `python -m vimlite.tui`.

## Modes and keys

The editor starts in normal mode with an empty buffer.

Normal mode:

- `h` `j` `k` `l` move the cursor left, down, up and right
- `w` moves to the start of the next word, `e` to the end of the next word
  (a word is a run of letters and digits)
- `i` inserts at the cursor, `a` inserts one column after it
- `I` inserts at the first non-tab column of the line, `A` at its end
- `o` opens a new line below the cursor's line, `O` opens one above it
- `:` enters command mode

Insert mode:

- typed characters go into the buffer at the cursor
- `Enter` splits the line at the cursor
- `Backspace` deletes the character before the cursor; at the start of a
  line it joins the line onto the one above
- `Tab` inserts four spaces
- `Esc` returns to normal mode, moving the cursor one column left

While in insert mode the bottom line shows `-- INSERT --`.

Command mode:

- typed characters build the command, shown as `:command` on the bottom line
- `Enter` runs it; `Backspace` removes the last character, and on an empty
  command returns to normal mode; `Esc` cancels
- `:q` quits the editor

An unknown command shows `Error: unrecognized command` on the bottom line
and returns to normal mode.

## Library use

The editing core works without a terminal:

- `vimlite.buffer.Buffer` holds the text and offers `write_char`,
  `delete_char`, `line_start_x`, `line_end_x`, `next_word_pos` and
  `next_word_end_pos`; positions outside the buffer raise
  `vimlite.buffer.BufferError`.
- `vimlite.keys.get_key_action(mode, ch)` maps a key (a one-character
  string or a curses key code) pressed in a `vimlite.mode.Mode` to an
  `(Action, ActionTrigger)` pair.
- `vimlite.state.EditorState.handle_action(action, trigger, ch)` applies
  that action to the cursor, the buffer and the command line held in a
  `vimlite.command_view.CommandView`; buffer and command errors are shown
  on the status line rather than raised.
- `vimlite.command.parse_command` turns command text into a `CommandType`,
  raising `UnknownCommandError` for anything else; running the quit command
  raises `QuitRequested`, a `SystemExit` with status 0.
- `vimlite.tui.Tui` draws an `EditorState` on a curses window and feeds it
  keys.

## What it does not do

- There is no way to open or save a file: the buffer lives in memory only
  and is lost on `:q`.
- `q` is the only command.
- The `v` key is recognised in normal mode but visual mode is not
  implemented; pressing it changes nothing.
- There is no undo, search, yank or paste, and no command-line options.

## Tests

    pip install -e ".[test]"
    pytest
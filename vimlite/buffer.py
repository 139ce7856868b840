"""A text buffer addressed by column and line."""

from __future__ import annotations

from dataclasses import dataclass


class BufferError(Exception):
    """Raised when a position lies outside the buffer."""


def _is_word(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal()


def _internal_error() -> BufferError:
    return BufferError("internal error")


@dataclass
class Buffer:
    """Text held as one string, with lines separated by newlines."""

    contents: str = ""

    def _lines(self) -> list[str]:
        return self.contents.split("\n")

    def _line(self, lines: list[str], y: int) -> str:
        if not 0 <= y < len(lines):
            raise _internal_error()
        return lines[y]

    def write_char(self, ch: str, x: int, y: int) -> None:
        """Insert ``ch`` before column ``x`` of line ``y``."""
        lines = self._lines()
        line = self._line(lines, y)
        if not 0 <= x <= len(line):
            raise _internal_error()
        lines[y] = line[:x] + ch + line[x:]
        self.contents = "\n".join(lines)

    def delete_char(self, x: int, y: int) -> None:
        """Delete the character before column ``x`` of line ``y``.

        At column 0 the line is joined onto the one above it; on the first
        line nothing happens.
        """
        if not self.contents:
            return
        lines = self._lines()
        line = self._line(lines, y)
        if not 0 <= x <= len(line):
            raise _internal_error()
        if x == 0:
            if y >= 1:
                lines[y - 1] += line
                del lines[y]
        else:
            lines[y] = line[: x - 1] + line[x:]
        self.contents = "\n".join(lines)

    def line_end_x(self, y: int) -> int:
        """Return the length of line ``y``."""
        return len(self._line(self._lines(), y))

    def line_start_x(self, y: int) -> int:
        """Return the column of the first non-tab character of line ``y``.

        An empty line gives 0; a line of tabs only gives its last column.
        """
        line = self._line(self._lines(), y)
        idx = 0
        for idx, ch in enumerate(line):
            if ch != "\t":
                break
        return idx

    def next_word_pos(self, x: int, y: int) -> tuple[int, int]:
        """Return ``(x, y)`` of the start of the next word after ``(x, y)``.

        Moving past the last word of a line lands on the start of the next
        line; with no next line the position is returned unchanged.
        """
        lines = self._lines()
        line = self._line(lines, y)
        if x < 0:
            raise _internal_error()
        n = len(line)
        i = x
        while i < n and not _is_word(line[i]):
            i += 1
        while i < n and _is_word(line[i]):
            i += 1
        while i < n and not _is_word(line[i]):
            i += 1
        if i < n:
            return i, y
        if y + 1 < len(lines):
            return self.line_start_x(y + 1), y + 1
        return x, y

    def next_word_end_pos(self, x: int, y: int) -> tuple[int, int]:
        """Return ``(x, y)`` of the end of the next word after ``(x, y)``.

        With no word left, the last column of the last line is returned,
        which is -1 when that line is empty.
        """
        lines = self._lines()
        self._line(lines, y)
        if x < 0:
            raise _internal_error()

        for line_idx in range(y, len(lines)):
            line = lines[line_idx]
            start_x = x if line_idx == y else self.line_start_x(line_idx)
            i = start_x
            n = len(line)

            if i < n and _is_word(line[i]):
                while i < n and _is_word(line[i]):
                    i += 1
                if i - 1 != start_x:
                    return i - 1, line_idx
                i += 1

            while i < n and not _is_word(line[i]):
                i += 1
            start = i
            while i < n and _is_word(line[i]):
                i += 1
            if start < i:
                return i - 1, line_idx

        last_line = len(lines) - 1
        last_len = len(lines[last_line])
        if last_len == 0:
            return -1, last_line
        return last_len - 1, last_line
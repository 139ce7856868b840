import pytest

from vimlite.buffer import Buffer, BufferError


def test_default_buffer_is_empty():
    assert Buffer().contents == ""


def test_write_into_empty_buffer():
    buf = Buffer()
    buf.write_char("a", 0, 0)
    assert buf.contents == "a"


def test_write_in_middle_of_line():
    buf = Buffer("ac")
    buf.write_char("b", 1, 0)
    assert buf.contents == "abc"


def test_write_appends_at_line_end():
    text = "abc"
    buf = Buffer(text)
    buf.write_char("d", len(text), 0)
    assert buf.contents == text + "d"


def test_write_newline_splits_line():
    buf = Buffer("abcd")
    buf.write_char("\n", 2, 0)
    assert buf.line_end_x(0) == 2
    assert buf.line_end_x(1) == 2
    assert buf.contents.replace("\n", "") == "abcd"


def test_write_on_second_line_keeps_first():
    buf = Buffer("ab\ncd")
    buf.write_char("x", 0, 1)
    assert buf.contents.split("\n")[0] == "ab"
    assert buf.contents.split("\n")[1] == "x" + "cd"


@pytest.mark.parametrize("x, y", [(0, 1), (4, 0), (-1, 0), (0, -1)])
def test_write_out_of_range_raises(x, y):
    buf = Buffer("abc")
    with pytest.raises(BufferError, match="internal error"):
        buf.write_char("z", x, y)


@pytest.mark.parametrize(
    "text, x, y",
    [("abc", 0, 0), ("abc", 1, 0), ("abc", 3, 0), ("ab\ncd", 1, 1), ("a\n\nb", 0, 1)],
)
def test_write_then_delete_restores(text, x, y):
    buf = Buffer(text)
    buf.write_char("z", x, y)
    buf.delete_char(x + 1, y)
    assert buf.contents == text


@pytest.mark.parametrize("text, x, y", [("abcd", 2, 0), ("ab\ncd", 1, 1), ("ab\ncd", 0, 1)])
def test_newline_then_delete_at_line_start_rejoins(text, x, y):
    buf = Buffer(text)
    buf.write_char("\n", x, y)
    buf.delete_char(0, y + 1)
    assert buf.contents == text


def test_delete_on_empty_buffer_is_noop():
    buf = Buffer()
    buf.delete_char(5, 5)
    assert buf.contents == ""


def test_delete_at_start_of_first_line_is_noop():
    buf = Buffer("abc")
    buf.delete_char(0, 0)
    assert buf.contents == "abc"


def test_delete_last_character_shortens_line():
    text = "abc"
    buf = Buffer(text)
    buf.delete_char(len(text), 0)
    assert buf.contents == text[:-1]


@pytest.mark.parametrize("x, y", [(0, 1), (4, 0)])
def test_delete_out_of_range_raises(x, y):
    with pytest.raises(BufferError):
        Buffer("abc").delete_char(x, y)


def test_line_end_x_is_line_length():
    lines = ["ab", "cdef", ""]
    buf = Buffer("\n".join(lines))
    assert [buf.line_end_x(y) for y in range(len(lines))] == [len(line) for line in lines]


@pytest.mark.parametrize("y", [-1, 1])
def test_line_end_x_out_of_range_raises(y):
    with pytest.raises(BufferError):
        Buffer("abc").line_end_x(y)


def test_line_start_x_skips_tabs():
    line = "\t\tabc"
    assert Buffer(line).line_start_x(0) == line.index("a")


def test_line_start_x_of_plain_line():
    assert Buffer("abc").line_start_x(0) == 0


def test_line_start_x_of_tabs_only_line_is_last_column():
    line = "\t\t\t"
    assert Buffer(line).line_start_x(0) == len(line) - 1


def test_line_start_x_out_of_range_raises():
    with pytest.raises(BufferError):
        Buffer("abc").line_start_x(1)


@pytest.mark.parametrize("text", ["foo bar", "foo, bar", "foo  !! bar"])
@pytest.mark.parametrize("x", [0, 1, 2])
def test_next_word_pos_on_same_line(text, x):
    assert Buffer(text).next_word_pos(x, 0) == (text.index("bar"), 0)


def test_next_word_pos_moves_to_next_line_start():
    second = "\tbar"
    buf = Buffer("foo\n" + second)
    assert buf.next_word_pos(0, 0) == (second.index("b"), 1)


def test_next_word_pos_without_next_word_stays():
    assert Buffer("foo").next_word_pos(1, 0) == (1, 0)


@pytest.mark.parametrize("x, y", [(0, 1), (0, -1), (-1, 0)])
def test_next_word_pos_invalid_raises(x, y):
    with pytest.raises(BufferError):
        Buffer("foo").next_word_pos(x, y)


def test_next_word_end_pos_from_word_start():
    word = "foo"
    assert Buffer(word + " bar").next_word_end_pos(0, 0) == (len(word) - 1, 0)


def test_next_word_end_pos_from_word_end_goes_to_next_word():
    text = "foo bar"
    assert Buffer(text).next_word_end_pos(text.index("o", 2), 0) == (len(text) - 1, 0)


def test_next_word_end_pos_crosses_lines():
    second = "bar"
    buf = Buffer("foo\n" + second)
    assert buf.next_word_end_pos(2, 0) == (len(second) - 1, 1)


def test_next_word_end_pos_without_more_words_goes_to_last_column():
    text = "foo "
    assert Buffer(text).next_word_end_pos(2, 0) == (len(text) - 1, 0)


def test_next_word_end_pos_with_empty_last_line():
    assert Buffer("foo\n").next_word_end_pos(2, 0) == (-1, 1)


@pytest.mark.parametrize("x, y", [(0, 1), (0, -1), (-1, 0)])
def test_next_word_end_pos_invalid_raises(x, y):
    with pytest.raises(BufferError):
        Buffer("foo").next_word_end_pos(x, y)
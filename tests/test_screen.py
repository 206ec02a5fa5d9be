import io

import pytest

from mazeclick.core import Color, CursorType
from mazeclick.screen import Character, ScreenBuffer


def make_buffer(width=4, height=2):
    stream = io.StringIO()
    return ScreenBuffer(width, height, stream), stream


def test_new_buffer_hides_cursor():
    buffer, stream = make_buffer()
    assert buffer.cursor_visible is False
    assert "\x1b[?25l" in stream.getvalue()


def test_new_buffer_is_blank():
    buffer, _ = make_buffer(3, 2)
    assert len(buffer.contents) == 6
    assert all(cell.image == " " for cell in buffer.contents)


@pytest.mark.parametrize(
    "cursor_type, size, visible",
    [
        (CursorType.NO_CURSOR, 1, False),
        (CursorType.SOLID_CURSOR, 100, True),
        (CursorType.NORMAL_CURSOR, 20, True),
    ],
)
def test_set_cursor_type(cursor_type, size, visible):
    buffer, _ = make_buffer()
    buffer.set_cursor_type(cursor_type)
    assert (buffer.cursor_size, buffer.cursor_visible) == (size, visible)


def test_show_cursor_written_for_visible_cursor():
    buffer, stream = make_buffer()
    buffer.set_cursor_type(CursorType.SOLID_CURSOR)
    assert stream.getvalue().endswith("\x1b[?25h\x1b[2 q")


def test_draw_rejects_wrong_size():
    buffer, _ = make_buffer(4, 2)
    with pytest.raises(ValueError):
        buffer.draw([Character()] * 3)


def test_draw_writes_characters_in_rows():
    buffer, stream = make_buffer(2, 2)
    cells = [Character("a"), Character("b"), Character("c"), Character("d")]
    buffer.draw(cells)
    output = stream.getvalue()
    assert "ab\r\ncd" in output
    assert buffer.contents == tuple(cells)


def test_draw_emits_colour_escape_once_per_run():
    buffer, stream = make_buffer(2, 1)
    stream.truncate(0)
    stream.seek(0)
    buffer.draw([Character("x", Color.RED), Character("y", Color.RED)])
    output = stream.getvalue()
    assert output.count("\x1b[31m") == 1
    assert "xy" in output


def test_clear_blanks_contents():
    buffer, _ = make_buffer(2, 1)
    buffer.draw([Character("q"), Character("r")])
    buffer.clear()
    assert all(cell == Character() for cell in buffer.contents)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        ScreenBuffer(0, 3, io.StringIO())
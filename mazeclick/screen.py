"""Terminal screen buffer that writes character cells with ANSI colours."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from .core import Color, CursorType

__all__ = ["Character", "ScreenBuffer"]

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
CLEAR_SCREEN = "\x1b[2J"
RESET = "\x1b[0m"

# (cursor size in percent of a cell, visible)
_CURSOR_SHAPES = {
    CursorType.NO_CURSOR: (1, False),
    CursorType.SOLID_CURSOR: (100, True),
    CursorType.NORMAL_CURSOR: (20, True),
}

_SHAPE_ESCAPES = {
    CursorType.NO_CURSOR: HIDE_CURSOR,
    CursorType.SOLID_CURSOR: SHOW_CURSOR + "\x1b[2 q",
    CursorType.NORMAL_CURSOR: SHOW_CURSOR + "\x1b[4 q",
}


@dataclass(frozen=True)
class Character:
    """One screen cell: a character and its colour (None for no colour)."""

    image: str = " "
    color: Optional[Color] = None


def _ansi_color(color: Optional[Color]) -> str:
    if color is None:
        return RESET
    value = int(color)
    code = 30
    if value & Color.RED:
        code += 1
    if value & Color.GREEN:
        code += 2
    if value & Color.BLUE:
        code += 4
    return f"\x1b[{code}m"


def _blank(count: int) -> tuple[Character, ...]:
    return (Character(),) * count


class ScreenBuffer:
    """A fixed-size grid of cells drawn to a text stream."""

    def __init__(self, width: int, height: int, stream: Optional[TextIO] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen buffer size must be positive")
        self.width = width
        self.height = height
        self.stream = stream if stream is not None else sys.stdout
        self.cursor_size, self.cursor_visible = _CURSOR_SHAPES[CursorType.NO_CURSOR]
        self.contents = _blank(width * height)
        self._write(HIDE_CURSOR)

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def set_cursor_type(self, cursor_type: CursorType) -> None:
        """Change the cursor's visibility and shape."""
        self.cursor_size, self.cursor_visible = _CURSOR_SHAPES[cursor_type]
        self._write(_SHAPE_ESCAPES[cursor_type])

    def clear(self) -> None:
        """Blank every cell and clear the terminal."""
        self.contents = _blank(self.width * self.height)
        self._write(CURSOR_HOME + CLEAR_SCREEN)

    def draw(self, cells: Iterable[Character]) -> None:
        """Write a full frame of width * height cells, row by row."""
        cells = tuple(cells)
        if len(cells) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} cells, got {len(cells)}"
            )
        self.contents = cells
        parts = [CURSOR_HOME]
        current: object = object()
        for start in range(0, len(cells), self.width):
            if start:
                parts.append("\r\n")
            for cell in cells[start:start + self.width]:
                if cell.color != current:
                    parts.append(_ansi_color(cell.color))
                    current = cell.color
                parts.append(cell.image)
        parts.append(RESET)
        self._write("".join(parts))
"""Command-line entry point: play the maze click demo in a terminal."""

from __future__ import annotations

import argparse
import curses
import random
import sys
from collections import deque
from typing import Optional, Sequence

from .core import Key
from .engine import Engine, InputEvent, KeyEvent, MouseEvent
from .game_level import GameLevel
from .maze import DEFAULT_MAP_PATH
from .screen import RESET, SHOW_CURSOR
from .vector import Vector2

__all__ = ["TerminalInput", "main"]

_KEY_MAP = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_PPAGE: Key.PRIOR,
    curses.KEY_NPAGE: Key.NEXT,
    curses.KEY_IC: Key.INSERT,
    curses.KEY_DC: Key.DELETE,
    curses.KEY_BACKSPACE: Key.BACK,
    curses.KEY_ENTER: Key.RETURN,
    27: Key.ESCAPE,
    9: Key.TAB,
    10: Key.RETURN,
    13: Key.RETURN,
    127: Key.BACK,
    ord(" "): Key.SPACE,
}

_LEFT_BUTTON = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED | curses.BUTTON1_DOUBLE_CLICKED
_RIGHT_BUTTON = curses.BUTTON3_PRESSED | curses.BUTTON3_CLICKED | curses.BUTTON3_DOUBLE_CLICKED


def _key_code(code: int) -> Optional[int]:
    if code in _KEY_MAP:
        return int(_KEY_MAP[code])
    if 0 <= code < 128:
        char = chr(code)
        if char.isdigit() or char.isalpha():
            # Letter and digit key codes are their upper-case ASCII values.
            return ord(char.upper())
    return None


class TerminalInput:
    """Input source reading keys and mouse clicks from a curses window.

    A terminal reports presses only, so every press is followed on the
    next call by the matching release.
    """

    def __init__(self, window) -> None:
        self.window = window
        self._pending: deque[InputEvent] = deque()

    def __call__(self) -> Optional[InputEvent]:
        if self._pending:
            return self._pending.popleft()
        code = self.window.getch()
        if code == -1:
            return None
        if code == curses.KEY_MOUSE:
            return self._mouse_event()
        key = _key_code(code)
        if key is None:
            return None
        self._pending.append(KeyEvent(key, False))
        return KeyEvent(key, True)

    def _mouse_event(self) -> Optional[InputEvent]:
        try:
            _, x, y, _, state = curses.getmouse()
        except curses.error:
            return None
        position = Vector2(x, y)
        left = bool(state & _LEFT_BUTTON)
        right = bool(state & _RIGHT_BUTTON)
        if left or right:
            self._pending.append(MouseEvent(position))
        return MouseEvent(position, left, right)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mazeclick",
        description="Click in a random maze to move the player (right) or the goal (left); "
        "space walks the route, arrows move the view, tab jumps, escape quits.",
    )
    parser.add_argument("--width", type=int, default=200, help="maze width")
    parser.add_argument("--height", type=int, default=200, help="maze height")
    parser.add_argument("--screen-width", type=int, default=40, help="view width")
    parser.add_argument("--screen-height", type=int, default=25, help="view height")
    parser.add_argument("--fps", type=float, default=60.0, help="target frame rate")
    parser.add_argument("--seed", type=int, default=None, help="maze random seed")
    parser.add_argument("--map-path", default=DEFAULT_MAP_PATH, help="where to save the maze")
    parser.add_argument("--no-save", action="store_true", help="do not save the maze")
    args = parser.parse_args(argv)

    if args.width < 2 or args.height < 2:
        parser.error("maze must be at least 2 by 2")
    if args.screen_width < 1 or args.screen_height < 1:
        parser.error("view size must be positive")
    if args.fps <= 0:
        parser.error("frame rate must be positive")
    if args.no_save:
        args.map_path = None
    return args


def _play(window, args: argparse.Namespace) -> None:
    window.nodelay(True)
    window.keypad(True)
    curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
    curses.mouseinterval(0)

    engine = Engine(args.screen_width, args.screen_height, sys.stdout, TerminalInput(window))
    engine.set_target_frame_rate(args.fps)
    engine.load_level(GameLevel(args.width, args.height, random.Random(args.seed), args.map_path))
    engine.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo until escape is pressed."""
    args = _parse_args(argv)
    try:
        curses.wrapper(_play, args)
    finally:
        sys.stdout.write(RESET + SHOW_CURSOR)
        sys.stdout.flush()
    return 0
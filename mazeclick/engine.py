"""Game loop, input state and frame composition."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional, TextIO, Union

from .actor import Actor
from .core import Color, CursorType, Key
from .level import Level
from .screen import Character, ScreenBuffer
from .vector import Vector2

__all__ = ["KeyState", "KeyEvent", "MouseEvent", "Engine"]

KEY_COUNT = 255


@dataclass
class KeyState:
    """Pressed state of one key in this frame and the previous one."""

    is_key_down: bool = False
    was_key_down: bool = False


@dataclass(frozen=True)
class KeyEvent:
    """A key was pressed or released."""

    key_code: int
    key_down: bool


@dataclass(frozen=True)
class MouseEvent:
    """The mouse moved or its buttons changed."""

    position: Vector2
    left_button: bool = False
    right_button: bool = False


InputEvent = Union[KeyEvent, MouseEvent]
InputSource = Callable[[], Optional[InputEvent]]


class Engine:
    """Runs the frame loop for one level and owns input and screen state.

    The most recently created engine is reachable through Engine.get().
    """

    _instance: ClassVar[Optional["Engine"]] = None

    def __init__(
        self,
        width: int = 40,
        height: int = 25,
        stream: Optional[TextIO] = None,
        input_source: Optional[InputSource] = None,
    ) -> None:
        Engine._instance = self
        self.quit = False
        self.main_level: Optional[Level] = None
        self.screen_size = Vector2(width, height)
        self.mouse_position = Vector2()
        self.input_source = input_source
        self.key_state = [KeyState() for _ in range(KEY_COUNT)]
        self.target_frame_rate = 60.0
        self.target_one_frame_time = 0.0
        self.set_target_frame_rate(60.0)
        self.image_buffer: list[Character] = []
        self.clear()
        self.render_targets = (
            ScreenBuffer(width, height, stream),
            ScreenBuffer(width, height, stream),
        )
        self.current_render_target_index = 0
        self.active_buffer: Optional[ScreenBuffer] = None
        self.present()

    @classmethod
    def get(cls) -> "Engine":
        """Return the current engine."""
        if cls._instance is None:
            raise RuntimeError("no engine has been created")
        return cls._instance

    @property
    def renderer(self) -> ScreenBuffer:
        """The screen buffer the next frame is drawn into."""
        return self.render_targets[self.current_render_target_index]

    def run(self) -> None:
        """Run frames at the target rate until quit_game is called."""
        previous = time.perf_counter()
        try:
            while not self.quit:
                current = time.perf_counter()
                delta_time = current - previous
                if delta_time < self.target_one_frame_time:
                    time.sleep(self.target_one_frame_time - delta_time)
                    continue
                self.process_input()
                self.update(delta_time)
                self.render()
                self.save_previous_key_states()
                previous = current
                if self.main_level is not None:
                    self.main_level.process_added_and_destroyed_actors()
        except KeyboardInterrupt:
            self.quit = True

    def load_level(self, level: Level) -> None:
        """Make level the one that is updated and drawn."""
        self.main_level = level

    def add_actor(self, actor: Actor) -> None:
        """Queue an actor into the current level, if there is one."""
        if self.main_level is None:
            return
        self.main_level.add_actor(actor)

    def destroy_actor(self, actor: Actor) -> None:
        """Mark an actor for removal, if there is a level."""
        if self.main_level is None:
            return
        actor.destroy()

    def set_cursor_type(self, cursor_type: CursorType) -> None:
        """Change the cursor of the current screen buffer."""
        self.renderer.set_cursor_type(cursor_type)

    def draw_text(self, position: Vector2, image: str, color: Color = Color.WHITE) -> None:
        """Write image into the frame at a screen position.

        Characters run on linearly through the buffer; those that land
        outside it are dropped.
        """
        size = len(self.image_buffer)
        start = position.y * self.screen_size.x + position.x
        for offset, char in enumerate(image):
            index = start + offset
            if 0 <= index < size:
                self.image_buffer[index] = Character(char, color)

    def set_target_frame_rate(self, target_frame_rate: float) -> None:
        """Set how many frames per second the loop aims for."""
        if target_frame_rate <= 0:
            raise ValueError("target frame rate must be positive")
        self.target_frame_rate = target_frame_rate
        self.target_one_frame_time = 1.0 / target_frame_rate

    def get_key(self, key: int) -> bool:
        """True while the key is held."""
        return self.key_state[int(key)].is_key_down

    def get_key_down(self, key: int) -> bool:
        """True on the frame the key was pressed."""
        state = self.key_state[int(key)]
        return state.is_key_down and not state.was_key_down

    def get_key_up(self, key: int) -> bool:
        """True on the frame the key was released."""
        state = self.key_state[int(key)]
        return not state.is_key_down and state.was_key_down

    def quit_game(self) -> None:
        """Stop the loop after the current frame."""
        self.quit = True

    def process_event(self, event: InputEvent) -> None:
        """Apply one input event to the key and mouse state."""
        if isinstance(event, KeyEvent):
            self.key_state[event.key_code].is_key_down = event.key_down
        elif isinstance(event, MouseEvent):
            self.mouse_position = event.position
            self.key_state[Key.LBUTTON].is_key_down = event.left_button
            self.key_state[Key.RBUTTON].is_key_down = event.right_button

    def process_input(self) -> None:
        """Read at most one pending event from the input source."""
        if self.input_source is None:
            return
        event = self.input_source()
        if event is not None:
            self.process_event(event)

    def update(self, delta_time: float) -> None:
        """Update the current level."""
        if self.main_level is not None:
            self.main_level.update(delta_time)

    def clear(self) -> None:
        """Blank the frame being composed."""
        self.image_buffer = [Character()] * (self.screen_size.x * self.screen_size.y)

    def render(self) -> None:
        """Compose the level into a fresh frame, draw it and swap buffers."""
        self.clear()
        if self.main_level is not None:
            self.main_level.draw()
        self.renderer.draw(self.image_buffer)
        self.present()

    def present(self) -> None:
        """Show the current buffer and switch drawing to the other one."""
        self.active_buffer = self.renderer
        self.current_render_target_index = 1 - self.current_render_target_index

    def save_previous_key_states(self) -> None:
        """Remember this frame's key states for edge detection."""
        for state in self.key_state:
            state.was_key_down = state.is_key_down

    def frame_text(self) -> str:
        """The composed frame as plain text, one line per row."""
        width = self.screen_size.x
        chars = [cell.image for cell in self.image_buffer]
        return "\n".join(
            "".join(chars[start:start + width]) for start in range(0, len(chars), width)
        )
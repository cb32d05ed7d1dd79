"""Keyboard and mouse state tracking driven by input events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Hashable, Optional, Union


class MouseButton(enum.IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


@dataclass(frozen=True)
class KeyEvent:
    """A key went down (``down=True``) or up."""

    key: Hashable
    down: bool


@dataclass(frozen=True)
class MouseButtonEvent:
    """A mouse button went down (``down=True``) or up."""

    button: MouseButton
    down: bool


@dataclass(frozen=True)
class MouseMotionEvent:
    """The cursor moved to (x, y), by (xrel, yrel) since the last motion."""

    x: float
    y: float
    xrel: float
    yrel: float


@dataclass(frozen=True)
class MouseWheelEvent:
    x: float
    y: float


InputEvent = Union[KeyEvent, MouseButtonEvent, MouseMotionEvent, MouseWheelEvent]


class Keyboard:
    """Current and previous-frame key states."""

    def __init__(self) -> None:
        self._states: dict[Hashable, bool] = {}
        self._previous: dict[Hashable, bool] = {}

    def is_key_pressed(self, key: Hashable) -> bool:
        """True on the frame the key went down."""
        return self._states.get(key, False) and not self._previous.get(key, False)

    def is_key_released(self, key: Hashable) -> bool:
        """True on the frame the key went up."""
        return not self._states.get(key, False) and self._previous.get(key, False)

    def is_key_down(self, key: Hashable) -> bool:
        return self._states.get(key, False)

    def is_key_up(self, key: Hashable) -> bool:
        return not self._states.get(key, False)

    def handle_event(self, event: object) -> None:
        if isinstance(event, KeyEvent):
            self._states[event.key] = event.down

    def update(self) -> None:
        """Start a new frame: the current states become the previous ones."""
        self._previous = dict(self._states)


class Mouse:
    """Button states, cursor position and per-frame motion and scroll."""

    def __init__(
        self,
        warp: Optional[Callable[[float, float], None]] = None,
        on_cursor_visibility: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._warp = warp
        self._on_cursor_visibility = on_cursor_visibility
        self._buttons: set[MouseButton] = set()
        self._previous: set[MouseButton] = set()
        self._position = (0.0, 0.0)
        self._delta = (0.0, 0.0)
        self._scroll = (0.0, 0.0)
        self._cursor_visible = True

    @property
    def position(self) -> tuple[float, float]:
        return self._position

    @property
    def delta(self) -> tuple[float, float]:
        """Motion accumulated since the last ``update``."""
        return self._delta

    @property
    def scroll(self) -> tuple[float, float]:
        """Wheel movement accumulated since the last ``update``."""
        return self._scroll

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_visible

    def is_button_down(self, button: MouseButton) -> bool:
        return button in self._buttons

    def is_button_up(self, button: MouseButton) -> bool:
        return button not in self._buttons

    def is_button_pressed(self, button: MouseButton) -> bool:
        return button in self._buttons and button not in self._previous

    def is_button_released(self, button: MouseButton) -> bool:
        return button not in self._buttons and button in self._previous

    def set_position(self, x: Optional[float] = None, y: Optional[float] = None) -> None:
        """Move the cursor; a coordinate left as None keeps its value."""
        new_x = self._position[0] if x is None else float(x)
        new_y = self._position[1] if y is None else float(y)
        self._position = (new_x, new_y)
        if self._warp is not None:
            self._warp(new_x, new_y)

    def set_cursor_visible(self, visible: bool) -> None:
        self._cursor_visible = visible
        if self._on_cursor_visibility is not None:
            self._on_cursor_visibility(visible)

    def handle_event(self, event: object) -> None:
        match event:
            case MouseButtonEvent(button=button, down=True):
                self._buttons.add(button)
            case MouseButtonEvent(button=button, down=False):
                self._buttons.discard(button)
            case MouseMotionEvent(x=x, y=y, xrel=xrel, yrel=yrel):
                self._position = (float(x), float(y))
                self._delta = (self._delta[0] + xrel, self._delta[1] + yrel)
            case MouseWheelEvent(x=x, y=y):
                self._scroll = (self._scroll[0] + x, self._scroll[1] + y)

    def update(self) -> None:
        """Start a new frame: remember buttons and reset motion and scroll."""
        self._previous = set(self._buttons)
        self._delta = (0.0, 0.0)
        self._scroll = (0.0, 0.0)


class InputManager:
    """Owns a keyboard and a mouse and feeds both with events."""

    def __init__(
        self,
        warp: Optional[Callable[[float, float], None]] = None,
        on_cursor_visibility: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self.keyboard = Keyboard()
        self.mouse = Mouse(warp, on_cursor_visibility)

    def handle_event(self, event: object) -> None:
        self.keyboard.handle_event(event)
        self.mouse.handle_event(event)

    def update(self) -> None:
        self.keyboard.update()
        self.mouse.update()
"""Keyboard state tracking with remappable action keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Collection, Dict, Hashable, Union


class Key(Enum):
    """Game actions bound to keyboard keys."""

    LEFT = "Left"
    RIGHT = "Right"
    JUMP = "Jump"
    SHOOT = "Shoot"


DEFAULT_MAPPING: Dict[Key, Hashable] = {
    Key.LEFT: "A",
    Key.RIGHT: "D",
    Key.JUMP: "Space",
    Key.SHOOT: "J",
}


@dataclass(frozen=True)
class KeyEvent:
    """A key going down (pressed=True) or up (pressed=False)."""

    scancode: Hashable
    pressed: bool


PressedSource = Union[Callable[[Hashable], bool], Collection[Hashable]]


class InputState:
    """Tracks the current and previous frame's state of the mapped keys."""

    def __init__(self) -> None:
        self._mapping: Dict[Key, Hashable] = dict(DEFAULT_MAPPING)
        self._current: Dict[Hashable, bool] = {}
        self._previous: Dict[Hashable, bool] = {}

    def update(self, pressed: PressedSource) -> None:
        """Start a new frame, sampling mapped keys from pressed.

        pressed is either a predicate on scancodes or a collection of the
        scancodes currently held down.
        """
        is_down = pressed if callable(pressed) else set(pressed).__contains__
        self._previous = dict(self._current)
        for scancode in self._mapping.values():
            self._current[scancode] = bool(is_down(scancode))

    def process_event(self, event: object) -> None:
        """Apply a key event to mapped keys; anything else is ignored."""
        if not isinstance(event, KeyEvent):
            return
        if event.scancode in self._mapping.values():
            self._current[event.scancode] = event.pressed

    def is_pressed(self, key: Key) -> bool:
        """Whether the key is held down."""
        return self._current.get(self._mapping[key], False)

    def just_pressed(self, key: Key) -> bool:
        """Whether the key went down this frame."""
        scancode = self._mapping[key]
        return self._current.get(scancode, False) and not self._previous.get(scancode, False)

    def just_released(self, key: Key) -> bool:
        """Whether the key went up this frame."""
        scancode = self._mapping[key]
        return not self._current.get(scancode, False) and self._previous.get(scancode, False)

    def set_mapping(self, key: Key, scancode: Hashable) -> None:
        """Bind key to a different scancode."""
        self._mapping[key] = scancode
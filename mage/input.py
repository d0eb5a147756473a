"""Named buttons and axes driven by keyboard, mouse buttons and mouse motion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from mage.vectors import Vector2f


class Key(Enum):
    """Keys and mouse buttons the input manager polls."""

    W = auto()
    S = auto()
    A = auto()
    D = auto()
    SPACE = auto()
    MOUSE_BUTTON_1 = auto()
    MOUSE_BUTTON_2 = auto()


@dataclass
class Input:
    """The current value of a named button or axis."""

    value: float = 0.0


class InputManager:
    """Polls key state through ``is_pressed`` and keeps named inputs and axes."""

    def __init__(self, is_pressed: Callable[[Key], bool] | None = None) -> None:
        self.is_pressed: Callable[[Key], bool] = is_pressed or (lambda key: False)
        self.first_mouse_move = True
        self.mouse_active = False
        self.last_mouse_pos = Vector2f(0.0, 0.0)
        self.mouse_vertical_axis = "vertical1"
        self.mouse_horizontal_axis = "horizontal1"
        self.inputs = {name: Input() for name in ("jump", "fire", "fire1")}
        self.axes = {
            name: Input() for name in ("vertical", "horizontal", "vertical1", "horizontal1")
        }

    def get_axis(self, name: str) -> Input:
        try:
            return self.axes[name]
        except KeyError:
            raise KeyError(f"no axis named {name!r}") from None

    def get_input(self, name: str) -> Input:
        try:
            return self.inputs[name]
        except KeyError:
            raise KeyError(f"no input named {name!r}") from None

    def mouse_moved(self, x: float, y: float) -> None:
        """Feed a cursor position; the mouse axes take the unit direction of motion."""
        position = Vector2f(x, y)
        vertical = self.get_axis(self.mouse_vertical_axis)
        horizontal = self.get_axis(self.mouse_horizontal_axis)
        if self.first_mouse_move:
            self.first_mouse_move = False
            self.last_mouse_pos = position
        elif self.last_mouse_pos != position:
            movement = (position - self.last_mouse_pos).normalised()
            self.last_mouse_pos = position
            vertical.value = -movement.y
            horizontal.value = movement.x
        else:
            vertical.value = 0.0
            horizontal.value = 0.0

    def process_input(self) -> None:
        self.check_key_axis("vertical", Key.W, Key.S, 1, -1)
        self.check_key_axis("horizontal", Key.D, Key.A, 1, -1)
        self.check_key("jump", Key.SPACE, 1)
        self.check_mouse_button("fire", Key.MOUSE_BUTTON_1, 1)
        self.check_mouse_button("fire1", Key.MOUSE_BUTTON_2, 1)

    def check_key(self, name: str, key: Key, value: float) -> None:
        self.get_input(name).value = value if self.is_pressed(key) else 0

    def check_key_axis(
        self, name: str, key: Key, other_key: Key, value: float, other_value: float
    ) -> None:
        """Set the axis from ``key``, else ``other_key``, else zero."""
        axis = self.get_axis(name)
        if self.is_pressed(key):
            axis.value = value
        elif self.is_pressed(other_key):
            axis.value = other_value
        else:
            axis.value = 0

    def check_mouse_button(self, name: str, button: Key, value: float) -> None:
        """Set the input to 1 while ``button`` is held; ``value`` is not used."""
        self.get_input(name).value = 1 if self.is_pressed(button) else 0
"""Base classes for things that are drawn and updated, and things that take input."""

from __future__ import annotations

from typing import Any

from catdefense.point import Point


class GameObject:
    """Something placed in a scene that can be drawn and updated each frame.

    ``position`` is the point the object sits at, interpreted through
    ``anchor``: (0, 0) is the top-left corner, (1, 1) the bottom-right.
    A width or height of 0 means the object's natural size.
    """

    def __init__(self, x: float = 0, y: float = 0, w: float = 0, h: float = 0,
                 anchor_x: float = 0, anchor_y: float = 0) -> None:
        self.visible = True
        self.position = Point(x, y)
        self.size = Point(w, h)
        self.anchor = Point(anchor_x, anchor_y)

    def draw(self, surface: Any) -> None:
        """Draw the object onto ``surface``; the base object draws nothing."""

    def update(self, delta_time: float) -> None:
        """Advance the object's logic by ``delta_time`` seconds; the base does nothing."""


class Control:
    """Something that receives keyboard and mouse events.

    Every handler does nothing by default; subclasses override the ones
    they care about.
    """

    def on_key_down(self, key_code: int) -> None:
        """Called when a key is pressed."""

    def on_key_up(self, key_code: int) -> None:
        """Called when a key is released."""

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Called when a mouse button is pressed at (mx, my)."""

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        """Called when a mouse button is released at (mx, my)."""

    def on_mouse_move(self, mx: int, my: int) -> None:
        """Called when the mouse moves to (mx, my)."""

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        """Called when the mouse wheel scrolls by ``delta`` at (mx, my)."""
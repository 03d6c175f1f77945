"""Base class for game scenes."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any

from catdefense.group import Group

_BACKGROUND = (0, 0, 0)


class Scene(Group, metaclass=ABCMeta):
    """A group that the engine makes active as a whole.

    Set-up belongs in :meth:`initialize` and tear-down in :meth:`terminate`
    rather than in the constructor, so a scene can be entered many times.
    """

    @abstractmethod
    def initialize(self) -> None:
        """Build the scene's contents when it becomes active."""

    def terminate(self) -> None:
        """Drop the scene's contents when it stops being active."""
        self.clear()

    def draw(self, surface: Any) -> None:
        """Clear ``surface`` to black, then draw the visible objects."""
        surface.fill(_BACKGROUND)
        super().draw(surface)
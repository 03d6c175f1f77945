"""A container of objects and controls that forwards frames and events to them."""

from __future__ import annotations

from typing import Any

from catdefense.objects import Control, GameObject


def _index_of(items: list, item: object) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise ValueError(f"{item!r} is not in the group")


def _contains(items: list, item: object) -> bool:
    return any(candidate is item for candidate in items)


class Group(GameObject, Control):
    """Holds objects and controls, in order, and delegates to them.

    A group is itself an object and a control, so groups can be nested.
    Objects and controls are matched by identity, not equality.
    """

    def __init__(self) -> None:
        GameObject.__init__(self)
        self._objects: list[GameObject] = []
        self._controls: list[Control] = []

    def clear(self) -> None:
        """Remove every object and control."""
        self._objects.clear()
        self._controls.clear()

    def update(self, delta_time: float) -> None:
        """Update every visible object.

        Objects may add or remove members of the group while being updated;
        an object removed earlier in the same pass is not updated.
        """
        for obj in list(self._objects):
            if obj.visible and _contains(self._objects, obj):
                obj.update(delta_time)

    def draw(self, surface: Any) -> None:
        """Draw every visible object in order."""
        for obj in self._objects:
            if obj.visible:
                obj.draw(surface)

    def on_key_down(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_down(key_code)

    def on_key_up(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_up(key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_down(button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_up(button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_move(mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_scroll(mx, my, delta)

    def add_object(self, obj: GameObject) -> None:
        """Append an object."""
        self._objects.append(obj)

    def insert_object(self, obj: GameObject, before: GameObject) -> None:
        """Insert an object just before ``before``, which must be in the group."""
        self._objects.insert(_index_of(self._objects, before), obj)

    def add_control(self, ctrl: Control) -> None:
        """Append a control."""
        self._controls.append(ctrl)

    def add_control_object(self, ctrl: Control) -> None:
        """Add something that is both an object and a control, as each."""
        if not isinstance(ctrl, GameObject) or not isinstance(ctrl, Control):
            raise TypeError("the control must be both a GameObject and a Control")
        self._objects.append(ctrl)
        self._controls.append(ctrl)

    def remove_object(self, obj: GameObject) -> None:
        """Remove an object; raises ValueError if it is not in the group."""
        index = _index_of(self._objects, obj)
        self._objects = self._objects[:index] + self._objects[index + 1:]

    def remove_control(self, ctrl: Control) -> None:
        """Remove a control; raises ValueError if it is not in the group."""
        index = _index_of(self._controls, ctrl)
        self._controls = self._controls[:index] + self._controls[index + 1:]

    def remove_control_object(self, ctrl: Control) -> None:
        """Remove something added with :meth:`add_control_object`."""
        self.remove_control(ctrl)
        self.remove_object(ctrl)

    def objects(self) -> list[GameObject]:
        """Return a new list of the objects, in order."""
        return list(self._objects)

    def controls(self) -> list[Control]:
        """Return a new list of the controls, in order."""
        return list(self._controls)
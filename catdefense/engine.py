"""The game engine: window, event loop and scene management."""

from __future__ import annotations

import time
from typing import Any

import pygame

from catdefense.errors import EngineError
from catdefense.log import LogType, log
from catdefense.point import Point
from catdefense.resources import Resources
from catdefense.scene import Scene

# Button numbers as scenes expect them: 1 primary, 2 secondary, 3 middle.
_BUTTON_MAP = {1: 1, 2: 3, 3: 2}
_WHEEL_BUTTONS = frozenset({4, 5})


class GameEngine:
    """Owns the window and the scenes, and drives the active scene each frame."""

    def __init__(self) -> None:
        self.fps = 60
        self.screen_w = 800
        self.screen_h = 600
        self.reserve_samples = 1000
        self.title = "Tower Defense"
        self.icon: str | None = "icon.png"
        self.free_memory_on_scene_changed = False
        self.delta_time_threshold = 0.05
        self._scenes: dict[str, Scene] = {}
        self._active: Scene | None = None
        self._next_scene = ""
        self._display: Any = None
        self._mouse = (0, 0)

    def add_new_scene(self, name: str, scene: Scene) -> None:
        """Register ``scene`` under ``name``; each name may be used once."""
        if name in self._scenes:
            raise ValueError("Cannot add scenes with the same name.")
        self._scenes[name] = scene

    def change_scene(self, name: str) -> None:
        """Switch to the scene ``name`` at the start of the next update."""
        self._next_scene = name

    def active_scene(self) -> Scene | None:
        """Return the scene currently receiving updates and events."""
        return self._active

    def get_scene(self, name: str) -> Scene:
        """Return the scene registered under ``name``."""
        try:
            return self._scenes[name]
        except KeyError:
            raise ValueError("Cannot get scenes that aren't added.") from None

    def _switch_to(self, name: str) -> None:
        if name not in self._scenes:
            raise ValueError("Cannot change to a unknown scene.")
        if self._active is not None:
            self._active.terminate()
        self._active = self._scenes[name]
        if self.free_memory_on_scene_changed:
            Resources.get_instance().release_unused()
        self._active.initialize()
        log(LogType.INFO, "Changed to ", name, " scene")

    def _require_active(self) -> Scene:
        if self._active is None:
            raise RuntimeError("there is no active scene")
        return self._active

    def update(self, delta_time: float) -> None:
        """Apply a pending scene change, then update the active scene.

        ``delta_time`` is capped at ``delta_time_threshold`` so that a long
        frame does not let fast objects skip through each other.
        """
        if self._next_scene:
            name, self._next_scene = self._next_scene, ""
            self._switch_to(name)
        scene = self._require_active()
        scene.update(min(delta_time, self.delta_time_threshold))

    def draw(self) -> None:
        """Draw the active scene and show the frame."""
        self._require_active().draw(self._display)
        if self._display is not None:
            pygame.display.flip()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Forward one input event to the active scene.

        Returns False when the event asks the game to close, True otherwise.
        """
        kind = event.type
        if kind == pygame.QUIT:
            log(LogType.VERBOSE, "Window close button clicked")
            return False
        scene = self._require_active()
        if kind == pygame.KEYDOWN:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " down")
            scene.on_key_down(event.key)
        elif kind == pygame.KEYUP:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " up")
            scene.on_key_up(event.key)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if event.button in _WHEEL_BUTTONS:
                return True
            mx, my = event.pos
            self._mouse = (mx, my)
            button = _BUTTON_MAP.get(event.button, event.button)
            state = "down" if kind == pygame.MOUSEBUTTONDOWN else "up"
            log(LogType.VERBOSE, "Mouse button ", button, " ", state,
                " at (", mx, ", ", my, ")")
            if kind == pygame.MOUSEBUTTONDOWN:
                scene.on_mouse_down(button, mx, my)
            else:
                scene.on_mouse_up(button, mx, my)
        elif kind == pygame.MOUSEMOTION:
            mx, my = event.pos
            self._mouse = (mx, my)
            if tuple(event.rel) != (0, 0):
                log(LogType.VERBOSE, "Mouse move to (", mx, ", ", my, ")")
                scene.on_mouse_move(mx, my)
        elif kind == pygame.MOUSEWHEEL:
            if event.y != 0:
                mx, my = self._mouse
                log(LogType.VERBOSE, "Mouse scroll at (", mx, ", ", my,
                    ") with delta ", event.y)
                scene.on_mouse_scroll(mx, my, event.y)
        elif kind == getattr(pygame, "WINDOWLEAVE", None):
            log(LogType.VERBOSE, "Mouse leave display.")
            scene.on_mouse_move(-1, -1)
        elif kind == getattr(pygame, "WINDOWENTER", None):
            log(LogType.VERBOSE, "Mouse enter display.")
        return True

    def _init_pygame(self) -> None:
        pygame.init()
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.set_num_channels(self.reserve_samples)
        except pygame.error as exc:
            raise EngineError("failed to initialize audio add-on") from exc
        try:
            self._display = pygame.display.set_mode((self.screen_w, self.screen_h))
        except pygame.error as exc:
            raise EngineError("failed to create display") from exc
        pygame.display.set_caption(self.title)
        if self.icon:
            icon = Resources.get_instance().get_bitmap(self.icon)
            pygame.display.set_icon(icon)
            log(LogType.INFO, "Loaded window icon from: ", self.icon)

    def _event_loop(self) -> None:
        clock = pygame.time.Clock()
        timestamp = time.perf_counter()
        done = False
        while not done:
            clock.tick(self.fps)
            for event in pygame.event.get():
                if not self.handle_event(event):
                    done = True
            if done:
                break
            now = time.perf_counter()
            elapsed, timestamp = now - timestamp, now
            self.update(elapsed)
            self.draw()

    def start(self, first_scene_name: str, fps: int = 60, screen_w: int = 800,
              screen_h: int = 600, reserve_samples: int = 1000,
              title: str = "Tower Defense", icon: str | None = "icon.png",
              free_memory_on_scene_changed: bool = False,
              delta_time_threshold: float = 0.05) -> None:
        """Open the window and run the game until it is closed."""
        log(LogType.INFO, "Game Initializing...")
        self.fps = fps
        self.screen_w = screen_w
        self.screen_h = screen_h
        self.reserve_samples = reserve_samples
        self.title = title
        self.icon = icon
        self.free_memory_on_scene_changed = free_memory_on_scene_changed
        self.delta_time_threshold = delta_time_threshold
        if first_scene_name not in self._scenes:
            raise ValueError("The scene is not added yet.")
        self._active = self._scenes[first_scene_name]
        try:
            self._init_pygame()
            log(LogType.INFO, "Game begin")
            self._active.initialize()
            log(LogType.INFO, "Game initialized")
            self.draw()
            log(LogType.INFO, "Game start event loop")
            self._event_loop()
            log(LogType.INFO, "Game Terminating...")
            self._active.terminate()
            log(LogType.INFO, "Game end")
        finally:
            self._display = None
            pygame.quit()

    def screen_size(self) -> Point:
        """Return the window size."""
        return Point(self.screen_w, self.screen_h)

    def mouse_position(self) -> Point:
        """Return the current mouse position in the window."""
        mx, my = pygame.mouse.get_pos()
        return Point(mx, my)

    def is_key_down(self, key_code: int) -> bool:
        """Return whether the key ``key_code`` is held down."""
        return bool(pygame.key.get_pressed()[key_code])

    @staticmethod
    def get_instance() -> GameEngine:
        """Return the shared engine, creating it on first use."""
        global _instance
        if _instance is None:
            _instance = GameEngine()
        return _instance


_instance: GameEngine | None = None
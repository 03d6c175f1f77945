"""Engine core for a small 2D game: geometry, objects, scenes, resources, audio and the game loop."""

__version__ = "0.1.0"
__all__ = [
    "audio",
    "collider",
    "engine",
    "errors",
    "group",
    "log",
    "objects",
    "point",
    "resources",
    "scene",
]
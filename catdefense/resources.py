"""Loading and caching of images, fonts and audio samples."""

from __future__ import annotations

import sys
from pathlib import Path

import pygame

from catdefense.errors import EngineError
from catdefense.log import LogType, log

IMAGES_DIR = "images"
FONTS_DIR = "fonts"
AUDIOS_DIR = "audios"


def _refcount_in(container, key) -> int:
    return sys.getrefcount(container[key])


def _sole_owner_refcount() -> int:
    probe = {"probe": object()}
    return _refcount_in(probe, "probe")


# Reference count of a value held by its container and nothing else,
# measured the same way as the values checked in ``release_unused``.
_SOLE_OWNER = _sole_owner_refcount()


def _is_unused(container, key) -> bool:
    return _refcount_in(container, key) <= _SOLE_OWNER


def _ensure_mixer() -> tuple[int, int, int]:
    if not pygame.mixer.get_init():
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise EngineError("failed to initialize audio") from exc
    return pygame.mixer.get_init()


def _ensure_font() -> None:
    if not pygame.font.get_init():
        pygame.font.init()


class SampleInstance:
    """One playable use of a loaded sample, with its own gain, looping and position."""

    def __init__(self, sample: pygame.mixer.Sound) -> None:
        self.sample = sample
        self.loop = False
        self.gain = 1.0
        self.position = 0
        self._channel: pygame.mixer.Channel | None = None
        self._sound: pygame.mixer.Sound | None = None

    @staticmethod
    def _frame_bytes() -> int:
        _, size, channels = _ensure_mixer()
        return abs(size) // 8 * channels

    @property
    def frequency(self) -> int:
        """Frames per second of the mixer the sample plays through."""
        return _ensure_mixer()[0]

    @property
    def length(self) -> int:
        """Length of the sample in frames."""
        return len(self.sample.get_raw()) // self._frame_bytes()

    @property
    def playing(self) -> bool:
        """Whether this instance is currently playing."""
        return (
            self._channel is not None
            and self._channel.get_busy()
            and self._channel.get_sound() is self._sound
        )

    def set_gain(self, gain: float) -> None:
        """Change the volume, also for a sound that is already playing."""
        self.gain = gain
        if self.playing:
            self._channel.set_volume(gain)

    def play(self) -> bool:
        """Start playing from the current position; return whether it started."""
        if self.position:
            offset = self.position * self._frame_bytes()
            sound = pygame.mixer.Sound(buffer=self.sample.get_raw()[offset:])
        else:
            sound = self.sample
        channel = sound.play(loops=-1 if self.loop else 0)
        if channel is None:
            return False
        channel.set_volume(self.gain)
        self._channel = channel
        self._sound = sound
        return True

    def stop(self) -> bool:
        """Stop playing; return whether anything was stopped."""
        if not self.playing:
            return False
        self._channel.stop()
        return True


class Resources:
    """Loads resources from files under ``root`` and keeps them cached.

    Images live under ``root/images``, fonts under ``root/fonts`` and
    audio under ``root/audios``.
    """

    def __init__(self, root: str | Path = "Resource") -> None:
        self.root = Path(root)
        self._bitmaps: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, pygame.font.Font] = {}
        self._samples: dict[str, pygame.mixer.Sound] = {}
        self._sample_instances: dict[str, tuple[SampleInstance, pygame.mixer.Sound]] = {}

    def release_unused(self) -> None:
        """Drop every cached resource that nothing outside the cache refers to."""
        for name in list(self._bitmaps):
            if _is_unused(self._bitmaps, name):
                log(LogType.INFO, "Destroyed Resource<image>: ", name)
                del self._bitmaps[name]
        for name in list(self._fonts):
            if _is_unused(self._fonts, name):
                log(LogType.INFO, "Destroyed Resource<font>: ", name)
                del self._fonts[name]
        for name in list(self._sample_instances):
            pair = self._sample_instances[name]
            if _is_unused(pair, 0):
                log(LogType.INFO, "Destroyed<sample_instance>: ", name)
                del self._sample_instances[name]
            del pair
        for name in list(self._samples):
            if _is_unused(self._samples, name):
                log(LogType.INFO, "Destroyed Resource<audio>: ", name)
                del self._samples[name]

    def _load_image(self, name: str) -> tuple[pygame.Surface, Path]:
        path = self.root / IMAGES_DIR / name
        try:
            return pygame.image.load(str(path)), path
        except (OSError, pygame.error) as exc:
            raise EngineError(f"failed to load image: {path}") from exc

    def get_bitmap(self, name: str, width: int | None = None,
                   height: int | None = None) -> pygame.Surface:
        """Return the image ``name``, scaled to ``width`` x ``height`` if given."""
        if (width is None) != (height is None):
            raise ValueError("width and height must be given together")
        if width is None:
            if name not in self._bitmaps:
                bitmap, path = self._load_image(name)
                log(LogType.INFO, "Loaded Resource<image>: ", path)
                self._bitmaps[name] = bitmap
            return self._bitmaps[name]
        key = f"{name}?{width}x{height}"
        if key not in self._bitmaps:
            bitmap, path = self._load_image(name)
            try:
                scaled = pygame.transform.smoothscale(bitmap, (width, height))
            except ValueError:
                scaled = pygame.transform.scale(bitmap, (width, height))
            log(LogType.INFO, "Loaded Resource<image>: ", path,
                " scaled to ", width, "x", height)
            self._bitmaps[key] = scaled
        return self._bitmaps[key]

    def get_font(self, name: str, font_size: int) -> pygame.font.Font:
        """Return the font ``name`` at ``font_size``."""
        key = f"{name}?{font_size}"
        if key not in self._fonts:
            _ensure_font()
            path = self.root / FONTS_DIR / name
            try:
                font = pygame.font.Font(str(path), font_size)
            except (OSError, pygame.error) as exc:
                raise EngineError(f"failed to load font: {path}") from exc
            log(LogType.INFO, "Loaded Resource<font>: ", path, " with size ", font_size)
            self._fonts[key] = font
        return self._fonts[key]

    def get_sample(self, name: str) -> pygame.mixer.Sound:
        """Return the audio sample ``name``."""
        if name not in self._samples:
            _ensure_mixer()
            path = self.root / AUDIOS_DIR / name
            try:
                sample = pygame.mixer.Sound(str(path))
            except (OSError, pygame.error) as exc:
                raise EngineError(f"failed to load audio: {path}") from exc
            log(LogType.INFO, "Loaded Resource<audio>: ", path)
            self._samples[name] = sample
        return self._samples[name]

    def get_sample_instance(self, name: str) -> SampleInstance:
        """Return a new playable instance of the sample ``name``."""
        sample = self.get_sample(name)
        instance = SampleInstance(sample)
        log(LogType.INFO, "Created<sample_instance>: ", self.root / AUDIOS_DIR / name)
        self._sample_instances[name] = (instance, sample)
        return instance

    @staticmethod
    def get_instance() -> Resources:
        """Return the shared instance, creating it on first use."""
        global _instance
        if _instance is None:
            _instance = Resources()
        return _instance


_instance: Resources | None = None
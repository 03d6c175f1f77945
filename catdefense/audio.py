"""Playing sound effects, background music and controllable samples."""

from __future__ import annotations

import pygame

from catdefense.errors import EngineError
from catdefense.log import LogType, log
from catdefense.resources import Resources, SampleInstance


class AudioPlayer:
    """Plays audio loaded through a :class:`Resources` cache."""

    def __init__(self, resources: Resources | None = None, bgm_volume: float = 1.0,
                 sfx_volume: float = 1.0) -> None:
        self.resources = resources if resources is not None else Resources.get_instance()
        self.bgm_volume = bgm_volume
        self.sfx_volume = sfx_volume

    def _play(self, audio: str, loops: int, volume: float, kind: str) -> pygame.mixer.Channel | None:
        sample = self.resources.get_sample(audio)
        channel = sample.play(loops=loops)
        if channel is None:
            log(LogType.INFO, f"failed to play audio ({kind})")
            return None
        channel.set_volume(volume)
        log(LogType.VERBOSE, f"played audio ({kind})")
        return channel

    def play_audio(self, audio: str) -> pygame.mixer.Channel | None:
        """Play ``audio`` once at the effect volume; return its channel, if any."""
        return self._play(audio, 0, self.sfx_volume, "once")

    def play_bgm(self, audio: str) -> pygame.mixer.Channel | None:
        """Play ``audio`` in a loop at the music volume; return its channel, if any."""
        return self._play(audio, -1, self.bgm_volume, "bgm")

    def stop_bgm(self, channel: pygame.mixer.Channel | None) -> None:
        """Stop music started with :meth:`play_bgm`."""
        if channel is not None:
            channel.stop()
        log(LogType.INFO, "stopped audio (bgm)")

    def play_sample(self, audio: str, loop: bool = False, volume: float = 1.0,
                    position: float = 0.0) -> SampleInstance:
        """Start a new instance of ``audio`` and return it for later control.

        ``position`` is the offset in seconds to start from.
        """
        instance = self.resources.get_sample_instance(audio)
        instance.loop = loop
        if volume != 1:
            self.change_sample_volume(instance, volume)
        if position != 0:
            self.change_sample_position(instance, position)
        if instance.play():
            log(LogType.VERBOSE, "played audio (sample)")
        else:
            log(LogType.INFO, "failed to play audio (sample)")
        return instance

    def stop_sample(self, sample: SampleInstance) -> None:
        """Stop a sample instance if it is playing."""
        if not sample.playing:
            return
        if sample.stop():
            log(LogType.INFO, "stopped audio (sample)")
        else:
            log(LogType.INFO, "failed to stop audio (sample)")

    def change_sample_volume(self, sample: SampleInstance, volume: float) -> None:
        """Set the gain of a sample instance; a negative gain is an error."""
        if volume < 0:
            raise EngineError(f"failed to change sample volume to {volume:f}")
        sample.set_gain(volume)

    def change_sample_position(self, sample: SampleInstance, position: float) -> None:
        """Move a sample instance's start to ``position`` seconds."""
        frame = int(sample.frequency * position)
        if frame < 0 or frame > sample.length:
            raise EngineError(f"failed to change sample position to {position:f} s")
        sample.position = frame

    def get_sample_length(self, sample: SampleInstance) -> int:
        """Return the length of a sample instance in whole seconds."""
        return sample.length // sample.frequency
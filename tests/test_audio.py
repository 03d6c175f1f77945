import wave
from pathlib import Path

import pygame
import pytest

from catdefense.audio import AudioPlayer
from catdefense.errors import EngineError
from catdefense.resources import Resources


@pytest.fixture
def mixer(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.mixer.init(frequency=22050, size=-16, channels=2)
    yield
    pygame.mixer.quit()


def _write_wav(path: Path, seconds: float, rate: int = 22050) -> None:
    with wave.open(str(path), "wb") as fh:
        fh.setnchannels(1)
        fh.setsampwidth(2)
        fh.setframerate(rate)
        fh.writeframes(bytes(2 * int(rate * seconds)))


@pytest.fixture
def player(tmp_path, mixer):
    (tmp_path / "audios").mkdir()
    _write_wav(tmp_path / "audios" / "tone.wav", 2.5)
    return AudioPlayer(Resources(tmp_path), bgm_volume=0.25, sfx_volume=0.5)


def test_sample_length_in_whole_seconds(player):
    instance = player.resources.get_sample_instance("tone.wav")
    assert player.get_sample_length(instance) == 2


def test_change_position_sets_frame(player):
    instance = player.resources.get_sample_instance("tone.wav")
    player.change_sample_position(instance, 1.0)
    assert instance.position == instance.frequency


def test_change_position_past_end_raises(player):
    instance = player.resources.get_sample_instance("tone.wav")
    with pytest.raises(EngineError, match="failed to change sample position"):
        player.change_sample_position(instance, 10.0)
    assert instance.position == 0


def test_change_position_negative_raises(player):
    instance = player.resources.get_sample_instance("tone.wav")
    with pytest.raises(EngineError):
        player.change_sample_position(instance, -1.0)


def test_change_volume(player):
    instance = player.resources.get_sample_instance("tone.wav")
    player.change_sample_volume(instance, 0.75)
    assert instance.gain == 0.75


def test_negative_volume_raises(player):
    instance = player.resources.get_sample_instance("tone.wav")
    with pytest.raises(EngineError, match="failed to change sample volume"):
        player.change_sample_volume(instance, -0.5)
    assert instance.gain == 1.0


def test_play_sample_applies_settings(player):
    instance = player.play_sample("tone.wav", loop=True, volume=0.5, position=1.0)
    assert instance.loop is True
    assert instance.gain == 0.5
    assert instance.position == instance.frequency
    player.stop_sample(instance)
    assert instance.playing is False


def test_stop_sample_not_playing(player):
    instance = player.resources.get_sample_instance("tone.wav")
    player.stop_sample(instance)
    assert instance.playing is False


def test_play_audio_uses_effect_volume(player):
    channel = player.play_audio("tone.wav")
    assert channel.get_volume() == pytest.approx(0.5, abs=0.01)
    channel.stop()


def test_bgm_plays_and_stops(player):
    channel = player.play_bgm("tone.wav")
    assert channel.get_volume() == pytest.approx(0.25, abs=0.01)
    player.stop_bgm(channel)
    assert channel.get_busy() is False


def test_play_missing_audio_raises(player):
    with pytest.raises(EngineError, match="failed to load audio"):
        player.play_audio("missing.wav")
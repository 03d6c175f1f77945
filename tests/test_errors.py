import pytest

from catdefense.errors import EngineError


def test_engine_error_keeps_message():
    error = EngineError("failed to load image: x.png")
    assert str(error) == "failed to load image: x.png"
    assert error.args == ("failed to load image: x.png",)


def test_engine_error_is_runtime_error():
    error = EngineError("failed to create display")
    assert isinstance(error, RuntimeError)
    assert str(error) == "failed to create display"


@pytest.mark.parametrize(
    "message",
    [
        "failed to reserve samples",
        "failed to create timer",
        "failed to load audio: Resource/audios/explosion.wav",
    ],
)
def test_engine_error_message_round_trip(message):
    error = EngineError(message)
    assert issubclass(type(error), RuntimeError)
    assert error.args == (message,)
    assert str(error) == message
    assert repr(error) == f"EngineError({message!r})"
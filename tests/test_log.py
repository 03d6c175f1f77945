import pytest

from catdefense.log import Logger, LogType, configure, log


@pytest.fixture
def reset_global(tmp_path):
    yield
    configure(False, False, tmp_path / "reset.txt")


def test_labels_match_names(tmp_path):
    path = tmp_path / "log.txt"
    logger = Logger(True, True, path)
    for log_type in LogType:
        logger.log(log_type, "x")
    assert path.read_text().splitlines() == [
        "[VERBOSE] x",
        "[DEBUGGING] x",
        "[INFO] x",
        "[WARN] x",
        "[ERROR] x",
    ]


def test_disabled_logger_writes_nothing(tmp_path, capsys):
    path = tmp_path / "log.txt"
    Logger(False, False, path).log(LogType.ERROR, "boom")
    assert not path.exists()
    assert capsys.readouterr().out == ""


def test_enabled_logger_writes_labelled_line(tmp_path, capsys):
    path = tmp_path / "log.txt"
    Logger(True, False, path).log(LogType.INFO, "Changed to ", "play", " scene")
    assert path.read_text() == "[INFO] Changed to play scene\n"
    assert capsys.readouterr().out == "[INFO] Changed to play scene\n"


def test_lines_are_appended(tmp_path):
    path = tmp_path / "log.txt"
    logger = Logger(True, False, path)
    logger.log(LogType.WARN, "a")
    logger.log(LogType.ERROR, "b")
    assert path.read_text().splitlines() == ["[WARN] a", "[ERROR] b"]


def test_verbose_suppressed_without_flag(tmp_path):
    logger = Logger(True, False, tmp_path / "log.txt")
    assert logger.can_log(LogType.VERBOSE) is False
    assert logger.can_log(LogType.DEBUGGING) is True


def test_verbose_allowed_with_flag(tmp_path):
    logger = Logger(True, True, tmp_path / "log.txt")
    logger.log(LogType.VERBOSE, "tick")
    assert (tmp_path / "log.txt").read_text() == "[VERBOSE] tick\n"


def test_configure_truncates_file(tmp_path, reset_global):
    path = tmp_path / "log.txt"
    path.write_text("old content\n")
    configure(True, False, path)
    assert path.read_text() == ""


def test_global_log_uses_configuration(tmp_path, reset_global):
    path = tmp_path / "log.txt"
    configure(True, False, path)
    log(LogType.INFO, "count ", 3)
    log(LogType.VERBOSE, "hidden")
    assert path.read_text() == "[INFO] count 3\n"


def test_configure_disabled_silences_global(tmp_path, reset_global):
    path = tmp_path / "log.txt"
    configure(False, False, path)
    log(LogType.ERROR, "nothing")
    assert path.read_text() == ""
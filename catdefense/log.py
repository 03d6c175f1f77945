"""Simple logging to the console and to an appended log file."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path


class LogType(Enum):
    """Kinds of log message; the name is printed as the line's label."""

    VERBOSE = auto()
    DEBUGGING = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()

    @property
    def label(self) -> str:
        return self.name


class Logger:
    """Writes labelled lines to standard output and to a log file."""

    def __init__(self, enabled: bool = False, log_verbose: bool = False,
                 file_path: str | Path = "log.txt") -> None:
        self.enabled = enabled
        self.log_verbose = log_verbose
        self.file_path = Path(file_path)

    def can_log(self, log_type: LogType) -> bool:
        """Return whether a message of ``log_type`` would be written."""
        return self.enabled and (log_type is not LogType.VERBOSE or self.log_verbose)

    def log(self, log_type: LogType, *args: object) -> None:
        """Write the arguments, joined without separators, as one labelled line."""
        if not self.can_log(log_type):
            return
        line = f"[{log_type.label}] " + "".join(str(arg) for arg in args)
        print(line)
        with self.file_path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")


_default = Logger()


def configure(enabled: bool = False, log_verbose: bool = False,
              file_path: str | Path = "log.txt") -> Logger:
    """Replace the global logger's settings and empty its log file."""
    global _default
    _default = Logger(enabled, log_verbose, file_path)
    Path(file_path).write_text("", encoding="utf-8")
    return _default


def log(log_type: LogType, *args: object) -> None:
    """Log through the global logger."""
    _default.log(log_type, *args)
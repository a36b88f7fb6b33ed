"""Core domain models for in-memory logging."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from memlog.core.ports import Sink

INFO = "info"
DEBUG = "debug"
WARNING = "warning"
ERROR = "error"

LEVELS = (INFO, DEBUG, WARNING, ERROR)


@dataclass(frozen=True)
class LogEntry:
    """A single logging event.

    Attributes:
        timestamp: Time of the event, timezone-aware UTC with millisecond precision.
        level: Log level (e.g., info, debug, warning, error). Any string is accepted.
        message: The log message. Non-string values are rendered by the formatter.
    """

    timestamp: datetime
    level: str
    message: Any


@dataclass(frozen=True)
class LoggerConfig:
    """Construction-time settings for a Logger.

    Attributes:
        print_to_console: Pass each new entry to the sink as it is added.
        print_function: Sink receiving formatted lines. None selects the
            default stdout sink.
        write_to_file: Pass each new entry to the file writer as it is added.
        log_file_path: Target file for real-time writes and dumps. None
            selects ``<local timestamp>.log``, resolved by the Logger.
    """

    print_to_console: bool = True
    print_function: Sink | None = None
    write_to_file: bool = False
    log_file_path: str | None = None

    def __post_init__(self) -> None:
        if self.print_function is not None and not callable(self.print_function):
            raise TypeError(
                f"print_function must be callable, got {type(self.print_function).__name__}"
            )

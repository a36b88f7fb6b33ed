"""memlog: in-memory leveled logging with named timers."""

from memlog.adapters import (
    ListSink,
    MemlogHandler,
    NullFileWriter,
    TextFileWriter,
    logging_sink,
    print_sink,
)
from memlog.core.dates import date_to_string
from memlog.core.encoding import dump_to_string, format_log_entry
from memlog.core.models import (
    DEBUG,
    ERROR,
    INFO,
    LEVELS,
    WARNING,
    LogEntry,
    LoggerConfig,
)
from memlog.core.ports import LogFileWriterPort, Sink
from memlog.logger import Logger, TimerResult

__all__ = [
    "DEBUG",
    "ERROR",
    "INFO",
    "LEVELS",
    "WARNING",
    "ListSink",
    "LogEntry",
    "LogFileWriterPort",
    "Logger",
    "LoggerConfig",
    "MemlogHandler",
    "NullFileWriter",
    "Sink",
    "TextFileWriter",
    "TimerResult",
    "date_to_string",
    "dump_to_string",
    "format_log_entry",
    "logging_sink",
    "print_sink",
]

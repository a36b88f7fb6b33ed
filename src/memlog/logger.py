"""In-memory logger with leveled entries, named timers and text dumps."""

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

from memlog.adapters.file import NullFileWriter
from memlog.adapters.sinks import print_sink
from memlog.core.dates import date_to_string
from memlog.core.encoding.text import dump_to_string, format_log_entry
from memlog.core.models import DEBUG, ERROR, INFO, WARNING, LogEntry, LoggerConfig
from memlog.core.ports import LogFileWriterPort, Sink


def _now() -> datetime:
    """Current UTC time truncated to milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _format_seconds(seconds: float) -> str:
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


@dataclass
class TimerResult:
    """Result object for the Logger.timed context manager."""

    name: str
    started: datetime | Literal[False] = False
    elapsed: float | Literal[False] = False


class Logger:
    """Keeps log entries and named timers for the lifetime of the instance.

    Entries are appended in call order and never removed. When enabled,
    every new entry is formatted and handed to ``print_function`` and/or
    the file writer synchronously; exceptions raised there reach the
    caller.

    Example:
        ```python
        from memlog import Logger

        log = Logger()
        log.info("program started")
        log.time("big loop")
        ...
        log.time_end("big loop")
        print(log.dump_to_string())
        ```
    """

    def __init__(
        self,
        print_to_console: bool | None = None,
        print_function: Sink | None = None,
        write_to_file: bool | None = None,
        log_file_path: str | None = None,
        *,
        file_writer: LogFileWriterPort | None = None,
        config: LoggerConfig | None = None,
    ) -> None:
        """Initialize the logger.

        Args:
            print_to_console: Send each entry to print_function as it is
                added. Default True.
            print_function: Sink for formatted lines. Default prints to stdout.
            write_to_file: Send each entry to the file writer as it is
                added. Default False.
            log_file_path: File used by real-time writes and dump_to_file.
                Default is ``<local timestamp>.log``.
            file_writer: Adapter backing the file hooks. Default does nothing.
            config: Prebuilt settings; cannot be combined with the
                individual keyword settings above.
        """
        overrides = (print_to_console, print_function, write_to_file, log_file_path)
        if config is None:
            config = LoggerConfig(
                print_to_console=True if print_to_console is None else print_to_console,
                print_function=print_function,
                write_to_file=False if write_to_file is None else write_to_file,
                log_file_path=log_file_path,
            )
        elif any(value is not None for value in overrides):
            raise TypeError("pass either config or individual settings, not both")

        self._config = config
        self.print_function: Sink = (
            config.print_function if config.print_function is not None else print_sink
        )
        self._log_file_path = (
            config.log_file_path
            if config.log_file_path is not None
            else date_to_string() + ".log"
        )
        self._file_writer: LogFileWriterPort = (
            file_writer if file_writer is not None else NullFileWriter()
        )
        self._entries: list[LogEntry] = []
        self._timers: dict[str, datetime] = {}

    @property
    def config(self) -> LoggerConfig:
        """Settings the logger was constructed with.

        Reassigning print_function later does not update this record.
        """
        return self._config

    @property
    def print_to_console(self) -> bool:
        return self._config.print_to_console

    @property
    def write_to_file(self) -> bool:
        return self._config.write_to_file

    @property
    def log_file_path(self) -> str:
        return self._log_file_path

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Snapshot of all entries in insertion order."""
        return tuple(self._entries)

    @property
    def active_timers(self) -> frozenset[str]:
        """Names of timers started and not yet ended."""
        return frozenset(self._timers)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def add(self, message: Any, level: str = DEBUG) -> LogEntry:
        """Add a log entry stamped with the current time.

        Args:
            message: The log message; any value is accepted.
            level: Log level (default "debug").

        Returns:
            The LogEntry that was appended.
        """
        entry = LogEntry(timestamp=_now(), level=level, message=message)
        self._entries.append(entry)

        if self.print_to_console or self.write_to_file:
            line = format_log_entry(entry)
            if self.print_to_console:
                self.print_function(line)
            if self.write_to_file:
                self._file_writer.append_line(self._log_file_path, line)

        return entry

    def info(self, message: Any) -> LogEntry:
        """Add an informational message intended for the user."""
        return self.add(message, INFO)

    def debug(self, message: Any) -> LogEntry:
        """Add a diagnostic message intended for the developer."""
        return self.add(message, DEBUG)

    def warning(self, message: Any) -> LogEntry:
        """Add a warning that something might go wrong."""
        return self.add(message, WARNING)

    def error(self, message: Any) -> LogEntry:
        """Add an error explaining why the program is about to fail."""
        return self.add(message, ERROR)

    def time(self, name: str) -> datetime | Literal[False]:
        """Start a named timer.

        Returns:
            The start time, or False if a timer with this name is already
            running. A running timer is never restarted.
        """
        if name in self._timers:
            return False
        start = _now()
        self._timers[name] = start
        return start

    def time_end(self, name: str) -> float | Literal[False]:
        """Stop a named timer and log how long it ran.

        Appends a debug entry ``'<name>' took <elapsed> seconds``.

        Returns:
            Elapsed seconds rounded to milliseconds, or False if no timer
            with this name is running.
        """
        start = self._timers.pop(name, None)
        if start is None:
            return False
        elapsed = round(max((_now() - start).total_seconds(), 0.0), 3)
        self.debug(f"'{name}' took {_format_seconds(elapsed)} seconds")
        return elapsed

    @contextmanager
    def timed(self, name: str) -> Generator[TimerResult, None, None]:
        """Context manager that times the enclosed block under name.

        Yields:
            TimerResult whose elapsed is filled in when the block exits.
            If name is already running, started and elapsed stay False.
        """
        result = TimerResult(name=name, started=self.time(name))
        try:
            yield result
        finally:
            # Leave a timer started elsewhere under the same name running.
            if result.started is not False:
                result.elapsed = self.time_end(name)

    def dump_to_string(self) -> str:
        """Render every stored entry, one line each."""
        return dump_to_string(self._entries)

    def dump_to_file(self, file_path: str | None = None) -> None:
        """Hand the full rendered log to the file writer.

        Args:
            file_path: Output path. Default is log_file_path.
        """
        path = file_path if file_path is not None else self._log_file_path
        self._file_writer.dump(path, self.dump_to_string())

"""Port interfaces for logger output.

The Logger depends only on these contracts. Concrete sinks and file
writers live in memlog.adapters.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

Sink = Callable[[str], object]
"""Single-argument callable receiving one formatted log line."""


@runtime_checkable
class LogFileWriterPort(Protocol):
    """Port for file output of log lines.

    Adapters implementing this protocol back the two file hook points of
    the Logger. Examples: NullFileWriter, TextFileWriter.
    """

    def append_line(self, path: str, line: str) -> None:
        """Append one formatted log line to the file at path."""
        ...

    def dump(self, path: str, text: str) -> None:
        """Write the full rendered log to the file at path."""
        ...

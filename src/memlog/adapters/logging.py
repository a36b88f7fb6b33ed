"""Bridges between Python's logging module and memlog.

MemlogHandler captures standard-library log records into a Logger.
logging_sink goes the other way, forwarding formatted memlog lines to a
standard-library logger.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from memlog.core.ports import Sink

if TYPE_CHECKING:
    from memlog.logger import Logger


class MemlogHandler(logging.Handler):
    """Logging handler that adds log records to a memlog Logger.

    Record level names are lower-cased, so WARNING becomes "warning" and
    CRITICAL is kept as "critical".

    Example:
        ```python
        from memlog import Logger, MemlogHandler

        log = Logger(print_to_console=False)
        logging.getLogger().addHandler(MemlogHandler(log))
        ```
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET) -> None:
        """Initialize the handler with the Logger receiving records.

        Args:
            target: Logger that stores the entries.
            level: Minimum record level handled.
        """
        super().__init__(level)
        self._target = target

    def emit(self, record: logging.LogRecord) -> None:
        """Add a log record to the target Logger.

        Args:
            record: The log record to emit.
        """
        try:
            message = record.getMessage()
        except Exception:
            self.handleError(record)
            return
        self._target.add(message, record.levelname.lower())


def logging_sink(py_logger: logging.Logger, level: int = logging.INFO) -> Sink:
    """Build a sink that forwards formatted lines to a standard-library logger.

    Args:
        py_logger: Destination logger.
        level: Level every forwarded line is logged at.

    Returns:
        A callable usable as Logger.print_function.
    """

    def sink(line: str) -> None:
        py_logger.log(level, line)

    return sink

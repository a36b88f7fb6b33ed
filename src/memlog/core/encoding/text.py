"""Plain-text encoder for log entries."""

import json
import pprint
from collections.abc import Iterable, Mapping
from typing import Any

from memlog.core.dates import date_to_string

_REQUIRED_FIELDS = ("timestamp", "level", "message")
_MISSING = object()


def _get_field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name, _MISSING)
    return getattr(entry, name, _MISSING)


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        # Keys JSON cannot encode, or circular references.
        return pprint.pformat(value)


def format_log_entry(entry: Any) -> str:
    """Render one log entry as a human-readable line.

    Args:
        entry: A LogEntry, or any object or mapping exposing timestamp,
            level and message.

    Returns:
        ``<local timestamp> [<LEVEL>] : <message>``. Empty string if any
        of the three fields is missing.
    """
    fields = {name: _get_field(entry, name) for name in _REQUIRED_FIELDS}
    if any(value is _MISSING for value in fields.values()):
        return ""

    timestamp = date_to_string(fields["timestamp"], True)
    level = _stringify(fields["level"]).upper()
    message = _stringify(fields["message"])
    return f"{timestamp} [{level}] : {message}"


def dump_to_string(entries: Iterable[Any]) -> str:
    """Encode log entries to newline-terminated text.

    Args:
        entries: An iterable of log entries.

    Returns:
        One formatted line per entry, each followed by a newline.
        Empty string if no entries.
    """
    return "".join(format_log_entry(entry) + "\n" for entry in entries)

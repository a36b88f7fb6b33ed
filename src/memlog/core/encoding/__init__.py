"""Encoders turning log entries into output text."""

from memlog.core.encoding.text import dump_to_string, format_log_entry

__all__ = ["dump_to_string", "format_log_entry"]

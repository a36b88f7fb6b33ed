"""Adapters implementing core ports."""

from memlog.adapters.file import NullFileWriter, TextFileWriter
from memlog.adapters.logging import MemlogHandler, logging_sink
from memlog.adapters.sinks import ListSink, print_sink

__all__ = [
    "ListSink",
    "MemlogHandler",
    "NullFileWriter",
    "TextFileWriter",
    "logging_sink",
    "print_sink",
]

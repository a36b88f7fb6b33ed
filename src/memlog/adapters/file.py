"""File writer adapters implementing LogFileWriterPort."""

from pathlib import Path


class NullFileWriter:
    """LogFileWriterPort implementation that writes nothing.

    Default writer of a Logger: enabling write_to_file or calling
    dump_to_file has no effect until a real writer is supplied.
    """

    def append_line(self, path: str, line: str) -> None:
        """Discard the line."""

    def dump(self, path: str, text: str) -> None:
        """Discard the text."""


class TextFileWriter:
    """LogFileWriterPort implementation backed by plain text files.

    Args:
        encoding: Text encoding used for every write.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def _prepare(self, path: str) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        return target

    def append_line(self, path: str, line: str) -> None:
        """Append the line and a newline to the file."""
        with self._prepare(path).open("a", encoding=self._encoding) as fh:
            fh.write(line + "\n")

    def dump(self, path: str, text: str) -> None:
        """Replace the file contents with text."""
        self._prepare(path).write_text(text, encoding=self._encoding)

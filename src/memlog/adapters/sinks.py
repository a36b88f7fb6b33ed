"""Sink adapters receiving formatted log lines."""

from dataclasses import dataclass, field


def print_sink(line: str) -> None:
    """Default sink: print the line to stdout followed by a newline."""
    print(line)


@dataclass
class ListSink:
    """Sink that keeps every line it receives.

    Suitable for tests and for embedding the output in another report.
    """

    lines: list[str] = field(default_factory=list)

    def __call__(self, line: str) -> None:
        self.lines.append(line)

"""
Output sinks.

Everything the simulation reports (speech, soft-failure notices, display
summaries, attribute listings) is written as one text line per event to an
OutputSink.  The core never reads from a sink.

  StreamSink — writes lines to a text stream (stdout by default)
  ListSink   — keeps lines in memory; used for transcripts and tests
  TeeSink    — fans each line out to several sinks
"""

from __future__ import annotations

import sys
from typing import List, Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Write-only destination for formatted report lines."""

    def write(self, line: str) -> None:
        ...


class StreamSink:
    """Writes each line, newline-terminated, to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: str) -> None:
        self.stream.write(f"{line}\n")


class ListSink:
    """Collects lines in memory.

    Attributes:
        max_lines: If set, older lines are discarded beyond this limit (FIFO).
    """

    def __init__(self, max_lines: Optional[int] = None) -> None:
        if max_lines is not None and max_lines <= 0:
            raise ValueError(f"max_lines must be > 0 or None, got {max_lines}")
        self.max_lines: Optional[int] = max_lines
        self._lines: List[str] = []

    def write(self, line: str) -> None:
        self._lines.append(line)
        if self.max_lines is not None and len(self._lines) > self.max_lines:
            self._lines.pop(0)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def last(self) -> Optional[str]:
        return self._lines[-1] if self._lines else None

    def clear(self) -> None:
        self._lines = []

    def __len__(self) -> int:
        return len(self._lines)


class TeeSink:
    """Forwards every line to each wrapped sink in order."""

    def __init__(self, *sinks: OutputSink) -> None:
        self.sinks: List[OutputSink] = list(sinks)

    def write(self, line: str) -> None:
        for sink in self.sinks:
            sink.write(line)

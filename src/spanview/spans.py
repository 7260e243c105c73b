from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A concrete source position.

    Lines are 1-based; columns are 0-based character offsets into the line.
    Ordering is lexicographic on (line, column).
    """

    line: int = 0
    column: int = 0


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single file.

    A span with an empty ``file`` is synthetic: it was produced by the
    token source without any backing text.
    """

    file: str = ""
    start: Position = Position()
    end: Position = Position()

    @property
    def is_real(self) -> bool:
        return self.file != ""

    def format(self) -> str:
        if self.file == "":
            return ""

        return f"{self.file}:{self.start.line}:{self.start.column}"


SYNTHETIC = Span()


@dataclass(frozen=True, slots=True)
class ProvenanceRange:
    """Interned form of a real span, keyed by the file's interned id."""

    source: int
    start: Position
    end: Position

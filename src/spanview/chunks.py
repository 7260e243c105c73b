from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .spans import Position


@dataclass(frozen=True, slots=True)
class GeneratedChunk:
    """A run of formatted output produced by at most one provenance range."""

    text: str
    range_id: int | None = None

    @property
    def ids(self) -> tuple[int, ...]:
        return () if self.range_id is None else (self.range_id,)


@dataclass(frozen=True, slots=True)
class SourceChunk:
    """A run of original source text sharing one set of active range ids."""

    text: str
    active_ids: tuple[int, ...] = ()

    @property
    def ids(self) -> tuple[int, ...]:
        return self.active_ids


class BoundaryKind(IntEnum):
    # START sorts before END at equal positions.
    START = 0
    END = 1


@dataclass(frozen=True, slots=True, order=True)
class BoundaryEvent:
    pos: Position
    kind: BoundaryKind
    range_id: int

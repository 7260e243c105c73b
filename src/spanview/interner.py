from __future__ import annotations

from dataclasses import dataclass, field

from .spans import ProvenanceRange, Span


@dataclass(slots=True)
class RangeInterner:
    """Assigns small sequential ids to distinct files and provenance ranges.

    Ids are handed out in first-seen order, so the same set of spans visited
    in the same order always yields the same ids no matter how many tokens
    share a span.
    """

    sources: dict[str, int] = field(default_factory=dict)
    ranges: dict[ProvenanceRange, int] = field(default_factory=dict)

    def intern(self, span: Span) -> int | None:
        if not span.is_real:
            return None
        source = self.sources.setdefault(span.file, len(self.sources))
        rng = ProvenanceRange(source=source, start=span.start, end=span.end)
        return self.ranges.setdefault(rng, len(self.ranges))

    def ranges_for(self, source: int) -> list[tuple[ProvenanceRange, int]]:
        return [(rng, rid) for rng, rid in self.ranges.items() if rng.source == source]

    def __len__(self) -> int:
        return len(self.ranges)

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from .chunks import BoundaryEvent, BoundaryKind, SourceChunk
from .config import DEFAULT_CONFIG, RenderConfig
from .interner import RangeInterner
from .spans import ProvenanceRange

logger = logging.getLogger(__name__)

LineReader = Callable[[str], list[str]]

_NEWLINE = SourceChunk("\n")


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def read_source_lines(path: str, *, encoding: str = "utf-8") -> list[str]:
    return split_lines(Path(path).read_text(encoding=encoding))


def boundary_events(ranges: Iterable[tuple[ProvenanceRange, int]]) -> list[BoundaryEvent]:
    """One START and one END per range, in sweep order.

    Events at the same position order START before END, then by range id.
    """
    events: list[BoundaryEvent] = []
    for rng, rid in ranges:
        events.append(BoundaryEvent(rng.start, BoundaryKind.START, rid))
        events.append(BoundaryEvent(rng.end, BoundaryKind.END, rid))
    events.sort()
    return events


def sweep_source(lines: list[str], ranges: Iterable[tuple[ProvenanceRange, int]]) -> list[SourceChunk]:
    """Cut ``lines`` into chunks tagged with the range ids active over them.

    Output starts at column 0 of the first event's line and stops at the end
    of the last event's line. Lines the file no longer has keep their line
    break but contribute no text; missing columns are clipped.
    """
    events = boundary_events(ranges)
    if not events:
        return []

    out: list[SourceChunk] = []
    active: set[int] = set()

    def line_text(n: int) -> str | None:
        if 1 <= n <= len(lines):
            return lines[n - 1]
        return None

    def add(text: str) -> None:
        if text:
            out.append(SourceChunk(text, tuple(sorted(active))))

    line, column = events[0].pos.line, 0
    for ev in events:
        while line < ev.pos.line:
            src = line_text(line)
            if src is None:
                logger.debug("line %d is past the end of the file (%d lines)", line, len(lines))
            else:
                add(src[column:])
            out.append(_NEWLINE)
            line += 1
            column = 0
        if column < ev.pos.column:
            src = line_text(line)
            if src is not None:
                add(src[column : ev.pos.column])
            column = ev.pos.column
        if ev.kind is BoundaryKind.START:
            active.add(ev.range_id)
        else:
            active.discard(ev.range_id)

    src = line_text(line)
    if src is not None:
        add(src[column:])
    out.append(_NEWLINE)
    return out


def source_header(path: str, *, config: RenderConfig = DEFAULT_CONFIG) -> list[SourceChunk]:
    rule = "//" + config.header_rule
    return [
        _NEWLINE,
        SourceChunk(rule),
        _NEWLINE,
        SourceChunk(f"// {path}"),
        _NEWLINE,
        SourceChunk(rule),
        _NEWLINE,
    ]


def load_original_source(
    interner: RangeInterner,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
    read_lines: LineReader | None = None,
) -> list[SourceChunk]:
    """Build the original-source view for every file the interner knows.

    Files are visited in the order they were first referenced. A file that
    cannot be read is left out of the view entirely.
    """
    reader = read_lines or (lambda p: read_source_lines(p, encoding=config.encoding))

    out: list[SourceChunk] = []
    for path, source in interner.sources.items():
        ranges = interner.ranges_for(source)
        if not ranges:
            continue
        try:
            lines = reader(path)
        except (OSError, ValueError) as e:
            logger.debug("skipping unreadable source %s: %s", path, e)
            continue
        out.extend(source_header(path, config=config))
        out.extend(sweep_source(lines, ranges))
    logger.debug("reconciled %d source chunks from %d files", len(out), len(interner.sources))
    return out

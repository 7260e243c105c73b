from __future__ import annotations

import html
from collections.abc import Iterable
from typing import Union

from .chunks import GeneratedChunk, SourceChunk

ChunkLike = Union[GeneratedChunk, SourceChunk, tuple[str, Union[int, Iterable[int], None]]]


def _chunk_ids(chunk: ChunkLike) -> tuple[str, tuple[int, ...]]:
    if isinstance(chunk, (GeneratedChunk, SourceChunk)):
        return chunk.text, chunk.ids
    text, ids = chunk
    if ids is None:
        return text, ()
    if isinstance(ids, int):
        return text, (ids,)
    return text, tuple(ids)


def class_list(ids: Iterable[int], *, prefix: str = "c") -> str:
    return " ".join(f"{prefix}{i}" for i in sorted(set(ids)))


def render_chunks(chunks: Iterable[ChunkLike], *, class_prefix: str = "c") -> str:
    """Render chunks as one ``<div>`` per line of ``<span>`` units.

    Every unit is classed ``<prefix><id>`` for each of its ids so that a page
    can highlight all units sharing an id, in either view. Units without ids
    are rendered unclassed.
    """
    out: list[str] = ["<div>"]
    for chunk in chunks:
        text, ids = _chunk_ids(chunk)
        classes = class_list(ids, prefix=class_prefix)
        open_tag = f'<span class="{classes}">' if classes else "<span>"
        for i, piece in enumerate(text.split("\n")):
            if i:
                out.append("</div><div>")
            if piece:
                out.append(f"{open_tag}{html.escape(piece)}</span>")
    out.append("</div>")
    return "".join(out)

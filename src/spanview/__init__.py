from __future__ import annotations

from .api import RenderedViews, generate_html, render_views, save_html
from .chunks import GeneratedChunk, SourceChunk
from .config import DEFAULT_CONFIG, RenderConfig
from .errors import LexError, OutputWriteError
from .format import FormatResult, format_tokens
from .interner import RangeInterner
from .reconcile import load_original_source, sweep_source
from .render import render_chunks
from .spans import SYNTHETIC, Position, ProvenanceRange, Span
from .tokens import Delimiter, Group, Ident, Literal, Punct, Spacing

__all__ = [
    "DEFAULT_CONFIG",
    "Delimiter",
    "FormatResult",
    "GeneratedChunk",
    "Group",
    "Ident",
    "LexError",
    "Literal",
    "OutputWriteError",
    "Position",
    "ProvenanceRange",
    "Punct",
    "RangeInterner",
    "RenderConfig",
    "RenderedViews",
    "SYNTHETIC",
    "SourceChunk",
    "Spacing",
    "Span",
    "format_tokens",
    "generate_html",
    "load_original_source",
    "render_chunks",
    "render_views",
    "save_html",
    "sweep_source",
]

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from .config import DEFAULT_CONFIG, LEFT_MARKER, RIGHT_MARKER, RenderConfig
from .errors import OutputWriteError
from .format import format_tokens
from .reconcile import LineReader, load_original_source
from .render import render_chunks
from .tokens import TokenStream

logger = logging.getLogger(__name__)

_MARKER_RE = re.compile("|".join(re.escape(m) for m in (LEFT_MARKER, RIGHT_MARKER)))


@dataclass(frozen=True, slots=True)
class RenderedViews:
    left: str  # generated code
    right: str  # original source


def default_template() -> str:
    return resources.files(__package__).joinpath("template.html").read_text(encoding="utf-8")


def assemble(template: str, views: RenderedViews) -> str:
    """Substitute both views into ``template`` in a single pass.

    Marker text that happens to occur inside a view is left alone.
    """
    values = {LEFT_MARKER: views.left, RIGHT_MARKER: views.right}
    return _MARKER_RE.sub(lambda m: values[m.group(0)], template)


def render_views(
    stream: TokenStream,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
    read_lines: LineReader | None = None,
) -> RenderedViews:
    formatted = format_tokens(stream, config=config)
    source = load_original_source(formatted.interner, config=config, read_lines=read_lines)
    return RenderedViews(
        left=render_chunks(formatted.chunks, class_prefix=config.class_prefix),
        right=render_chunks(source, class_prefix=config.class_prefix),
    )


def generate_html(
    stream: TokenStream,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
    read_lines: LineReader | None = None,
) -> str:
    views = render_views(stream, config=config, read_lines=read_lines)
    template = config.template if config.template is not None else default_template()
    return assemble(template, views)


def save_html(
    stream: TokenStream,
    path: str | Path,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
    read_lines: LineReader | None = None,
) -> None:
    doc = generate_html(stream, config=config, read_lines=read_lines)
    p = Path(path)
    try:
        p.write_text(doc, encoding=config.encoding)
    except OSError as e:
        raise OutputWriteError(p, e) from e
    logger.debug("wrote %d characters of html to %s", len(doc), p)

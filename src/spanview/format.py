from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .chunks import GeneratedChunk
from .config import DEFAULT_CONFIG, RenderConfig
from .interner import RangeInterner
from .spans import Span
from .tokens import Group, Ident, Literal, Punct, Spacing, TokenStream, TokenTree

logger = logging.getLogger(__name__)

# Punctuation that attaches to whatever precedes it.
_TIGHT_PUNCT = frozenset({";", ",", ".", "?"})


class _NeedsSpace(Enum):
    NEVER = "never"
    ALWAYS = "always"
    IF_NOT_PUNCT = "if-not-punct"


@dataclass(slots=True)
class _FormatState:
    depth: int = 0
    newline: bool = True
    needs_space: _NeedsSpace = _NeedsSpace.NEVER


@dataclass(slots=True)
class FormatResult:
    chunks: list[GeneratedChunk]
    interner: RangeInterner

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.chunks)


@dataclass(slots=True)
class _TokenVisitor:
    interner: RangeInterner
    indent_unit: str
    chunks: list[GeneratedChunk] = field(default_factory=list)
    state: _FormatState = field(default_factory=_FormatState)

    def _emit(self, text: str, range_id: int | None = None) -> None:
        self.chunks.append(GeneratedChunk(text, range_id))

    def _space(self) -> None:
        self._emit(" ")

    def _settle(self) -> None:
        # A forced line break wins over whatever spacing the token asked for.
        if self.state.newline:
            self.state.needs_space = _NeedsSpace.NEVER

    def visit_str(self, text: str, span: Span) -> None:
        if not text:
            return
        st = self.state
        range_id = self.interner.intern(span)
        if text == "}":
            st.depth = max(st.depth - 1, 0)
            if not st.newline:
                st.newline = True
                self._emit("\n")
        if st.newline:
            st.newline = False
            if st.depth:
                self._emit(self.indent_unit * st.depth)
        self._emit(text, range_id)
        if text == "{":
            st.depth += 1
            st.newline = True
            self._emit("\n")
        elif text in (";", "}"):
            st.newline = True
            self._emit("\n")

    def visit_stream(self, stream: TokenStream) -> None:
        for tree in stream:
            self.visit_tree(tree)

    def visit_tree(self, tree: TokenTree) -> None:
        st = self.state
        if isinstance(tree, Group):
            opening, closing = tree.delimiter.open, tree.delimiter.close
            # Only a block brace is set apart; `(` and `[` hug what precedes them.
            if opening == "{" and st.needs_space is not _NeedsSpace.NEVER:
                self._space()
            self.visit_str(opening, tree.span_open)
            if opening:
                st.needs_space = _NeedsSpace.NEVER
            self.visit_stream(tree.stream)
            self.visit_str(closing, tree.span_close)
            if closing in (")", "]"):
                st.needs_space = _NeedsSpace.ALWAYS
        elif isinstance(tree, (Ident, Literal)):
            if st.needs_space is not _NeedsSpace.NEVER:
                self._space()
            self.visit_str(tree.text, tree.span)
            st.needs_space = _NeedsSpace.IF_NOT_PUNCT
        elif isinstance(tree, Punct):
            if st.needs_space is _NeedsSpace.ALWAYS and tree.text not in _TIGHT_PUNCT:
                self._space()
            self.visit_str(tree.text, tree.span)
            if tree.spacing is Spacing.ALONE:
                st.needs_space = _NeedsSpace.ALWAYS
            else:
                # Joint punctuation glues to the next character of the operator.
                st.needs_space = _NeedsSpace.NEVER
        else:
            raise TypeError(f"not a token tree: {type(tree)!r}")
        self._settle()


def format_tokens(
    stream: TokenStream,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
    interner: RangeInterner | None = None,
) -> FormatResult:
    """Pretty-print ``stream``, tagging every emitted run with its range id.

    Concatenating the returned chunks gives the formatted text. Runs that
    were not produced by a token (spaces, line breaks, indentation) and
    tokens with synthetic spans carry no id.
    """
    visitor = _TokenVisitor(
        interner=interner if interner is not None else RangeInterner(),
        indent_unit=" " * config.indent_width,
    )
    visitor.visit_stream(stream)
    logger.debug(
        "formatted %d chunks from %d distinct ranges in %d files",
        len(visitor.chunks),
        len(visitor.interner),
        len(visitor.interner.sources),
    )
    return FormatResult(chunks=visitor.chunks, interner=visitor.interner)

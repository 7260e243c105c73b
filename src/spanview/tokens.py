from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .spans import SYNTHETIC, Span


class Delimiter(str, Enum):
    PARENTHESIS = "()"
    BRACE = "{}"
    BRACKET = "[]"
    NONE = ""

    @property
    def open(self) -> str:
        return self.value[:1]

    @property
    def close(self) -> str:
        return self.value[1:]


class Spacing(str, Enum):
    # Alone: not followed by another punctuation character of the same operator.
    ALONE = "alone"
    JOINT = "joint"


@dataclass(frozen=True, slots=True)
class Ident:
    text: str
    span: Span = SYNTHETIC

    def __repr__(self) -> str:
        return f"Ident({self.text!r}, {self.span.format()})"


@dataclass(frozen=True, slots=True)
class Literal:
    text: str
    span: Span = SYNTHETIC

    def __repr__(self) -> str:
        return f"Literal({self.text!r}, {self.span.format()})"


@dataclass(frozen=True, slots=True)
class Punct:
    text: str
    span: Span = SYNTHETIC
    spacing: Spacing = Spacing.ALONE

    def __repr__(self) -> str:
        return f"Punct({self.text!r}, {self.spacing.value}, {self.span.format()})"


@dataclass(frozen=True, slots=True)
class Group:
    delimiter: Delimiter
    stream: tuple["TokenTree", ...] = field(default_factory=tuple)
    span_open: Span = SYNTHETIC
    span_close: Span = SYNTHETIC


TokenTree = Union[Group, Ident, Literal, Punct]
TokenStream = Sequence[TokenTree]

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .spans import Span


@dataclass(slots=True)
class LexError(Exception):
    span: Span
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.span.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


class OutputWriteError(OSError):
    """The rendered document could not be written to ``path``."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        super().__init__(cause.errno, f"cannot write {str(path)!r}: {cause.strerror or cause}")
        self.path = str(path)
        self.cause = cause

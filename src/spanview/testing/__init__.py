from __future__ import annotations

from .corpus import generate_corpus_files, generate_sources
from .lexer import tokenize

__all__ = ["generate_corpus_files", "generate_sources", "tokenize"]

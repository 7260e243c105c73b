"""Rendering settings."""

from __future__ import annotations

from dataclasses import dataclass

LEFT_MARKER = "{LEFT}"
RIGHT_MARKER = "{RIGHT}"


@dataclass(slots=True, frozen=True)
class RenderConfig:
    """Settings shared by the formatter, reconciler and renderer.

    ``template`` is the document the two rendered views are substituted
    into; ``None`` selects the packaged ``template.html``.
    """

    class_prefix: str = "c"
    indent_width: int = 4
    header_rule: str = "=" * 38
    template: str | None = None
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not self.class_prefix or any(ch.isspace() for ch in self.class_prefix):
            raise ValueError(f"class_prefix must be a non-empty word, got {self.class_prefix!r}")
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be >= 0, got {self.indent_width}")
        if self.template is not None:
            missing = [m for m in (LEFT_MARKER, RIGHT_MARKER) if m not in self.template]
            if missing:
                raise ValueError(f"template is missing marker(s): {', '.join(missing)}")


DEFAULT_CONFIG = RenderConfig()

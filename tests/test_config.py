from __future__ import annotations

import pytest

from spanview import DEFAULT_CONFIG, RenderConfig


def test_defaults() -> None:
    assert DEFAULT_CONFIG.class_prefix == "c"
    assert DEFAULT_CONFIG.indent_width == 4
    assert DEFAULT_CONFIG.template is None


@pytest.mark.parametrize(
    "kwargs, needle",
    [
        ({"class_prefix": ""}, "class_prefix"),
        ({"class_prefix": "a b"}, "class_prefix"),
        ({"indent_width": -1}, "indent_width"),
        ({"template": "<html>{LEFT}</html>"}, "{RIGHT}"),
    ],
)
def test_invalid_config(kwargs: dict[str, object], needle: str) -> None:
    with pytest.raises(ValueError) as e:
        RenderConfig(**kwargs)  # type: ignore[arg-type]
    assert needle in str(e.value)

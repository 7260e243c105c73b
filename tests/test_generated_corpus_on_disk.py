from __future__ import annotations

from pathlib import Path

from spanview import format_tokens, generate_html, load_original_source, render_views
from spanview.testing import generate_corpus_files, generate_sources, tokenize


def test_generated_corpus_on_disk_renders(tmp_path: Path) -> None:
    # Large enough to be meaningful, small enough to keep CI fast.
    seed = 1
    count = 100

    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir(parents=True, exist_ok=True)

    for rel, src in generate_corpus_files(seed=seed, count=count):
        p = corpus_dir / rel
        p.write_text(src, encoding="utf-8")

        tokens = tokenize(src, file=str(p))
        formatted = format_tokens(tokens)
        source = load_original_source(formatted.interner)

        # Every token of the file is referenced, so the view spans the whole file.
        body = "".join(c.text for c in source).split(f"// {p}\n", 1)[1]
        assert body.split("\n", 1)[1] == src.rstrip("\n") + "\n"
        assert {i for c in source for i in c.active_ids} == set(range(len(formatted.interner)))

        views = render_views(tokens)
        assert views == render_views(tokens)


def test_corpus_reformat_is_stable() -> None:
    for i, src in enumerate(generate_sources(seed=7, count=100)):
        out1 = format_tokens(tokenize(src, file=f"case{i}.rs")).text
        out2 = format_tokens(tokenize(out1, file=f"case{i}.rs")).text
        assert out2 == out1, f"case {i} not stable"


def test_corpus_is_deterministic() -> None:
    assert generate_sources(seed=3, count=20) == generate_sources(seed=3, count=20)
    assert generate_sources(seed=3, count=5) != generate_sources(seed=4, count=5)


def test_multi_file_document(tmp_path: Path) -> None:
    files = generate_corpus_files(seed=2, count=3)
    tokens = []
    for rel, src in files:
        p = tmp_path / rel
        p.write_text(src, encoding="utf-8")
        tokens.extend(tokenize(src, file=str(p)))
    doc = generate_html(tokens)
    positions = [doc.index(f"// {tmp_path / rel}") for rel, _ in files]
    assert positions == sorted(positions)

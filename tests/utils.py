from __future__ import annotations

from pathlib import Path


def write_sample_corpus(root: Path) -> Path:
    """Create a small corpus containing both .txt and .html sources."""
    corpus_dir = root / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The storm clouds rolled over the bay. Sailors watched the winds.\n"
        "Unexpectedly, the extraordinary conditions intensified.",
        encoding="utf-8",
    )
    (corpus_dir / "nested" / "page.html").write_text(
        "<html><head><style>p { color: red; }</style></head>"
        "<body><p>The captain stood on deck.</p><p>Everybody celebrated.</p></body></html>",
        encoding="utf-8",
    )
    (corpus_dir / "notes.md").write_text("Ignored file.", encoding="utf-8")
    return corpus_dir

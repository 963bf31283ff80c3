from __future__ import annotations

from pathlib import Path
from typing import List

from bs4 import BeautifulSoup

from .models import Document

# File types that can be expanded into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".html", ".htm"}
HTML_EXTENSIONS = {".html", ".htm"}
# Elements that break the flow of text; inline markup is joined without a gap.
BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
    "figcaption", "footer", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr",
    "li", "main", "nav", "ol", "p", "pre", "section", "table", "td", "th", "tr",
    "ul",
]


class SourceError(RuntimeError):
    """Raised when an input file cannot be turned into plain text."""


def html_to_text(markup: str) -> str:
    """Return the visible text of an HTML fragment or page."""
    soup = BeautifulSoup(markup, "html.parser")
    for element in soup(["script", "style"]):
        element.decompose()
    for element in soup.find_all(BLOCK_TAGS):
        element.insert_before("\n")
        element.insert_after("\n")
    return soup.get_text().strip()


def load_documents(input_path: Path) -> List[Document]:
    """Expand a file or directory into documents, ordered by relative path."""
    if input_path.is_file():
        return [document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    # Relative paths keep doc IDs stable regardless of where the tree lives.
    return [document_from_file(p, p.relative_to(input_path).as_posix()) for p in files]


def document_from_file(path: Path, doc_id: str) -> Document:
    """Read a supported file from disk and wrap it in a Document."""
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_INPUT_EXTENSIONS:
        raise SourceError(f"Unsupported input type '{suffix}': {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"Unable to read {path}: {exc}") from exc
    text = html_to_text(raw) if suffix in HTML_EXTENSIONS else raw
    return Document(doc_id=doc_id, text=text)

from __future__ import annotations

import re
from typing import List

NEWLINES_RE = re.compile(r"\n+")
# Skips leading non-letters, then captures up to the last letter.
LETTER_SPAN_RE = re.compile(r"[^A-Za-z]*(.*[A-Za-z])?", re.DOTALL)
LETTER_RE = re.compile(r"[A-Za-z]")
TERMINATOR_RE = re.compile(r"[.!?]")


def _require_str(value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"A string is required, got {type(value).__name__}.")


def trim_non_letters(value: str) -> str:
    """Strip anything other than A-Z/a-z from both ends of ``value``."""
    _require_str(value)
    match = LETTER_SPAN_RE.match(value)
    return match.group(1) or ""


def get_words(text: str) -> List[str]:
    """Split a passage into word tokens that contain at least one letter."""
    _require_str(text)
    if not text:
        return []
    text = NEWLINES_RE.sub(" ", text)
    words: List[str] = []
    for raw in text.split():
        word = trim_non_letters(raw)
        if LETTER_RE.search(word):
            words.append(word)
    return words


def get_sentences(text: str) -> List[str]:
    """
    Split a passage into sentences, keeping terminators and wrapping parentheses.

    Any ``.``, ``!`` or ``?`` ends a sentence, abbreviations included. A final
    fragment without a terminator is kept as the last sentence.
    """
    _require_str(text)
    if not text:
        return []
    text = NEWLINES_RE.sub(" ", text)
    sentences: List[str] = []
    start = 0
    tail_start = 0
    for match in TERMINATOR_RE.finditer(text):
        end = tail_start = match.end()
        if match.start() == start:
            # A terminator with no text before it does not form a sentence.
            start = end
            continue
        if text.startswith(")", end):
            end += 1
        sentences.append(text[start:end])
        start = end
    # Everything after the last terminator is kept, even a lone closing parenthesis
    # already attached to the previous sentence.
    if tail_start < len(text):
        sentences.append(text[tail_start:])
    return sentences

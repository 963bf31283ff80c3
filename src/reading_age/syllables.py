from __future__ import annotations

import logging
import re
from typing import Iterable, List

LOGGER = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s")
SILENT_SUFFIX_RE = re.compile(r"(es|ed|e)$")
VOWEL_RUN_RE = re.compile(r"[aeiouy]+")


class SyllableError(ValueError):
    """Raised when a token cannot be treated as a single word."""


def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a single word.

    Each run of vowels (a, e, i, o, u, y) counts as one syllable, subject to:

    - words of three letters or fewer are always one syllable;
    - a final -es, -ed or -e is ignored, except after -le;
    - consecutive vowels count once.

    This is a heuristic and is knowingly wrong for many irregular words.
    """
    if not isinstance(word, str):
        raise TypeError(f"A string is required, got {type(word).__name__}.")
    if not word:
        raise SyllableError("Empty string.")
    if WHITESPACE_RE.search(word):
        raise SyllableError(f"Contains whitespace: {word!r}")
    if len(word) <= 3:
        return 1
    word = word.lower()
    if not word.endswith("le"):
        word = SILENT_SUFFIX_RE.sub("", word, count=1)
    return len(VOWEL_RUN_RE.findall(word))


def syllables_per_word(words: Iterable[str]) -> List[int]:
    """Estimate syllables for each word, skipping (and logging) words that fail."""
    counts: List[int] = []
    for word in words:
        try:
            counts.append(count_syllables(word))
        except (TypeError, SyllableError) as exc:
            LOGGER.warning("Skipping word %r in syllable count: %s", word, exc)
    return counts

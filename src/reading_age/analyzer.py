from __future__ import annotations

import logging
from dataclasses import fields
from typing import List, Sequence

from .models import AnalysisResult, DeepAnalysisResult
from .scoring import RANKING_METRICS, ranking_key
from .syllables import syllables_per_word
from .tokenization import get_sentences, get_words

LOGGER = logging.getLogger(__name__)

COMPLEX_WORD_MIN_SYLLABLES = 3


class SentenceAnalysisError(RuntimeError):
    """Raised when one sentence of a deep analysis cannot be analyzed."""

    def __init__(self, index: int, sentence: str) -> None:
        super().__init__(f"Failed to analyze sentence {index}: {sentence!r}")
        self.index = index
        self.sentence = sentence


def complex_word_positions(syllable_counts: Sequence[int]) -> List[int]:
    """Return the indexes of words with three or more syllables."""
    return [
        idx
        for idx, count in enumerate(syllable_counts)
        if count >= COMPLEX_WORD_MIN_SYLLABLES
    ]


def analyze(text: str) -> AnalysisResult:
    """Tokenize a passage, estimate syllables and score its readability."""
    # Sentences and words are counted from separate passes over the same text.
    sentences = get_sentences(text)
    words = get_words(text)
    syllables = syllables_per_word(words)
    positions = complex_word_positions(syllables)
    result = AnalysisResult(
        source=text,
        sentences=tuple(sentences),
        words=tuple(words),
        syllable_counts=tuple(syllables),
        complex_word_positions=tuple(positions),
        complex_words=tuple(words[idx] for idx in positions),
    )
    LOGGER.debug(
        "Analyzed passage: %d sentences, %d words, %d syllables.",
        result.num_sentences,
        result.num_words,
        result.num_syllables,
    )
    return result


def deep_analyze(text: str, rank_by: str = "grade_level") -> DeepAnalysisResult:
    """
    Analyze a passage and each of its sentences, hardest sentence first.

    Sentences are ranked by Flesch-Kincaid Grade Level (or SMOG when
    ``rank_by="smog_index"``). The sort is stable, so equal scores keep their
    order in the passage; undefined scores sort last.
    """
    if rank_by not in RANKING_METRICS:
        raise ValueError(
            f"Unknown ranking '{rank_by}'. Expected one of {sorted(RANKING_METRICS)}."
        )
    attribute = RANKING_METRICS[rank_by]

    passage = analyze(text)
    sentence_results: List[AnalysisResult] = []
    for idx, sentence in enumerate(passage.sentences):
        try:
            sentence_results.append(analyze(sentence))
        except Exception as exc:
            LOGGER.error("Deep analysis failed on sentence %d: %r", idx, sentence)
            raise SentenceAnalysisError(idx, sentence) from exc

    sentence_results.sort(
        key=lambda r: ranking_key(getattr(r, attribute)), reverse=True
    )
    return DeepAnalysisResult(
        **{f.name: getattr(passage, f.name) for f in fields(passage)},
        sentence_results=tuple(sentence_results),
        rank_by=rank_by,
    )

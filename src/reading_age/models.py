from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from . import scoring


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Tokens, syllable estimates and readability metrics for one passage."""

    source: str
    sentences: Tuple[str, ...]
    words: Tuple[str, ...]
    syllable_counts: Tuple[int, ...]
    complex_word_positions: Tuple[int, ...]
    complex_words: Tuple[str, ...]

    @property
    def num_sentences(self) -> int:
        return len(self.sentences)

    @property
    def num_words(self) -> int:
        return len(self.words)

    @property
    def num_syllables(self) -> int:
        return sum(self.syllable_counts)

    @property
    def num_complex_words(self) -> int:
        return len(self.complex_word_positions)

    @property
    def average_words_per_sentence(self) -> float:
        return scoring.ratio(self.num_words, self.num_sentences)

    @property
    def average_syllables_per_word(self) -> float:
        return scoring.ratio(self.num_syllables, self.num_words)

    @property
    def complex_word_ratio(self) -> float:
        return scoring.ratio(self.num_complex_words, self.num_words)

    @property
    def complex_words_per_sentence(self) -> float:
        return scoring.ratio(self.num_complex_words, self.num_sentences)

    @property
    def flesch_kincaid_reading_ease(self) -> float:
        return scoring.flesch_kincaid_reading_ease(
            self.average_words_per_sentence, self.average_syllables_per_word
        )

    @property
    def flesch_kincaid_grade_level(self) -> float:
        return scoring.flesch_kincaid_grade_level(
            self.average_words_per_sentence, self.average_syllables_per_word
        )

    @property
    def gunning_fog_index(self) -> float:
        return scoring.gunning_fog_index(
            self.average_words_per_sentence, self.complex_word_ratio
        )

    @property
    def smog_index(self) -> float:
        return scoring.smog_index(self.complex_words_per_sentence)

    @property
    def reading_age(self) -> float:
        """Mean of grade level, fog index and SMOG."""
        return scoring.reading_age(
            self.flesch_kincaid_grade_level, self.gunning_fog_index, self.smog_index
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the tokens and every derived metric as plain data."""
        return {
            "source": self.source,
            "sentences": list(self.sentences),
            "words": list(self.words),
            "syllable_counts": list(self.syllable_counts),
            "complex_word_positions": list(self.complex_word_positions),
            "complex_words": list(self.complex_words),
            **self.metrics(),
        }

    def metrics(self) -> Dict[str, float]:
        return {
            "num_sentences": self.num_sentences,
            "num_words": self.num_words,
            "num_syllables": self.num_syllables,
            "num_complex_words": self.num_complex_words,
            "average_words_per_sentence": self.average_words_per_sentence,
            "average_syllables_per_word": self.average_syllables_per_word,
            "complex_word_ratio": self.complex_word_ratio,
            "complex_words_per_sentence": self.complex_words_per_sentence,
            "flesch_kincaid_reading_ease": self.flesch_kincaid_reading_ease,
            "flesch_kincaid_grade_level": self.flesch_kincaid_grade_level,
            "gunning_fog_index": self.gunning_fog_index,
            "smog_index": self.smog_index,
            "reading_age": self.reading_age,
        }


@dataclass(frozen=True, slots=True)
class DeepAnalysisResult(AnalysisResult):
    """Whole-passage analysis plus per-sentence analyses, hardest first."""

    sentence_results: Tuple[AnalysisResult, ...] = ()
    rank_by: str = "grade_level"

    def to_dict(self) -> dict[str, Any]:
        payload = AnalysisResult.to_dict(self)
        payload["rank_by"] = self.rank_by
        payload["sentence_results"] = [r.to_dict() for r in self.sentence_results]
        return payload


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str

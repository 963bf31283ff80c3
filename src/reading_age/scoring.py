from __future__ import annotations

import math
from typing import Dict

import numpy as np

# Result attribute used for each supported sentence ranking.
RANKING_METRICS: Dict[str, str] = {
    "grade_level": "flesch_kincaid_grade_level",
    "smog_index": "smog_index",
}


def ratio(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE-754 semantics.

    A zero denominator yields inf (or NaN for 0/0) instead of raising, so
    metrics for empty passages come out undefined rather than failing.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def flesch_kincaid_reading_ease(
    words_per_sentence: float, syllables_per_word: float
) -> float:
    """Flesch-Kincaid Reading Ease; higher is easier."""
    return 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word


def flesch_kincaid_grade_level(
    words_per_sentence: float, syllables_per_word: float
) -> float:
    """Flesch-Kincaid Grade Level; lower is easier."""
    return 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59


def gunning_fog_index(words_per_sentence: float, complex_word_ratio: float) -> float:
    """Gunning Fog Index; lower is easier."""
    return 0.4 * (words_per_sentence + 100 * complex_word_ratio)


def smog_index(complex_words_per_sentence: float) -> float:
    """Simple Measure Of Gobbledygook; lower is easier."""
    return 1.0430 * math.sqrt(30 * complex_words_per_sentence) + 3.1291


def reading_age(grade_level: float, fog_index: float, smog: float) -> float:
    """Composite difficulty: the mean of grade level, fog index and SMOG."""
    return (grade_level + fog_index + smog) / 3


def typical_age(score: float) -> float:
    """Age (in years) of a typical reader for a grade-style score."""
    if not math.isfinite(score):
        return score
    return float(math.floor(score + 5.5))


def ranking_key(value: float) -> float:
    """Sort key that places undefined scores after every real one."""
    return -math.inf if math.isnan(value) else value


def round_half_up(value: float, places: int) -> float:
    """Round to ``places`` decimals with ties going up; non-finite values pass through."""
    if not math.isfinite(value):
        return value
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor

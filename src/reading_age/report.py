from __future__ import annotations

from typing import List, TypedDict

from .models import AnalysisResult, DeepAnalysisResult
from .scoring import RANKING_METRICS, round_half_up, typical_age


class ScoresPayload(TypedDict):
    flesch_kincaid_reading_ease: float
    flesch_kincaid_grade_level: float
    gunning_fog_index: float
    smog_index: float
    reading_age: float


class SentencePayload(TypedDict):
    rank: int
    score: float
    sentence: str


class SummaryPayload(TypedDict, total=False):
    num_sentences: int
    num_words: int
    num_complex_words: int
    num_syllables: int
    average_words_per_sentence: float
    complex_words_per_sentence: float
    complex_word_percentage: float
    average_syllables_per_word: float
    scores: ScoresPayload
    rank_by: str
    complex_sentences: List[SentencePayload]


def summarize(
    result: AnalysisResult,
    top_n: int = 5,
    decimals: int = 3,
    percent_decimals: int = 1,
) -> SummaryPayload:
    """Round a result into a JSON-ready summary; deep results list top sentences."""
    summary: SummaryPayload = {
        "num_sentences": result.num_sentences,
        "num_words": result.num_words,
        "num_complex_words": result.num_complex_words,
        "num_syllables": result.num_syllables,
        "average_words_per_sentence": round_half_up(
            result.average_words_per_sentence, decimals
        ),
        "complex_words_per_sentence": round_half_up(
            result.complex_words_per_sentence, decimals
        ),
        "complex_word_percentage": round_half_up(
            result.complex_word_ratio * 100, percent_decimals
        ),
        "average_syllables_per_word": round_half_up(
            result.average_syllables_per_word, decimals
        ),
        "scores": {
            "flesch_kincaid_reading_ease": round_half_up(
                result.flesch_kincaid_reading_ease, decimals
            ),
            "flesch_kincaid_grade_level": round_half_up(
                result.flesch_kincaid_grade_level, decimals
            ),
            "gunning_fog_index": round_half_up(result.gunning_fog_index, decimals),
            "smog_index": round_half_up(result.smog_index, decimals),
            "reading_age": round_half_up(result.reading_age, decimals),
        },
    }
    if isinstance(result, DeepAnalysisResult):
        attribute = RANKING_METRICS[result.rank_by]
        summary["rank_by"] = result.rank_by
        summary["complex_sentences"] = [
            {
                "rank": rank,
                "score": round_half_up(getattr(sub, attribute), decimals),
                "sentence": sub.source.strip(),
            }
            for rank, sub in enumerate(result.sentence_results[:top_n], start=1)
        ]
    return summary


def describe(
    result: AnalysisResult,
    top_n: int = 5,
    decimals: int = 3,
    percent_decimals: int = 1,
) -> List[str]:
    """Render a result as plain report lines."""
    summary = summarize(result, top_n, decimals, percent_decimals)
    scores = summary["scores"]
    lines = [
        "Basic Stats",
        f"  Number of Sentences: {summary['num_sentences']}",
        f"  Number of Words: {summary['num_words']}",
        f"  Number of Complex Words: {summary['num_complex_words']}",
        f"  Number of Syllables: {summary['num_syllables']}",
        "Averages",
        f"  Average Number of Words per Sentence: {summary['average_words_per_sentence']}",
        f"  Average Number of Complex Words per Sentence: {summary['complex_words_per_sentence']}",
        f"  Percentage of Complex Words: {summary['complex_word_percentage']}%",
        f"  Average Number of Syllables per Word: {summary['average_syllables_per_word']}",
        "Reading Ease Scores",
        f"  Flesch Kincaid Reading Ease: {scores['flesch_kincaid_reading_ease']} (Higher is Better)",
    ]
    for label, key in (
        ("Flesch Kincaid Grade Level", "flesch_kincaid_grade_level"),
        ("Gunning Fog Index", "gunning_fog_index"),
        ("Simple Measure Of Gobbledygook (SMOG) Index", "smog_index"),
    ):
        # Typical ages come from the unrounded score.
        age = typical_age(getattr(result, key))
        lines.append(f"  {label}: {scores[key]} (Lower is Better)")
        lines.append(f"    Typically Understandable by a {age:.0f} Year Old.")
    lines.append(f"  Reading Age: {round_half_up(result.reading_age, 1)}")

    if "complex_sentences" in summary:
        label = "FKGL" if summary["rank_by"] == "grade_level" else "SMOG"
        lines.append("Most Complex Sentences")
        for entry in summary["complex_sentences"]:
            lines.append(
                f"  {entry['rank']}. {label} {entry['score']}: {entry['sentence']}"
            )
    return lines

"""
reading_age package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analyzer import SentenceAnalysisError, analyze, deep_analyze
from .config import ReadingAgeConfig, config_from_dict, config_from_yaml, load_config
from .models import AnalysisResult, DeepAnalysisResult
from .report import describe, summarize
from .syllables import SyllableError, count_syllables
from .tokenization import get_sentences, get_words, trim_non_letters

__all__ = [
    "AnalysisResult",
    "DeepAnalysisResult",
    "ReadingAgeConfig",
    "SentenceAnalysisError",
    "SyllableError",
    "analyze",
    "config_from_dict",
    "config_from_yaml",
    "count_syllables",
    "deep_analyze",
    "describe",
    "get_sentences",
    "get_words",
    "load_config",
    "summarize",
    "trim_non_letters",
]

__version__ = "0.1.0"

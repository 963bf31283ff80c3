from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .scoring import RANKING_METRICS


@dataclass(slots=True)
class ReadingAgeConfig:
    """Configuration options for reports and sentence ranking."""

    top_sentences: int = 5
    decimal_places: int = 3
    percent_decimal_places: int = 1
    rank_by: str = "grade_level"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ReadingAgeConfig)}
    return {key: data[key] for key in data if key in allowed}


def validate_config(config: ReadingAgeConfig) -> ReadingAgeConfig:
    """Reject values the analyzer cannot honour."""
    for name in ("top_sentences", "decimal_places", "percent_decimal_places"):
        value = getattr(config, name)
        # bool is an int subclass but never a sensible count.
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{name} must be an integer, got {value!r}.")
    if not isinstance(config.rank_by, str):
        raise ValueError(f"rank_by must be a string, got {config.rank_by!r}.")
    if config.rank_by not in RANKING_METRICS:
        raise ValueError(
            f"Unknown rank_by '{config.rank_by}'. "
            f"Expected one of {sorted(RANKING_METRICS)}."
        )
    if config.top_sentences < 0:
        raise ValueError("top_sentences must be zero or greater.")
    return config


def config_from_dict(data: Mapping[str, Any] | None) -> ReadingAgeConfig:
    """Build a ReadingAgeConfig from a dictionary-like input."""
    if data is None:
        return ReadingAgeConfig()
    return validate_config(ReadingAgeConfig(**_build_kwargs(data)))


def config_from_yaml(path: str | Path) -> ReadingAgeConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadingAgeConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadingAgeConfig()
    return config_from_yaml(path)

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .analyzer import deep_analyze
from .config import ReadingAgeConfig, load_config, validate_config
from .models import Document
from .report import SummaryPayload, describe, summarize
from .sources import SourceError, load_documents

app = typer.Typer(help="Reading age and readability metrics CLI.", no_args_is_help=True)


class DocumentSummary(TypedDict):
    doc_id: str
    summary: SummaryPayload


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Configure logging before running a sub-command."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    top: int | None = typer.Option(
        None, "--top", "-n", help="Number of most complex sentences to list."
    ),
    rank_by: str | None = typer.Option(
        None, "--rank-by", help="Sentence ranking metric ('grade_level' or 'smog_index')."
    ),
) -> None:
    """Analyze every document under the input path and emit a JSON summary."""
    cfg = _load_overridden_config(config, top, rank_by)
    documents = _load_documents(input_path)
    summary = _build_summary(documents, cfg)
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def report(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    top: int | None = typer.Option(
        None, "--top", "-n", help="Number of most complex sentences to list."
    ),
    rank_by: str | None = typer.Option(
        None, "--rank-by", help="Sentence ranking metric ('grade_level' or 'smog_index')."
    ),
) -> None:
    """Print a readable report for a single document."""
    cfg = _load_overridden_config(config, top, rank_by)
    document = _load_documents(input_path)[0]
    result = deep_analyze(document.text, rank_by=cfg.rank_by)
    typer.echo(f"File: {document.doc_id}")
    for line in describe(
        result,
        top_n=cfg.top_sentences,
        decimals=cfg.decimal_places,
        percent_decimals=cfg.percent_decimal_places,
    ):
        typer.echo(line)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadingAgeConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_overridden_config(
    config: Path | None, top: int | None, rank_by: str | None
) -> ReadingAgeConfig:
    """Load configuration and apply CLI overrides when provided."""
    try:
        cfg = load_config(config)
        if top is not None:
            cfg.top_sentences = top
        if rank_by:
            cfg.rank_by = rank_by
        return validate_config(cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_documents(input_path: Path) -> List[Document]:
    try:
        return load_documents(input_path)
    except SourceError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build_summary(
    documents: List[Document], cfg: ReadingAgeConfig
) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each document."""
    summary: List[DocumentSummary] = []
    for document in sorted(documents, key=lambda d: d.doc_id):
        result = deep_analyze(document.text, rank_by=cfg.rank_by)
        summary.append(
            {
                "doc_id": document.doc_id,
                "summary": summarize(
                    result,
                    top_n=cfg.top_sentences,
                    decimals=cfg.decimal_places,
                    percent_decimals=cfg.percent_decimal_places,
                ),
            }
        )
    return summary


if __name__ == "__main__":
    main()

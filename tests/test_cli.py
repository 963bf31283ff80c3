import json
from pathlib import Path

from typer.testing import CliRunner

from reading_age.cli import app
from tests.utils import write_sample_corpus

runner = CliRunner()


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """analyze returns a JSON summary for .txt and .html documents."""
    corpus_dir = write_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", "nested/page.html"]
    html_summary = payload["documents"][1]["summary"]
    assert html_summary["num_sentences"] == 2
    assert html_summary["num_words"] == 7
    assert len(html_summary["complex_sentences"]) == 2


def test_cli_analyze_respects_top_and_config(tmp_path: Path):
    corpus_dir = write_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("rank_by: smog_index\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(corpus_dir / "chapter1.txt"),
            "--config",
            str(config_path),
            "--top",
            "1",
        ],
    )

    assert result.exit_code == 0, result.output
    summary = json.loads(result.stdout)["documents"][0]["summary"]
    assert summary["rank_by"] == "smog_index"
    assert len(summary["complex_sentences"]) == 1
    assert summary["complex_sentences"][0]["sentence"].startswith("Unexpectedly")


def test_cli_analyze_rejects_unknown_ranking(tmp_path: Path):
    corpus_dir = write_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--rank-by", "lexile"]
    )

    assert result.exit_code != 0


def test_cli_report_prints_sections(tmp_path: Path):
    corpus_dir = write_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["report", "--input-path", str(corpus_dir / "chapter1.txt")]
    )

    assert result.exit_code == 0, result.output
    assert "File: chapter1.txt" in result.stdout
    assert "Reading Ease Scores" in result.stdout
    assert "Most Complex Sentences" in result.stdout


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])

    assert result.exit_code == 0
    assert "top_sentences: 5" in result.stdout


def test_cli_rejects_unknown_log_level():
    result = runner.invoke(app, ["--log-level", "bogus", "print-config"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)


def test_cli_accepts_known_log_level():
    result = runner.invoke(app, ["--log-level", "debug", "print-config"])

    assert result.exit_code == 0


def test_cli_reports_badly_typed_config(tmp_path: Path):
    corpus_dir = write_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("top_sentences: five\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(corpus_dir), "--config", str(config_path)],
    )

    assert result.exit_code == 2


def test_cli_counts_inline_html_markup_as_one_word(tmp_path: Path):
    page = tmp_path / "inline.html"
    page.write_text(
        "<p>It was extra<b>ordinary</b>.</p><p>We agreed.</p>", encoding="utf-8"
    )

    result = runner.invoke(app, ["analyze", "--input-path", str(page)])

    assert result.exit_code == 0, result.output
    summary = json.loads(result.stdout)["documents"][0]["summary"]
    assert summary["num_words"] == 5
    assert summary["num_sentences"] == 2
    assert summary["num_complex_words"] == 1

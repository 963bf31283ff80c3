"""
Tiny helper script to eyeball sentence rankings for a couple of passages.
"""

from __future__ import annotations

from reading_age import deep_analyze, load_config
from reading_age.report import describe


def main() -> None:
    config = load_config()
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "Quantum entanglement is a physical phenomenon. It occurs when particles interact "
        "in ways such that their states cannot be described independently.",
    ]

    for sample in samples:
        result = deep_analyze(sample, rank_by=config.rank_by)
        print("-" * 40)
        print(sample)
        for line in describe(result, top_n=config.top_sentences):
            print(line)
        print(f"Reading age: {result.reading_age:.1f}")


if __name__ == "__main__":
    main()

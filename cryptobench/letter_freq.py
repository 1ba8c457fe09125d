"""Count the letters A-Z in a text and report their frequencies."""

from __future__ import annotations

import argparse
import string
import sys
from collections import Counter
from os import PathLike
from typing import Sequence

ALPHABET = string.ascii_uppercase


def count_letters(text: str) -> tuple[list[int], int]:
    """Return per-letter counts for A..Z (case-insensitive) and their total."""
    counter = Counter(ch.upper() for ch in text if ch in string.ascii_letters)
    counts = [counter[letter] for letter in ALPHABET]
    return counts, sum(counts)


def letter_freq_from_file(path: str | PathLike[str]) -> tuple[list[int], int]:
    """Count letters in a file; an unreadable file counts as empty."""
    try:
        with open(path, encoding="latin-1") as fh:
            text = fh.read()
    except OSError:
        return [0] * len(ALPHABET), 0
    return count_letters(text)


def percentages(counts: Sequence[int], total: int) -> list[float]:
    """Return each count as a percentage of ``total`` (all zero when empty)."""
    return [100.0 * c / total if total else 0.0 for c in counts]


def format_table(counts: Sequence[int], total: int) -> str:
    rows = ["Letter  Count  Frequency(%)"]
    rows.extend(
        f"{letter}{count:>9}{pct:>12.2f}"
        for letter, count, pct in zip(ALPHABET, counts, percentages(counts, total))
    )
    return "\n".join(rows) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Letter frequency of the text read from standard input."
    )
    parser.parse_args(argv)
    counts, total = count_letters(sys.stdin.read())
    if total == 0:
        print("No letters!", file=sys.stderr)
        return 1
    sys.stdout.write(format_table(counts, total))
    return 0


if __name__ == "__main__":
    sys.exit(main())
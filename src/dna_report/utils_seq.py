"""Lightweight sequence utilities."""

from __future__ import annotations

from typing import List

COMPLEMENT = str.maketrans("ACGT", "TGCA")


def complement(sequence: str) -> str:
    """Return the reverse complement of a nucleotide sequence."""
    return sequence.translate(COMPLEMENT)[::-1]


def wrap_sequence(sequence: str, width: int) -> List[str]:
    """Split a sequence into fixed-width lines; width <= 0 disables wrapping."""
    if not sequence:
        return []
    if width <= 0:
        return [sequence]
    return [sequence[i : i + width] for i in range(0, len(sequence), width)]

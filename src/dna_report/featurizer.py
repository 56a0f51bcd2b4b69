"""Sequence cleaning and composition statistics."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field

CANONICAL_BASES = ("A", "C", "G", "T")
ALLOWED_BASES = frozenset(CANONICAL_BASES)

_HEADER_RE = re.compile(r"\A>[^\n]*")


@dataclass(frozen=True, slots=True)
class CompositionStats:
    gc_percent: float
    gc_count: int
    at_count: int
    other_count: int
    length: int
    base_counts: dict[str, int] = field(default_factory=dict)

    def as_row(self) -> dict:
        """Flatten the stats into a feature row."""
        row = {
            "length": self.length,
            "gc_percent": self.gc_percent,
            "gc_count": self.gc_count,
            "at_count": self.at_count,
            "other_count": self.other_count,
        }
        for base in CANONICAL_BASES:
            row[f"count_{base}"] = self.base_counts.get(base, 0)
        return row


def strip_header(raw: str) -> str:
    """Drop a FASTA header line if the text starts with one.

    Only a `>` at the very first character opens a header; leading blank
    lines or whitespace mean the text is treated as sequence body.
    """
    return _HEADER_RE.sub("", raw, count=1)


def normalize(raw: str) -> str:
    """Strip the header and whitespace, uppercase and keep only A/C/G/T."""
    body = strip_header(raw)
    upper = "".join(body.split()).upper()
    return "".join(ch for ch in upper if ch in ALLOWED_BASES)


def analyze(sequence: str) -> CompositionStats:
    """Return GC/AT tallies and GC percentage for a sequence."""
    counts = Counter(sequence)
    length = len(sequence)
    gc = counts["G"] + counts["C"]
    at = counts["A"] + counts["T"]
    gc_percent = (gc / length * 100.0) if length else 0.0
    return CompositionStats(
        gc_percent=gc_percent,
        gc_count=gc,
        at_count=at,
        other_count=length - gc - at,
        length=length,
        base_counts={base: counts[base] for base in CANONICAL_BASES},
    )

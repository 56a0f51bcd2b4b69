"""Report formatting plus CSV and JSONL feature exports."""

from __future__ import annotations

import json
from typing import Iterable, TextIO

import pandas as pd

from .featurizer import CANONICAL_BASES, CompositionStats
from .utils_seq import wrap_sequence

FASTA_LINE_WIDTH = 60
FEATURE_FORMATS = ("csv", "jsonl")


def format_report(
    stats: CompositionStats,
    rev_comp: str,
    original_length: int,
    *,
    line_width: int = FASTA_LINE_WIDTH,
    precision: int = 2,
) -> str:
    """Render composition stats and the reverse complement as text."""
    base_counts = " ".join(
        f"{base}={stats.base_counts.get(base, 0)}" for base in CANONICAL_BASES
    )
    lines = [
        f"Sequence length: {stats.length}",
        f"Input length: {original_length}",
        f"GC content: {stats.gc_percent:.{precision}f}%",
        f"G+C count: {stats.gc_count}",
        f"A+T count: {stats.at_count}",
        f"Other count: {stats.other_count}",
        f"Base counts: {base_counts}",
        f">reverse_complement length={len(rev_comp)}",
    ]
    lines.extend(wrap_sequence(rev_comp, line_width))
    return "\n".join(lines) + "\n"


def features_frame(rows: Iterable[dict]) -> pd.DataFrame:
    """Collect feature rows into a DataFrame, one row per sequence."""
    return pd.DataFrame(list(rows))


def write_features(rows: Iterable[dict], handle: TextIO, fmt: str = "csv") -> None:
    """Write feature rows to an open text stream as CSV or JSON Lines."""
    if fmt not in FEATURE_FORMATS:
        raise ValueError(f"Unsupported feature format: {fmt}")
    if fmt == "csv":
        features_frame(rows).to_csv(handle, index=False)
        return
    for row in rows:
        handle.write(json.dumps(row, ensure_ascii=False))
        handle.write("\n")

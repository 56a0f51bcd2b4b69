"""Orchestration of the normalize / analyze / complement / format stages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from .exporter import FASTA_LINE_WIDTH, format_report
from .featurizer import CompositionStats, analyze, normalize, strip_header
from .utils_seq import complement

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ReportConfig:
    line_width: int = FASTA_LINE_WIDTH
    precision: int = 2


@dataclass(frozen=True, slots=True)
class SequenceAnalysis:
    sequence: str
    stats: CompositionStats
    reverse_complement: str
    input_length: int


def _int_setting(raw_config: dict, key: str, default: int) -> int:
    value = raw_config.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{key}` must be an integer, got {value!r}.")
    return value


def load_config(path: Path | None) -> ReportConfig:
    """Load report settings from YAML; no path means defaults."""
    if path is None:
        return ReportConfig()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        raw_config = yaml.safe_load(handle) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Config must be a mapping: {path}")

    line_width = _int_setting(raw_config, "line_width", FASTA_LINE_WIDTH)
    precision = _int_setting(raw_config, "precision", 2)
    if line_width < 0:
        raise ValueError("`line_width` must be zero or positive.")
    if precision < 0:
        raise ValueError("`precision` must be zero or positive.")
    return ReportConfig(line_width=line_width, precision=precision)


def run_analysis(raw: str) -> SequenceAnalysis:
    """Normalize raw text and compute stats plus the reverse complement."""
    if strip_header(raw) != raw:
        LOGGER.debug("FASTA header stripped from input")
    sequence = normalize(raw)
    LOGGER.debug(
        "Normalized %s input characters to %s bases", len(raw), len(sequence)
    )
    return SequenceAnalysis(
        sequence=sequence,
        stats=analyze(sequence),
        reverse_complement=complement(sequence),
        input_length=len(raw),
    )


def analyze_sequence(raw: str, config: ReportConfig | None = None) -> str:
    """Full run from raw text to the formatted report."""
    config = config or ReportConfig()
    result = run_analysis(raw)
    return format_report(
        result.stats,
        result.reverse_complement,
        result.input_length,
        line_width=config.line_width,
        precision=config.precision,
    )

"""Command line interface for dna-report."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .exporter import FEATURE_FORMATS, write_features
from .pipeline import analyze_sequence, load_config, run_analysis


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--sequence",
        help="Raw sequence text (a leading FASTA header is allowed).",
    )
    source.add_argument(
        "--input",
        type=Path,
        help="Text file holding one sequence; '-' reads standard input.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dnareport",
        description="GC content, base counts and reverse complement of a DNA sequence.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser(
        "report",
        help="Print the composition and reverse-complement report.",
    )
    _add_input_arguments(report_parser)
    report_parser.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML configuration file (line_width, precision).",
    )

    features_parser = subparsers.add_parser(
        "features",
        help="Print the composition statistics as a feature row.",
    )
    _add_input_arguments(features_parser)
    features_parser.add_argument(
        "--format",
        choices=FEATURE_FORMATS,
        default="csv",
        help="Output format (default: csv).",
    )
    return parser


def _read_input(args: argparse.Namespace) -> str:
    if args.sequence is not None:
        return args.sequence
    if args.input is None or str(args.input) == "-":
        return sys.stdin.read()
    if not args.input.exists():
        raise FileNotFoundError(f"Input file not found: {args.input}")
    return args.input.read_text(encoding="utf-8")


def _run_report_command(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    sys.stdout.write(analyze_sequence(_read_input(args), config))
    return 0


def _run_features_command(args: argparse.Namespace) -> int:
    result = run_analysis(_read_input(args))
    write_features([result.stats.as_row()], sys.stdout, args.format)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "report":
        return _run_report_command(args)
    if args.command == "features":
        return _run_features_command(args)
    parser.print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

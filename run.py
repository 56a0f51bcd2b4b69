"""Convenience runner for the DNA report without installing the CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dna_report.pipeline import analyze_sequence, load_config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the DNA composition report without installing the CLI.",
    )
    parser.add_argument(
        "sequence",
        nargs="?",
        help="Raw sequence text; standard input is read when omitted.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration YAML file; defaults are used when omitted.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    raw = args.sequence if args.sequence is not None else sys.stdin.read()
    sys.stdout.write(analyze_sequence(raw, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())

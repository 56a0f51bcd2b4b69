"""DNA report package metadata."""

from importlib.metadata import PackageNotFoundError, version

from .pipeline import analyze_sequence

try:
    __version__ = version("dna-report")
except PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"

__all__ = ["__version__", "analyze_sequence"]

"""Console display helpers for CLI."""

from lexpath.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]

"""Command execution package for CLI."""

from lexpath.ui.cli.commands.executor import (
    CommandExecutor,
    ManifestCommand,
    PairCommand,
    PathCommand,
    RecordCommand,
)

__all__ = ["CommandExecutor", "ManifestCommand", "PairCommand", "PathCommand", "RecordCommand"]

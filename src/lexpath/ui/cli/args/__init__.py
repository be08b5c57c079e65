"""Command line argument handling package."""

from lexpath.ui.cli.args.parser import ArgumentParser
from lexpath.ui.cli.args.options import CLIArgs, ManifestArgs, PairArgs, PathArgs, RecordArgs

__all__ = ["ArgumentParser", "CLIArgs", "ManifestArgs", "PairArgs", "PathArgs", "RecordArgs"]

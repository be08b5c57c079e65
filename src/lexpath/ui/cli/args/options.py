"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

PathForm = Literal["raw", "portable", "native"]


@final
@dataclass(slots=True)
class PathArgs:
    """Arguments for subcommands operating on a single path."""

    command: Literal["inspect", "normalize", "convert"]
    path: str
    filesystem_uri: str | None
    form: PathForm
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class PairArgs:
    """Arguments for the ``resolve`` and ``relativize`` subcommands."""

    command: Literal["resolve", "relativize"]
    base: str
    other: str
    filesystem_uri: str | None
    normalize: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ManifestArgs:
    """Arguments for the ``manifest`` subcommand."""

    command: Literal["manifest"]
    folder: Path
    types: list[str] | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RecordArgs:
    """Arguments for the ``record`` subcommand."""

    command: Literal["record"]
    folder: Path
    output_type: str
    path: str
    properties: dict[str, str]
    indent: int
    verbose: bool
    quiet: bool


CLIArgs = PathArgs | PairArgs | ManifestArgs | RecordArgs

__all__ = ["CLIArgs", "ManifestArgs", "PairArgs", "PathArgs", "PathForm", "RecordArgs"]

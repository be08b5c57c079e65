"""src/lexpath/ui/cli/commands/executor.py
What: Command executors behind each CLI subcommand.
Why: Keep argument parsing apart from path operations and presentation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final, override

from lexpath.features.manifest import BuildOutput, BuildOutputManifest
from lexpath.features.path import PathString
from lexpath.platform.logging import logger
from lexpath.ui.cli.args.options import ManifestArgs, PairArgs, PathArgs, RecordArgs
from lexpath.ui.cli.display.result import ResultDisplay

ArgsT = TypeVar("ArgsT", PathArgs, PairArgs, ManifestArgs, RecordArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    result_display: ResultDisplay

    def __init__(self, args: ArgsT, result_display: ResultDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            result_display: Display used for output, mainly for tests.
        """
        self.args = args
        self.result_display = result_display or ResultDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass


@final
class PathCommand(CommandExecutor[PathArgs]):
    """Run ``inspect``, ``normalize`` and ``convert``."""

    @override
    def execute(self) -> int:
        value = PathString(self.args.path, self.args.filesystem_uri)
        logger.debug("Parsed %r", value)

        if self.args.command == "inspect":
            self.result_display.show_details(value, quiet=self.args.quiet)
        elif self.args.command == "normalize":
            self.result_display.show_value(value.normalize().raw_path, quiet=self.args.quiet)
        else:
            self.result_display.show_value(self._render_form(value), quiet=self.args.quiet)
        return 0

    def _render_form(self, value: PathString) -> str:
        if self.args.form == "portable":
            return value.portable_path
        if self.args.form == "native":
            return value.native_path
        return value.raw_path


@final
class PairCommand(CommandExecutor[PairArgs]):
    """Run ``resolve`` and ``relativize``."""

    @override
    def execute(self) -> int:
        base = PathString(self.args.base, self.args.filesystem_uri)
        other = PathString(self.args.other, self.args.filesystem_uri)

        if self.args.command == "resolve":
            result = base.resolve(other)
        else:
            result = base.relativize(other)
        if self.args.normalize:
            result = result.normalize()

        logger.debug("%s(%r, %r) -> %r", self.args.command, base, other, result)
        self.result_display.show_value(result.raw_path, quiet=self.args.quiet)
        return 0


@final
class ManifestCommand(CommandExecutor[ManifestArgs]):
    """List the outputs recorded in a folder's manifest."""

    @override
    def execute(self) -> int:
        manifest = BuildOutputManifest.from_folder(self.args.folder, self.args.types)
        self.result_display.show_manifest(manifest, quiet=self.args.quiet)
        return 0


@final
class RecordCommand(CommandExecutor[RecordArgs]):
    """Append one output to a folder's manifest and write it back."""

    @override
    def execute(self) -> int:
        manifest = BuildOutputManifest.from_folder(self.args.folder)
        # Relative paths are kept relative and resolve against the folder on load
        output = BuildOutput(self.args.output_type, PathString(self.args.path), dict(self.args.properties))
        manifest.outputs.append(output)
        _ = manifest.save(self.args.folder, indent=self.args.indent)
        self.result_display.show_manifest(BuildOutputManifest.from_folder(self.args.folder), quiet=self.args.quiet)
        return 0


__all__ = ["CommandExecutor", "ManifestCommand", "PairCommand", "PathCommand", "RecordCommand"]

"""Command line interface for lexpath."""

import sys
from typing import final

from lexpath.platform.logging import logger
from lexpath.ui.cli.args import ArgumentParser
from lexpath.ui.cli.args.options import CLIArgs, ManifestArgs, PairArgs, PathArgs, RecordArgs
from lexpath.ui.cli.commands import (
    CommandExecutor,
    ManifestCommand,
    PairCommand,
    PathCommand,
    RecordCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(
        args: CLIArgs,
    ) -> (
        CommandExecutor[PathArgs]
        | CommandExecutor[PairArgs]
        | CommandExecutor[ManifestArgs]
        | CommandExecutor[RecordArgs]
    ):
        """Pick the executor for parsed arguments."""

        if isinstance(args, PairArgs):
            return PairCommand(args)
        if isinstance(args, ManifestArgs):
            return ManifestCommand(args)
        if isinstance(args, RecordArgs):
            return RecordCommand(args)
        return PathCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            return CommandProcessor.build_command(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except (ValueError, OSError) as e:
            logger.error("%s", e)
            return 1


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()


if __name__ == "__main__":
    sys.exit(main())

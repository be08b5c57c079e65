"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from lexpath.config.config import Config
from lexpath.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from lexpath.ui.cli.args.options import CLIArgs, ManifestArgs, PairArgs, PathArgs, RecordArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="lexpath",
            description="lexpath - inspect and combine path strings without touching the filesystem.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Show the root, names and flags of a path",
        )
        ArgumentParser._configure_path_parser(inspect_parser)

        normalize_parser = subparsers.add_parser(
            "normalize",
            help="Remove '.' and resolvable '..' names from a path",
        )
        ArgumentParser._configure_path_parser(normalize_parser)

        convert_parser = subparsers.add_parser(
            "convert",
            help="Print a path in raw, portable or native form",
        )
        ArgumentParser._configure_path_parser(convert_parser)
        _ = convert_parser.add_argument(
            "--form",
            choices=("raw", "portable", "native"),
            default="portable",
            help="Output form (default: portable)",
        )

        resolve_parser = subparsers.add_parser(
            "resolve",
            help="Resolve OTHER against BASE",
        )
        ArgumentParser._configure_pair_parser(resolve_parser)

        relativize_parser = subparsers.add_parser(
            "relativize",
            help="Compute the path from BASE to OTHER",
        )
        ArgumentParser._configure_pair_parser(relativize_parser)

        manifest_parser = subparsers.add_parser(
            "manifest",
            help="List the outputs recorded in FOLDER/output.json",
        )
        _ = manifest_parser.add_argument(
            "folder",
            type=str,
            help="Folder holding the output.json manifest",
            metavar="FOLDER",
        )
        _ = manifest_parser.add_argument(
            "--type",
            dest="types",
            action="append",
            metavar="TYPE",
            help="Only list outputs of this type (repeatable)",
        )
        ArgumentParser._configure_verbosity(manifest_parser)

        record_parser = subparsers.add_parser(
            "record",
            help="Append an output to FOLDER/output.json",
        )
        _ = record_parser.add_argument(
            "folder",
            type=str,
            help="Folder holding the output.json manifest",
            metavar="FOLDER",
        )
        _ = record_parser.add_argument("output_type", type=str, help="Output type", metavar="TYPE")
        _ = record_parser.add_argument("path", type=str, help="Output path", metavar="PATH")
        _ = record_parser.add_argument(
            "--property",
            dest="properties",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Property stored with the output (repeatable)",
        )
        ArgumentParser._configure_verbosity(record_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the arguments are invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command
        filesystem_uri = getattr(parsed_args, "filesystem", None) or configuration.default_filesystem_uri

        if command in {"inspect", "normalize", "convert"}:
            return PathArgs(
                command=command,  # pyright: ignore[reportArgumentType]
                path=parsed_args.path,
                filesystem_uri=filesystem_uri,
                form=getattr(parsed_args, "form", "raw"),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command in {"resolve", "relativize"}:
            return PairArgs(
                command=command,  # pyright: ignore[reportArgumentType]
                base=parsed_args.base,
                other=parsed_args.other,
                filesystem_uri=filesystem_uri,
                normalize=bool(parsed_args.normalize),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "manifest":
            return ManifestArgs(
                command="manifest",
                folder=Path(parsed_args.folder).expanduser(),
                types=parsed_args.types,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "record":
            return RecordArgs(
                command="record",
                folder=Path(parsed_args.folder).expanduser(),
                output_type=parsed_args.output_type,
                path=parsed_args.path,
                properties=ArgumentParser._parse_properties(parser, parsed_args.properties),
                indent=configuration.manifest_indent,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _parse_properties(parser: argparse.ArgumentParser, items: list[str]) -> dict[str, str]:
        properties: dict[str, str] = {}
        for item in items:
            key, sep, value = item.partition("=")
            if not sep or not key:
                parser.error(f"Invalid property '{item}', expected KEY=VALUE")
            properties[key] = value
        return properties

    @staticmethod
    def _configure_path_parser(parser: argparse.ArgumentParser) -> None:
        """Apply shared configuration for single-path subparsers."""

        _ = parser.add_argument(
            "path",
            type=str,
            help="Path text to parse",
            metavar="PATH",
        )
        ArgumentParser._configure_filesystem(parser)
        ArgumentParser._configure_verbosity(parser)

    @staticmethod
    def _configure_pair_parser(parser: argparse.ArgumentParser) -> None:
        """Apply shared configuration for two-path subparsers."""

        _ = parser.add_argument("base", type=str, help="Base path", metavar="BASE")
        _ = parser.add_argument("other", type=str, help="Other path", metavar="OTHER")
        _ = parser.add_argument(
            "--normalize",
            action="store_true",
            help="Normalize the result",
        )
        ArgumentParser._configure_filesystem(parser)
        ArgumentParser._configure_verbosity(parser)

    @staticmethod
    def _configure_filesystem(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--filesystem",
            type=str,
            metavar="URI",
            help="Filesystem root URI (defaults to the configured or local filesystem)",
        )

    @staticmethod
    def _configure_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

"""src/lexpath/ui/cli/display/result.py
What: Render path values and manifests for the CLI.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lexpath.features.manifest import BuildOutputManifest
from lexpath.features.path import PathString


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_value(self, text: str, quiet: bool = False) -> None:
        """Print a single result line without markup processing."""

        if quiet:
            return
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def show_details(self, value: PathString, quiet: bool = False) -> None:
        """Display the decomposition of a path value.

        Args:
            value: Path to describe.
            quiet: Whether to suppress output.
        """
        if quiet:
            return

        table = Table(title="Path", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value")

        root = value.root
        parent = value.parent
        table.add_row("raw", escape(value.raw_path))
        table.add_row("uri", escape(str(value)))
        table.add_row("root", escape(root.raw_path) if root is not None else "-")
        table.add_row("parent", escape(parent.raw_path) if parent is not None else "-")
        table.add_row("file name", escape(value.file_name.raw_path))
        table.add_row("names", str(value.name_count))
        table.add_row("absolute", "yes" if value.is_absolute else "no")
        table.add_row("trailing separator", "yes" if value.has_trailing_separator else "no")
        table.add_row("portable", escape(value.portable_path))
        table.add_row("native", escape(value.native_path))
        self.console.print(table)

        for index, name in enumerate(value.segments):
            self.console.print(f"  [{index}] {name}", markup=False, highlight=False)

    def show_manifest(self, manifest: BuildOutputManifest, quiet: bool = False) -> None:
        """Display the outputs listed in a manifest."""

        if quiet:
            return

        if not len(manifest):
            self.console.print("No outputs recorded")
            return

        table = Table(title="Build outputs")
        table.add_column("Type", style="cyan")
        table.add_column("Path")
        table.add_column("Properties", style="dim")
        for output in manifest:
            properties = ", ".join(f"{key}={value}" for key, value in sorted(output.properties.items()))
            table.add_row(escape(output.output_type), escape(output.path.raw_path), escape(properties))
        self.console.print(table)


__all__ = ["ResultDisplay"]

"""Console output for the diskfs CLI."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from diskfs.types import FileSystemProviderCapabilities, FileType

if TYPE_CHECKING:
    from diskfs.errors import FileSystemProviderError
    from diskfs.types import StatResult


TYPE_LABELS = {
    FileType.UNKNOWN: "unknown",
    FileType.FILE: "file",
    FileType.DIRECTORY: "directory",
    FileType.SYMBOLIC_LINK: "symlink",
}

TYPE_STYLES = {
    FileType.DIRECTORY: "bold blue",
    FileType.SYMBOLIC_LINK: "cyan",
}


def _format_millis(millis: int) -> str:
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).isoformat(timespec="seconds")


class Reporter:
    """Renders provider results for humans."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def show_provider_error(self, error: FileSystemProviderError) -> None:
        """Display a normalized provider error with its code."""
        self.show_error(f"[bold]{error.code.value}[/bold]: {error.args[0]}")

    def show_stat(self, path: str, stat: StatResult) -> None:
        """Display metadata of a single entry.

        Args:
            path: Path that was resolved.
            stat: Its metadata.
        """
        table = Table(title=path, show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")

        table.add_row("type", TYPE_LABELS[stat.type])
        table.add_row("size", str(stat.size))
        table.add_row("ctime", _format_millis(stat.ctime))
        table.add_row("mtime", _format_millis(stat.mtime))

        self.console.print(table)

    def show_entries(self, path: str, entries: list[tuple[str, FileType]]) -> None:
        """Display directory children in listing order.

        Args:
            path: Directory that was listed.
            entries: (name, type) pairs.
        """
        if not entries:
            self.console.print(f"[dim]{path} is empty[/dim]")
            return

        table = Table(title=path)
        table.add_column("Name")
        table.add_column("Type")

        for name, file_type in entries:
            style = TYPE_STYLES.get(file_type, "")
            table.add_row(f"[{style}]{name}[/{style}]" if style else name, TYPE_LABELS[file_type])

        self.console.print(table)

    def show_capabilities(self, capabilities: FileSystemProviderCapabilities) -> None:
        table = Table(title="Capabilities")
        table.add_column("Capability")
        table.add_column("Supported")

        for flag in FileSystemProviderCapabilities:
            supported = bool(capabilities & flag)
            table.add_row(flag.name or str(flag.value), "[green]yes[/green]" if supported else "[dim]no[/dim]")

        self.console.print(table)

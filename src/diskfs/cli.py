"""CLI commands using Typer."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

if TYPE_CHECKING:
    from diskfs.context import AppContext

import typer
from rich.console import Console
from rich.logging import RichHandler

from diskfs import __version__
from diskfs.console import Reporter
from diskfs.context import create_context
from diskfs.errors import FileSystemProviderError
from diskfs.types import FileDeleteOptions, FileOverwriteOptions, FileWriteOptions

T = TypeVar("T")

app = typer.Typer(
    name="diskfs",
    help="Inspect and modify the local disk through the diskfs provider",
    no_args_is_help=True,
)

console = Console()
reporter = Reporter(console)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"diskfs v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route diskfs log records to the console."""
    if not verbose:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    package_logger = logging.getLogger("diskfs")
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(handler)


@app.callback()
def main(
    cli_ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log provider activity")
    ] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Path to a config file")
    ] = None,
) -> None:
    """Inspect and modify the local disk through the diskfs provider."""
    cli_ctx.obj = config
    configure_logging(verbose)


def _get_context(
    context: AppContext | None, cli_ctx: typer.Context | None
) -> AppContext:
    """Use the injected context, or build one from the --config path."""
    if context is not None:
        return context
    config_path = cli_ctx.obj if cli_ctx is not None else None
    return create_context(config_path)


def _run(operation: Coroutine[Any, Any, T]) -> T:
    """Run a provider coroutine, turning provider errors into exit code 1."""
    try:
        return asyncio.run(operation)
    except FileSystemProviderError as e:
        reporter.show_provider_error(e)
        raise typer.Exit(1) from e


# ============================================================================
# Metadata Commands
# ============================================================================


@app.command()
def capabilities(cli_ctx: typer.Context = None, _context=None) -> None:
    """Show what the provider supports on this host."""
    ctx = _get_context(_context, cli_ctx)
    reporter.show_capabilities(ctx.provider.capabilities)


@app.command()
def stat(
    path: Annotated[str, typer.Argument(help="Path or file:// URI")],
    cli_ctx: typer.Context = None,
    _context=None,
) -> None:
    """Show type, size and timestamps of an entry."""
    ctx = _get_context(_context, cli_ctx)
    result = _run(ctx.provider.stat(path))
    reporter.show_stat(path, result)


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory path")] = ".",
    cli_ctx: typer.Context = None,
    _context=None,
) -> None:
    """List a directory."""
    ctx = _get_context(_context, cli_ctx)
    entries = _run(ctx.provider.readdir(path))
    reporter.show_entries(path, entries)


# ============================================================================
# Content Commands
# ============================================================================


@app.command()
def cat(
    path: Annotated[str, typer.Argument(help="File path")],
    cli_ctx: typer.Context = None,
    _context=None,
) -> None:
    """Print the content of a file."""
    ctx = _get_context(_context, cli_ctx)
    content = _run(ctx.provider.read_file(path))
    typer.echo(content, nl=False)


def _read_content(text: str | None, from_file: Path | None) -> bytes:
    """Resolve content from the text argument or a source file.

    Raises:
        typer.Exit: If neither or both are given.
    """
    if text is not None and from_file is None:
        return text.encode("utf-8")
    if from_file is not None and text is None:
        return from_file.read_bytes()

    reporter.show_error("Provide either TEXT or --from-file")
    raise typer.Exit(1)


@app.command()
def write(
    path: Annotated[str, typer.Argument(help="File path")],
    text: Annotated[str | None, typer.Argument(help="Text to write")] = None,
    from_file: Annotated[
        Path | None, typer.Option("--from-file", "-f", help="Copy bytes from this file")
    ] = None,
    overwrite: Annotated[
        bool, typer.Option("--overwrite/--no-overwrite", help="Replace an existing file")
    ] = True,
    create: Annotated[
        bool, typer.Option("--create/--no-create", help="Create the file if missing")
    ] = True,
    cli_ctx: typer.Context = None,
    _context=None,
) -> None:
    """Write a whole file."""
    ctx = _get_context(_context, cli_ctx)
    content = _read_content(text, from_file)
    _run(
        ctx.provider.write_file(
            path, content, FileWriteOptions(overwrite=overwrite, create=create)
        )
    )
    reporter.show_success(f"Wrote {len(content)} bytes to {path}")


# ============================================================================
# Entry Commands
# ============================================================================


@app.command()
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory path")],
    cli_ctx: typer.Context = None,
    _context=None,
) -> None:
    """Create a directory (parent must exist)."""
    ctx = _get_context(_context, cli_ctx)
    _run(ctx.provider.mkdir(path))
    reporter.show_success(f"Created {path}")


@app.command("rm")
def remove(
    path: Annotated[str, typer.Argument(help="Path to delete")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Delete directories and their content")
    ] = False,
    cli_ctx: typer.Context = None,
    _context=None,
) -> None:
    """Delete an entry. Missing entries are not an error."""
    ctx = _get_context(_context, cli_ctx)
    _run(ctx.provider.delete(path, FileDeleteOptions(recursive=recursive)))
    reporter.show_success(f"Deleted {path}")


@app.command("mv")
def move(
    source: Annotated[str, typer.Argument(help="Source path")],
    target: Annotated[str, typer.Argument(help="Target path")],
    overwrite: Annotated[
        bool, typer.Option("--overwrite", help="Replace an existing target")
    ] = False,
    cli_ctx: typer.Context = None,
    _context=None,
) -> None:
    """Rename or move an entry."""
    ctx = _get_context(_context, cli_ctx)
    _run(ctx.provider.rename(source, target, FileOverwriteOptions(overwrite=overwrite)))
    reporter.show_success(f"Moved {source} to {target}")


@app.command("cp")
def copy(
    source: Annotated[str, typer.Argument(help="Source path")],
    target: Annotated[str, typer.Argument(help="Target path")],
    overwrite: Annotated[
        bool, typer.Option("--overwrite", help="Replace an existing target")
    ] = False,
    cli_ctx: typer.Context = None,
    _context=None,
) -> None:
    """Copy a file or directory tree."""
    ctx = _get_context(_context, cli_ctx)
    _run(ctx.provider.copy(source, target, FileOverwriteOptions(overwrite=overwrite)))
    reporter.show_success(f"Copied {source} to {target}")


if __name__ == "__main__":
    app()

"""CLI entry point for GitPacker."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from gitpacker.errors import ArchiveError, CloneStageError, ConfigError
from gitpacker.models.pack import DEFAULT_CONFIG_FILENAME, PackConfig
from gitpacker.models.result import CloneResult, PackResult
from gitpacker.packer import GitPacker

console = Console()

EXIT_OK = 0
EXIT_CONFIG_ERROR = ConfigError.exit_code
EXIT_CLONE_ERROR = CloneStageError.exit_code
EXIT_ARCHIVE_ERROR = ArchiveError.exit_code


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def print_progress(result: CloneResult, index: int, total: int) -> None:
    if result.ok:
        suffix = f" @ {result.commit}" if result.commit else ""
        console.print(f"[green]\\[{index}/{total}] Cloned {escape(result.path)}{suffix}[/green]")
    else:
        console.print(f"[red]\\[{index}/{total}] Failed {escape(result.path)}[/red]")


def print_summary(result: PackResult) -> None:
    table = Table(title="Clone Results")
    table.add_column("Directory", style="cyan")
    table.add_column("URL", style="blue")
    table.add_column("Commit", style="yellow")
    table.add_column("Status")

    for clone in result.clones:
        status = "[green]ok[/green]" if clone.ok else f"[red]{clone.error_type}[/red]"
        table.add_row(escape(clone.path), escape(clone.spec.git_url), clone.commit or "", status)

    console.print(table)


@click.command()
@click.option(
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_FILENAME,
    envvar="GITPACKER_CONFIG",
    show_default=True,
    help="Pack config JSON file",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every git command")
def main(config_path: str, verbose: bool) -> None:
    """GitPacker - Clone a list of git repositories and optionally zip them."""
    configure_logging(verbose)

    try:
        config = PackConfig.from_json(config_path)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(e.exit_code)
    console.print(f"Loaded GitPack config {escape(repr(config))}")

    packer = GitPacker(config)
    try:
        result = packer.run(progress_callback=print_progress)
    except (ConfigError, ArchiveError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(e.exit_code)

    if result.clones:
        print_summary(result)

    if result.failed:
        console.print("[yellow]Skipping archive because of cloning errors[/yellow]")
        sys.exit(EXIT_CLONE_ERROR)

    if result.archive_path:
        root = config.root_clone_directory or "."
        console.print(f"[green]Archived {escape(root)} to {escape(result.archive_path)}[/green]")
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()

"""
Sassline CLI Entry Point.

This module implements the command-line interface for Sassline, a convention
linter for SCSS trees organized into structural roles. Each file's role is
derived from where it lives, and every root level declaration in it is checked
against the naming and placement rules for that role.

The pipeline operates in three stages:

1.  **Validation**: Resolves the scan directory (default: the current working
    directory) and verifies it exists.
2.  **Discovery**: Walks the tree and lists every `*.scss` file, sorted by path.
    Files under `component/` and `module/`, plus the root level `config.scss`,
    `layout.scss`, `mixin.scss` and `style.scss`, are lintable; others are skipped.
3.  **Lint & Report**: Loads lintable files concurrently, checks each line and
    prints the violations grouped by file.

Usage:
    Run directly as a script or via the installed entry point.

    $ sassline path/to/scss

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI, colors, and progress visualization.
    - aiofiles: Non-blocking directory walking and file reads.
"""

from pathlib import Path
from typing import Annotated
import typer
from rich import print as pr
from core.exceptions import (
    ConfigurationError,
    DiscoveryError,
    EmptyScanError,
)
from core.linting import run_lint
from ui.progress_display import NoOpProgressDisplay, RichProgressDisplay
from ui.report import render_linted_files, render_report

app = typer.Typer()


@app.command()
def main(
    path: Annotated[
        Path,
        typer.Argument(
            resolve_path=True,  # Automatically converts to absolute path
            help="SCSS directory to lint",
            show_default="current working directory",
        ),
    ] = Path.cwd(),
    progress: Annotated[
        bool,
        typer.Option(help="Show progress bars while discovering and linting."),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="List every linted file with its role."),
    ] = False,
):
    """
    Lint the SCSS tree at PATH against the role naming conventions.

    Exits with code 0 when no violations are found and 1 when violations are
    found or the scan cannot run.

    Args:
        path (Path): Root of the SCSS tree. Defaults to the current working directory.
        progress (bool): Whether to draw Rich progress bars.
        verbose (bool): Whether to list each linted file before the report.

    Raises:
        typer.Exit: With code 1 on violations or a fatal error.
    """
    pr(f"[green]Linting: {path}[/green]")

    display = RichProgressDisplay() if progress else NoOpProgressDisplay()

    try:
        report = run_lint(path, progress_display=display)
    except ConfigurationError as e:
        print_configuration_err(e)
    except DiscoveryError as e:
        print_discovery_err(e)
    except EmptyScanError as e:
        pr(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e
    except Exception as e:  # noqa: BLE001
        # Catch-all for any unexpected errors - ensures users always see
        # a friendly message instead of a raw Python stack trace
        print_unexpected_err(e)

    pr(f"Found a total of {report.discovered_count} file(s) for potential linting")

    if verbose:
        render_linted_files(report)

    render_report(report)

    if not report.is_clean:
        raise typer.Exit(code=1)


def print_configuration_err(e: ConfigurationError) -> None:
    """
    Displays a user-friendly error message for an invalid scan directory.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Configuration Error[/bold red]")
    pr("SCSS scan directory given does not exist and/or is not a directory")
    if e.root:
        pr(f"Directory: [yellow]{e.root}[/yellow]")

    pr("\n[yellow]Usage:[/yellow] sassline PATH")
    raise typer.Exit(code=1) from e


def print_discovery_err(e: DiscoveryError) -> None:
    """
    Displays a user-friendly error message when the tree cannot be walked.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Discovery Error[/bold red]")
    pr(f"The app could not finish listing files: {e.message}")
    if e.path:
        pr(f"Path: [yellow]{e.path}[/yellow]")

    pr("\n[yellow]Quick Fix:[/yellow] Check directory permissions under the scan root.")
    pr(f"Diagnostics: {e.diagnostic_info}")
    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Unexpected Error[/bold red]")
    pr("An unexpected error occurred while linting.")
    pr(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {str(e)}")

    pr("\n--- PLEASE REPORT THIS ---")
    pr(f"Error Type: {type(e).__name__}")
    pr(f"Error Message: {e}")
    if e.__cause__:
        pr(f"Caused by: {e.__cause__}")

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()

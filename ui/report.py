"""
Console rendering of lint reports.

Output layout:

    12 files linted (3 skipped)
    4 errors found in a total of 2 files

    component/navigationarea.scss:
      7:    invalid variable name ($navHeight)
      12:   class selectors not permitted here (.nav)
"""

from rich.console import Console
from rich.markup import escape

from core.classification import classify
from core.models import LintError, LintReport

LINE_NUMBER_WIDTH = 5

console = Console(highlight=False)


def format_error_line(error: LintError) -> str:
    """
    Format a violation as `  <line>:<padding><message>`.

    The line number and padding together fill LINE_NUMBER_WIDTH characters,
    with at least one space before the message.
    """
    number = str(error.line_number)
    padding = " " * max(1, LINE_NUMBER_WIDTH - len(number))
    text = f"  {number}:{padding}{error.message}"
    if error.subject:
        text += f" ({error.subject})"
    return text


def render_linted_files(report: LintReport, out: Console | None = None) -> None:
    """List every linted file with its role (verbose mode)."""
    out = out or console
    for path in report.linted:
        out.print(f"File: {escape(path)} [dim]({classify(path)})[/dim]")
    out.print()


def render_report(report: LintReport, out: Console | None = None) -> None:
    """Print the summary line, any load failures, and violations grouped by file."""
    out = out or console

    out.print(
        f"\n{report.linted_count} files linted ({report.skipped_count} skipped)"
    )

    for path, reason in report.load_errors.items():
        out.print(f"[yellow]Skipped:[/yellow] {escape(path)} - {escape(reason)}")

    if report.is_clean:
        out.print("[green]No linting errors found[/green]\n")
        return

    out.print(
        f"[red]{report.error_count} errors found in a total of "
        f"{report.files_with_errors_count} files[/red]\n"
    )

    for path, errors in report.results.items():
        out.print(f"[bold]{escape(path)}:[/bold]")
        for error in errors:
            out.print(escape(format_error_line(error)))
        out.print()

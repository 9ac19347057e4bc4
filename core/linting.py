"""
Lint pipeline orchestration.

A run has two I/O bound phases followed by pure computation per file:

1. Discovery: the enumerator lists every stylesheet below the scan root.
2. Load-and-lint: each file with a recognized role is read concurrently
   (bounded by a semaphore) and its lines are checked against the rule table.

Each file is linted in isolation, so results do not depend on completion
order. They are gathered in discovery order, which keeps the report stable
across runs.
"""

import asyncio
from pathlib import Path

from rich import print as pr

from adapters.filesystem import FileEnumerator, FilesystemEnumerator
from constants import MAX_CONCURRENT_READS, SCSS_EXTENSION
from core.classification import classify
from core.exceptions import EmptyScanError, LoadError
from core.file_io import FileReader, FilesystemFileReader
from core.lines import iter_lines
from core.models import LintError, LintReport, SourceFile
from core.rules import check_lines
from models import FileRole
from ui.progress_display import NoOpProgressDisplay, ProgressDisplay


def lint_source(source: SourceFile) -> list[LintError]:
    """
    Check every line of a loaded file against the rules for its role.

    Args:
        source: The file to check.

    Returns:
        Violations in ascending line order. Empty if the file is clean.
    """
    return check_lines(iter_lines(source.content), source.role, source.base_name)


async def _load_and_lint(
    root: Path,
    path: str,
    role: FileRole,
    reader: FileReader,
    semaphore: asyncio.Semaphore,
    progress_display: ProgressDisplay,
) -> list[LintError] | LoadError:
    try:
        async with semaphore:
            content = await reader.read_file(root / path)
    except LoadError as e:
        pr(f"[yellow]⚠ Warning:[/yellow] {e.message}")
        return e
    finally:
        progress_display.on_advance()

    return lint_source(SourceFile(path, role, content))


async def lint_tree(
    root: Path,
    enumerator: FileEnumerator | None = None,
    file_reader: FileReader | None = None,
    progress_display: ProgressDisplay | None = None,
    max_concurrent_reads: int = MAX_CONCURRENT_READS,
) -> LintReport:
    """
    Discover, load and lint every stylesheet below `root`.

    Args:
        root: Scan root directory.
        enumerator: Lists files below `root`. Defaults to `FilesystemEnumerator`.
        file_reader: Loads file content. Defaults to `FilesystemFileReader`.
        progress_display: Progress reporting. Defaults to `NoOpProgressDisplay`.
        max_concurrent_reads: Upper bound on files being read at once.

    Returns:
        The aggregated `LintReport`.

    Raises:
        ConfigurationError: If `root` is missing or not a directory.
        DiscoveryError: If a directory below `root` cannot be read.
        EmptyScanError: If no stylesheets were found.
    """
    enumerator = enumerator if enumerator is not None else FilesystemEnumerator()
    reader = file_reader if file_reader is not None else FilesystemFileReader()
    display = progress_display if progress_display is not None else NoOpProgressDisplay()

    with display as rpd:
        rpd.on_start(f"Discovering *.{SCSS_EXTENSION} files...", None)
        paths = await enumerator.enumerate(root)
        rpd.on_complete(f"Found {len(paths)} file(s).", len(paths))

        if not paths:
            raise EmptyScanError(
                f"Unable to locate any files matching *.{SCSS_EXTENSION}"
            )

        report = LintReport(discovered_count=len(paths))
        lintable = [(path, role) for path in paths if (role := classify(path))]

        rpd.on_start(f"Linting {len(lintable)} file(s)...", len(lintable))
        semaphore = asyncio.Semaphore(max_concurrent_reads)
        outcomes = await asyncio.gather(
            *(
                _load_and_lint(root, path, role, reader, semaphore, rpd)
                for path, role in lintable
            )
        )

        for (path, _), outcome in zip(lintable, outcomes):
            if isinstance(outcome, LoadError):
                report.add_load_error(path, outcome.message)
            else:
                report.add_linted(path, outcome)

        rpd.on_complete(
            f"Linted {report.linted_count} file(s).",
            len(lintable),
            warning=bool(report.load_errors),
        )

    return report


def run_lint(root: Path, **kwargs) -> LintReport:
    """Synchronous entry point around `lint_tree`."""
    return asyncio.run(lint_tree(root, **kwargs))

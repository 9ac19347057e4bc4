"""
Progress reporting protocol for decoupling UI from the lint pipeline.

The lint run reports discovery and per-file progress through `ProgressDisplay`
so the core never imports Rich directly and tests can pass a no-op display.
"""

from types import TracebackType
from typing import Protocol

from rich.progress import Progress, TaskID
from ui.progress import (
    ProgressState,
    create_progress,
    create_task,
    update_progress,
)


class ProgressDisplay(Protocol):
    """
    Protocol for progress reporting.

    The lifecycle is:
    1. Context manager entry (__enter__)
    2. on_start() - once per phase (discovery, linting)
    3. on_advance() - once per processed item
    4. on_complete() - once per phase
    5. Context manager exit (__exit__)
    """

    def __enter__(self) -> "ProgressDisplay":
        """Enter the progress context."""

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the progress context."""

    def on_start(self, description: str, total: int | None) -> None:
        """
        Begin a new phase.

        Args:
            description: Text shown next to the bar.
            total: Number of items expected, or None if unknown.
        """

    def on_advance(self, advance: int = 1) -> None:
        """Record `advance` more items as processed in the current phase."""

    def on_complete(self, description: str, completed: int, warning: bool = False) -> None:
        """
        Finish the current phase.

        Args:
            description: Final text for the phase.
            completed: Number of items processed.
            warning: Draw the phase in the warning color (e.g. files skipped).
        """


class RichProgressDisplay:
    """Rich implementation of ProgressDisplay. Must be used as a context manager."""

    def __init__(self) -> None:
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress()
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._progress:
            self._progress.__exit__(exc_type, exc_val, exc_tb)

    def _require_progress(self) -> Progress:
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        return self._progress

    def on_start(self, description: str, total: int | None) -> None:
        self._task = create_task(self._require_progress(), description, total=total)

    def on_advance(self, advance: int = 1) -> None:
        progress = self._require_progress()
        if self._task is None:
            raise RuntimeError("on_start() must be called before on_advance()")
        update_progress(progress, self._task, advance=advance)

    def on_complete(self, description: str, completed: int, warning: bool = False) -> None:
        progress = self._require_progress()
        if self._task is None:
            raise RuntimeError("on_start() must be called before on_complete()")

        update_progress(
            progress,
            self._task,
            ProgressState.WARNING if warning else ProgressState.COMPLETE,
            completed=completed,
            description=description,
        )


class NoOpProgressDisplay:
    """
    No-op implementation of ProgressDisplay for testing and `--no-progress` runs.
    """

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        """Exit the progress context (no-op)."""

    def on_start(self, description: str, total: int | None) -> None:
        """No-op: does nothing."""

    def on_advance(self, advance: int = 1) -> None:
        """No-op: does nothing."""

    def on_complete(self, description: str, completed: int, warning: bool = False) -> None:
        """No-op: does nothing."""

"""
Progress bar helpers built on Rich.

Creates the progress bars shown while a stylesheet tree is discovered and
linted, and applies a state color to task descriptions.
"""

from enum import StrEnum
from typing import Optional

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class ProgressState(StrEnum):
    """
    Progress bar states, valued by the Rich color used to draw them.

    Attributes:
        IN_PROGRESS: Magenta for tasks still running.
        COMPLETE: Green for tasks that finished cleanly.
        WARNING: Yellow for tasks that finished with skipped files.
    """

    IN_PROGRESS = "magenta"
    COMPLETE = "green"
    WARNING = "yellow"


def create_progress() -> Progress:
    """
    Create a Rich Progress instance with the standard column layout.

    The bar is transient so the lint report is printed on a clean screen.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        transient=True,
    )


def create_task(progress: Progress, description: str, total: Optional[int]) -> TaskID:
    """Add a task in the IN_PROGRESS state. A None total is indeterminate."""
    return progress.add_task(f"[{ProgressState.IN_PROGRESS}]{description}", total=total)


def update_progress(
    progress: Progress,
    task: TaskID,
    progress_state: Optional[ProgressState] = None,
    completed: Optional[float] = None,
    advance: Optional[float] = None,
    description: Optional[str] = None,
) -> None:
    """
    Update a task's counters and, optionally, its styled description.

    Raises:
        ValueError: If only one of `progress_state` and `description` is given.
    """
    if bool(progress_state) != bool(description):
        raise ValueError("progress_state and description must be provided together.")

    # Rich treats description=None as "clear", so it is only passed when set
    if description:
        progress.update(
            task,
            completed=completed,
            advance=advance,
            description=f"[{progress_state}]{description}",
        )
    else:
        progress.update(task, completed=completed, advance=advance)

"""File role classification module.

Maps a file path, relative to the scan root, to the structural role it plays
in the stylesheet tree. Rules are evaluated in a fixed order and the first
match wins:

1. Anything below `component/` is a Component.
2. Anything below `module/` is a Module.
3. The root level files `config.scss`, `layout.scss`, `mixin.scss` and
   `style.scss` are Config, Layout, Mixin and Style respectively.

Every other file has no role. It still counts as discovered, but is skipped
by the linter.
"""

from pathlib import PurePath
from constants import ROLE_DIRECTORIES, ROLE_FILE_NAMES
from models import FileRole


def classify(relative_path: str | PurePath) -> FileRole | None:
    """
    Determine the role of a stylesheet from its relative path.

    Args:
        relative_path: Path relative to the scan root. `PurePath` values are
            converted to forward-slash form so results do not depend on the OS.

    Returns:
        The matching `FileRole`, or None if the file is not lintable.

    Example:
        >>> classify("component/navigationarea.scss")
        <FileRole.COMPONENT: 'Component'>
        >>> classify("vendor/reset.scss") is None
        True
    """
    if isinstance(relative_path, PurePath):
        relative_path = relative_path.as_posix()

    for prefix, role in ROLE_DIRECTORIES:
        if relative_path.startswith(prefix):
            return role

    return ROLE_FILE_NAMES.get(relative_path)

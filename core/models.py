"""
Core data models for the discovery and lint pipeline.

This module defines the records passed between the classifier, the line
categorizer, the rule engine and the report aggregator.
"""

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from constants import SCSS_EXTENSION
from models import FileRole, LineCategory


def derive_base_name(relative_path: str) -> str:
    """
    Build the namespace a file's declarations must carry.

    The file name loses its recognized extension, is lowercased, and loses any
    leading underscores (the partial-file convention), so both
    `component/_NavigationArea.scss` and `component/navigationarea.scss`
    yield `navigationarea`.
    """
    name = PurePosixPath(relative_path).name
    suffix = f".{SCSS_EXTENSION}"
    if name.lower().endswith(suffix):
        name = name[: -len(suffix)]
    return name.lower().lstrip("_")


@dataclass(frozen=True)
class SourceFile:
    """
    A stylesheet loaded for linting.

    Attributes:
        path: Path relative to the scan root, using forward slashes.
        role: The role assigned by the classifier.
        content: Raw text content of the file.

    Computed Attributes (set in __post_init__):
        base_name: Namespace derived once from `path`, see `derive_base_name`.
    """

    path: str
    role: FileRole
    content: str
    base_name: str = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "base_name", derive_base_name(self.path))


@dataclass(frozen=True)
class LineRecord:
    """
    One physical line of a source file and the declaration it represents.

    Attributes:
        number: 1-based line number.
        text: Line with whitespace trimmed from both ends.
        root_text: Line with trailing whitespace trimmed only; leading
            indentation is kept so root level checks can tell nested lines apart.
        category: The recognized declaration, or None when the line is not checked.
    """

    number: int
    text: str
    root_text: str
    category: LineCategory | None = None


@dataclass(frozen=True, order=True)
class LintError:
    """
    A single naming or placement violation.

    Attributes:
        line_number: 1-based line number the violation was found on.
        message: Description of the broken convention.
        subject: The offending name, when one could be extracted.
    """

    line_number: int
    message: str
    subject: str | None = None


@dataclass
class LintReport:
    """
    Aggregated result of a lint run.

    Files without violations are not present in `results`. Both `results`
    and `load_errors` are kept in discovery (name sorted) order.

    Attributes:
        discovered_count: Number of files found with the recognized extension.
        linted: Relative paths of the files that were actually linted.
        results: Mapping of relative path to its ordered violations.
        load_errors: Mapping of relative path to the reason it could not be read.
    """

    discovered_count: int = 0
    linted: list[str] = field(default_factory=list)
    results: dict[str, list[LintError]] = field(default_factory=dict)
    load_errors: dict[str, str] = field(default_factory=dict)

    def add_linted(self, path: str, errors: list[LintError]) -> None:
        self.linted.append(path)
        if errors:
            self.results[path] = list(errors)

    def add_load_error(self, path: str, reason: str) -> None:
        self.load_errors[path] = reason

    @property
    def linted_count(self) -> int:
        return len(self.linted)

    @property
    def skipped_count(self) -> int:
        """Files discovered but not linted: unrecognized roles and load failures."""
        return self.discovered_count - self.linted_count

    @property
    def files_with_errors_count(self) -> int:
        return len(self.results)

    @property
    def error_count(self) -> int:
        return sum(len(errors) for errors in self.results.values())

    @property
    def is_clean(self) -> bool:
        return not self.results

"""
Application-wide constants and lookup tables.

This module defines the conventions the linter enforces: which paths map to
which file role, which prefix letter each role reserves for its declarations,
the characters allowed to terminate a selector name, and the text of every
violation message.
"""

from typing import Final, Mapping
from models import FileRole, LineCategory


SCSS_EXTENSION: Final[str] = "scss"
FILE_ENCODING: Final[str] = "utf-8"

# Upper bound on files open at the same time during load-and-lint.
MAX_CONCURRENT_READS: Final[int] = 32

# Files anywhere below these directories take the directory's role.
# Checked in order, before the root-level file names below.
ROLE_DIRECTORIES: Final[tuple[tuple[str, FileRole], ...]] = (
    ("component/", FileRole.COMPONENT),
    ("module/", FileRole.MODULE),
)

# Root-level files (relative path equals the name exactly).
ROLE_FILE_NAMES: Final[Mapping[str, FileRole]] = {
    f"config.{SCSS_EXTENSION}": FileRole.CONFIG,
    f"layout.{SCSS_EXTENSION}": FileRole.LAYOUT,
    f"mixin.{SCSS_EXTENSION}": FileRole.MIXIN,
    f"style.{SCSS_EXTENSION}": FileRole.STYLE,
}

# Letter that must follow `$` / `%` (or start a function/mixin name) in
# namespaced roles. Roles not listed here reserve no letter.
ROLE_PREFIX_LETTERS: Final[Mapping[FileRole, str]] = {
    FileRole.COMPONENT: "c",
    FileRole.LAYOUT: "l",
    FileRole.MODULE: "m",
}

# Roles whose root level comments must use the `// -- detail --` form.
COMMENT_SHAPE_ROLES: Final[frozenset[FileRole]] = frozenset(
    {FileRole.COMPONENT, FileRole.LAYOUT, FileRole.MIXIN, FileRole.MODULE}
)

# Characters allowed directly after a placeholder or class name.
SELECTOR_TERMINATORS: Final[str] = ",:. {"

# Declarations that may not appear at all in the given roles, with the
# message reported when they do.
DISALLOWED_CATEGORIES: Final[
    Mapping[LineCategory, tuple[frozenset[FileRole], str]]
] = {
    LineCategory.VARIABLE: (
        frozenset({FileRole.STYLE}),
        "define in Config instead",
    ),
    LineCategory.PLACEHOLDER: (
        frozenset({FileRole.CONFIG, FileRole.MIXIN, FileRole.STYLE}),
        "placeholder selectors not permitted here",
    ),
    LineCategory.FUNCTION: (
        frozenset({FileRole.CONFIG, FileRole.STYLE}),
        "functions not permitted here",
    ),
    LineCategory.MIXIN: (
        frozenset({FileRole.CONFIG, FileRole.STYLE}),
        "mixins not permitted here",
    ),
    LineCategory.CLASS_SELECTOR: (
        frozenset(role for role in FileRole if role != FileRole.MODULE),
        "class selectors not permitted here",
    ),
}

# Message reported when a permitted declaration fails its naming pattern.
INVALID_NAME_MESSAGES: Final[Mapping[LineCategory, str]] = {
    LineCategory.COMMENT: (
        "root level comments should be in the form // -- comment --"
    ),
    LineCategory.VARIABLE: "invalid variable name",
    LineCategory.PLACEHOLDER: "invalid placeholder selector name",
    LineCategory.FUNCTION: "invalid function name",
    LineCategory.MIXIN: "invalid mixin name",
    LineCategory.CLASS_SELECTOR: "invalid class selector name",
}

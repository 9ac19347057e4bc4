"""
Role-aware naming and placement rules.

Every (line category, file role) pair maps to exactly one `Rule` in
`RULE_TABLE`. A rule is a predicate over the trimmed line text and the file's
base name, plus the message reported when the predicate fails. Declarations
that are not allowed in a role at all get a rule that always fails with the
placement message from `DISALLOWED_CATEGORIES`; everything else gets the
naming check for that role.

Naming conventions by role:

- Config: `$camelCase` variables, no namespace.
- Layout: names start with `l` followed by a capitalized word,
  e.g. `$lGutter`, `%lColumn`, `@mixin lColumnSpan`.
- Component / Module: names start with `c` / `m`, then the capitalized file
  namespace, an underscore and a camelCase sub-name, e.g. `$cNavigationArea_height`
  in `component/navigationarea.scss`. Component placeholders may also be the
  bare namespace, e.g. `%cNavigationArea`.
- Module class selectors are lowercase and dash-joined, starting with the file
  namespace, e.g. `.pageheader` or `.pageheader-item`.
- Mixin: root level comment shape only; names are not enforced.

Namespace comparisons ignore case; the shape checks around them do not.
"""

import re
from dataclasses import dataclass
from typing import Callable, Final, Iterable, Mapping

from constants import (
    COMMENT_SHAPE_ROLES,
    DISALLOWED_CATEGORIES,
    INVALID_NAME_MESSAGES,
    ROLE_PREFIX_LETTERS,
    SELECTOR_TERMINATORS,
)
from core.lines import TODO_COMMENT_PATTERN
from core.models import LineRecord, LintError
from models import FileRole, LineCategory

NameCheck = Callable[[str, str], bool]

TERMINATOR = f"[{re.escape(SELECTOR_TERMINATORS)}]"
CLASS_NAMESPACE_TERMINATOR = f"[{re.escape(SELECTOR_TERMINATORS)}\\-]"

COMMENT_SHAPE = re.compile(r"// -- [^ ](?:.*[^ ])? --")

CONFIG_VARIABLE = re.compile(r"\$[a-z][A-Za-z0-9_]+:")
LAYOUT_VARIABLE = re.compile(r"\$l[A-Z][A-Za-z0-9]+:")
NAMESPACED_VARIABLE = re.compile(
    r"\$[cm](?P<namespace>[A-Z][A-Za-z]+)_[a-z][A-Za-z0-9]+:"
)

LAYOUT_PLACEHOLDER = re.compile(rf"%l[A-Z][A-Za-z0-9]+{TERMINATOR}")
NAMESPACED_PLACEHOLDER = re.compile(
    rf"%[cm](?P<namespace>[A-Z][A-Za-z]+)_[a-z][A-Za-z0-9]+{TERMINATOR}"
)
SIMPLE_PLACEHOLDER_CASE = re.compile(r"%c[A-Z]")

LAYOUT_IDENTIFIER = re.compile(r"l[A-Z][A-Za-z0-9]+")
NAMESPACED_IDENTIFIER = re.compile(
    r"[cm](?P<namespace>[A-Z][A-Za-z]+)_[a-z][A-Za-z0-9]+"
)

CLASS_SELECTOR_SHAPE = re.compile(rf"\.[a-z0-9][a-z0-9-]*[a-z0-9]{TERMINATOR}")

DECLARATION_NAMES: Final[Mapping[LineCategory, re.Pattern[str]]] = {
    LineCategory.FUNCTION: re.compile(r"@function +([^( ]+)"),
    LineCategory.MIXIN: re.compile(r"@mixin +([^( ]+)"),
}

SUBJECT_PATTERNS: Final[Mapping[LineCategory, re.Pattern[str]]] = {
    LineCategory.VARIABLE: re.compile(r"(\$[^ :]+)"),
    LineCategory.PLACEHOLDER: re.compile(rf"(%[^{re.escape(SELECTOR_TERMINATORS)}]+)"),
    LineCategory.CLASS_SELECTOR: re.compile(
        rf"(\.[^{re.escape(SELECTOR_TERMINATORS)}]+)"
    ),
    **DECLARATION_NAMES,
}


@dataclass(frozen=True)
class Rule:
    """
    A naming or placement check bound to one category and role.

    Attributes:
        message: Reported when `check` fails.
        check: Predicate receiving the trimmed line text and the file base name.
    """

    message: str
    check: NameCheck


def _accept(text: str, base_name: str) -> bool:
    return True


def _reject(text: str, base_name: str) -> bool:
    return False


def _has_role_prefix(name: str, role: FileRole, symbol: str = "") -> bool:
    """Roles without a reserved letter accept any prefix."""
    letter = ROLE_PREFIX_LETTERS.get(role)
    return letter is None or name.startswith(symbol + letter)


def _namespace_matches(match: re.Match[str] | None, base_name: str) -> bool:
    return match is not None and match.group("namespace").lower() == base_name


def _check_comment(text: str, base_name: str) -> bool:
    if TODO_COMMENT_PATTERN.match(text):
        return True
    return COMMENT_SHAPE.match(text) is not None


def _check_config_variable(text: str, base_name: str) -> bool:
    return CONFIG_VARIABLE.match(text) is not None


def _check_layout_variable(text: str, base_name: str) -> bool:
    return (
        _has_role_prefix(text, FileRole.LAYOUT, "$")
        and LAYOUT_VARIABLE.match(text) is not None
    )


def _namespaced_variable(role: FileRole) -> NameCheck:
    def check(text: str, base_name: str) -> bool:
        if not _has_role_prefix(text, role, "$"):
            return False
        return _namespace_matches(NAMESPACED_VARIABLE.match(text), base_name)

    return check


def _check_layout_placeholder(text: str, base_name: str) -> bool:
    return (
        _has_role_prefix(text, FileRole.LAYOUT, "%")
        and LAYOUT_PLACEHOLDER.match(text) is not None
    )


def _is_simple_placeholder(text: str, base_name: str) -> bool:
    """`%c<BaseName>` with no sub-name, compared without case."""
    simple = re.compile(rf"%c{re.escape(base_name)}{TERMINATOR}")
    return simple.match(text.lower()) is not None


def _namespaced_placeholder(role: FileRole) -> NameCheck:
    def check(text: str, base_name: str) -> bool:
        if not _has_role_prefix(text, role, "%"):
            return False
        if role == FileRole.COMPONENT and _is_simple_placeholder(text, base_name):
            return SIMPLE_PLACEHOLDER_CASE.match(text) is not None
        return _namespace_matches(NAMESPACED_PLACEHOLDER.match(text), base_name)

    return check


def _declaration_check(category: LineCategory, role: FileRole) -> NameCheck:
    """Naming check for `@function` / `@mixin` identifiers."""
    name_pattern = DECLARATION_NAMES[category]

    def check(text: str, base_name: str) -> bool:
        found = name_pattern.match(text)
        if not found:
            return False

        name = found.group(1)
        if not _has_role_prefix(name, role):
            return False
        if role == FileRole.LAYOUT:
            return LAYOUT_IDENTIFIER.fullmatch(name) is not None
        if role in (FileRole.COMPONENT, FileRole.MODULE):
            return _namespace_matches(NAMESPACED_IDENTIFIER.fullmatch(name), base_name)
        return True

    return check


def _check_class_selector(text: str, base_name: str) -> bool:
    if not CLASS_SELECTOR_SHAPE.match(text):
        return False
    namespace = re.compile(rf"\.{re.escape(base_name)}{CLASS_NAMESPACE_TERMINATOR}")
    return namespace.match(text.lower()) is not None


def _naming_checks() -> dict[tuple[LineCategory, FileRole], NameCheck]:
    checks: dict[tuple[LineCategory, FileRole], NameCheck] = {}

    for role in FileRole:
        checks[(LineCategory.COMMENT, role)] = (
            _check_comment if role in COMMENT_SHAPE_ROLES else _accept
        )
        for category in (LineCategory.FUNCTION, LineCategory.MIXIN):
            checks[(category, role)] = _declaration_check(category, role)

    checks[(LineCategory.VARIABLE, FileRole.CONFIG)] = _check_config_variable
    checks[(LineCategory.VARIABLE, FileRole.LAYOUT)] = _check_layout_variable
    checks[(LineCategory.VARIABLE, FileRole.MIXIN)] = _accept
    checks[(LineCategory.PLACEHOLDER, FileRole.LAYOUT)] = _check_layout_placeholder
    for role in (FileRole.COMPONENT, FileRole.MODULE):
        checks[(LineCategory.VARIABLE, role)] = _namespaced_variable(role)
        checks[(LineCategory.PLACEHOLDER, role)] = _namespaced_placeholder(role)

    checks[(LineCategory.CLASS_SELECTOR, FileRole.MODULE)] = _check_class_selector
    return checks


def build_rule_table() -> dict[tuple[LineCategory, FileRole], Rule]:
    """
    Build the complete (category, role) -> Rule lookup.

    Placement rules take precedence over naming checks, so a category that is
    disallowed in a role never reaches its naming pattern.

    Raises:
        ValueError: If some (category, role) pair has no rule.
    """
    table: dict[tuple[LineCategory, FileRole], Rule] = {}

    for category, (roles, message) in DISALLOWED_CATEGORIES.items():
        for role in roles:
            table[(category, role)] = Rule(message, _reject)

    for key, check in _naming_checks().items():
        if key not in table:
            table[key] = Rule(INVALID_NAME_MESSAGES[key[0]], check)

    missing = [
        (category, role)
        for category in LineCategory
        for role in FileRole
        if (category, role) not in table
    ]
    if missing:
        raise ValueError(f"No rule defined for {missing}")

    return table


RULE_TABLE: Final[Mapping[tuple[LineCategory, FileRole], Rule]] = build_rule_table()


def extract_subject(category: LineCategory, text: str) -> str | None:
    """Pull the declared name out of a line for reporting, if there is one."""
    pattern = SUBJECT_PATTERNS.get(category)
    if pattern is None:
        return None
    found = pattern.match(text)
    return found.group(1) if found else None


def check_line(record: LineRecord, role: FileRole, base_name: str) -> LintError | None:
    """
    Apply the rule for a categorized line.

    Returns:
        A `LintError` if the line breaks its rule, None otherwise (including
        lines with no category).
    """
    if record.category is None:
        return None

    rule = RULE_TABLE[(record.category, role)]
    if rule.check(record.text, base_name):
        return None

    return LintError(
        record.number, rule.message, extract_subject(record.category, record.text)
    )


def check_lines(
    records: Iterable[LineRecord], role: FileRole, base_name: str
) -> list[LintError]:
    """Check every line in scan order and collect the violations."""
    errors = []
    for record in records:
        error = check_line(record, role, base_name)
        if error is not None:
            errors.append(error)
    return errors

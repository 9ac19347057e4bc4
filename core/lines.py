"""
Line categorizer.

Splits a file into physical lines and tags each one with the declaration its
leading token introduces. Comment and class selector detection look at the
right-trimmed text, so only root level (unindented) comments and selectors are
recognized. The other categories look at the fully trimmed text.
"""

import re
from typing import Iterator

from core.models import LineRecord
from models import LineCategory

LINE_SEPARATOR = re.compile(r"\r?\n")

COMMENT_PATTERN = re.compile(r"//")
TODO_COMMENT_PATTERN = re.compile(r"// +TODO:")
VARIABLE_PATTERN = re.compile(r"\$[^ ]+:")
PLACEHOLDER_PATTERN = re.compile(r"%")
FUNCTION_PATTERN = re.compile(r"@function ")
MIXIN_PATTERN = re.compile(r"@mixin ")
CLASS_SELECTOR_PATTERN = re.compile(r"\.")


def categorize_line(text: str, root_text: str) -> LineCategory | None:
    """
    Decide which declaration a line represents.

    The leading tokens tested here are disjoint, so a line matches at most one
    category.

    Args:
        text: The line trimmed at both ends.
        root_text: The line trimmed on the right only.

    Returns:
        The line's category, or None when the line is not subject to any rule.
    """
    if COMMENT_PATTERN.match(root_text):
        return LineCategory.COMMENT
    if VARIABLE_PATTERN.match(text):
        return LineCategory.VARIABLE
    if PLACEHOLDER_PATTERN.match(text):
        return LineCategory.PLACEHOLDER
    if FUNCTION_PATTERN.match(text):
        return LineCategory.FUNCTION
    if MIXIN_PATTERN.match(text):
        return LineCategory.MIXIN
    if CLASS_SELECTOR_PATTERN.match(root_text):
        return LineCategory.CLASS_SELECTOR
    return None


def iter_lines(content: str) -> Iterator[LineRecord]:
    """
    Yield a `LineRecord` for every physical line of `content`.

    Both `\\n` and `\\r\\n` terminators are accepted. Line numbers start at 1.
    """
    for index, raw_line in enumerate(LINE_SEPARATOR.split(content)):
        text = raw_line.strip()
        root_text = raw_line.rstrip()
        yield LineRecord(
            number=index + 1,
            text=text,
            root_text=root_text,
            category=categorize_line(text, root_text),
        )

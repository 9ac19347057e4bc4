"""
Type definitions shared across the Sassline CLI application.

This module contains the enums that describe what a stylesheet file is for and
what a single line of it declares. They are used as keys in the rule table
defined in `core/rules.py` and in the lookup tables in `constants.py`.
"""

from enum import Enum, StrEnum


class FileRole(StrEnum):
    """
    Enumeration of the structural roles a stylesheet file can play.

    A file's role is derived from its path relative to the scan root (see
    `core/classification.py`) and decides which declarations are legal in it
    and which naming pattern those declarations must follow.
    """

    COMPONENT = "Component"
    CONFIG = "Config"
    LAYOUT = "Layout"
    MIXIN = "Mixin"
    MODULE = "Module"
    STYLE = "Style"


class LineCategory(Enum):
    """
    Closed set of declarations the line categorizer can recognize.

    A line is assigned at most one category, decided by its leading token.
    Lines that match none of these carry no category and are never checked.
    """

    COMMENT = "comment"
    VARIABLE = "variable"
    PLACEHOLDER = "placeholder"
    FUNCTION = "function"
    MIXIN = "mixin"
    CLASS_SELECTOR = "class_selector"

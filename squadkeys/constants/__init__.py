"""Constants module for the squadkeys registry.

Centralized constants organized by domain:
- enums.py: ActionId and HelpCategory
- values.py: Scalar constants (strings, orderings with Final)

Note: Literal binding and help tables live in squadkeys.keyboard.defaults.
"""

from squadkeys.constants.enums import ActionId, HelpCategory
from squadkeys.constants.values import (
    CATEGORY_DISPLAY_ORDER,
    DEFAULT_CATEGORY,
    DEFAULT_DESCRIPTION,
    HELP_KEY_COLUMN_WIDTH,
    HIDDEN_CATEGORIES,
    LEGACY_SUFFIX,
    STATUS_LINE_SEPARATOR,
    TEXTUAL_KEY_ALIASES,
)

__all__ = [
    # Enums
    "ActionId",
    "HelpCategory",
    # Values
    "CATEGORY_DISPLAY_ORDER",
    "DEFAULT_CATEGORY",
    "DEFAULT_DESCRIPTION",
    "HELP_KEY_COLUMN_WIDTH",
    "HIDDEN_CATEGORIES",
    "LEGACY_SUFFIX",
    "STATUS_LINE_SEPARATOR",
    "TEXTUAL_KEY_ALIASES",
]

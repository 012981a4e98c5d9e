"""Scalar constants for the key registry.

All registry-level constants with proper type hints using Final.
"""

from typing import Final

from squadkeys.constants.enums import HelpCategory

# ============================================================================
# Help fallback
# ============================================================================

DEFAULT_DESCRIPTION: Final = "No description"
DEFAULT_CATEGORY: Final = HelpCategory.UNCATEGORIZED

# ============================================================================
# Help screen layout
# ============================================================================

# Display order for categories on the general help screen.
CATEGORY_DISPLAY_ORDER: Final[tuple[HelpCategory, ...]] = (
    HelpCategory.MANAGING,
    HelpCategory.HANDOFF,
    HelpCategory.ORGANIZATION,
    HelpCategory.NAVIGATION,
    HelpCategory.OTHER,
    HelpCategory.UNCATEGORIZED,
)

HIDDEN_CATEGORIES: Final[frozenset[HelpCategory]] = frozenset({HelpCategory.SPECIAL})

HELP_KEY_COLUMN_WIDTH: Final = 12
STATUS_LINE_SEPARATOR: Final = " • "
LEGACY_SUFFIX: Final = " (legacy)"

# ============================================================================
# Textual key names
# ============================================================================

# Registry tokens whose Textual key name differs.
TEXTUAL_KEY_ALIASES: Final[dict[str, str]] = {
    "esc": "escape",
}

__all__ = [
    "CATEGORY_DISPLAY_ORDER",
    "DEFAULT_CATEGORY",
    "DEFAULT_DESCRIPTION",
    "HELP_KEY_COLUMN_WIDTH",
    "HIDDEN_CATEGORIES",
    "LEGACY_SUFFIX",
    "STATUS_LINE_SEPARATOR",
    "TEXTUAL_KEY_ALIASES",
]

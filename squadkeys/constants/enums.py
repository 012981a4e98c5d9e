"""All enum definitions for the key registry.

This module consolidates the closed sets the registry is keyed on: the
semantic actions a keystroke can resolve to and the help-screen categories
they are grouped under.
"""

from enum import Enum, IntEnum, auto

# =============================================================================
# Action Enums
# =============================================================================

class ActionId(IntEnum):
    """Semantic action identifiers, independent of the keys that trigger them.

    Member order is the canonical iteration order for every sequence the
    registry hands to a renderer.
    """

    UP = auto()
    DOWN = auto()
    ENTER = auto()
    NEW = auto()
    KILL = auto()
    QUIT = auto()
    REVIEW = auto()  # Modal-only: review code
    PUSH = auto()  # Modal-only: push changes
    SUBMIT = auto()

    TAB = auto()  # Switch between preview and diff panes
    SUBMIT_NAME = auto()  # Modal-only: submit the name of a new session

    CHECKOUT = auto()
    RESUME = auto()
    PROMPT = auto()
    HELP = auto()
    ESC = auto()

    # Diff scrolling
    SHIFT_UP = auto()
    SHIFT_DOWN = auto()

    # Session organization
    SEARCH = auto()
    RIGHT = auto()
    LEFT = auto()
    TOGGLE_GROUP = auto()
    FILTER_PAUSED = auto()
    CLEAR_FILTERS = auto()
    GIT = auto()


# =============================================================================
# Help Enums
# =============================================================================

class HelpCategory(Enum):
    """Help-screen categories for organizing actions."""

    MANAGING = "Managing"
    HANDOFF = "Handoff"
    NAVIGATION = "Navigation"
    ORGANIZATION = "Organization"
    OTHER = "Other"
    SPECIAL = "Special"  # Modal-only actions, never listed in general help
    UNCATEGORIZED = "Uncategorized"  # Fallback for actions without help


__all__ = [
    "ActionId",
    "HelpCategory",
]

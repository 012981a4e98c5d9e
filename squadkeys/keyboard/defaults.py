"""Literal key, binding and help tables for the session list.

These tables are the only source of key data. They are read once by
squadkeys.keyboard.registry.build_registry and never mutated.
"""

from squadkeys.constants.enums import ActionId, HelpCategory
from squadkeys.models.bindings import HelpEntry, KeyBinding

# ============================================================================
# Raw token table
# ============================================================================

KEY_TOKENS: dict[str, ActionId] = {
    "up": ActionId.UP,
    "k": ActionId.UP,
    "down": ActionId.DOWN,
    "j": ActionId.DOWN,
    "shift+up": ActionId.SHIFT_UP,
    "shift+down": ActionId.SHIFT_DOWN,
    "ctrl+u": ActionId.SHIFT_UP,
    "ctrl+d": ActionId.SHIFT_DOWN,
    "N": ActionId.PROMPT,
    ":": ActionId.PROMPT,
    "enter": ActionId.ENTER,
    "n": ActionId.NEW,
    "D": ActionId.KILL,
    "q": ActionId.QUIT,
    "tab": ActionId.TAB,
    "c": ActionId.CHECKOUT,
    "r": ActionId.RESUME,
    "P": ActionId.SUBMIT,
    "?": ActionId.HELP,
    "right": ActionId.RIGHT,
    "l": ActionId.RIGHT,
    "left": ActionId.LEFT,
    "h": ActionId.LEFT,
    "s": ActionId.SEARCH,
    "/": ActionId.SEARCH,
    "space": ActionId.TOGGLE_GROUP,
    "f": ActionId.FILTER_PAUSED,
    "C": ActionId.CLEAR_FILTERS,
    "g": ActionId.GIT,
    "esc": ActionId.ESC,
}

# ============================================================================
# Display bindings
# ============================================================================

KEY_BINDINGS: dict[ActionId, KeyBinding] = {
    ActionId.UP: KeyBinding(keys=("up", "k"), key_label="↑/k", caption="up"),
    ActionId.DOWN: KeyBinding(keys=("down", "j"), key_label="↓/j", caption="down"),
    ActionId.SHIFT_UP: KeyBinding(
        keys=("shift+up", "ctrl+u"), key_label="shift+↑/^u", caption="scroll up"
    ),
    ActionId.SHIFT_DOWN: KeyBinding(
        keys=("shift+down", "ctrl+d"), key_label="shift+↓/^d", caption="scroll down"
    ),
    ActionId.ENTER: KeyBinding(keys=("enter",), key_label="↵", caption="attach"),
    ActionId.NEW: KeyBinding(keys=("n",), key_label="n", caption="new"),
    ActionId.KILL: KeyBinding(keys=("D",), key_label="D", caption="kill"),
    ActionId.HELP: KeyBinding(keys=("?",), key_label="?", caption="help"),
    ActionId.QUIT: KeyBinding(keys=("q",), key_label="q", caption="quit"),
    ActionId.SUBMIT: KeyBinding(keys=("P",), key_label="P", caption="push branch"),
    ActionId.PROMPT: KeyBinding(keys=("N", ":"), key_label="N/:", caption="new with prompt"),
    ActionId.CHECKOUT: KeyBinding(keys=("c",), key_label="c", caption="checkout"),
    ActionId.TAB: KeyBinding(keys=("tab",), key_label="tab", caption="switch tab"),
    ActionId.RESUME: KeyBinding(keys=("r",), key_label="r", caption="resume"),
    # Session organization
    ActionId.SEARCH: KeyBinding(keys=("s", "/"), key_label="s/", caption="search sessions"),
    ActionId.RIGHT: KeyBinding(keys=("right", "l"), key_label="→/l", caption="expand category"),
    ActionId.LEFT: KeyBinding(keys=("left", "h"), key_label="←/h", caption="collapse category"),
    ActionId.TOGGLE_GROUP: KeyBinding(
        keys=("space",), key_label="space", caption="toggle category"
    ),
    ActionId.FILTER_PAUSED: KeyBinding(keys=("f",), key_label="f", caption="filter paused"),
    ActionId.CLEAR_FILTERS: KeyBinding(keys=("C",), key_label="C", caption="clear all filters"),
    ActionId.GIT: KeyBinding(keys=("g",), key_label="g", caption="git status"),
    ActionId.ESC: KeyBinding(keys=("esc",), key_label="esc", caption="cancel"),
    # Modal-only; "enter" resolves to ENTER outside the naming prompt
    ActionId.SUBMIT_NAME: KeyBinding(keys=("enter",), key_label="enter", caption="submit name"),
}

# ============================================================================
# Help entries
# ============================================================================

HELP_ENTRIES: dict[ActionId, HelpEntry] = {
    # Managing
    ActionId.NEW: HelpEntry(description="Create a new session", category=HelpCategory.MANAGING),
    ActionId.PROMPT: HelpEntry(
        description="Create a new session with a prompt (Vim-like command mode)",
        category=HelpCategory.MANAGING,
    ),
    ActionId.KILL: HelpEntry(
        description="Kill (delete) the selected session", category=HelpCategory.MANAGING
    ),
    ActionId.ENTER: HelpEntry(
        description="Attach to the selected session", category=HelpCategory.MANAGING
    ),
    # Handoff
    ActionId.SUBMIT: HelpEntry(
        description="Push branch (legacy - use 'g' for git workflow)",
        category=HelpCategory.HANDOFF,
        superseded_by=ActionId.GIT,
    ),
    ActionId.CHECKOUT: HelpEntry(
        description="Checkout: commit changes and pause session", category=HelpCategory.HANDOFF
    ),
    ActionId.RESUME: HelpEntry(description="Resume a paused session", category=HelpCategory.HANDOFF),
    ActionId.GIT: HelpEntry(
        description="Open git status interface (fugitive-style)", category=HelpCategory.HANDOFF
    ),
    # Organization
    ActionId.SEARCH: HelpEntry(
        description="Search sessions by title (Vim-style search)",
        category=HelpCategory.ORGANIZATION,
    ),
    ActionId.RIGHT: HelpEntry(
        description="Expand selected category (Vim h/j/k/l navigation)",
        category=HelpCategory.ORGANIZATION,
    ),
    ActionId.LEFT: HelpEntry(
        description="Collapse selected category (Vim h/j/k/l navigation)",
        category=HelpCategory.ORGANIZATION,
    ),
    ActionId.TOGGLE_GROUP: HelpEntry(
        description="Toggle expand/collapse category", category=HelpCategory.ORGANIZATION
    ),
    ActionId.FILTER_PAUSED: HelpEntry(
        description="Toggle visibility of paused sessions", category=HelpCategory.ORGANIZATION
    ),
    ActionId.CLEAR_FILTERS: HelpEntry(
        description="Clear all filters and search", category=HelpCategory.ORGANIZATION
    ),
    # Navigation
    ActionId.UP: HelpEntry(
        description="Navigate up (Vim j/k keys supported)", category=HelpCategory.NAVIGATION
    ),
    ActionId.DOWN: HelpEntry(
        description="Navigate down (Vim j/k keys supported)", category=HelpCategory.NAVIGATION
    ),
    ActionId.SHIFT_UP: HelpEntry(
        description="Scroll up (Vim Ctrl+u supported)", category=HelpCategory.NAVIGATION
    ),
    ActionId.SHIFT_DOWN: HelpEntry(
        description="Scroll down (Vim Ctrl+d supported)", category=HelpCategory.NAVIGATION
    ),
    # Other
    ActionId.TAB: HelpEntry(
        description="Switch between preview and diff tabs", category=HelpCategory.OTHER
    ),
    ActionId.ESC: HelpEntry(description="Cancel/exit current mode", category=HelpCategory.OTHER),
    ActionId.QUIT: HelpEntry(description="Quit the application", category=HelpCategory.OTHER),
    ActionId.HELP: HelpEntry(description="Show help screen", category=HelpCategory.OTHER),
    # Special (not shown in general help)
    ActionId.SUBMIT_NAME: HelpEntry(
        description="Submit name for new instance", category=HelpCategory.SPECIAL
    ),
    ActionId.REVIEW: HelpEntry(description="Review code", category=HelpCategory.SPECIAL),
    ActionId.PUSH: HelpEntry(description="Push changes", category=HelpCategory.SPECIAL),
}

__all__ = [
    "HELP_ENTRIES",
    "KEY_BINDINGS",
    "KEY_TOKENS",
]

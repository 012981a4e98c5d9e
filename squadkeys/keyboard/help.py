"""Help catalog: descriptions and categories for the help screen."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from squadkeys.constants.enums import ActionId, HelpCategory
from squadkeys.constants.values import (
    CATEGORY_DISPLAY_ORDER,
    DEFAULT_CATEGORY,
    DEFAULT_DESCRIPTION,
    HIDDEN_CATEGORIES,
)
from squadkeys.models.bindings import HelpEntry

DEFAULT_HELP_ENTRY = HelpEntry(description=DEFAULT_DESCRIPTION, category=DEFAULT_CATEGORY)


def category_priority(category: HelpCategory) -> int:
    """Return the display priority for a category (lower = shown first)."""
    try:
        return CATEGORY_DISPLAY_ORDER.index(category)
    except ValueError:
        return len(CATEGORY_DISPLAY_ORDER)


def is_hidden(category: HelpCategory) -> bool:
    """Return True if the category must not appear in general help."""
    return category in HIDDEN_CATEGORIES


class HelpCatalog:
    """Read-only help metadata keyed by action identifier.

    Every sequence returned here is explicitly ordered so rendered help
    screens are identical across calls and runs: actions by ActionId order,
    categories by CATEGORY_DISPLAY_ORDER.
    """

    def __init__(self, entries: Mapping[ActionId, HelpEntry]) -> None:
        self._entries: Mapping[ActionId, HelpEntry] = MappingProxyType(dict(entries))

        by_category: dict[HelpCategory, list[ActionId]] = {}
        for action in sorted(self._entries):
            by_category.setdefault(self._entries[action].category, []).append(action)
        self._by_category: Mapping[HelpCategory, tuple[ActionId, ...]] = MappingProxyType(
            {category: tuple(actions) for category, actions in by_category.items()}
        )
        self._visible: tuple[HelpCategory, ...] = tuple(
            sorted(
                (
                    category
                    for category in self._by_category
                    if not is_hidden(category) and category is not DEFAULT_CATEGORY
                ),
                key=category_priority,
            )
        )

    def lookup(self, action: ActionId) -> HelpEntry | None:
        """Return the registered entry for ``action``, or None."""
        return self._entries.get(action)

    def describe_action(self, action: ActionId) -> HelpEntry:
        """Return the help entry for ``action``, falling back to a placeholder."""
        entry = self._entries.get(action)
        if entry is None:
            return DEFAULT_HELP_ENTRY
        return entry

    def actions_in_category(self, category: HelpCategory) -> tuple[ActionId, ...]:
        """Return registered actions in ``category``, in ActionId order."""
        return self._by_category.get(category, ())

    def visible_categories(self) -> tuple[HelpCategory, ...]:
        """Return categories with at least one registered action, minus hidden ones."""
        return self._visible

    @property
    def entries(self) -> Mapping[ActionId, HelpEntry]:
        return self._entries


__all__ = [
    "DEFAULT_HELP_ENTRY",
    "HelpCatalog",
    "category_priority",
    "is_hidden",
]

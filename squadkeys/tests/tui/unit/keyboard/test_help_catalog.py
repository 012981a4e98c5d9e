"""Unit tests for keyboard/help.py.

Tests cover:
- describe_action for registered and unregistered actions
- Explicit absence through lookup
- Category membership and visible categories
- Deterministic ordering
"""

from __future__ import annotations

from squadkeys.constants.enums import ActionId, HelpCategory
from squadkeys.keyboard.defaults import HELP_ENTRIES
from squadkeys.keyboard.help import (
    DEFAULT_HELP_ENTRY,
    HelpCatalog,
    category_priority,
    is_hidden,
)
from squadkeys.keyboard.registry import Registry
from squadkeys.models.bindings import HelpEntry

# =============================================================================
# DescribeAction
# =============================================================================


class TestDescribeAction:
    """Test HelpCatalog.describe_action and lookup."""

    def test_up_is_navigation(self, registry: Registry) -> None:
        assert registry.describe_action(ActionId.UP).category is HelpCategory.NAVIGATION

    def test_registered_entries_returned_exactly(self, registry: Registry) -> None:
        assert dict(registry.help.entries) == HELP_ENTRIES
        for action, entry in HELP_ENTRIES.items():
            assert registry.describe_action(action) == entry

    def test_unregistered_action_gets_default(self, small_registry: Registry) -> None:
        entry = small_registry.describe_action(ActionId.NEW)
        assert entry.description == "No description"
        assert entry.category is HelpCategory.UNCATEGORIZED
        assert entry == DEFAULT_HELP_ENTRY

    def test_lookup_distinguishes_default(self, small_registry: Registry) -> None:
        assert small_registry.lookup_help(ActionId.NEW) is None
        assert small_registry.lookup_help(ActionId.QUIT) is not None

    def test_every_builtin_action_has_help(self, registry: Registry) -> None:
        for action in registry.all_identifiers():
            assert registry.lookup_help(action) is not None, action.name

    def test_legacy_push_branch_is_handoff(self, registry: Registry) -> None:
        entry = registry.describe_action(ActionId.SUBMIT)
        assert entry.category is HelpCategory.HANDOFF
        assert entry.superseded_by is ActionId.GIT


# =============================================================================
# ActionsInCategory
# =============================================================================


class TestActionsInCategory:
    """Test HelpCatalog.actions_in_category."""

    def test_matches_registered_entries(self, registry: Registry) -> None:
        for category in HelpCategory:
            expected = {
                action for action, entry in HELP_ENTRIES.items() if entry.category is category
            }
            assert set(registry.actions_in_category(category)) == expected

    def test_special_contains_submit_name(self, registry: Registry) -> None:
        special = registry.actions_in_category(HelpCategory.SPECIAL)
        assert special == (ActionId.REVIEW, ActionId.PUSH, ActionId.SUBMIT_NAME)

    def test_navigation_in_action_order(self, registry: Registry) -> None:
        assert registry.actions_in_category(HelpCategory.NAVIGATION) == (
            ActionId.UP,
            ActionId.DOWN,
            ActionId.SHIFT_UP,
            ActionId.SHIFT_DOWN,
        )

    def test_repeated_calls_identical(self, registry: Registry) -> None:
        for category in HelpCategory:
            assert registry.actions_in_category(category) == registry.actions_in_category(
                category
            )

    def test_uncategorized_is_empty(self, registry: Registry) -> None:
        assert registry.actions_in_category(HelpCategory.UNCATEGORIZED) == ()

    def test_insertion_order_does_not_matter(self) -> None:
        entries = {
            ActionId.GIT: HelpEntry(description="git", category=HelpCategory.HANDOFF),
            ActionId.SUBMIT: HelpEntry(description="push", category=HelpCategory.HANDOFF),
            ActionId.CHECKOUT: HelpEntry(description="checkout", category=HelpCategory.HANDOFF),
        }
        reversed_entries = dict(reversed(list(entries.items())))
        assert HelpCatalog(entries).actions_in_category(
            HelpCategory.HANDOFF
        ) == HelpCatalog(reversed_entries).actions_in_category(HelpCategory.HANDOFF)


# =============================================================================
# VisibleCategories
# =============================================================================


class TestVisibleCategories:
    """Test HelpCatalog.visible_categories."""

    def test_excludes_special(self, registry: Registry) -> None:
        assert HelpCategory.SPECIAL not in registry.visible_categories()

    def test_display_order(self, registry: Registry) -> None:
        assert registry.visible_categories() == (
            HelpCategory.MANAGING,
            HelpCategory.HANDOFF,
            HelpCategory.ORGANIZATION,
            HelpCategory.NAVIGATION,
            HelpCategory.OTHER,
        )

    def test_uncategorized_never_visible(self, registry: Registry) -> None:
        registry.describe_action(ActionId.UP)
        assert HelpCategory.UNCATEGORIZED not in registry.visible_categories()

    def test_only_populated_categories(self, small_registry: Registry) -> None:
        assert small_registry.visible_categories() == (HelpCategory.OTHER,)

    def test_stored_uncategorized_not_visible(self) -> None:
        catalog = HelpCatalog(
            {ActionId.QUIT: HelpEntry(description="Quit", category=HelpCategory.UNCATEGORIZED)}
        )
        assert catalog.visible_categories() == ()

    def test_empty_catalog(self) -> None:
        assert HelpCatalog({}).visible_categories() == ()


# =============================================================================
# Category helpers
# =============================================================================


class TestCategoryHelpers:
    """Test category_priority and is_hidden."""

    def test_special_is_hidden(self) -> None:
        assert is_hidden(HelpCategory.SPECIAL) is True

    def test_other_categories_not_hidden(self) -> None:
        for category in HelpCategory:
            if category is not HelpCategory.SPECIAL:
                assert is_hidden(category) is False

    def test_managing_first(self) -> None:
        assert category_priority(HelpCategory.MANAGING) == 0

    def test_uncategorized_after_other(self) -> None:
        assert category_priority(HelpCategory.UNCATEGORIZED) > category_priority(
            HelpCategory.OTHER
        )

    def test_special_sorts_last(self) -> None:
        assert category_priority(HelpCategory.SPECIAL) == max(
            category_priority(category) for category in HelpCategory
        )

"""Key registry composition, validation and snapshot publication.

The registry is an explicit immutable value built once by build_registry()
and handed to the event loop and help renderer at startup. Tests build
reduced registries from their own tables the same way.

Hot reload never mutates a registry: a new one is built and published
through RegistryHolder, which swaps a single reference.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache

from squadkeys.constants.enums import ActionId, HelpCategory
from squadkeys.keyboard.catalog import all_identifiers
from squadkeys.keyboard.defaults import HELP_ENTRIES, KEY_BINDINGS, KEY_TOKENS
from squadkeys.keyboard.help import HelpCatalog
from squadkeys.keyboard.resolver import InputResolver
from squadkeys.models.bindings import (
    CatalogConsistencyError,
    HelpEntry,
    KeyBinding,
    RegistryOptions,
)

logger = logging.getLogger(__name__)


# ============================================================================
# VALIDATION
# ============================================================================

def _is_phantom(token: str, action: ActionId, bindings: Mapping[ActionId, KeyBinding]) -> bool:
    if not isinstance(action, ActionId):
        return True
    binding = bindings.get(action)
    return binding is None or token not in binding.keys


def validate_tables(
    token_map: Mapping[str, ActionId],
    bindings: Mapping[ActionId, KeyBinding],
    help_entries: Mapping[ActionId, HelpEntry],
) -> list[str]:
    """Check the three tables against each other.

    Returns:
        Human-readable issues, empty when the tables are consistent.
    """
    issues: list[str] = []

    for token, action in token_map.items():
        if not isinstance(action, ActionId):
            issues.append(f"Token {token!r} maps to unknown action {action!r}")
            continue
        binding = bindings.get(action)
        if binding is None:
            issues.append(f"Token {token!r} maps to {action.name}, which has no binding")
        elif token not in binding.keys:
            issues.append(
                f"Token {token!r} maps to {action.name}, but its binding lists {list(binding.keys)}"
            )

    for action in bindings:
        if not isinstance(action, ActionId):
            issues.append(f"Binding registered for unknown action {action!r}")

    for action, entry in help_entries.items():
        if not isinstance(action, ActionId):
            issues.append(f"Help entry registered for unknown action {action!r}")
            continue
        if entry.category is HelpCategory.UNCATEGORIZED:
            issues.append(f"Help entry for {action.name} is stored as {entry.category.value}")
        if entry.superseded_by is action:
            issues.append(f"Help entry for {action.name} is superseded by itself")

    return issues


# ============================================================================
# REGISTRY
# ============================================================================

class Registry:
    """Immutable composition of the input resolver and help catalog."""

    def __init__(self, resolver: InputResolver, help_catalog: HelpCatalog) -> None:
        self._resolver = resolver
        self._help = help_catalog

    @property
    def resolver(self) -> InputResolver:
        return self._resolver

    @property
    def help(self) -> HelpCatalog:
        return self._help

    def all_identifiers(self) -> tuple[ActionId, ...]:
        """Return every ActionId member, including ones this registry does not bind."""
        return all_identifiers()

    def resolve(self, token: str) -> ActionId | None:
        return self._resolver.resolve(token)

    def binding_for(self, action: ActionId) -> KeyBinding | None:
        return self._resolver.binding_for(action)

    def describe_action(self, action: ActionId) -> HelpEntry:
        return self._help.describe_action(action)

    def lookup_help(self, action: ActionId) -> HelpEntry | None:
        return self._help.lookup(action)

    def actions_in_category(self, category: HelpCategory) -> tuple[ActionId, ...]:
        return self._help.actions_in_category(category)

    def visible_categories(self) -> tuple[HelpCategory, ...]:
        return self._help.visible_categories()


def build_registry(
    token_map: Mapping[str, ActionId] | None = None,
    bindings: Mapping[ActionId, KeyBinding] | None = None,
    help_entries: Mapping[ActionId, HelpEntry] | None = None,
    options: RegistryOptions | None = None,
) -> Registry:
    """Build a registry from literal tables, defaulting to the built-in ones.

    Args:
        token_map: Raw token to action identifier.
        bindings: Action identifier to display binding.
        help_entries: Action identifier to help entry.
        options: Build options; strict by default.

    Raises:
        CatalogConsistencyError: If the tables disagree and options.strict is set.
    """
    token_map = KEY_TOKENS if token_map is None else token_map
    bindings = KEY_BINDINGS if bindings is None else bindings
    help_entries = HELP_ENTRIES if help_entries is None else help_entries
    options = options or RegistryOptions()

    issues = validate_tables(token_map, bindings, help_entries)
    if issues:
        if options.strict:
            raise CatalogConsistencyError(issues)
        for issue in issues:
            logger.warning("Key registry: %s", issue)
        bindings = {
            action: binding
            for action, binding in bindings.items()
            if isinstance(action, ActionId)
        }
        help_entries = {
            action: entry
            for action, entry in help_entries.items()
            if isinstance(action, ActionId) and entry.category is not HelpCategory.UNCATEGORIZED
        }
        token_map = {
            token: action
            for token, action in token_map.items()
            if not _is_phantom(token, action, bindings)
        }

    registry = Registry(InputResolver(token_map, bindings), HelpCatalog(help_entries))
    logger.debug(
        "Built key registry: %d tokens, %d bindings, %d help entries",
        len(token_map),
        len(bindings),
        len(help_entries),
    )
    return registry


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Return the registry built from the built-in tables, built on first use."""
    return build_registry()


# ============================================================================
# SNAPSHOT HOLDER
# ============================================================================

class RegistryHolder:
    """Holds the current registry snapshot for readers on any thread.

    Readers take ``holder.current`` once per event and use that snapshot;
    publish() replaces the whole registry in one reference assignment.
    """

    def __init__(self, registry: Registry | None = None) -> None:
        self._current = registry if registry is not None else default_registry()

    @property
    def current(self) -> Registry:
        return self._current

    def publish(self, registry: Registry) -> Registry:
        """Replace the current snapshot and return the previous one."""
        previous = self._current
        self._current = registry
        logger.debug("Published new key registry snapshot")
        return previous


__all__ = [
    "Registry",
    "RegistryHolder",
    "build_registry",
    "default_registry",
    "validate_tables",
]

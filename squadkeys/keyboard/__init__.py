"""Keyboard registry module.

This module provides key resolution and help metadata for the session TUI.
It is organized into:

- catalog: the ordered set of action identifiers
- defaults: literal token, binding and help tables
- resolver: token -> action and action -> binding lookups (InputResolver)
- help: descriptions and category queries (HelpCatalog)
- registry: composition, validation and snapshot publication
- textual_bindings: Textual Binding objects for screens
- legend: Rich markup for the help screen and status line
"""

from squadkeys.keyboard.catalog import all_identifiers
from squadkeys.keyboard.defaults import HELP_ENTRIES, KEY_BINDINGS, KEY_TOKENS
from squadkeys.keyboard.help import DEFAULT_HELP_ENTRY, HelpCatalog, category_priority, is_hidden
from squadkeys.keyboard.legend import help_lines, status_line
from squadkeys.keyboard.registry import (
    Registry,
    RegistryHolder,
    build_registry,
    default_registry,
    validate_tables,
)
from squadkeys.keyboard.resolver import InputResolver
from squadkeys.keyboard.textual_bindings import (
    action_from_name,
    action_name,
    textual_key,
    to_textual_bindings,
)

__all__ = [
    "DEFAULT_HELP_ENTRY",
    # Literal tables
    "HELP_ENTRIES",
    "KEY_BINDINGS",
    "KEY_TOKENS",
    # Components
    "HelpCatalog",
    "InputResolver",
    "Registry",
    "RegistryHolder",
    # Catalog and registry functions
    "all_identifiers",
    "build_registry",
    "category_priority",
    "default_registry",
    "is_hidden",
    "validate_tables",
    # Presentation
    "action_from_name",
    "action_name",
    "help_lines",
    "status_line",
    "textual_key",
    "to_textual_bindings",
]

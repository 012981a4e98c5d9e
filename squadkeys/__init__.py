"""squadkeys: key resolution and help registry for the session manager TUI."""

from squadkeys.constants.enums import ActionId, HelpCategory
from squadkeys.keyboard.registry import Registry, RegistryHolder, build_registry, default_registry
from squadkeys.models.bindings import (
    CatalogConsistencyError,
    HelpEntry,
    KeyBinding,
    RegistryError,
    RegistryOptions,
)

__all__ = [
    "ActionId",
    "CatalogConsistencyError",
    "HelpCategory",
    "HelpEntry",
    "KeyBinding",
    "Registry",
    "RegistryError",
    "RegistryHolder",
    "RegistryOptions",
    "build_registry",
    "default_registry",
]

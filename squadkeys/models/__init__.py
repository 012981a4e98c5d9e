"""Registry data models."""

from squadkeys.models.bindings import (
    CatalogConsistencyError,
    HelpEntry,
    KeyBinding,
    RegistryError,
    RegistryOptions,
)

__all__ = [
    "CatalogConsistencyError",
    "HelpEntry",
    "KeyBinding",
    "RegistryError",
    "RegistryOptions",
]

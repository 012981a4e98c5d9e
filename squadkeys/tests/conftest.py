"""Shared fixtures for squadkeys tests."""

from __future__ import annotations

import pytest

from squadkeys.constants.enums import ActionId, HelpCategory
from squadkeys.keyboard.registry import Registry, build_registry
from squadkeys.models.bindings import HelpEntry, KeyBinding


@pytest.fixture
def registry() -> Registry:
    """Registry built from the built-in tables."""
    return build_registry()


@pytest.fixture
def small_registry() -> Registry:
    """Reduced registry with two actions, one of them without help."""
    return build_registry(
        token_map={"x": ActionId.QUIT, "y": ActionId.NEW, "Y": ActionId.NEW},
        bindings={
            ActionId.QUIT: KeyBinding(keys=("x",), key_label="x", caption="exit"),
            ActionId.NEW: KeyBinding(keys=("y", "Y"), key_label="y/Y", caption="make"),
        },
        help_entries={
            ActionId.QUIT: HelpEntry(description="Leave", category=HelpCategory.OTHER),
        },
    )

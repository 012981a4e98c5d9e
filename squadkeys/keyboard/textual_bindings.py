"""Textual Binding objects generated from the key registry.

Screens declare ``BINDINGS = to_textual_bindings(registry)`` and implement
``action_<name>`` methods, where ``<name>`` is action_name(ActionId).
"""

from __future__ import annotations

from textual.binding import Binding

from squadkeys.constants.enums import ActionId
from squadkeys.constants.values import TEXTUAL_KEY_ALIASES
from squadkeys.keyboard.help import is_hidden
from squadkeys.keyboard.registry import Registry


def textual_key(token: str) -> str:
    """Translate a registry token to the key name Textual reports."""
    return TEXTUAL_KEY_ALIASES.get(token, token)


def action_name(action: ActionId) -> str:
    """Return the Textual action name for ``action``."""
    return action.name.lower()


def action_from_name(name: str) -> ActionId | None:
    """Inverse of action_name(); None for names that are not registry actions."""
    try:
        return ActionId[name.upper()]
    except KeyError:
        return None


def to_textual_bindings(
    registry: Registry,
    include_hidden: bool = False,
    show: bool = True,
) -> list[Binding]:
    """Build one Textual Binding per bound action, in ActionId order.

    Args:
        registry: Registry to read bindings and help categories from.
        include_hidden: Also emit actions whose help category is hidden
            (modal-only actions such as name submission).
        show: Whether the bindings appear in the Textual footer.
    """
    result: list[Binding] = []
    for action in registry.all_identifiers():
        binding = registry.binding_for(action)
        if binding is None:
            continue
        if not include_hidden and is_hidden(registry.describe_action(action).category):
            continue
        result.append(
            Binding(
                ",".join(textual_key(key) for key in binding.keys),
                action_name(action),
                binding.caption,
                show=show,
                key_display=binding.key_label,
            )
        )
    return result


__all__ = [
    "action_from_name",
    "action_name",
    "textual_key",
    "to_textual_bindings",
]

"""Input resolver: raw key tokens to actions, actions to display bindings."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from squadkeys.constants.enums import ActionId
from squadkeys.models.bindings import KeyBinding


class InputResolver:
    """Read-only lookup between raw input tokens and action identifiers.

    Token lookup is exact-match and case-sensitive: ``"D"`` (kill) and ``"d"``
    are different tokens. Several tokens may resolve to the same action to
    support alternate keyboard conventions (arrow keys and Vim keys).
    """

    def __init__(
        self,
        token_map: Mapping[str, ActionId],
        bindings: Mapping[ActionId, KeyBinding],
    ) -> None:
        """Copy both tables into read-only mappings.

        Args:
            token_map: Raw token to action identifier.
            bindings: Action identifier to its canonical display binding.
        """
        self._tokens: Mapping[str, ActionId] = MappingProxyType(dict(token_map))
        self._bindings: Mapping[ActionId, KeyBinding] = MappingProxyType(dict(bindings))
        self._ordered_tokens: tuple[str, ...] = tuple(sorted(self._tokens, key=self._token_order))

    def _token_order(self, token: str) -> tuple[int, int, str]:
        action = self._tokens[token]
        binding = self._bindings.get(action)
        keys = binding.keys if binding is not None else ()
        # Tokens missing from the binding sort after the bound ones
        position = keys.index(token) if token in keys else len(keys)
        return int(action), position, token

    def resolve(self, token: str) -> ActionId | None:
        """Return the action bound to ``token``, or None for unknown tokens."""
        return self._tokens.get(token)

    def binding_for(self, action: ActionId) -> KeyBinding | None:
        """Return the display binding for ``action``, or None if it has none."""
        return self._bindings.get(action)

    def tokens(self) -> tuple[str, ...]:
        """Return every known token, ordered by action then binding position."""
        return self._ordered_tokens

    def tokens_for(self, action: ActionId) -> tuple[str, ...]:
        """Return the tokens that resolve to ``action``."""
        return tuple(token for token in self._ordered_tokens if self._tokens[token] == action)

    @property
    def token_map(self) -> Mapping[str, ActionId]:
        return self._tokens

    @property
    def bindings(self) -> Mapping[ActionId, KeyBinding]:
        return self._bindings


__all__ = [
    "InputResolver",
]

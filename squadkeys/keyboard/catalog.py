"""Action catalog: the closed, ordered set of action identifiers."""

from squadkeys.constants.enums import ActionId

_ALL_IDENTIFIERS: tuple[ActionId, ...] = tuple(sorted(ActionId))


def all_identifiers() -> tuple[ActionId, ...]:
    """Return every action identifier in enumeration order."""
    return _ALL_IDENTIFIERS


__all__ = [
    "all_identifiers",
]

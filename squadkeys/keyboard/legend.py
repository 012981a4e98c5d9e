"""Help screen and status line content built from the key registry.

Returns Rich markup strings; the widget layer decides how to paint them.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.markup import escape

from squadkeys.constants.enums import ActionId
from squadkeys.constants.values import (
    HELP_KEY_COLUMN_WIDTH,
    LEGACY_SUFFIX,
    STATUS_LINE_SEPARATOR,
)
from squadkeys.keyboard.registry import Registry


def _help_line(key_label: str, description: str) -> str:
    padding = " " * max(HELP_KEY_COLUMN_WIDTH - len(key_label), 0)
    return f"[bold yellow]{escape(key_label)}[/bold yellow]{padding}- {escape(description)}"


def help_lines(registry: Registry) -> list[str]:
    """Return the general help screen as Rich markup lines.

    One section per visible category, in display order. Actions without a
    display binding are left out since there is no key to show for them.
    """
    lines: list[str] = []
    for category in registry.visible_categories():
        rows: list[str] = []
        for action in registry.actions_in_category(category):
            binding = registry.binding_for(action)
            if binding is None:
                continue
            entry = registry.describe_action(action)
            description = entry.description + (LEGACY_SUFFIX if entry.is_legacy else "")
            rows.append(_help_line(binding.key_label, description))
        if not rows:
            continue
        lines.append(f"[bold cyan]{escape(category.value)}:[/bold cyan]")
        lines.extend(rows)
        lines.append("")
    return lines


def status_line(registry: Registry, actions: Iterable[ActionId]) -> str:
    """Return a one-line ``key caption • key caption`` legend for ``actions``."""
    parts: list[str] = []
    for action in actions:
        binding = registry.binding_for(action)
        if binding is None:
            continue
        parts.append(f"[bold]{escape(binding.key_label)}[/bold] {escape(binding.caption)}")
    return STATUS_LINE_SEPARATOR.join(parts)


__all__ = [
    "help_lines",
    "status_line",
]

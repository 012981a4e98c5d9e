"""Key binding and help entry models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from squadkeys.constants.enums import ActionId, HelpCategory


class KeyBinding(BaseModel):
    """Canonical key set plus the short label and caption shown for an action."""

    model_config = ConfigDict(frozen=True)

    keys: tuple[str, ...]
    key_label: str  # e.g. "↑/k"
    caption: str  # e.g. "up"

    @model_validator(mode="after")
    def _validate_keys(self) -> KeyBinding:
        if not self.keys:
            raise ValueError("binding must list at least one key")
        if any(not key for key in self.keys):
            raise ValueError("binding keys must be non-empty strings")
        if len(set(self.keys)) != len(self.keys):
            raise ValueError(f"binding lists duplicate keys: {self.keys}")
        return self


class HelpEntry(BaseModel):
    """Extended help text and help-screen category for an action."""

    model_config = ConfigDict(frozen=True)

    description: str
    category: HelpCategory
    superseded_by: ActionId | None = None  # Replacement for a legacy action

    @property
    def is_legacy(self) -> bool:
        return self.superseded_by is not None


class RegistryOptions(BaseModel):
    """Build-time options for the registry."""

    model_config = ConfigDict(frozen=True)

    # Raise on inconsistent tables instead of logging and dropping phantom tokens
    strict: bool = True


class RegistryError(Exception):
    """Base exception for registry errors."""


class CatalogConsistencyError(RegistryError):
    """Raised when the literal tables disagree with each other."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        super().__init__(
            "Inconsistent key registry tables:\n" + "\n".join(f"  - {issue}" for issue in issues)
        )

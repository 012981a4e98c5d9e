"""Unit tests for all enum definitions in constants/enums.py.

Tests cover:
- ActionId membership, ordering and reserved modal-only members
- HelpCategory values
"""

from __future__ import annotations

from enum import Enum, IntEnum

import pytest

from squadkeys.constants.enums import ActionId, HelpCategory

# =============================================================================
# ActionId
# =============================================================================


class TestActionId:
    """Test ActionId enum."""

    def test_is_int_enum(self) -> None:
        assert issubclass(ActionId, IntEnum)

    def test_members_count(self) -> None:
        assert len(ActionId) == 25

    def test_first_and_last_members(self) -> None:
        members = list(ActionId)
        assert members[0] is ActionId.UP
        assert members[-1] is ActionId.GIT

    def test_totally_ordered(self) -> None:
        assert ActionId.UP < ActionId.DOWN < ActionId.GIT

    def test_reserved_modal_members_exist(self) -> None:
        assert ActionId.SUBMIT_NAME in ActionId
        assert ActionId.REVIEW in ActionId
        assert ActionId.PUSH in ActionId

    def test_lookup_by_name(self) -> None:
        assert ActionId["FILTER_PAUSED"] is ActionId.FILTER_PAUSED

    def test_invalid_name(self) -> None:
        with pytest.raises(KeyError):
            ActionId["NOT_AN_ACTION"]


# =============================================================================
# HelpCategory
# =============================================================================


class TestHelpCategory:
    """Test HelpCategory enum."""

    def test_is_enum(self) -> None:
        assert issubclass(HelpCategory, Enum)

    def test_members_count(self) -> None:
        assert len(HelpCategory) == 7

    def test_organization_value(self) -> None:
        assert HelpCategory.ORGANIZATION.value == "Organization"

    def test_special_value(self) -> None:
        assert HelpCategory.SPECIAL.value == "Special"

    def test_uncategorized_value(self) -> None:
        assert HelpCategory.UNCATEGORIZED.value == "Uncategorized"

    def test_membership(self) -> None:
        assert HelpCategory("Handoff") is HelpCategory.HANDOFF

    def test_invalid_membership(self) -> None:
        with pytest.raises(ValueError):
            HelpCategory("invalid")

"""Shared test fixtures."""

import pytest

from pmapi.core.item.effective import EffectiveItem
from pmapi.core.item.models import Item


@pytest.fixture()
def item() -> Item:
    """속성 없는 기본 아이템"""
    return Item(name="Cheri Berry")


@pytest.fixture()
def effective_item() -> EffectiveItem:
    """효과 없는 EffectiveItem (usable=False)"""
    return EffectiveItem(Item(name="Potion"))

"""아이템 조립 헬퍼

속성/효과를 매번 손으로 붙이는 반복을 줄인다.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pmapi.core.logging import get_logger

from .attributes import (
    FlavorAttribute,
    IdentityAttribute,
    Pocket,
    PocketAttribute,
)
from .effective import EffectiveItem
from .effects import HoldEffect, UseEffect
from .models import Item

logger = get_logger(__name__)


class BerryFactory:
    """나무열매 아이템 생성.

    IDENTITY / FLAVOR / POCKET(BERRIES) 속성을 붙이고, 기본적으로 소지 가능.
    """

    def __init__(self, sale_price: int = 10) -> None:
        self.sale_price = sale_price

    def create(
        self,
        item_id: int,
        name: str,
        flavor: Optional[FlavorAttribute] = None,
        description: str = "",
    ) -> Item:
        berry = Item(
            name=name,
            description=description,
            sellable=self.sale_price > 0,
            sale_price=self.sale_price,
            consumable=True,
            holdable=True,
        )
        berry.attach_attribute(IdentityAttribute(item_id))
        berry.attach_attribute(flavor or FlavorAttribute())
        berry.attach_attribute(PocketAttribute(Pocket.BERRIES))
        logger.debug("Created berry #%d %r", item_id, name)
        return berry


class ItemFactory:
    """효과 아이템 생성"""

    @staticmethod
    def create_effective(
        name: str,
        use_effects: Iterable[type[UseEffect]] = (),
        hold_effects: Iterable[type[HoldEffect]] = (),
        pocket: Pocket = Pocket.ITEMS,
        **fields,
    ) -> EffectiveItem:
        """Item 필드(**fields) + 주머니 속성 + 주어진 효과 종류들을 부착.

        효과 생성 실패 시 EffectConstructionError 가 그대로 전파된다.
        """
        effective = EffectiveItem(Item(name=name, **fields))
        effective.attach_attribute(PocketAttribute(pocket))
        for kind in use_effects:
            effective.get_or_create_use_effect(kind)
        for kind in hold_effects:
            effective.get_or_create_hold_effect(kind)
        return effective

"""효과를 가질 수 있는 아이템

Item 을 소유(composition)하고, 효과 종류 → 효과 인스턴스 맵을 두 개 둔다.
(사용 효과 / 소지 효과)

규칙:
- (아이템, 효과 종류)당 인스턴스는 최대 하나
- 부착된 효과는 제거/교체되지 않는다 (제거 메서드 없음)
- 확인 → 생성 → attach → 저장은 맵별 락(RLock) 안에서 한 번에 수행
- attach 훅은 호스트를 읽을 수 있다. 같은 종류를 다시 생성하려 하면 EffectConstructionError
- 생성 실패 시 맵과 플래그는 그대로, 재시도 가능

사용 패턴:
    potion = EffectiveItem(Item(name="Potion"))
    heal = potion.get_or_create_use_effect(HealEffect)
    assert potion.usable
    assert potion.get_or_create_use_effect(HealEffect) is heal
"""

from __future__ import annotations

import threading
from typing import Callable, Optional, TypeVar

from pmapi.core.logging import get_logger

from .attributes import Attribute, AttributeKind
from .effects import Effect, HoldEffect, UseEffect
from .errors import EffectConstructionError
from .models import Item

logger = get_logger(__name__)

E = TypeVar("E", bound=Effect)
U = TypeVar("U", bound=UseEffect)
H = TypeVar("H", bound=HoldEffect)
A = TypeVar("A", bound=Attribute)


def _item_field(name: str, doc: str) -> property:
    """소유한 Item 의 필드를 그대로 노출하는 property"""

    def getter(self: EffectiveItem):
        return getattr(self.item, name)

    def setter(self: EffectiveItem, value) -> None:
        setattr(self.item, name, value)

    return property(getter, setter, doc=doc)


class EffectiveItem:
    """사용/소지 효과를 가질 수 있는 아이템"""

    name = _item_field("name", "표시 이름")
    description = _item_field("description", "설명")
    sellable = _item_field("sellable", "상점 판매 가능 여부")
    sale_price = _item_field("sale_price", "판매 가격")
    usable = _item_field("usable", "사용 가능 여부")
    consumable = _item_field("consumable", "사용 시 소모 여부")
    holdable = _item_field("holdable", "소지 가능 여부")
    has_hold_effect = _item_field("has_hold_effect", "소지 효과 보유 여부")

    def __init__(self, item: Optional[Item] = None) -> None:
        self.item = item if item is not None else Item()
        self._use_effects: dict[type[UseEffect], UseEffect] = {}
        self._hold_effects: dict[type[HoldEffect], HoldEffect] = {}
        # 두 맵은 서로 경합하지 않는다. attach 훅이 호스트를 읽을 수 있도록 재진입 허용
        self._use_lock = threading.RLock()
        self._hold_lock = threading.RLock()
        # attach 진행 중인 종류 (재진입 생성 차단)
        self._use_building: set[type[UseEffect]] = set()
        self._hold_building: set[type[HoldEffect]] = set()

    def __repr__(self) -> str:
        return (
            f"EffectiveItem(item={self.item!r}, "
            f"use_effects={len(self._use_effects)}, "
            f"hold_effects={len(self._hold_effects)})"
        )

    # ── 속성 레지스트리 (Item 위임) ─────────────────────────────

    def add_attribute(self, kind: AttributeKind, attribute: Attribute) -> None:
        self.item.add_attribute(kind, attribute)

    def attach_attribute(self, attribute: A) -> A:
        return self.item.attach_attribute(attribute)

    def get_attribute(self, kind: AttributeKind) -> Optional[Attribute]:
        return self.item.get_attribute(kind)

    def has_attribute(self, kind: AttributeKind) -> bool:
        return self.item.has_attribute(kind)

    def get_attribute_as(
        self, kind: AttributeKind, attribute_type: type[A]
    ) -> Optional[A]:
        return self.item.get_attribute_as(kind, attribute_type)

    def attribute_kinds(self) -> frozenset[AttributeKind]:
        return self.item.attribute_kinds()

    # ── 효과 ────────────────────────────────────────────────────

    def get_or_create_use_effect(
        self, effect_kind: type[U], factory: Optional[Callable[[], U]] = None
    ) -> U:
        """사용 효과 조회, 없으면 생성 후 부착. usable = True.

        Args:
            effect_kind: 효과 클래스 (맵의 키)
            factory: 인자 없는 생성 함수. 생략 시 effect_kind()

        Returns:
            기존 인스턴스 또는 새로 부착된 인스턴스

        Raises:
            EffectConstructionError: 생성/부착 실패. 아이템은 변하지 않는다.
        """
        with self._use_lock:
            effect = self._get_or_create(
                self._use_effects,
                self._use_building,
                UseEffect,
                effect_kind,
                factory,
            )
            self.item.usable = True
        return effect

    def get_or_create_hold_effect(
        self, effect_kind: type[H], factory: Optional[Callable[[], H]] = None
    ) -> H:
        """소지 효과 조회, 없으면 생성 후 부착. holdable = has_hold_effect = True.

        실패 처리는 get_or_create_use_effect 와 동일.
        """
        with self._hold_lock:
            effect = self._get_or_create(
                self._hold_effects,
                self._hold_building,
                HoldEffect,
                effect_kind,
                factory,
            )
            self.item.holdable = True
            self.item.has_hold_effect = True
        return effect

    def get_use_effect(self, effect_kind: type[U]) -> Optional[U]:
        """부착된 사용 효과. 없으면 None (생성하지 않음)."""
        with self._use_lock:
            return self._use_effects.get(effect_kind)  # type: ignore[return-value]

    def get_hold_effect(self, effect_kind: type[H]) -> Optional[H]:
        """부착된 소지 효과. 없으면 None (생성하지 않음)."""
        with self._hold_lock:
            return self._hold_effects.get(effect_kind)  # type: ignore[return-value]

    def use_effects(self) -> tuple[UseEffect, ...]:
        """부착 순서대로 사용 효과 스냅샷"""
        with self._use_lock:
            return tuple(self._use_effects.values())

    def hold_effects(self) -> tuple[HoldEffect, ...]:
        """부착 순서대로 소지 효과 스냅샷"""
        with self._hold_lock:
            return tuple(self._hold_effects.values())

    def _get_or_create(
        self,
        effects: dict,
        building: set,
        category: type[Effect],
        effect_kind: type[E],
        factory: Optional[Callable[[], E]],
    ) -> E:
        """호출 측이 해당 맵의 락을 잡고 있어야 한다.

        같은 종류를 생성/attach 하는 도중의 재진입 호출은 EffectConstructionError.
        """
        if not (isinstance(effect_kind, type) and issubclass(effect_kind, category)):
            raise TypeError(f"{effect_kind!r} is not a {category.__name__} type")

        existing = effects.get(effect_kind)
        if existing is not None:
            return existing
        if effect_kind in building:
            raise EffectConstructionError(
                effect_kind, "re-entrant creation while building"
            )

        building.add(effect_kind)
        try:
            return self._build(effects, effect_kind, factory)
        finally:
            building.discard(effect_kind)

    def _build(
        self,
        effects: dict,
        effect_kind: type[E],
        factory: Optional[Callable[[], E]],
    ) -> E:
        create = factory if factory is not None else effect_kind
        try:
            effect = create()
        except Exception as e:
            logger.warning(
                "Failed to construct %s for %r: %s", effect_kind.__name__, self.name, e
            )
            raise EffectConstructionError(effect_kind, str(e)) from e

        if not isinstance(effect, effect_kind):
            logger.warning(
                "Factory for %s returned %s", effect_kind.__name__, type(effect).__name__
            )
            raise EffectConstructionError(
                effect_kind, f"factory returned {type(effect).__name__}"
            )

        try:
            effect.attach(self)
        except Exception as e:
            logger.warning(
                "Failed to attach %s to %r: %s", effect_kind.__name__, self.name, e
            )
            raise EffectConstructionError(effect_kind, f"attach failed: {e}") from e

        effects[effect_kind] = effect
        logger.debug("Attached %s to %r", effect_kind.__name__, self.name)
        return effect

"""아이템 도메인 모델 (저장 형식 무관)

기본 필드(이름, 가격, 사용 가능 여부 등)는 단순 데이터다.
그 외의 특성은 AttributeKind → Attribute 속성 레지스트리로 붙인다.

사용 패턴:
    berry = Item(name="Cheri Berry")
    berry.attach_attribute(IdentityAttribute(1))
    berry.attach_attribute(PocketAttribute(Pocket.BERRIES))

    pocket = berry.get_attribute_as(AttributeKind.POCKET, PocketAttribute)
    if pocket is not None:
        sort_into(pocket.pocket)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional, TypeVar

from pmapi.config import settings
from pmapi.core.logging import get_logger

from .attributes import Attribute, AttributeKind
from .errors import AttributeTypeMismatchError

logger = get_logger(__name__)

A = TypeVar("A", bound=Attribute)


def _default_name() -> str:
    return settings.ITEM_DEFAULT_NAME


@dataclass(eq=False)
class Item:
    """기본 아이템. 동일성 = 객체 참조."""

    # 표시
    name: str = field(default_factory=_default_name)
    description: str = ""

    # 거래
    sellable: bool = False
    sale_price: int = 0

    # 사용/소지
    usable: bool = False
    consumable: bool = False  # 소지 중 사용 포함
    holdable: bool = False
    has_hold_effect: bool = False

    # 첫 add_attribute 전까지 None (미할당 == 빈 맵)
    _attributes: Optional[dict[AttributeKind, Attribute]] = field(
        default=None, init=False, repr=False
    )
    _attributes_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def add_attribute(self, kind: AttributeKind, attribute: Attribute) -> None:
        """kind 자리에 속성 저장. 기존 값이 있으면 덮어쓴다 (last write wins)."""
        with self._attributes_lock:
            if self._attributes is None:
                self._attributes = {}
            elif kind in self._attributes:
                logger.debug("Overwriting attribute %s on item %r", kind.value, self.name)
            self._attributes[kind] = attribute

    def attach_attribute(self, attribute: A) -> A:
        """속성이 선언한 kind 자리에 저장하고 그 속성을 돌려준다.

        pocket = item.attach_attribute(PocketAttribute())
        pocket.pocket = Pocket.BERRIES
        """
        kind = getattr(type(attribute), "kind", None)
        if not isinstance(kind, AttributeKind):
            raise TypeError(f"{type(attribute).__name__} declares no AttributeKind")
        self.add_attribute(kind, attribute)
        return attribute

    def get_attribute(self, kind: AttributeKind) -> Optional[Attribute]:
        """kind 속성 조회. 없으면 None."""
        with self._attributes_lock:
            if self._attributes is None:
                return None
            return self._attributes.get(kind)

    def has_attribute(self, kind: AttributeKind) -> bool:
        return self.get_attribute(kind) is not None

    def get_attribute_as(
        self, kind: AttributeKind, attribute_type: type[A]
    ) -> Optional[A]:
        """kind 속성을 attribute_type 으로 조회.

        없으면 None. 저장된 값이 attribute_type 이 아니면
        AttributeTypeMismatchError (조회 실패가 아니라 호출 측 오류).
        """
        attribute = self.get_attribute(kind)
        if attribute is None:
            return None
        if not isinstance(attribute, attribute_type):
            raise AttributeTypeMismatchError(kind, attribute_type, type(attribute))
        return attribute

    def attribute_kinds(self) -> frozenset[AttributeKind]:
        """등록된 속성 종류 스냅샷."""
        with self._attributes_lock:
            if self._attributes is None:
                return frozenset()
            return frozenset(self._attributes)

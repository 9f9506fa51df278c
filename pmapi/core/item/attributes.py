"""아이템 속성: 종류(AttributeKind) 태그로 조회되는 값 객체

속성은 실행 로직이 없는 데이터 조각이다 (식별자, 맛, 주머니 등).
조회 키는 구체 클래스가 아니라 AttributeKind 이므로,
"이 아이템에 X 종류가 있는가"를 타입 검사 없이 확인할 수 있다.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar, Optional


class AttributeKind(str, Enum):
    IDENTITY = "identity"
    FLAVOR = "flavor"
    POCKET = "pocket"


class Pocket(str, Enum):
    """가방 주머니 구분 (표시 이름이 값)"""

    ITEMS = "Items"
    MEDICINE = "Medicine"
    POKE_BALLS = "Poké Balls"
    TMS_HMS = "TMs & HMs"
    BERRIES = "Berries"
    MAIL = "Mail"
    BATTLE_ITEMS = "Battle Items"
    KEY_ITEMS = "Key Items"


@dataclass(eq=False)
class Attribute:
    """속성 기반 클래스. 아이템 하나가 배타적으로 소유한다.

    kind: 이 속성이 기본적으로 등록되는 종류
    """

    kind: ClassVar[AttributeKind]


@dataclass(eq=False)
class IdentityAttribute(Attribute):
    """카탈로그 번호"""

    kind: ClassVar[AttributeKind] = AttributeKind.IDENTITY

    item_id: int

    def __post_init__(self) -> None:
        if self.item_id < 0:
            raise ValueError(f"item_id must be >= 0, got {self.item_id}")


@dataclass(eq=False)
class FlavorAttribute(Attribute):
    """나무열매 맛 세기 (5종)"""

    kind: ClassVar[AttributeKind] = AttributeKind.FLAVOR

    spicy: int = 0
    dry: int = 0
    sweet: int = 0
    bitter: int = 0
    sour: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"{f.name} must be >= 0, got {value}")

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def dominant(self) -> Optional[str]:
        """가장 강한 맛 이름. 모두 0이면 None. 동률이면 선언 순서상 앞의 것."""
        flavors = self.as_dict()
        name = max(flavors, key=flavors.__getitem__)
        return name if flavors[name] > 0 else None


@dataclass(eq=False)
class PocketAttribute(Attribute):
    """아이템이 정렬될 가방 주머니"""

    kind: ClassVar[AttributeKind] = AttributeKind.POCKET

    pocket: Pocket = Pocket.ITEMS

    def __setattr__(self, name: str, value) -> None:
        # 생성 시와 대입 시 모두 Pocket 으로 변환 ("Berries" 같은 표시 이름 허용)
        if name == "pocket":
            value = Pocket(value)
        super().__setattr__(name, value)

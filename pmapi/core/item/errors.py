"""아이템 코어 예외

조회 실패(속성/효과 없음)는 예외가 아니다 (None 반환).
"""

from __future__ import annotations

from typing import Any


class ItemError(Exception):
    """아이템 코어 예외 기반"""


class EffectConstructionError(ItemError):
    """효과 생성(또는 부착) 실패. 아이템 상태는 변하지 않으며 재시도 가능."""

    def __init__(self, effect_kind: type, reason: str) -> None:
        self.effect_kind = effect_kind
        self.reason = reason
        super().__init__(f"Failed to create effect {effect_kind.__name__}: {reason}")


class EffectAlreadyAttachedError(ItemError):
    """이미 호스트가 정해진 효과에 다시 attach 시도"""

    def __init__(self, effect: Any) -> None:
        self.effect = effect
        super().__init__(f"{type(effect).__name__} is already attached to an item")


class AttributeTypeMismatchError(ItemError):
    """요청한 타입과 저장된 속성 타입 불일치"""

    def __init__(self, kind: Any, expected: type, actual: type) -> None:
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Attribute {kind} is {actual.__name__}, not {expected.__name__}"
        )

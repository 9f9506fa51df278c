"""아이템 효과: 사용 시(UseEffect) / 소지 중(HoldEffect)

효과 종류는 인자 없이 생성 가능해야 한다.
EffectiveItem 이 (아이템, 종류) 쌍마다 정확히 한 번 attach 를 호출하고,
효과는 그때 호스트 아이템을 역참조로 기록한다 (이후 변경 불가).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .errors import EffectAlreadyAttachedError

if TYPE_CHECKING:
    from .effective import EffectiveItem


class Effect:
    """효과 공통 기반"""

    def __init__(self) -> None:
        self._item: Optional[EffectiveItem] = None

    @property
    def item(self) -> Optional[EffectiveItem]:
        """부착된 호스트 아이템. 부착 전에는 None."""
        return self._item

    @property
    def is_attached(self) -> bool:
        return self._item is not None

    def attach(self, item: EffectiveItem) -> None:
        """호스트 기록. 두 번째 호출은 EffectAlreadyAttachedError."""
        if self._item is not None:
            raise EffectAlreadyAttachedError(self)
        self.on_attach(item)
        self._item = item

    def on_attach(self, item: EffectiveItem) -> None:
        """하위 클래스용 훅. 여기서 예외가 나면 부착되지 않는다."""


class UseEffect(Effect):
    """사용 시 발동하는 효과"""


class HoldEffect(Effect):
    """소지 중 지속되는 효과"""


# ── 기본 효과 (데이터만, 게임 규칙 없음) ──────────────────────


class HealEffect(UseEffect):
    """HP 회복"""

    def __init__(self, amount: int = 20) -> None:
        super().__init__()
        self.amount = amount


class RestoreOnHoldEffect(HoldEffect):
    """소지 중 매 턴 HP 소량 회복"""

    def __init__(self, amount: int = 10) -> None:
        super().__init__()
        self.amount = amount

"""효과 기반 클래스 테스트"""

from __future__ import annotations

import pytest

from pmapi.core.item.effective import EffectiveItem
from pmapi.core.item.effects import HealEffect, RestoreOnHoldEffect
from pmapi.core.item.errors import EffectAlreadyAttachedError


class TestEffectAttach:
    def test_unattached_by_default(self) -> None:
        effect = HealEffect()
        assert effect.item is None
        assert effect.is_attached is False

    def test_attach_records_host(self) -> None:
        host = EffectiveItem()
        effect = HealEffect()
        effect.attach(host)
        assert effect.item is host

    def test_back_reference_set_once(self) -> None:
        first = EffectiveItem()
        effect = RestoreOnHoldEffect()
        effect.attach(first)
        with pytest.raises(EffectAlreadyAttachedError):
            effect.attach(EffectiveItem())
        assert effect.item is first

    def test_default_amounts(self) -> None:
        assert HealEffect().amount == 20
        assert RestoreOnHoldEffect().amount == 10

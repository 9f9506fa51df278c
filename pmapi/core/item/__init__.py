"""아이템 시스템 Core. 순수 Python, 저장 형식 무관"""

from .attributes import (
    Attribute,
    AttributeKind,
    FlavorAttribute,
    IdentityAttribute,
    Pocket,
    PocketAttribute,
)
from .effective import EffectiveItem
from .effects import Effect, HealEffect, HoldEffect, RestoreOnHoldEffect, UseEffect
from .errors import (
    AttributeTypeMismatchError,
    EffectAlreadyAttachedError,
    EffectConstructionError,
    ItemError,
)
from .factory import BerryFactory, ItemFactory
from .models import Item

__all__ = [
    "Attribute",
    "AttributeKind",
    "FlavorAttribute",
    "IdentityAttribute",
    "Pocket",
    "PocketAttribute",
    "Item",
    "EffectiveItem",
    "Effect",
    "UseEffect",
    "HoldEffect",
    "HealEffect",
    "RestoreOnHoldEffect",
    "ItemError",
    "EffectConstructionError",
    "EffectAlreadyAttachedError",
    "AttributeTypeMismatchError",
    "BerryFactory",
    "ItemFactory",
]

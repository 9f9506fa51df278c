"""pmapi Core"""

from pmapi.core.item import EffectiveItem, Item

__all__ = [
    "Item",
    "EffectiveItem",
]

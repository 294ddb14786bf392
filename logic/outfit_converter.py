"""Map a flat recommendation onto the per-zone outfit structure."""

from __future__ import annotations

from typing import Iterable

from models.outfit import ZoneOutfit
from models.taxonomy import ClothingItem, parse_items


def convert_items_to_outfit(items: Iterable[ClothingItem | str]) -> ZoneOutfit:
    """Place each item in its slot. The helmet has no slot in the zone structure."""

    outfit = ZoneOutfit()
    for item in parse_items(items):
        slot = item.slot
        if slot == "torso.base":
            outfit.torso.base = item
        elif slot == "torso.mid":
            outfit.torso.mid = item
        elif slot == "torso.outer":
            outfit.torso.outer = item
        elif slot == "legs":
            # long pants cover whatever shorts were listed
            if outfit.legs is not ClothingItem.LONG_PANTS:
                outfit.legs = item
        elif slot == "legs.warmers":
            outfit.leg_warmers = True
        elif slot == "feet.socks":
            outfit.feet.socks = item
        elif slot == "feet.covers":
            outfit.feet.covers = item
        elif slot == "head":
            outfit.head = item
        elif slot == "neck":
            outfit.neck = item
        elif slot == "arms":
            outfit.arms = item
        elif slot == "hands":
            outfit.hands = item
    if outfit.legs is ClothingItem.LONG_PANTS:
        outfit.leg_warmers = False
    return outfit


__all__ = ["convert_items_to_outfit"]

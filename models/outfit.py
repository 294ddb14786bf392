"""Per-zone outfit schema used for rendering and feedback forms."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from models.taxonomy import ClothingItem


def _value(item: Optional[ClothingItem]) -> Optional[str]:
    return item.value if item is not None else None


@dataclass
class TorsoLayers:
    base: Optional[ClothingItem] = None
    mid: Optional[ClothingItem] = None
    outer: Optional[ClothingItem] = None


@dataclass
class FeetCoverage:
    socks: Optional[ClothingItem] = None
    covers: Optional[ClothingItem] = None


@dataclass
class ZoneOutfit:
    """Structured outfit, one field per body zone. Empty slots stay ``None``."""

    head: Optional[ClothingItem] = None
    neck: Optional[ClothingItem] = None
    torso: TorsoLayers = field(default_factory=TorsoLayers)
    arms: Optional[ClothingItem] = None
    hands: Optional[ClothingItem] = None
    legs: Optional[ClothingItem] = None
    leg_warmers: bool = False
    feet: FeetCoverage = field(default_factory=FeetCoverage)

    def to_dict(self) -> Dict[str, object]:
        return {
            "head": _value(self.head),
            "neck": _value(self.neck),
            "torso": {
                "base": _value(self.torso.base),
                "mid": _value(self.torso.mid),
                "outer": _value(self.torso.outer),
            },
            "arms": _value(self.arms),
            "hands": _value(self.hands),
            "legs": _value(self.legs),
            "leg_warmers": self.leg_warmers,
            "feet": {
                "socks": _value(self.feet.socks),
                "covers": _value(self.feet.covers),
            },
        }

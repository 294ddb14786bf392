"""Derived and output value objects of the recommendation engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterator, List, Tuple

from models.taxonomy import ClothingItem, Zone


@dataclass(frozen=True)
class EffectiveTemperatureBreakdown:
    """Every stage of the felt-temperature computation, in application order."""

    baseline: float
    after_wind_chill: float
    after_heat_index: float
    intensity_offset: float
    duration_offset: float
    value: float
    wind_chill_applied: bool
    heat_index_applied: bool

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class ClothingRecommendation:
    """Ordered, immutable list of garments for one ride."""

    items: Tuple[ClothingItem, ...]
    breakdown: EffectiveTemperatureBreakdown

    @property
    def effective_temperature(self) -> float:
        return self.breakdown.value

    def __iter__(self) -> Iterator[ClothingItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def for_zone(self, zone: Zone) -> Tuple[ClothingItem, ...]:
        return tuple(item for item in self.items if item.zone is zone)

    def values(self) -> List[str]:
        return [item.value for item in self.items]

    def labels(self) -> List[str]:
        return [item.label for item in self.items]


__all__ = ["ClothingRecommendation", "EffectiveTemperatureBreakdown"]

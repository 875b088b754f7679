"""Herb catalog definitions and the enumerations they are tagged with."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Rarity(Enum):
    """Ordered rarity tiers, lowest first."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    VERY_RARE = "VeryRare"

    @property
    def rank(self) -> int:
        return _RARITY_ORDER.index(self)

    def next_rarity(self) -> Optional["Rarity"]:
        """Return the tier one step rarer, or None at the top tier."""
        return _NEXT_RARITY[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.rank >= other.rank


_RARITY_ORDER: Tuple[Rarity, ...] = (
    Rarity.COMMON,
    Rarity.UNCOMMON,
    Rarity.RARE,
    Rarity.VERY_RARE,
)

_NEXT_RARITY: dict[Rarity, Optional[Rarity]] = {
    Rarity.COMMON: Rarity.UNCOMMON,
    Rarity.UNCOMMON: Rarity.RARE,
    Rarity.RARE: Rarity.VERY_RARE,
    Rarity.VERY_RARE: None,
}


class Biome(Enum):
    """Terrain tags a herb can be gathered in."""

    MOST_TERRAIN = "MostTerrain"
    COASTAL = "Coastal"
    UNDERDARK = "Underdark"
    DESERT = "Desert"
    MOUNTAIN = "Mountain"
    SWAMP = "Swamp"
    FOREST = "Forest"
    ARCTIC = "Arctic"
    HILLS = "Hills"
    GRASSLANDS = "Grasslands"


@dataclass(frozen=True, slots=True)
class HerbDef:
    """Catalog entry for a herb the market may stock."""

    name: str
    rarity: Rarity
    biomes: Tuple[Biome, ...] = field(default_factory=tuple)

"""Per-rarity price and likelihood definitions."""
from __future__ import annotations

from dataclasses import dataclass

from .herb_def import Rarity


@dataclass(frozen=True, slots=True)
class RarityConfigDef:
    """Price bounds (inclusive) and stocking likelihood for one tier."""

    price_lower: int
    price_upper: int
    likelihood: float


@dataclass(frozen=True, slots=True)
class RarityTableDef:
    """One RarityConfigDef per tier."""

    common: RarityConfigDef
    uncommon: RarityConfigDef
    rare: RarityConfigDef
    very_rare: RarityConfigDef

    def for_rarity(self, rarity: Rarity) -> RarityConfigDef:
        if rarity is Rarity.COMMON:
            return self.common
        if rarity is Rarity.UNCOMMON:
            return self.uncommon
        if rarity is Rarity.RARE:
            return self.rare
        if rarity is Rarity.VERY_RARE:
            return self.very_rare
        raise ValueError(f"Unknown rarity: {rarity!r}")

"""Top-level market configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .herb_def import Biome, HerbDef
from .rarity_def import RarityTableDef


@dataclass(frozen=True, slots=True)
class MarketConfigDef:
    """Everything needed to roll a market's stock."""

    rarities: RarityTableDef
    local_biomes: FrozenSet[Biome] = field(default_factory=frozenset)
    herbs: Tuple[HerbDef, ...] = field(default_factory=tuple)

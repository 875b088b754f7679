"""Domain definition exports."""

from .herb_def import Biome, HerbDef, Rarity
from .market_def import MarketConfigDef
from .rarity_def import RarityConfigDef, RarityTableDef

__all__ = [
    "Biome",
    "HerbDef",
    "MarketConfigDef",
    "Rarity",
    "RarityConfigDef",
    "RarityTableDef",
]

"""Stock generation for a single market visit."""
from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional

from herbmarket.core.rng import RandomSource
from herbmarket.domain.defs import Biome, HerbDef, MarketConfigDef, Rarity, RarityConfigDef


@dataclass(frozen=True, slots=True)
class StockEntry:
    """A herb the market has in stock for this visit."""

    herb: HerbDef
    quantity: int
    price: int
    rarity: Rarity


def is_local(herb: HerbDef, local_biomes: AbstractSet[Biome]) -> bool:
    """Return True when any of the herb's biomes is local to the market."""
    return any(biome in local_biomes for biome in herb.biomes)


def effective_rarity(herb: HerbDef, local_biomes: AbstractSet[Biome]) -> Optional[Rarity]:
    """Return the tier used for the herb's draws.

    Non-local herbs are one tier rarer than declared. A non-local herb that is
    already at the top tier cannot be stocked and yields None.
    """
    if is_local(herb, local_biomes):
        return herb.rarity
    return herb.rarity.next_rarity()


def draw_quantity(rarity_config: RarityConfigDef, rng: RandomSource) -> int:
    """Count uniform draws below the likelihood until the first miss."""
    quantity = 0
    while rng.random() < rarity_config.likelihood:
        quantity += 1
    return quantity


def draw_price(rarity_config: RarityConfigDef, rng: RandomSource) -> int:
    """Draw a price uniformly from the tier's inclusive bounds."""
    return rng.randint(rarity_config.price_lower, rarity_config.price_upper)


def generate_stock(config: MarketConfigDef, rng: RandomSource) -> List[StockEntry]:
    """Roll stock for every catalog herb, in catalog order.

    Herbs that resolve to no tier or draw a zero quantity are left out. The
    price is only drawn for herbs that are stocked.
    """
    stock: List[StockEntry] = []
    for herb in config.herbs:
        rarity = effective_rarity(herb, config.local_biomes)
        if rarity is None:
            continue
        rarity_config = config.rarities.for_rarity(rarity)
        quantity = draw_quantity(rarity_config, rng)
        if quantity == 0:
            continue
        price = draw_price(rarity_config, rng)
        stock.append(StockEntry(herb=herb, quantity=quantity, price=price, rarity=rarity))
    return stock


def sort_stock(stock: Iterable[StockEntry]) -> List[StockEntry]:
    """Return entries ordered by herb name."""
    return sorted(stock, key=lambda entry: entry.herb.name)

"""Market config repository."""
from __future__ import annotations

import math
from enum import Enum
from typing import List, Type, TypeVar

from herbmarket.data.errors import DataValidationError
from herbmarket.data.repositories.base import RepositoryBase
from herbmarket.domain.defs import (
    Biome,
    HerbDef,
    MarketConfigDef,
    Rarity,
    RarityConfigDef,
    RarityTableDef,
)

E = TypeVar("E", bound=Enum)

_RARITY_KEYS = ("common", "uncommon", "rare", "very_rare")


class MarketConfigRepository(RepositoryBase[MarketConfigDef]):
    """Loads and validates the herb market config."""

    def _build(self, raw: dict[str, object]) -> MarketConfigDef:
        self._assert_exact_fields(raw, {"local_biomes", "rarities", "herbs"}, "config")
        local_biomes = frozenset(
            self._parse_enum_list(Biome, raw["local_biomes"], "local_biomes")
        )
        rarities = self._parse_rarities(raw["rarities"])
        herbs = self._parse_herbs(raw["herbs"])
        return MarketConfigDef(local_biomes=local_biomes, rarities=rarities, herbs=herbs)

    def _parse_rarities(self, raw_rarities: object) -> RarityTableDef:
        rarity_map = self._require_mapping(raw_rarities, "rarities")
        self._assert_exact_fields(rarity_map, set(_RARITY_KEYS), "rarities")
        configs = {
            key: self._parse_rarity_config(rarity_map[key], f"rarities.{key}")
            for key in _RARITY_KEYS
        }
        return RarityTableDef(**configs)

    def _parse_rarity_config(self, payload: object, context: str) -> RarityConfigDef:
        data = self._require_mapping(payload, context)
        self._assert_exact_fields(data, {"price_lower", "price_upper", "likelihood"}, context)
        price_lower = self._require_int(data["price_lower"], f"{context}.price_lower")
        price_upper = self._require_int(data["price_upper"], f"{context}.price_upper")
        likelihood = self._require_number(data["likelihood"], f"{context}.likelihood")
        if price_lower < 0:
            raise DataValidationError(f"{context}.price_lower must not be negative.")
        if price_upper < price_lower:
            raise DataValidationError(
                f"{context}.price_upper must be at least price_lower "
                f"(found {price_lower}..{price_upper})."
            )
        if math.isnan(likelihood) or not 0.0 <= likelihood < 1.0:
            raise DataValidationError(
                f"{context}.likelihood must be in [0, 1) (found {likelihood})."
            )
        return RarityConfigDef(
            price_lower=price_lower,
            price_upper=price_upper,
            likelihood=likelihood,
        )

    def _parse_herbs(self, raw_herbs: object) -> tuple[HerbDef, ...]:
        herb_list = self._require_list(raw_herbs, "herbs")
        herbs: List[HerbDef] = []
        for index, entry in enumerate(herb_list):
            context = f"herbs[{index}]"
            herb_data = self._require_mapping(entry, context)
            self._assert_exact_fields(herb_data, {"name", "rarity", "biomes"}, context)
            name = self._require_str(herb_data["name"], f"{context}.name")
            rarity = self._parse_enum(Rarity, herb_data["rarity"], f"{context}.rarity")
            biomes = tuple(self._parse_enum_list(Biome, herb_data["biomes"], f"{context}.biomes"))
            herbs.append(HerbDef(name=name, rarity=rarity, biomes=biomes))
        return tuple(herbs)

    def _parse_enum_list(self, enum_type: Type[E], value: object, context: str) -> List[E]:
        entries = self._require_list(value, context)
        return [
            self._parse_enum(enum_type, entry, f"{context}[{index}]")
            for index, entry in enumerate(entries)
        ]

    def _parse_enum(self, enum_type: Type[E], value: object, context: str) -> E:
        tag = self._require_str(value, context)
        try:
            return enum_type(tag)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in enum_type)
            raise DataValidationError(
                f"{context} '{tag}' is not a valid {enum_type.__name__} (expected one of: {allowed})."
            ) from exc

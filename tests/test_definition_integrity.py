from herbmarket.data.paths import get_repo_root
from herbmarket.data.repositories import MarketConfigRepository
from herbmarket.domain.defs import Rarity


def test_sample_config_loads() -> None:
    config = MarketConfigRepository(get_repo_root()).load()

    assert config.herbs
    assert config.local_biomes


def test_sample_config_tiers_get_pricier() -> None:
    config = MarketConfigRepository(get_repo_root()).load()
    tiers = [config.rarities.for_rarity(rarity) for rarity in Rarity]

    for lower, higher in zip(tiers, tiers[1:]):
        assert lower.price_upper < higher.price_lower
        assert lower.likelihood > higher.likelihood


def test_sample_config_herb_names_unique() -> None:
    names = [herb.name for herb in MarketConfigRepository(get_repo_root()).load().herbs]
    assert len(names) == len(set(names))

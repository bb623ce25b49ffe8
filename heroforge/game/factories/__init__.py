"""Faction hero factories."""

from .hero_factory import (
    HeroFactory,
    HumanHeroFactory,
    OrcHeroFactory,
    FACTORY_CLASSES,
    get_factory,
)

__all__ = [
    "HeroFactory",
    "HumanHeroFactory",
    "OrcHeroFactory",
    "FACTORY_CLASSES",
    "get_factory",
]

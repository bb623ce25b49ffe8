"""Centralized game enums and constants.

This module contains the enums shared across the factory, entity and logging
modules, providing a single source of truth for factions and hero roles.
"""

from enum import Enum, auto


class Faction(Enum):
    """Origin groupings that determine a hero's starting data."""
    HUMAN = auto()
    ORC = auto()


class HeroRole(Enum):
    """Hero archetypes, each with its own action."""
    MAGE = auto()
    WARRIOR = auto()
    ARCHER = auto()


FACTION_NAMES = {
    Faction.HUMAN: "Human",
    Faction.ORC: "Orc",
}

HERO_ROLE_NAMES = {
    HeroRole.MAGE: "Mage",
    HeroRole.WARRIOR: "Warrior",
    HeroRole.ARCHER: "Archer",
}

"""Core data definitions.

- game_enums.py: Centralized enums for factions and hero roles
"""

from .game_enums import Faction, HeroRole, FACTION_NAMES, HERO_ROLE_NAMES

__all__ = [
    "Faction",
    "HeroRole",
    "FACTION_NAMES",
    "HERO_ROLE_NAMES",
]

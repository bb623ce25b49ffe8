"""Hero entities.

This package contains:
- hero.py: Immutable hero value objects (Mage, Warrior, Archer)
- hero_templates.py: Faction starting data loaded from YAML
"""

from .hero import Hero, Mage, Warrior, Archer, HeroValidationError, HERO_CLASSES
from .hero_templates import (
    HeroTemplate,
    HeroTemplateTable,
    HERO_TEMPLATES,
    get_template,
    load_hero_templates,
)

__all__ = [
    "Hero",
    "Mage",
    "Warrior",
    "Archer",
    "HeroValidationError",
    "HERO_CLASSES",
    "HeroTemplate",
    "HeroTemplateTable",
    "HERO_TEMPLATES",
    "get_template",
    "load_hero_templates",
]

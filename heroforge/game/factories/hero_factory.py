"""Abstract hero factory and its faction implementations.

Every faction factory builds the same family of heroes (one per role). The
faction decides the starting health and action phrase, read from the hero
template table.
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from ...core.data import Faction, HeroRole, FACTION_NAMES
from ...core.events import HeroCreated
from ..entities.hero import Hero, Mage, Warrior, Archer, HERO_CLASSES
from ..entities.hero_templates import HeroTemplateTable, get_template

if TYPE_CHECKING:
    from ...core.events import EventManager


class HeroFactory(ABC):
    """Creates a faction's family of heroes."""

    def __init__(
        self,
        templates: Optional[HeroTemplateTable] = None,
        event_manager: Optional["EventManager"] = None
    ):
        """Initialize the factory.

        Args:
            templates: Template table override (bundled templates when None)
            event_manager: Optional bus notified with HeroCreated events
        """
        self.templates = templates
        self.event_manager = event_manager

    @property
    @abstractmethod
    def faction(self) -> Faction:
        """Faction whose heroes this factory builds."""
        pass

    @property
    def name(self) -> str:
        return f"{FACTION_NAMES[self.faction]}HeroFactory"

    def create_mage(self, name: str) -> Mage:
        return self._build(HeroRole.MAGE, name)

    def create_warrior(self, name: str) -> Warrior:
        return self._build(HeroRole.WARRIOR, name)

    def create_archer(self, name: str) -> Archer:
        return self._build(HeroRole.ARCHER, name)

    def create(self, role: HeroRole, name: str) -> Hero:
        """Create a hero of any role.

        Raises:
            KeyError: If the role is unknown
            HeroValidationError: If the name is blank
        """
        creators = {
            HeroRole.MAGE: self.create_mage,
            HeroRole.WARRIOR: self.create_warrior,
            HeroRole.ARCHER: self.create_archer,
        }
        if role not in creators:
            raise KeyError(f"Unknown hero role: {role}")
        return creators[role](name)

    def _build(self, role: HeroRole, name: str):
        template = get_template(self.faction, role, self.templates)
        hero = HERO_CLASSES[role](
            name=name,
            health=template.health,
            faction=self.faction,
            verb=template.verb,
        )

        if self.event_manager:
            self.event_manager.publish(
                HeroCreated(hero=hero, factory_name=self.name),
                source=self.name
            )

        return hero


class HumanHeroFactory(HeroFactory):
    """Builds Human heroes."""

    @property
    def faction(self) -> Faction:
        return Faction.HUMAN


class OrcHeroFactory(HeroFactory):
    """Builds Orc heroes."""

    @property
    def faction(self) -> Faction:
        return Faction.ORC


FACTORY_CLASSES: dict[Faction, type[HeroFactory]] = {
    Faction.HUMAN: HumanHeroFactory,
    Faction.ORC: OrcHeroFactory,
}


def get_factory(
    faction: Faction,
    templates: Optional[HeroTemplateTable] = None,
    event_manager: Optional["EventManager"] = None
) -> HeroFactory:
    """Create the factory for a faction.

    Raises:
        KeyError: If no factory exists for the faction
    """
    if faction not in FACTORY_CLASSES:
        raise KeyError(f"No hero factory for faction: {faction}")
    return FACTORY_CLASSES[faction](templates=templates, event_manager=event_manager)

"""Driver that builds a roster of heroes and runs their actions.

The default roster creates one hero of each role per faction, Human before
Orc, in the order Mage, Warrior, Archer.
"""

import sys
from typing import Optional, TextIO

from ..core.data import Faction, HeroRole
from ..core.events import EventManager, HeroActed, GameStarted, GameEnded
from .config import GameConfig
from .entities.hero import Hero
from .entities.hero_templates import HeroTemplateTable, load_hero_templates
from .factories.hero_factory import HeroFactory, get_factory
from .managers.log_manager import LogManager, LogLevel


RosterEntry = tuple[Faction, HeroRole, str]

DEFAULT_ROSTER: list[RosterEntry] = [
    (Faction.HUMAN, HeroRole.MAGE, "Elena"),
    (Faction.HUMAN, HeroRole.WARRIOR, "Borislav"),
    (Faction.HUMAN, HeroRole.ARCHER, "Ilya"),
    (Faction.ORC, HeroRole.MAGE, "Gor'uk"),
    (Faction.ORC, HeroRole.WARRIOR, "Thrag"),
    (Faction.ORC, HeroRole.ARCHER, "Rag"),
]


class Game:
    """Composes the faction factories and runs a roster."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        roster: Optional[list[RosterEntry]] = None
    ):
        self.config = config or GameConfig()
        self.roster = list(roster) if roster is not None else list(DEFAULT_ROSTER)

        self.event_manager = EventManager(
            enable_debug_logging=self.config.enable_debug_logging
        )
        self.log_manager = LogManager(
            self.event_manager,
            default_level=LogLevel.DEBUG if self.config.enable_debug_logging else LogLevel.INFO
        )

        # Explicit path loads a fresh table; otherwise factories use the bundled one
        self.templates: Optional[HeroTemplateTable] = None
        if self.config.templates_path:
            self.templates = load_hero_templates(self.config.templates_path)

        self.factories: dict[Faction, HeroFactory] = {
            faction: get_factory(faction, self.templates, self.event_manager)
            for faction in Faction
        }

    def create_heroes(self) -> list[Hero]:
        """Create every roster hero in roster order.

        Raises:
            HeroValidationError: If a roster entry has a blank name
        """
        return [
            self.factories[faction].create(role, name)
            for faction, role, name in self.roster
        ]

    def run(self, stream: Optional[TextIO] = None) -> list[str]:
        """Create the roster and invoke each hero's action in creation order.

        Args:
            stream: Output stream for the action lines (stdout when None)

        Returns:
            The lines written, in order
        """
        stream = stream or sys.stdout
        self.event_manager.publish(
            GameStarted(roster_size=len(self.roster)), source="Game"
        )

        heroes = self.create_heroes()

        lines = []
        for hero in heroes:
            line = hero.perform(stream)
            self.event_manager.publish(HeroActed(hero=hero, line=line), source="Game")
            lines.append(line)

        self.event_manager.publish(
            GameEnded(lines_written=len(lines)), source="Game"
        )

        if self.config.enable_debug_logging:
            stats = self.event_manager.get_statistics()
            self.log_manager.debug(
                f"Event bus: {stats['events_published']} events published, "
                f"{stats['subscriber_errors']} subscriber errors"
            )
        return lines

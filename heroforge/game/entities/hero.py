"""Hero value objects.

A hero is an immutable record of a name, a starting health value, the faction
that built it and the phrase describing its action. Each role subclass keeps
its own capability method (``cast_spell``, ``strike``, ``shoot``) on top of
the shared ``act`` action so callers can use either form.
"""

import sys
from dataclasses import dataclass
from typing import ClassVar, Optional, TextIO

from ...core.data import Faction, HeroRole, FACTION_NAMES, HERO_ROLE_NAMES
from .hero_templates import get_template


class HeroValidationError(ValueError):
    """Raised when a hero is constructed with an invalid argument."""


@dataclass(frozen=True)
class Hero:
    """Base class for all heroes.

    Attributes:
        name: Display name, never blank
        health: Starting health, always positive
        faction: Faction whose factory built the hero (Human by default)
        verb: Phrase describing the hero's action (e.g. "casts Fireball");
            taken from the faction's template when omitted
    """
    name: str
    health: int
    faction: Faction = Faction.HUMAN
    verb: Optional[str] = None

    role: ClassVar[HeroRole]

    def __post_init__(self):
        if not hasattr(type(self), "role"):
            raise TypeError("Hero has no role; instantiate Mage, Warrior or Archer")

        if not isinstance(self.name, str) or not self.name.strip():
            raise HeroValidationError(f"Hero name must be non-blank, got {self.name!r}")

        # bool is an int subclass but never a valid health value
        if isinstance(self.health, bool) or not isinstance(self.health, int):
            raise HeroValidationError(f"Hero health must be an integer, got {self.health!r}")
        if self.health <= 0:
            raise HeroValidationError(f"Hero health must be positive, got {self.health}")

        if self.verb is None:
            object.__setattr__(self, "verb", get_template(self.faction, self.role).verb)
        if not isinstance(self.verb, str) or not self.verb.strip():
            raise HeroValidationError(f"Hero action verb must be non-blank, got {self.verb!r}")

    @property
    def title(self) -> str:
        """Faction and role label, e.g. "Human Mage"."""
        return f"{FACTION_NAMES[self.faction]} {HERO_ROLE_NAMES[self.role]}"

    def act(self) -> str:
        """Describe the hero's action.

        Returns:
            "<Name> (<Faction> <Role>) <verb>! - Health: <Health>"
        """
        return f"{self.name} ({self.title}) {self.verb}! - Health: {self.health}"

    def perform(self, stream: Optional[TextIO] = None) -> str:
        """Write the action line to a text stream (stdout by default).

        Returns:
            The line that was written, without the trailing newline
        """
        line = self.act()
        print(line, file=stream or sys.stdout)
        return line


@dataclass(frozen=True)
class Mage(Hero):
    role: ClassVar[HeroRole] = HeroRole.MAGE

    def cast_spell(self) -> str:
        return self.act()


@dataclass(frozen=True)
class Warrior(Hero):
    role: ClassVar[HeroRole] = HeroRole.WARRIOR

    def strike(self) -> str:
        return self.act()


@dataclass(frozen=True)
class Archer(Hero):
    role: ClassVar[HeroRole] = HeroRole.ARCHER

    def shoot(self) -> str:
        return self.act()


HERO_CLASSES: dict[HeroRole, type[Hero]] = {
    HeroRole.MAGE: Mage,
    HeroRole.WARRIOR: Warrior,
    HeroRole.ARCHER: Archer,
}

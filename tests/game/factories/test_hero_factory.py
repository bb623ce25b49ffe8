"""
Tests for the abstract hero factory and its faction implementations.
"""
from unittest.mock import Mock

import pytest

from heroforge.core.data import Faction, HeroRole
from heroforge.core.events import EventType, HeroCreated
from heroforge.game.entities import Mage, Warrior, Archer, HeroTemplate, HeroValidationError
from heroforge.game.factories import (
    HeroFactory,
    HumanHeroFactory,
    OrcHeroFactory,
    FACTORY_CLASSES,
    get_factory,
)


STARTING_HEALTH = [
    (Faction.HUMAN, HeroRole.MAGE, 80),
    (Faction.HUMAN, HeroRole.WARRIOR, 120),
    (Faction.HUMAN, HeroRole.ARCHER, 90),
    (Faction.ORC, HeroRole.MAGE, 70),
    (Faction.ORC, HeroRole.WARRIOR, 150),
    (Faction.ORC, HeroRole.ARCHER, 85),
]


class TestFactoryCreation:
    """Test the faction factories themselves."""

    def test_abstract_factory_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            HeroFactory()  # type: ignore[abstract]

    def test_factory_factions(self, human_factory, orc_factory):
        assert human_factory.faction == Faction.HUMAN
        assert orc_factory.faction == Faction.ORC

    def test_factory_names(self, human_factory, orc_factory):
        assert human_factory.name == "HumanHeroFactory"
        assert orc_factory.name == "OrcHeroFactory"

    @pytest.mark.parametrize("faction,factory_class", [
        (Faction.HUMAN, HumanHeroFactory),
        (Faction.ORC, OrcHeroFactory),
    ])
    def test_get_factory(self, faction, factory_class):
        factory = get_factory(faction)

        assert isinstance(factory, factory_class)
        assert FACTORY_CLASSES[faction] is factory_class

    def test_get_factory_unknown_faction(self):
        with pytest.raises(KeyError):
            get_factory("ELF")  # type: ignore[arg-type]


class TestHeroCreation:
    """Test the heroes each factory builds."""

    @pytest.mark.parametrize("faction,role,health", STARTING_HEALTH)
    def test_starting_health(self, factories, faction, role, health):
        """Test that every faction gives every role its table health."""
        hero = factories[faction].create(role, "Test")

        assert hero.health == health
        assert hero.faction == faction
        assert hero.role == role

    def test_role_specific_creators(self, human_factory):
        assert isinstance(human_factory.create_mage("Elena"), Mage)
        assert isinstance(human_factory.create_warrior("Borislav"), Warrior)
        assert isinstance(human_factory.create_archer("Ilya"), Archer)

    def test_faction_changes_verb(self, human_factory, orc_factory):
        """Test that the same role acts differently per faction."""
        human = human_factory.create_mage("Elena")
        orc = orc_factory.create_mage("Gor'uk")

        assert human.act() == "Elena (Human Mage) casts Fireball! - Health: 80"
        assert orc.act() == "Gor'uk (Orc Mage) curses the enemy! - Health: 70"

    @pytest.mark.parametrize("role", list(HeroRole))
    def test_blank_name_rejected(self, orc_factory, role):
        with pytest.raises(HeroValidationError):
            orc_factory.create(role, "  ")

    def test_unknown_role(self, human_factory):
        with pytest.raises(KeyError):
            human_factory.create("BARD", "Nobody")  # type: ignore[arg-type]

    def test_custom_templates(self):
        table = {
            Faction.ORC: {
                HeroRole.MAGE: HeroTemplate(health=1, verb="sneezes"),
                HeroRole.WARRIOR: HeroTemplate(health=2, verb="trips"),
                HeroRole.ARCHER: HeroTemplate(health=3, verb="misses"),
            }
        }
        factory = OrcHeroFactory(templates=table)

        assert factory.create_archer("Rag").act() == "Rag (Orc Archer) misses! - Health: 3"

    def test_each_call_creates_new_hero(self, human_factory):
        first = human_factory.create_mage("Elena")
        second = human_factory.create_mage("Elena")

        assert first == second
        assert first is not second


class TestFactoryEvents:
    """Test HeroCreated publication."""

    def test_publishes_hero_created(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.HERO_CREATED, subscriber)
        factory = HumanHeroFactory(event_manager=event_manager)

        hero = factory.create_warrior("Borislav")

        subscriber.assert_called_once()
        event = subscriber.call_args[0][0]
        assert isinstance(event, HeroCreated)
        assert event.hero is hero
        assert event.factory_name == "HumanHeroFactory"

    def test_no_event_on_invalid_hero(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.HERO_CREATED, subscriber)
        factory = OrcHeroFactory(event_manager=event_manager)

        with pytest.raises(HeroValidationError):
            factory.create_mage("")

        subscriber.assert_not_called()

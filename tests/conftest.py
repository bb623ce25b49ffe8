"""
Basic test fixtures for the heroforge test suite.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from heroforge.core.data import Faction
from heroforge.core.events import EventManager
from heroforge.game.factories import HumanHeroFactory, OrcHeroFactory
from heroforge.game.managers import LogManager


EXPECTED_LINES = [
    "Elena (Human Mage) casts Fireball! - Health: 80",
    "Borislav (Human Warrior) strikes with a sword! - Health: 120",
    "Ilya (Human Archer) shoots an arrow! - Health: 90",
    "Gor'uk (Orc Mage) curses the enemy! - Health: 70",
    "Thrag (Orc Warrior) performs a brutal strike! - Health: 150",
    "Rag (Orc Archer) fires a heavy bolt! - Health: 85",
]


@pytest.fixture
def expected_output():
    """The six lines the default roster prints."""
    return list(EXPECTED_LINES)


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def log_manager(event_manager):
    """Create a log manager bound to the test event manager."""
    return LogManager(event_manager)


@pytest.fixture
def human_factory():
    return HumanHeroFactory()


@pytest.fixture
def orc_factory():
    return OrcHeroFactory()


@pytest.fixture
def factories(human_factory, orc_factory):
    return {Faction.HUMAN: human_factory, Faction.ORC: orc_factory}


@pytest.fixture
def write_templates(tmp_path):
    """Write a YAML templates file and return its path."""
    def _write(text: str) -> str:
        path = tmp_path / "hero_templates.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write

"""Hero templates for faction factories.

This module defines the starting data each faction gives its heroes. Templates
are loaded from a YAML file and converted to ``HeroTemplate`` records keyed by
faction and role.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TypeVar

import yaml

from ...core.data import Faction, HeroRole


@dataclass(frozen=True)
class HeroTemplate:
    """Starting values for one (faction, role) pair."""
    health: int
    verb: str


HeroTemplateTable = dict[Faction, dict[HeroRole, HeroTemplate]]

E = TypeVar("E", bound=Enum)


def default_templates_path() -> str:
    """Path of the bundled hero templates file."""
    package_root = os.path.dirname(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    )
    return os.path.join(package_root, "assets", "data", "heroes", "hero_templates.yaml")


def load_hero_templates(yaml_path: Optional[str] = None) -> HeroTemplateTable:
    """Load hero templates from a YAML file.

    Args:
        yaml_path: File to read (defaults to the bundled templates)

    Returns:
        Dictionary mapping each faction to its role templates

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If the file lacks the expected structure
        ValueError: If a faction or role name is unknown, a value is invalid,
            or a faction is missing one of the roles
    """
    yaml_path = yaml_path or default_templates_path()

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Hero templates file not found: {yaml_path}")

    try:
        raw_templates = data["hero_templates"]
        faction_items = list(raw_templates.items())
    except (KeyError, TypeError, AttributeError) as e:
        raise KeyError(f"Invalid template structure in {yaml_path}: {e}")

    templates: HeroTemplateTable = {}
    for faction_name, roles in faction_items:
        faction = _parse_enum(Faction, faction_name, yaml_path)
        if not isinstance(roles, dict):
            raise KeyError(f"Invalid template structure in {yaml_path}: {faction_name}")

        templates[faction] = {}
        for role_name, template_data in roles.items():
            role = _parse_enum(HeroRole, role_name, yaml_path)
            try:
                templates[faction][role] = _parse_template(template_data)
            except (KeyError, TypeError) as e:
                raise KeyError(
                    f"Invalid template structure in {yaml_path} "
                    f"({faction_name}.{role_name}): {e}"
                )

    for faction, roles in templates.items():
        missing = set(HeroRole) - set(roles)
        if missing:
            names = ", ".join(sorted(role.name for role in missing))
            raise ValueError(f"Faction {faction.name} is missing templates for: {names}")

    return templates


def _parse_enum(enum_class: type[E], name: str, yaml_path: str) -> E:
    try:
        return enum_class[name]
    except KeyError:
        raise ValueError(f"Invalid {enum_class.__name__} name in {yaml_path}: {name!r}")


def _parse_template(template_data: dict) -> HeroTemplate:
    health = template_data["health"]
    verb = template_data["verb"]

    if isinstance(health, bool) or not isinstance(health, int) or health <= 0:
        raise ValueError(f"Template health must be a positive integer, got {health!r}")
    if not isinstance(verb, str) or not verb.strip():
        raise ValueError(f"Template verb must be non-blank, got {verb!r}")

    return HeroTemplate(health=health, verb=verb.strip())


# Load templates from the bundled YAML file
HERO_TEMPLATES: HeroTemplateTable = load_hero_templates()


def get_template(faction: Faction, role: HeroRole,
                 templates: Optional[HeroTemplateTable] = None) -> HeroTemplate:
    """Get the template for a faction's hero role.

    Raises:
        KeyError: If the faction or role has no template
    """
    table = templates if templates is not None else HERO_TEMPLATES
    if faction not in table or role not in table[faction]:
        raise KeyError(f"No template found for {faction.name} {role.name}")
    return table[faction][role]

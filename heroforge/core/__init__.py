"""Core building blocks shared by the game layer.

This package contains:
- data/: Centralized enums for factions and hero roles
- events/: Publisher-subscriber event bus and event definitions
"""

"""Game layer: hero entities, faction factories, managers and the driver.

This package contains:
- entities/: Hero value objects and their YAML templates
- factories/: Abstract hero factory with Human and Orc implementations
- managers/: Log manager observing the event bus
- game.py: Driver creating the default roster and running every action
"""

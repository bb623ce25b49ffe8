"""HeroForge: faction hero families built through abstract factories."""

__version__ = "0.1.0"

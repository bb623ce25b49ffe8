from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    templates_path: Optional[str] = None  # None uses the bundled templates
    enable_debug_logging: bool = False

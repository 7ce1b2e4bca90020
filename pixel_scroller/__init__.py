# pixel_scroller/__init__.py
from .config import CFG, HERO, GOBLIN, ConfigError
from .simulation import Simulation, World, Outcome
from .state import State

__all__ = ["CFG", "HERO", "GOBLIN", "ConfigError", "Simulation", "World", "Outcome", "State"]

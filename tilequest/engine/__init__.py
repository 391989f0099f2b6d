"""Game engine package."""

from tilequest.engine.dice import DiceRoller
from tilequest.engine.encounters import EncounterGenerator
from tilequest.engine.experience import MaxExpFormula, compute_max_exp
from tilequest.engine.level_up import LevelUpResolver
from tilequest.engine.progression_config import ProgressionConfig
from tilequest.engine.progression_engine import ProgressionEngine
from tilequest.engine.random_source import RandomSource
from tilequest.engine.stat_calculator import StatCalculator
from tilequest.engine.teleport import NoTeleportTargetError, TeleportHelper

__all__ = [
    "DiceRoller",
    "EncounterGenerator",
    "LevelUpResolver",
    "MaxExpFormula",
    "NoTeleportTargetError",
    "ProgressionConfig",
    "ProgressionEngine",
    "RandomSource",
    "StatCalculator",
    "TeleportHelper",
    "compute_max_exp",
]

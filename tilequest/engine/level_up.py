"""Experience and level-up resolution."""

import logging
from typing import Optional

from tilequest.engine.experience import MaxExpFormula, compute_max_exp
from tilequest.engine.progression_config import ProgressionConfig
from tilequest.engine.random_source import RandomSource
from tilequest.models.stats import PendingLevelUp, StatLedger

logger = logging.getLogger(__name__)


class LevelUpResolver:
    """Turns experience into levels and pending stat gains."""

    def __init__(
        self,
        rng: RandomSource,
        config: Optional[ProgressionConfig] = None,
        max_exp_formula: MaxExpFormula = compute_max_exp,
    ) -> None:
        """
        Initialize resolver.

        Args:
            rng: Player-scoped random source
            config: Growth constants (defaults from environment)
            max_exp_formula: Experience curve, called as formula(level, offset)
        """
        self._rng = rng
        self._config = config or ProgressionConfig()
        self._max_exp_formula = max_exp_formula

    def create_ledger(self) -> StatLedger:
        """Build the starting ledger of a new level 1 player."""
        return StatLedger(
            level=1,
            experience=0,
            max_experience=self._next_max_exp(1),
            hp=self._config.init_max_hp,
            max_hp=self._config.init_max_hp,
            accuracy=self._config.init_accuracy,
            min_damage=self._config.init_min_damage,
            max_damage=self._config.init_max_damage,
        )

    def gain_experience(self, ledger: StatLedger, amount: int) -> int:
        """
        Add experience and resolve any level ups it causes.

        Args:
            ledger: Ledger to update
            amount: Experience earned (non-negative)

        Returns:
            Number of levels gained
        """
        if amount < 0:
            raise ValueError(f"Experience gain must be non-negative, got {amount}")

        total = ledger.experience + amount
        if total < ledger.max_experience:
            ledger.experience = total
            return 0

        return self.resolve(ledger, total - ledger.max_experience)

    def resolve(self, ledger: StatLedger, experience_overflow: int) -> int:
        """
        Level up once, then again for as long as the overflow covers the next level.

        Stat gains accumulate in `ledger.pending` until apply_pending_level_up().
        Every roll is made before the ledger is touched, so a failing
        experience curve leaves the ledger as it was.

        Args:
            ledger: Ledger to update
            experience_overflow: Experience left over after filling the current level

        Returns:
            Number of levels gained
        """
        gains = PendingLevelUp()
        level = ledger.level
        max_experience = ledger.max_experience
        remainder = experience_overflow

        while True:
            level += 1

            hp_gain = self._rng.randint(self._config.min_hp_increase, self._config.max_hp_increase)
            dmg_mean = self._rng.randint(self._config.min_dmg_increase, self._config.max_dmg_increase)
            # Range widens by 0-1 on each side
            low_jitter = self._rng.below(2)
            high_jitter = self._rng.below(2)
            next_max_exp = self._next_max_exp(level)

            gains.levels += 1
            gains.hp_increase += hp_gain
            gains.min_dmg_increase += dmg_mean - low_jitter
            gains.max_dmg_increase += dmg_mean + high_jitter
            if level % self._config.accuracy_level_interval == 0:
                gains.accuracy_increase += 1
            gains.max_exp_increase += next_max_exp - max_experience
            max_experience = next_max_exp

            logger.debug(f"Reached level {level}, next level at {max_experience} exp")

            if remainder < max_experience:
                break
            remainder -= max_experience

        ledger.apply_changes(level=level, max_experience=max_experience, experience=remainder)
        ledger.pending.add(gains)

        logger.info(f"Gained {gains.levels} level(s), now level {ledger.level}")
        return gains.levels

    def apply_pending_level_up(self, ledger: StatLedger) -> None:
        """Commit pending gains to live stats and fully heal. No-op if nothing is pending."""
        if not ledger.has_pending_level_up:
            return

        pending = ledger.pending
        max_hp = ledger.max_hp + pending.hp_increase
        ledger.apply_changes(
            max_hp=max_hp,
            hp=max_hp,
            min_damage=ledger.min_damage + pending.min_dmg_increase,
            max_damage=ledger.max_damage + pending.max_dmg_increase,
            accuracy=ledger.accuracy + pending.accuracy_increase,
        )
        pending.reset()

        logger.info(
            f"Applied level up: max_hp={ledger.max_hp}, damage={ledger.min_damage}-{ledger.max_damage}, "
            f"accuracy={ledger.accuracy}"
        )

    def _next_max_exp(self, level: int) -> int:
        """Draw an offset and evaluate the experience curve."""
        offset = self._rng.randint(self._config.max_exp_offset_min, self._config.max_exp_offset_max)
        max_exp = self._max_exp_formula(level, offset)
        if max_exp <= 0:
            raise ValueError(f"Max experience must be positive, formula gave {max_exp} for level {level}")
        return max_exp

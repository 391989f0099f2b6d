"""Reward ("?") and curse ("!") encounter tiles."""

import logging
import math
from typing import Optional

from tilequest.engine.dice import DiceRoller
from tilequest.engine.progression_config import ProgressionConfig
from tilequest.engine.random_source import RandomSource
from tilequest.models.items import Inventory, ItemProvider
from tilequest.models.outcomes import (
    DamageTaken,
    GoldGain,
    GoldLoss,
    HealGain,
    ItemDrop,
    Nothing,
)
from tilequest.models.stats import StatLedger

logger = logging.getLogger(__name__)

REWARD_HEADER = "The random tile gave something!"
CURSE_HEADER = "The random tile cursed you!"


class EncounterGenerator:
    """Rolls encounter tile outcomes and applies them to a ledger."""

    def __init__(
        self,
        rng: RandomSource,
        item_provider: Optional[ItemProvider] = None,
        config: Optional[ProgressionConfig] = None,
    ) -> None:
        """
        Initialize encounter generator.

        Args:
            rng: Player-scoped random source
            item_provider: Source of item drops (required for reward tiles to drop items)
            config: Encounter constants (defaults from environment)
        """
        self._rng = rng
        self._item_provider = item_provider
        self._config = config or ProgressionConfig()

    def roll_reward(
        self, ledger: StatLedger, inventory: Inventory, map_level: int
    ) -> GoldGain | HealGain | ItemDrop | Nothing:
        """
        Resolve a reward tile.

        When the tile activates, k in [0, 100) picks gold (k < 50),
        a 20% max hp heal (k < 95) or an item drop (otherwise).

        Args:
            ledger: Ledger to update
            inventory: Inventory receiving dropped items
            map_level: Difficulty of the current map

        Returns:
            Outcome, already applied to the ledger
        """
        if not self._rng.is_success(self._config.tile_interaction_chance):
            return Nothing(messages=["The random tile did not give anything."])

        k = self._rng.below(100)
        logger.debug(f"Reward tile roll k={k} at map level {map_level}")

        if k < self._config.reward_gold_threshold:
            outcome = self._reward_gold(ledger, map_level)
        elif k < self._config.reward_heal_threshold:
            outcome = self._reward_heal(ledger)
        else:
            outcome = self._reward_item(inventory, map_level)

        logger.info(f"Reward tile outcome: {outcome.kind.value}")
        return outcome

    def roll_curse(self, ledger: StatLedger, map_level: int) -> DamageTaken | GoldLoss | Nothing:
        """
        Resolve a curse tile: 60% damage scaled by map level, otherwise gold theft.

        A lethal hit restores hp to max; no death is modeled here.

        Args:
            ledger: Ledger to update
            map_level: Difficulty of the current map

        Returns:
            Outcome, already applied to the ledger
        """
        if not self._rng.is_success(self._config.tile_interaction_chance):
            return Nothing(messages=["The random tile did not affect you."])

        if self._rng.is_success(self._config.curse_damage_chance):
            outcome = self._curse_damage(ledger, map_level)
        else:
            outcome = self._curse_theft(ledger, map_level)

        logger.info(f"Curse tile outcome: {outcome.kind.value}")
        return outcome

    def _reward_gold(self, ledger: StatLedger, map_level: int) -> GoldGain:
        roll = DiceRoller.roll_pool(
            self._rng, map_level, self._config.reward_gold_min, self._config.reward_gold_max
        )
        gold = roll["total"]
        ledger.add_gold(gold)
        return GoldGain(
            amount=gold,
            messages=[REWARD_HEADER, f"You obtained {gold} gold!"],
        )

    def _reward_heal(self, ledger: StatLedger) -> HealGain:
        heal = math.floor(self._config.reward_heal_fraction * ledger.max_hp)
        ledger.set_hp(ledger.hp + heal)
        return HealGain(
            amount=heal,
            messages=[REWARD_HEADER, f"It healed you for {heal} hp!"],
        )

    def _reward_item(self, inventory: Inventory, map_level: int) -> ItemDrop:
        if self._item_provider is None:
            raise ValueError("Reward tile rolled an item drop but no item provider is configured")

        item = self._item_provider.get_random_item(self._rng)
        item.adjust(map_level, self._rng)
        messages = [REWARD_HEADER, f"It dropped a {item.dialog_name}!"]

        if inventory.is_full():
            messages.append("Oh no, too bad your inventory was full.")
            return ItemDrop(item=item, added=False, messages=messages)

        inventory.add_item(item)
        messages.append("The item was added to your inventory.")
        return ItemDrop(item=item, added=True, messages=messages)

    def _curse_damage(self, ledger: StatLedger, map_level: int) -> DamageTaken:
        dmg = self._config.curse_damage_per_level * map_level
        messages = [CURSE_HEADER, f"It damaged you for {dmg} damage!"]

        remaining = ledger.hp - dmg
        lethal = remaining <= 0
        if lethal:
            # Placeholder death handling: full heal
            messages.append("The curse would have killed you, but you were revived.")
            ledger.hp = ledger.max_hp
        else:
            ledger.hp = remaining

        return DamageTaken(amount=dmg, lethal=lethal, messages=messages)

    def _curse_theft(self, ledger: StatLedger, map_level: int) -> GoldLoss:
        roll = DiceRoller.roll_pool(
            self._rng, map_level, self._config.curse_gold_min, self._config.curse_gold_max
        )
        steal = roll["total"]
        ledger.add_gold(-steal)
        return GoldLoss(
            amount=steal,
            messages=[CURSE_HEADER, f"It caused you to lose {steal} gold!"],
        )

"""Player progression and encounter engine."""

import logging
import uuid
from typing import Optional

from tilequest.config import DEFAULT_RANDOM_SEED
from tilequest.engine.encounters import EncounterGenerator
from tilequest.engine.experience import MaxExpFormula, compute_max_exp
from tilequest.engine.level_up import LevelUpResolver
from tilequest.engine.progression_config import ProgressionConfig
from tilequest.engine.random_source import RandomSource
from tilequest.engine.stat_calculator import StatCalculator
from tilequest.engine.teleport import TeleportHelper
from tilequest.helpers.debug import log_call
from tilequest.models.items import Inventory, Item, ItemProvider
from tilequest.models.outcomes import EncounterOutcome
from tilequest.models.player import Player
from tilequest.models.world import Direction, MapPosition, TileMap

logger = logging.getLogger(__name__)


class ProgressionEngine:
    """Single entry point for a player's leveling, equipment and encounter tiles."""

    def __init__(
        self,
        item_provider: ItemProvider,
        player: Optional[Player] = None,
        rng: Optional[RandomSource] = None,
        config: Optional[ProgressionConfig] = None,
        tile_map: Optional[TileMap] = None,
        max_exp_formula: MaxExpFormula = compute_max_exp,
    ) -> None:
        """
        Initialize progression engine.

        Args:
            item_provider: Source of reward tile item drops
            player: Existing player; a fresh level 1 player is created if omitted
            rng: Random source shared by every roll (seeded from config if omitted)
            config: Design constants
            tile_map: Map geometry used for teleporting
            max_exp_formula: Experience curve
        """
        self._config = config or ProgressionConfig()
        self._rng = rng or RandomSource(DEFAULT_RANDOM_SEED)
        self._tile_map = tile_map
        self._level_up = LevelUpResolver(self._rng, self._config, max_exp_formula)
        self._encounters = EncounterGenerator(self._rng, item_provider, self._config)
        self._teleport = TeleportHelper(self._rng)
        self._player = player or self._create_player()

    def _create_player(self) -> Player:
        """Create a level 1 player from config constants."""
        return Player(
            player_id=str(uuid.uuid4()),
            ledger=self._level_up.create_ledger(),
            inventory=Inventory(capacity=self._config.inventory_capacity),
        )

    @property
    def player(self) -> Player:
        """Get the player."""
        return self._player

    @property
    def rng(self) -> RandomSource:
        """Get the random source."""
        return self._rng

    def set_tile_map(self, tile_map: TileMap) -> None:
        """Set map geometry (e.g. after changing maps)."""
        self._tile_map = tile_map

    @log_call
    def gain_experience(self, amount: int) -> int:
        """Award experience; returns levels gained. Gains stay pending until applied."""
        return self._level_up.gain_experience(self._player.ledger, amount)

    @log_call
    def resolve_level_up(self, experience_overflow: int) -> int:
        """Level up with the given overflow; returns levels gained."""
        return self._level_up.resolve(self._player.ledger, experience_overflow)

    @log_call
    def apply_pending_level_up(self) -> None:
        """Commit pending level-up gains."""
        self._level_up.apply_pending_level_up(self._player.ledger)

    @log_call
    def equip(self, item: Item) -> None:
        """Equip an item and apply its bonuses."""
        StatCalculator.equip(self._player.ledger, item)
        self._player.equipped.append(item)

    @log_call
    def unequip(self, item: Item) -> None:
        """Unequip a previously equipped item and remove its bonuses."""
        if item not in self._player.equipped:
            raise ValueError(f"Item {item.name} is not equipped")
        self._player.equipped.remove(item)
        StatCalculator.unequip(self._player.ledger, item)

    @log_call
    def use_potion(self, heal: int) -> int:
        """Heal by a potion; returns hp restored."""
        return StatCalculator.heal(self._player.ledger, heal)

    @log_call
    def roll_reward(self, map_level: int) -> EncounterOutcome:
        """Player stepped on a reward tile."""
        return self._encounters.roll_reward(self._player.ledger, self._player.inventory, map_level)

    @log_call
    def roll_curse(self, map_level: int) -> EncounterOutcome:
        """Player stepped on a curse tile."""
        return self._encounters.roll_curse(self._player.ledger, map_level)

    @log_call
    def teleport(self) -> tuple[MapPosition, Direction]:
        """
        Move the player to a random teleport target.

        Returns:
            Tuple of (new_position, direction to walk off the tile)
        """
        if self._tile_map is None:
            raise ValueError("No tile map set for teleporting")

        new_position = self._teleport.teleport(self._tile_map, self._player.position)
        self._player.position = new_position
        return new_position, self._teleport.exit_direction()

"""Tests for the ProgressionEngine facade."""

import pytest

from conftest import ScriptedRandomSource, StubItemProvider, fixed_max_exp
from tilequest.engine.progression_config import ProgressionConfig
from tilequest.engine.progression_engine import ProgressionEngine
from tilequest.engine.random_source import RandomSource
from tilequest.models.items import Item
from tilequest.models.outcomes import CURSE_KINDS, REWARD_KINDS, GoldGain
from tilequest.models.player import Player
from tilequest.models.world import MapPosition, Tile, TilePosition


class TwoTeleporterMap:
    """Two linked teleport tiles at (0, 0) and (5, 5)."""

    def to_tile_coords(self, position):
        return TilePosition(x=int(position.x // 16), y=int(position.y // 16))

    def get_tile(self, tile_position):
        return Tile(tile_position=tile_position, kind="teleport")

    def teleport_candidates(self, current_tile):
        other = TilePosition(x=5, y=5) if current_tile.tile_position == TilePosition(x=0, y=0) else TilePosition(x=0, y=0)
        return [Tile(tile_position=other, kind="teleport")]

    def to_map_coords(self, tile_position):
        return MapPosition(x=tile_position.x * 16, y=tile_position.y * 16)


class TestProgressionEngine:
    """Test suite for ProgressionEngine."""

    def test_new_player_defaults(self, item_provider):
        """Test that a fresh engine creates a level 1 player from config."""
        config = ProgressionConfig(init_max_hp=40, inventory_capacity=6)
        engine = ProgressionEngine(item_provider, rng=RandomSource(1), config=config)

        ledger = engine.player.ledger
        assert ledger.level == 1
        assert ledger.hp == ledger.max_hp == 40
        assert engine.player.inventory.capacity == 6

    def test_existing_player_is_kept(self, ledger, item_provider):
        """Test that a supplied player is used as-is."""
        player = Player(player_id="hero", ledger=ledger)
        engine = ProgressionEngine(item_provider, player=player, rng=RandomSource(1))

        assert engine.player.player_id == "hero"
        assert engine.player.ledger is ledger

    def test_experience_flow(self, ledger, item_provider):
        """Test gaining experience, then committing the level up."""
        rng = ScriptedRandomSource([5, 2, 1, 0, 3])
        engine = ProgressionEngine(
            item_provider,
            player=Player(player_id="hero", ledger=ledger), rng=rng, max_exp_formula=fixed_max_exp
        )
        ledger.hp = 10

        assert engine.gain_experience(12) == 1
        engine.apply_pending_level_up()

        assert ledger.level == 2
        assert ledger.experience == 2
        assert ledger.max_hp == 55
        assert ledger.hp == 55
        assert not ledger.has_pending_level_up

    def test_resolve_level_up_directly(self, ledger, item_provider):
        """Test resolving a known overflow through the facade."""
        rng = ScriptedRandomSource([4, 1, 0, 0, 3])
        engine = ProgressionEngine(
            item_provider,
            player=Player(player_id="hero", ledger=ledger), rng=rng, max_exp_formula=fixed_max_exp
        )

        assert engine.resolve_level_up(7) == 1
        assert ledger.experience == 7

    def test_equip_and_unequip(self, ledger, sword, item_provider):
        """Test that the facade tracks equipped items and keeps stats symmetric."""
        engine = ProgressionEngine(item_provider, player=Player(player_id="hero", ledger=ledger), rng=RandomSource(1))

        engine.equip(sword)
        assert engine.player.equipped == [sword]
        assert ledger.max_hp == 60

        engine.unequip(sword)
        assert engine.player.equipped == []
        assert ledger.max_hp == 50

    def test_unequip_unknown_item(self, ledger, sword, item_provider):
        """Test that removing an item that was never equipped fails."""
        engine = ProgressionEngine(item_provider, player=Player(player_id="hero", ledger=ledger), rng=RandomSource(1))
        with pytest.raises(ValueError):
            engine.unequip(sword)

    def test_use_potion(self, ledger, item_provider):
        """Test potion healing through the facade."""
        ledger.hp = 48
        engine = ProgressionEngine(item_provider, player=Player(player_id="hero", ledger=ledger), rng=RandomSource(1))

        assert engine.use_potion(10) == 2
        assert ledger.hp == 50

    def test_reward_roll(self, ledger, item_provider):
        """Test a scripted reward roll through the facade."""
        rng = ScriptedRandomSource([0, 30, 8, 10])
        engine = ProgressionEngine(item_provider, player=Player(player_id="hero", ledger=ledger), rng=rng)

        outcome = engine.roll_reward(2)

        assert isinstance(outcome, GoldGain)
        assert ledger.gold == 18

    def test_seeded_session_keeps_invariants(self):
        """Test a long seeded session of mixed operations."""
        engine = ProgressionEngine(StubItemProvider(Item(name="Gem")), rng=RandomSource(2024))
        ledger = engine.player.ledger

        for step in range(200):
            map_level = 1 + step % 8
            assert engine.roll_reward(map_level).kind in REWARD_KINDS
            assert engine.roll_curse(map_level).kind in CURSE_KINDS
            engine.gain_experience(step)
            if step % 5 == 0:
                engine.apply_pending_level_up()

            assert 0 <= ledger.hp <= ledger.max_hp
            assert ledger.gold >= 0
            assert ledger.min_damage <= ledger.max_damage
            assert ledger.experience < ledger.max_experience

    def test_teleport_moves_player(self, ledger, item_provider):
        """Test that teleporting updates the player's position."""
        rng = ScriptedRandomSource([0, 2])
        engine = ProgressionEngine(
            item_provider,
            player=Player(player_id="hero", ledger=ledger), rng=rng, tile_map=TwoTeleporterMap()
        )

        position, direction = engine.teleport()

        assert position == MapPosition(x=80, y=80)
        assert engine.player.position == position
        assert direction.value == 2

    def test_teleport_requires_map(self, ledger, item_provider):
        """Test that teleporting with no map set fails."""
        engine = ProgressionEngine(item_provider, player=Player(player_id="hero", ledger=ledger), rng=RandomSource(1))
        with pytest.raises(ValueError):
            engine.teleport()

    def test_item_provider_is_required(self):
        """Test that the engine can't be built without an item source."""
        with pytest.raises(TypeError):
            ProgressionEngine()

    def test_reward_item_branch_drops_item(self, ledger, item_provider):
        """Test that the item branch of a reward tile always yields a drop through the facade."""
        rng = ScriptedRandomSource([0, 99])
        engine = ProgressionEngine(item_provider, player=Player(player_id="hero", ledger=ledger), rng=rng)

        outcome = engine.roll_reward(4)

        assert outcome.kind in REWARD_KINDS
        assert outcome.added is True
        assert engine.player.inventory.items == [item_provider.item]

"""Data models module for tilequest."""

# Stats
from tilequest.models.stats import PendingLevelUp, StatLedger

# Items and Inventory
from tilequest.models.items import EquipmentModifier, Inventory, Item, ItemProvider

# Encounter outcomes
from tilequest.models.outcomes import (
    CURSE_KINDS,
    REWARD_KINDS,
    DamageTaken,
    EncounterOutcome,
    GoldGain,
    GoldLoss,
    HealGain,
    ItemDrop,
    Nothing,
    OutcomeKind,
)

# World
from tilequest.models.world import Direction, MapPosition, Tile, TileMap, TilePosition

# Player
from tilequest.models.player import Player

__all__ = [
    # Stats
    "StatLedger",
    "PendingLevelUp",
    # Items and Inventory
    "Item",
    "ItemProvider",
    "EquipmentModifier",
    "Inventory",
    # Encounter outcomes
    "EncounterOutcome",
    "OutcomeKind",
    "Nothing",
    "GoldGain",
    "HealGain",
    "ItemDrop",
    "DamageTaken",
    "GoldLoss",
    "REWARD_KINDS",
    "CURSE_KINDS",
    # World
    "Direction",
    "MapPosition",
    "Tile",
    "TileMap",
    "TilePosition",
    # Player
    "Player",
]

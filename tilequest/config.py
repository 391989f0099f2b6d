"""Central configuration defaults and constants for tilequest."""

import os

# Starting stats for a new player
DEFAULT_PLAYER_INIT_MAX_HP = int(os.getenv("TILEQUEST_PLAYER_INIT_MAX_HP", "65"))
DEFAULT_PLAYER_ACCURACY = int(os.getenv("TILEQUEST_PLAYER_ACCURACY", "80"))
DEFAULT_PLAYER_INIT_MIN_DMG = int(os.getenv("TILEQUEST_PLAYER_INIT_MIN_DMG", "7"))
DEFAULT_PLAYER_INIT_MAX_DMG = int(os.getenv("TILEQUEST_PLAYER_INIT_MAX_DMG", "13"))

# Level-up growth ranges (inclusive)
DEFAULT_PLAYER_MIN_HP_INCREASE = int(os.getenv("TILEQUEST_PLAYER_MIN_HP_INCREASE", "4"))
DEFAULT_PLAYER_MAX_HP_INCREASE = int(os.getenv("TILEQUEST_PLAYER_MAX_HP_INCREASE", "10"))
DEFAULT_PLAYER_MIN_DMG_INCREASE = int(os.getenv("TILEQUEST_PLAYER_MIN_DMG_INCREASE", "1"))
DEFAULT_PLAYER_MAX_DMG_INCREASE = int(os.getenv("TILEQUEST_PLAYER_MAX_DMG_INCREASE", "2"))
DEFAULT_ACCURACY_LEVEL_INTERVAL = int(os.getenv("TILEQUEST_ACCURACY_LEVEL_INTERVAL", "10"))  # +1 accuracy every N levels

# Max experience offset range drawn on every level up
DEFAULT_MAX_EXP_OFFSET_MIN = int(os.getenv("TILEQUEST_MAX_EXP_OFFSET_MIN", "3"))
DEFAULT_MAX_EXP_OFFSET_MAX = int(os.getenv("TILEQUEST_MAX_EXP_OFFSET_MAX", "5"))

# Encounter tiles
DEFAULT_TILE_INTERACTION_CHANCE = int(os.getenv("TILEQUEST_TILE_INTERACTION_CHANCE", "70"))  # percent
DEFAULT_REWARD_GOLD_THRESHOLD = int(os.getenv("TILEQUEST_REWARD_GOLD_THRESHOLD", "50"))  # k < 50 -> gold
DEFAULT_REWARD_HEAL_THRESHOLD = int(os.getenv("TILEQUEST_REWARD_HEAL_THRESHOLD", "95"))  # k < 95 -> heal, else item
DEFAULT_REWARD_GOLD_MIN = int(os.getenv("TILEQUEST_REWARD_GOLD_MIN", "7"))
DEFAULT_REWARD_GOLD_MAX = int(os.getenv("TILEQUEST_REWARD_GOLD_MAX", "13"))
DEFAULT_REWARD_HEAL_FRACTION = float(os.getenv("TILEQUEST_REWARD_HEAL_FRACTION", "0.2"))
DEFAULT_CURSE_DAMAGE_CHANCE = int(os.getenv("TILEQUEST_CURSE_DAMAGE_CHANCE", "60"))  # percent, else theft
DEFAULT_CURSE_DAMAGE_PER_LEVEL = int(os.getenv("TILEQUEST_CURSE_DAMAGE_PER_LEVEL", "3"))
DEFAULT_CURSE_GOLD_MIN = int(os.getenv("TILEQUEST_CURSE_GOLD_MIN", "4"))
DEFAULT_CURSE_GOLD_MAX = int(os.getenv("TILEQUEST_CURSE_GOLD_MAX", "9"))

# Inventory
DEFAULT_INVENTORY_CAPACITY = int(os.getenv("TILEQUEST_INVENTORY_CAPACITY", "24"))

# Random source seed (unset means seeded from system entropy)
_seed_env = os.getenv("TILEQUEST_RANDOM_SEED")
DEFAULT_RANDOM_SEED = int(_seed_env) if _seed_env else None

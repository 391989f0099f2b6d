"""Progression and encounter tuning configuration."""

from pydantic import BaseModel, Field, model_validator

from tilequest.config import (
    DEFAULT_ACCURACY_LEVEL_INTERVAL,
    DEFAULT_CURSE_DAMAGE_CHANCE,
    DEFAULT_CURSE_DAMAGE_PER_LEVEL,
    DEFAULT_CURSE_GOLD_MAX,
    DEFAULT_CURSE_GOLD_MIN,
    DEFAULT_INVENTORY_CAPACITY,
    DEFAULT_MAX_EXP_OFFSET_MAX,
    DEFAULT_MAX_EXP_OFFSET_MIN,
    DEFAULT_PLAYER_ACCURACY,
    DEFAULT_PLAYER_INIT_MAX_DMG,
    DEFAULT_PLAYER_INIT_MAX_HP,
    DEFAULT_PLAYER_INIT_MIN_DMG,
    DEFAULT_PLAYER_MAX_DMG_INCREASE,
    DEFAULT_PLAYER_MAX_HP_INCREASE,
    DEFAULT_PLAYER_MIN_DMG_INCREASE,
    DEFAULT_PLAYER_MIN_HP_INCREASE,
    DEFAULT_REWARD_GOLD_MAX,
    DEFAULT_REWARD_GOLD_MIN,
    DEFAULT_REWARD_GOLD_THRESHOLD,
    DEFAULT_REWARD_HEAL_FRACTION,
    DEFAULT_REWARD_HEAL_THRESHOLD,
    DEFAULT_TILE_INTERACTION_CHANCE,
)


class ProgressionConfig(BaseModel):
    """Design constants for leveling and encounter tiles."""

    # Starting stats
    init_max_hp: int = Field(default=DEFAULT_PLAYER_INIT_MAX_HP, ge=1, description="Starting max hp")
    init_accuracy: int = Field(default=DEFAULT_PLAYER_ACCURACY, ge=0, le=100, description="Starting accuracy")
    init_min_damage: int = Field(default=DEFAULT_PLAYER_INIT_MIN_DMG, ge=0, description="Starting min damage")
    init_max_damage: int = Field(default=DEFAULT_PLAYER_INIT_MAX_DMG, ge=0, description="Starting max damage")

    # Level up
    min_hp_increase: int = Field(default=DEFAULT_PLAYER_MIN_HP_INCREASE, ge=0, description="Min hp gained per level")
    max_hp_increase: int = Field(default=DEFAULT_PLAYER_MAX_HP_INCREASE, ge=0, description="Max hp gained per level")
    min_dmg_increase: int = Field(default=DEFAULT_PLAYER_MIN_DMG_INCREASE, ge=0, description="Min damage mean gained per level")
    max_dmg_increase: int = Field(default=DEFAULT_PLAYER_MAX_DMG_INCREASE, ge=0, description="Max damage mean gained per level")
    accuracy_level_interval: int = Field(
        default=DEFAULT_ACCURACY_LEVEL_INTERVAL, ge=1, description="Accuracy grows by 1 every N levels"
    )
    max_exp_offset_min: int = Field(default=DEFAULT_MAX_EXP_OFFSET_MIN, ge=0, description="Min max-exp offset")
    max_exp_offset_max: int = Field(default=DEFAULT_MAX_EXP_OFFSET_MAX, ge=0, description="Max max-exp offset")

    # Encounter tiles
    tile_interaction_chance: int = Field(
        default=DEFAULT_TILE_INTERACTION_CHANCE, ge=0, le=100, description="Percent chance a tile activates"
    )
    reward_gold_threshold: int = Field(default=DEFAULT_REWARD_GOLD_THRESHOLD, ge=0, le=100, description="k below this gives gold")
    reward_heal_threshold: int = Field(default=DEFAULT_REWARD_HEAL_THRESHOLD, ge=0, le=100, description="k below this gives a heal")
    reward_gold_min: int = Field(default=DEFAULT_REWARD_GOLD_MIN, ge=0, description="Min gold per map level")
    reward_gold_max: int = Field(default=DEFAULT_REWARD_GOLD_MAX, ge=0, description="Max gold per map level")
    reward_heal_fraction: float = Field(default=DEFAULT_REWARD_HEAL_FRACTION, ge=0.0, le=1.0, description="Heal as a fraction of max hp")
    curse_damage_chance: int = Field(default=DEFAULT_CURSE_DAMAGE_CHANCE, ge=0, le=100, description="Percent chance a curse deals damage")
    curse_damage_per_level: int = Field(default=DEFAULT_CURSE_DAMAGE_PER_LEVEL, ge=0, description="Curse damage per map level")
    curse_gold_min: int = Field(default=DEFAULT_CURSE_GOLD_MIN, ge=0, description="Min gold stolen per map level")
    curse_gold_max: int = Field(default=DEFAULT_CURSE_GOLD_MAX, ge=0, description="Max gold stolen per map level")

    inventory_capacity: int = Field(default=DEFAULT_INVENTORY_CAPACITY, ge=1, description="Inventory slots")

    @model_validator(mode="after")
    def check_ranges(self) -> "ProgressionConfig":
        """Reject inverted ranges."""
        pairs = [
            ("init_min_damage", "init_max_damage"),
            ("min_hp_increase", "max_hp_increase"),
            ("min_dmg_increase", "max_dmg_increase"),
            ("max_exp_offset_min", "max_exp_offset_max"),
            ("reward_gold_threshold", "reward_heal_threshold"),
            ("reward_gold_min", "reward_gold_max"),
            ("curse_gold_min", "curse_gold_max"),
        ]
        for low, high in pairs:
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"{low} must not exceed {high}")
        return self

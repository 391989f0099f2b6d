"""Player stat ledger models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tilequest.config import (
    DEFAULT_PLAYER_ACCURACY,
    DEFAULT_PLAYER_INIT_MAX_DMG,
    DEFAULT_PLAYER_INIT_MAX_HP,
    DEFAULT_PLAYER_INIT_MIN_DMG,
)


class PendingLevelUp(BaseModel):
    """Stat gains computed by a level up but not yet applied to live stats."""

    model_config = ConfigDict(validate_assignment=True)

    hp_increase: int = Field(default=0, description="Max hp gained")
    min_dmg_increase: int = Field(default=0, description="Min damage gained")
    max_dmg_increase: int = Field(default=0, description="Max damage gained")
    accuracy_increase: int = Field(default=0, description="Accuracy gained")
    max_exp_increase: int = Field(default=0, description="Change in max experience (display only)")
    levels: int = Field(default=0, ge=0, description="Level ups resolved since the last commit")

    def is_empty(self) -> bool:
        """Whether there is nothing to apply."""
        return self.levels == 0

    def add(self, other: "PendingLevelUp") -> None:
        """Accumulate another batch of gains."""
        self.hp_increase += other.hp_increase
        self.min_dmg_increase += other.min_dmg_increase
        self.max_dmg_increase += other.max_dmg_increase
        self.accuracy_increase += other.accuracy_increase
        self.max_exp_increase += other.max_exp_increase
        self.levels += other.levels

    def reset(self) -> None:
        """Zero every pending delta."""
        self.hp_increase = 0
        self.min_dmg_increase = 0
        self.max_dmg_increase = 0
        self.accuracy_increase = 0
        self.max_exp_increase = 0
        self.levels = 0


class StatLedger(BaseModel):
    """Mutable stat and progress record of a single player."""

    model_config = ConfigDict(validate_assignment=True)

    level: int = Field(default=1, ge=1, description="Player level")
    experience: int = Field(default=0, ge=0, description="Experience towards next level")
    max_experience: int = Field(ge=1, description="Experience needed for next level")

    hp: int = Field(default=DEFAULT_PLAYER_INIT_MAX_HP, ge=0, description="Current hit points")
    max_hp: int = Field(default=DEFAULT_PLAYER_INIT_MAX_HP, ge=1, description="Maximum hit points")
    accuracy: int = Field(default=DEFAULT_PLAYER_ACCURACY, description="Hit chance in percent")
    min_damage: int = Field(default=DEFAULT_PLAYER_INIT_MIN_DMG, description="Minimum damage")
    max_damage: int = Field(default=DEFAULT_PLAYER_INIT_MAX_DMG, description="Maximum damage")

    gold: int = Field(default=0, ge=0, description="Gold carried")

    pending: PendingLevelUp = Field(
        default_factory=PendingLevelUp, description="Level-up gains awaiting commit"
    )

    @model_validator(mode="after")
    def check_invariants(self) -> "StatLedger":
        """Hp can't exceed max_hp and the damage range can't be inverted."""
        if self.hp > self.max_hp:
            raise ValueError(f"hp {self.hp} exceeds max_hp {self.max_hp}")
        if self.min_damage > self.max_damage:
            raise ValueError(f"min_damage {self.min_damage} exceeds max_damage {self.max_damage}")
        return self

    @property
    def has_pending_level_up(self) -> bool:
        """Whether a resolved level up still needs to be applied."""
        return not self.pending.is_empty()

    def apply_changes(self, **changes: int) -> None:
        """
        Set several stat fields at once.

        Hp is clamped to [0, max_hp] and gold to >= 0 after the changes, then
        the result is validated as a whole, so multi-field updates never trip
        over a half-applied state. Nothing is written if validation fails.

        Args:
            changes: New values by field name (any field except `pending`)
        """
        allowed = set(type(self).model_fields) - {"pending"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValueError(f"Unknown ledger fields: {sorted(unknown)}")

        values = {name: getattr(self, name) for name in allowed}
        values.update(changes)
        values["hp"] = max(0, min(values["hp"], values["max_hp"]))
        values["gold"] = max(0, values["gold"])

        checked = type(self).model_validate(values)
        for name in allowed:
            self.__dict__[name] = getattr(checked, name)

    def set_hp(self, value: int) -> None:
        """Set hp, clamped to [0, max_hp]."""
        self.apply_changes(hp=value)

    def set_gold(self, value: int) -> None:
        """Set gold, clamped at 0."""
        self.apply_changes(gold=value)

    def add_gold(self, amount: int) -> None:
        """Add (or with a negative amount, remove) gold."""
        self.set_gold(self.gold + amount)

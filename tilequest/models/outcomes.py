"""Encounter tile outcome models."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from tilequest.models.items import Item


class OutcomeKind(str, Enum):
    """Kinds of encounter tile outcomes."""

    NOTHING = "nothing"
    GOLD_GAIN = "gold_gain"
    HEAL_GAIN = "heal_gain"
    ITEM_DROP = "item_drop"
    DAMAGE_TAKEN = "damage_taken"
    GOLD_LOSS = "gold_loss"


class _Outcome(BaseModel):
    """Fields shared by every outcome."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    messages: list[str] = Field(default_factory=list, description="Display lines, in order")


class Nothing(_Outcome):
    """The tile did not activate."""

    kind: Literal[OutcomeKind.NOTHING] = OutcomeKind.NOTHING


class GoldGain(_Outcome):
    kind: Literal[OutcomeKind.GOLD_GAIN] = OutcomeKind.GOLD_GAIN
    amount: int = Field(ge=0, description="Gold added")


class HealGain(_Outcome):
    kind: Literal[OutcomeKind.HEAL_GAIN] = OutcomeKind.HEAL_GAIN
    amount: int = Field(ge=0, description="Nominal heal, before clamping to max hp")


class ItemDrop(_Outcome):
    kind: Literal[OutcomeKind.ITEM_DROP] = OutcomeKind.ITEM_DROP
    item: Item = Field(description="Dropped item")
    added: bool = Field(description="False when the inventory was full and the item was discarded")


class DamageTaken(_Outcome):
    kind: Literal[OutcomeKind.DAMAGE_TAKEN] = OutcomeKind.DAMAGE_TAKEN
    amount: int = Field(ge=0, description="Damage dealt")
    lethal: bool = Field(description="Whether the damage dropped hp to 0 or below")


class GoldLoss(_Outcome):
    kind: Literal[OutcomeKind.GOLD_LOSS] = OutcomeKind.GOLD_LOSS
    amount: int = Field(ge=0, description="Rolled theft amount, before clamping gold at 0")


EncounterOutcome = Annotated[
    Union[Nothing, GoldGain, HealGain, ItemDrop, DamageTaken, GoldLoss],
    Field(discriminator="kind"),
]

REWARD_KINDS = frozenset(
    {OutcomeKind.NOTHING, OutcomeKind.GOLD_GAIN, OutcomeKind.HEAL_GAIN, OutcomeKind.ITEM_DROP}
)
CURSE_KINDS = frozenset({OutcomeKind.NOTHING, OutcomeKind.DAMAGE_TAKEN, OutcomeKind.GOLD_LOSS})

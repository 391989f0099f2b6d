"""Item, equipment modifier and inventory models."""

from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, ConfigDict, Field

from tilequest.config import DEFAULT_INVENTORY_CAPACITY

if TYPE_CHECKING:
    from tilequest.engine.random_source import RandomSource


class EquipmentModifier(BaseModel):
    """Flat stat deltas an equipped item contributes."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    max_hp_delta: int = Field(default=0, description="Change to max hp")
    damage_delta: int = Field(default=0, description="Change to both min and max damage")
    accuracy_delta: int = Field(default=0, description="Change to accuracy")


class Item(BaseModel):
    """Item dropped by tiles or equipped by the player."""

    name: str = Field(description="Item name")
    description: str = Field(default="", description="Item description")
    level: int = Field(default=1, ge=1, description="Power level the item was scaled to")

    # Flat equip bonuses
    mhp: int = Field(default=0, description="Max hp bonus")
    dmg: int = Field(default=0, description="Damage bonus")
    acc: int = Field(default=0, description="Accuracy bonus")

    @property
    def modifier(self) -> EquipmentModifier:
        """Equip bonuses as a modifier."""
        return EquipmentModifier(max_hp_delta=self.mhp, damage_delta=self.dmg, accuracy_delta=self.acc)

    @property
    def dialog_name(self) -> str:
        """Name as shown in encounter messages."""
        return f"{self.name} (lv. {self.level})"

    def adjust(self, map_level: int, rng: "RandomSource") -> None:
        """
        Scale the item to a map level in place.

        Each non-zero bonus grows by a random amount up to the map level.
        """
        self.level = max(1, map_level)
        if self.mhp:
            self.mhp += rng.randint(0, map_level)
        if self.dmg:
            self.dmg += rng.randint(0, map_level)
        if self.acc:
            self.acc += rng.randint(0, map_level)


class ItemProvider(Protocol):
    """Source of random items for reward tiles."""

    def get_random_item(self, rng: "RandomSource") -> Item:
        ...


class Inventory(BaseModel):
    """Fixed-capacity item storage."""

    capacity: int = Field(default=DEFAULT_INVENTORY_CAPACITY, ge=1, description="Number of slots")
    items: list[Item] = Field(default_factory=list, description="Stored items")

    def is_full(self) -> bool:
        """Whether every slot is taken."""
        return len(self.items) >= self.capacity

    def add_item(self, item: Item) -> None:
        """Store an item in the next free slot."""
        if self.is_full():
            raise ValueError(f"No free inventory slot for item {item.name}")
        self.items.append(item)

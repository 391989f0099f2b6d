"""Player aggregate model."""

from pydantic import BaseModel, Field

from tilequest.models.items import Inventory, Item
from tilequest.models.stats import StatLedger
from tilequest.models.world import MapPosition


class Player(BaseModel):
    """The protagonist: stat ledger, inventory and map position."""

    player_id: str = Field(description="Unique player identifier")
    ledger: StatLedger = Field(description="Stats and progress")
    inventory: Inventory = Field(default_factory=Inventory, description="Carried items")
    equipped: list[Item] = Field(default_factory=list, description="Items whose bonuses are applied")
    position: MapPosition = Field(
        default_factory=lambda: MapPosition(x=0, y=0), description="Current map-space position"
    )

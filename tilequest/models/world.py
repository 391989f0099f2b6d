"""Tile map coordinate models and collaborator protocol."""

from enum import Enum
from typing import Protocol, Sequence

from pydantic import BaseModel, ConfigDict, Field


class Direction(int, Enum):
    """Walking directions, indexed 0-3."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class TilePosition(BaseModel):
    """Tile grid coordinates."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    x: int = Field(description="Column")
    y: int = Field(description="Row")


class MapPosition(BaseModel):
    """Map-space position (pixels)."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    x: float = Field(description="Horizontal position")
    y: float = Field(description="Vertical position")


class Tile(BaseModel):
    """Individual map tile."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    tile_position: TilePosition = Field(description="Tile coordinates")
    kind: str = Field(default="ground", description="Tile type (e.g. 'teleport', 'question', 'exclamation')")


class TileMap(Protocol):
    """Map geometry consumed by the teleport helper."""

    def to_tile_coords(self, position: MapPosition) -> TilePosition:
        ...

    def get_tile(self, tile_position: TilePosition) -> Tile:
        ...

    def teleport_candidates(self, current_tile: Tile) -> Sequence[Tile]:
        ...

    def to_map_coords(self, tile_position: TilePosition) -> MapPosition:
        ...

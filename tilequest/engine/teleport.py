"""Teleportation between teleport tiles."""

import logging

from tilequest.engine.random_source import RandomSource
from tilequest.models.world import Direction, MapPosition, TileMap

logger = logging.getLogger(__name__)


class NoTeleportTargetError(ValueError):
    """Raised when a teleport tile has nowhere to send the player."""


class TeleportHelper:
    """Picks teleport destinations on a tile map."""

    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng

    def teleport(self, tile_map: TileMap, position: MapPosition) -> MapPosition:
        """
        Choose a random teleport target reachable from the tile under `position`.

        Args:
            tile_map: Map geometry
            position: Player's current map-space position

        Returns:
            Map-space position of the chosen target tile

        Raises:
            NoTeleportTargetError: If the map offers no candidates
        """
        current_tile = tile_map.get_tile(tile_map.to_tile_coords(position))
        candidates = list(tile_map.teleport_candidates(current_tile))
        if not candidates:
            logger.error(f"No teleport candidates for tile {current_tile.tile_position}")
            raise NoTeleportTargetError(
                f"Tile {current_tile.tile_position} has no teleport targets"
            )

        target = self._rng.choice(candidates)
        logger.info(f"Teleporting from {current_tile.tile_position} to {target.tile_position}")
        return tile_map.to_map_coords(target.tile_position)

    def exit_direction(self) -> Direction:
        """Random direction to walk off the destination tile."""
        return Direction(self._rng.below(len(Direction)))

"""Pooled dice rolls scaled by map level."""

from typing import Any

from tilequest.engine.random_source import RandomSource


class DiceRoller:
    """Handles pooled rolls for encounter magnitudes."""

    @staticmethod
    def roll_pool(rng: RandomSource, count: int, lo: int, hi: int) -> dict[str, Any]:
        """
        Roll `count` independent values in [lo, hi] and sum them.

        Args:
            rng: Random source to draw from
            count: Number of draws (the map level for encounter tiles)
            lo: Inclusive lower bound of each draw
            hi: Inclusive upper bound of each draw

        Returns:
            Dictionary with 'total', 'rolls' and 'count' keys
        """
        rolls = [rng.randint(lo, hi) for _ in range(count)]
        return {
            "total": sum(rolls),
            "rolls": rolls,
            "count": count,
        }

"""Max experience curve."""

from typing import Callable

MaxExpFormula = Callable[[int, int], int]


def compute_max_exp(level: int, offset: int) -> int:
    """
    Experience needed to clear `level`.

    Quadratic in level with a per-level random offset (drawn in [3, 5] by
    callers). Strictly positive and non-decreasing in level for a fixed offset.
    """
    return level * level + offset * level + 4

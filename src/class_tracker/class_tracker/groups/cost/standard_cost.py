from __future__ import annotations

from ...core.constants import PLACEMENT_SIZE_PENALTY
from .base import PlacementCost


class StandardPlacementCost(PlacementCost):
    """Standard rule: |group average - score| + penalty * group size."""

    def __init__(self, size_penalty: float = PLACEMENT_SIZE_PENALTY):
        self._size_penalty = size_penalty

    def cost(self, *, total_score: float, size: int, score: float) -> float:
        average = total_score / max(1, size)
        return abs(average - score) + self._size_penalty * size

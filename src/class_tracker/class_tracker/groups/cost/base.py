from __future__ import annotations

from abc import ABC, abstractmethod


class PlacementCost(ABC):
    """Cost interface (Strategy Pattern for choosing a student's group). Lower is better."""

    @abstractmethod
    def cost(self, *, total_score: float, size: int, score: float) -> float:
        raise NotImplementedError

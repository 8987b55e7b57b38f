from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: one student on a class roster."""

    student_id: str
    number: int
    name: str
    score: Optional[float] = None
    is_leader: bool = False

    @property
    def effective_score(self) -> float:
        """Score used for balancing; a missing score counts as 0."""
        return float(self.score) if self.score is not None else 0.0

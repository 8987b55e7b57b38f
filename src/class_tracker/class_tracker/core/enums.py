from __future__ import annotations

from enum import Enum


class ViolationColor(str, Enum):
    """Label colors for violated exclusion rules, assigned cyclically by rule order."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    INDIGO = "indigo"
    ORANGE = "orange"

    @classmethod
    def for_index(cls, color_index: int) -> "ViolationColor":
        members = list(cls)
        return members[int(color_index) % len(members)]

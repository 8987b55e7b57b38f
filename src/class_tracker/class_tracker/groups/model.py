from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..core.enums import ViolationColor
from ..students.model import Student


@dataclass(frozen=True)
class ExclusionConstraint:
    """Students that must not share a group (2+ unique ids, in the order they were written)."""

    position: int
    student_ids: Tuple[str, ...]

    def involves(self, student_id: str) -> bool:
        return student_id in self.student_ids


@dataclass(frozen=True)
class Group:
    index: int
    students: Tuple[Student, ...]
    total_score: float
    leader_count: int

    @property
    def size(self) -> int:
        return len(self.students)

    @property
    def average_score(self) -> float:
        return self.total_score / max(1, self.size)

    @property
    def student_ids(self) -> Tuple[str, ...]:
        return tuple(s.student_id for s in self.students)


@dataclass(frozen=True)
class Violation:
    """An exclusion rule whose students (2+) ended up in the same group."""

    constraint_position: int
    group_index: int
    student_ids: Tuple[str, ...]
    student_names: Tuple[str, ...]
    color_index: int

    @property
    def color(self) -> ViolationColor:
        return ViolationColor.for_index(self.color_index)

    @property
    def label(self) -> str:
        return chr(ord("A") + self.color_index)


@dataclass(frozen=True)
class GroupingResult:
    groups: Tuple[Group, ...]
    violations: Tuple[Violation, ...]
    constraints: Tuple[ExclusionConstraint, ...] = ()

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)

    @property
    def color_by_student(self) -> Dict[str, ViolationColor]:
        colors: Dict[str, ViolationColor] = {}
        for v in self.violations:
            for sid in v.student_ids:
                colors[sid] = v.color
        return colors

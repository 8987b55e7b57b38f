from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..common.validators import require_int
from ..core.exceptions import EmptyRosterError, InvalidGroupCountError, ValidationError
from ..students.model import Student
from .cost.base import PlacementCost
from .cost.standard_cost import StandardPlacementCost
from .model import ExclusionConstraint, Group, GroupingResult
from .violations import detect_violations


@dataclass
class _GroupDraft:
    students: List[Student] = field(default_factory=list)
    total_score: float = 0.0
    leader_count: int = 0

    def add(self, student: Student) -> None:
        self.students.append(student)
        self.total_score += student.effective_score
        if student.is_leader:
            self.leader_count += 1


class GroupPartitioner:
    """Split a roster into N groups.

    1. Leaders go round-robin in roster order (group i % N) and are never moved.
    2. Non-leaders, highest score first, go to the eligible group with the
       lowest placement cost; the first group wins ties. A group is not
       eligible when it already holds someone the student is excluded from.
       If no group is eligible the cheapest group is used anyway and the
       clash shows up as a violation.
    3. Members are ordered by student number.
    4. Exclusion rules that were not honored are reported.

    Greedy, single pass, no backtracking. The input roster is left untouched.
    """

    def __init__(self, cost: Optional[PlacementCost] = None):
        self._cost = cost or StandardPlacementCost()

    def partition(
        self,
        roster: Sequence[Student],
        num_groups: int,
        constraints: Sequence[ExclusionConstraint] = (),
    ) -> GroupingResult:
        roster = list(roster)
        num_groups = self._validate(roster, num_groups)
        constraints = tuple(constraints)

        drafts = [_GroupDraft() for _ in range(num_groups)]

        leaders = [s for s in roster if s.is_leader]
        for i, leader in enumerate(leaders):
            drafts[i % num_groups].add(leader)

        # sorted() is stable: equal scores keep roster order
        others = sorted((s for s in roster if not s.is_leader), key=lambda s: s.effective_score, reverse=True)
        for student in others:
            drafts[self._choose_group(student, drafts, constraints)].add(student)

        groups = tuple(
            Group(
                index=i + 1,
                students=tuple(sorted(d.students, key=lambda s: s.number)),
                total_score=d.total_score,
                leader_count=d.leader_count,
            )
            for i, d in enumerate(drafts)
        )
        return GroupingResult(
            groups=groups,
            violations=tuple(detect_violations(groups, constraints)),
            constraints=constraints,
        )

    @staticmethod
    def _validate(roster: List[Student], num_groups) -> int:
        if not roster:
            raise EmptyRosterError()

        try:
            count = require_int(num_groups, "num_groups")
        except ValidationError:
            raise InvalidGroupCountError(num_groups, len(roster))
        if count < 1 or count > len(roster):
            raise InvalidGroupCountError(num_groups, len(roster))

        seen = set()
        for s in roster:
            if s.student_id in seen:
                raise ValidationError(f"Duplicate student id in roster: {s.student_id!r}")
            seen.add(s.student_id)
            if not math.isfinite(s.effective_score) or s.effective_score < 0:
                raise ValidationError(f"Invalid score for student {s.student_id!r}: {s.score!r}")
        return count

    def _choose_group(
        self,
        student: Student,
        drafts: List[_GroupDraft],
        constraints: Sequence[ExclusionConstraint],
    ) -> int:
        relevant = [c for c in constraints if c.involves(student.student_id)]

        best_index: Optional[int] = None
        best_cost = float("inf")
        fallback_index = 0
        fallback_cost = float("inf")

        for i, draft in enumerate(drafts):
            cost = self._cost.cost(total_score=draft.total_score, size=len(draft.students), score=student.effective_score)

            if cost < fallback_cost:
                fallback_cost = cost
                fallback_index = i

            if self._conflicts(draft, relevant):
                continue
            if cost < best_cost:
                best_cost = cost
                best_index = i

        return best_index if best_index is not None else fallback_index

    @staticmethod
    def _conflicts(draft: _GroupDraft, relevant: Sequence[ExclusionConstraint]) -> bool:
        return any(c.involves(member.student_id) for c in relevant for member in draft.students)

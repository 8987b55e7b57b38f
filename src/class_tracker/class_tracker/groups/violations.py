from __future__ import annotations

from typing import List, Sequence

from ..core.constants import MIN_CONSTRAINT_SIZE, VIOLATION_COLOR_COUNT
from .model import ExclusionConstraint, Group, Violation


def detect_violations(groups: Sequence[Group], constraints: Sequence[ExclusionConstraint]) -> List[Violation]:
    """Report each exclusion rule at most once, against the first group holding 2+ of its students."""
    violations: List[Violation] = []

    for c in constraints:
        for group in groups:
            names_by_id = {s.student_id: s.name for s in group.students}
            together = [sid for sid in c.student_ids if sid in names_by_id]
            if len(together) < MIN_CONSTRAINT_SIZE:
                continue

            violations.append(
                Violation(
                    constraint_position=c.position,
                    group_index=group.index,
                    student_ids=tuple(together),
                    student_names=tuple(names_by_id[sid] for sid in together),
                    color_index=c.position % VIOLATION_COLOR_COUNT,
                )
            )
            break

    return violations

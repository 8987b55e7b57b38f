from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEFAULT_NUM_GROUPS
from ..core.enums import ViolationColor
from ..students.model import Student
from ..students.service import RosterService
from .model import GroupingResult, Violation
from .parser import parse_exclusion_constraints
from .partitioner import GroupPartitioner

_COLOR_CSS = {
    ViolationColor.RED: "bg-red-100 border-red-300 text-red-900",
    ViolationColor.YELLOW: "bg-yellow-100 border-yellow-300 text-yellow-900",
    ViolationColor.GREEN: "bg-green-100 border-green-300 text-green-900",
    ViolationColor.BLUE: "bg-blue-100 border-blue-300 text-blue-900",
    ViolationColor.PURPLE: "bg-purple-100 border-purple-300 text-purple-900",
    ViolationColor.PINK: "bg-pink-100 border-pink-300 text-pink-900",
    ViolationColor.INDIGO: "bg-indigo-100 border-indigo-300 text-indigo-900",
    ViolationColor.ORANGE: "bg-orange-100 border-orange-300 text-orange-900",
}


class GroupingService:
    def __init__(
        self,
        roster: RosterService,
        *,
        partitioner: Optional[GroupPartitioner] = None,
        default_num_groups: int = DEFAULT_NUM_GROUPS,
    ):
        self._roster = roster
        self._partitioner = partitioner or GroupPartitioner()
        self._default_num_groups = int(default_num_groups)

    @property
    def default_num_groups(self) -> int:
        return self._default_num_groups

    def create_groups(
        self,
        *,
        roster: Sequence[Student],
        num_groups: Optional[int] = None,
        exclusion_text: Optional[str] = None,
    ) -> GroupingResult:
        if num_groups is None:
            num_groups = self._default_num_groups
        constraints = parse_exclusion_constraints(exclusion_text, roster)
        return self._partitioner.partition(roster, num_groups, constraints)

    def create_groups_for_class(
        self,
        *,
        school_id: str,
        class_name: str,
        num_groups: Optional[int] = None,
        exclusion_text: Optional[str] = None,
    ) -> GroupingResult:
        roster = self._roster.get_roster(school_id=school_id, class_name=class_name)
        return self.create_groups(roster=roster, num_groups=num_groups, exclusion_text=exclusion_text)

    def to_ui(self, result: GroupingResult) -> dict:
        highlight = result.color_by_student

        groups = []
        for g in result.groups:
            groups.append(
                {
                    "index": g.index,
                    "title": f"Group {g.index} ({g.size})",
                    "size": g.size,
                    "total_score": round(g.total_score, 1),
                    "average_score": round(g.average_score, 1),
                    "leader_count": g.leader_count,
                    "students": [
                        {
                            "id": s.student_id,
                            "number": s.number,
                            "name": s.name,
                            "score": s.score,
                            "is_leader": s.is_leader,
                            "css_class": _COLOR_CSS[highlight[s.student_id]] if s.student_id in highlight else "bg-gray-50",
                        }
                        for s in g.students
                    ],
                }
            )

        return {
            "groups": groups,
            "violations": [self._violation_to_ui(v) for v in result.violations],
            "constraint_count": len(result.constraints),
        }

    @staticmethod
    def _violation_to_ui(v: Violation) -> dict:
        return {
            "label": v.label,
            "color": v.color.value,
            "color_index": v.color_index,
            "css_class": _COLOR_CSS[v.color],
            "group_index": v.group_index,
            "student_ids": list(v.student_ids),
            "names": list(v.student_names),
            "message": f"Rule {v.label} ({v.color.value}): [{', '.join(v.student_names)}] - group {v.group_index}",
        }

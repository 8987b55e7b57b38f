from __future__ import annotations

from typing import Any, List

from ..common.validators import optional_bool, optional_score, require_int, require_non_empty
from ..core.exceptions import ValidationError
from .model import Student
from .repository import StudentRepository


class RosterService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def get_roster(self, *, school_id: str, class_name: str) -> List[Student]:
        school_id = require_non_empty(school_id, "School")
        class_name = require_non_empty(class_name, "Class")
        roster = list(self._students.list_by_class(school_id=school_id, class_name=class_name))
        roster.sort(key=lambda s: s.number)
        return roster

    def toggle_leader(self, student_id: str) -> Student:
        student_id = require_non_empty(student_id, "Student")
        student = self._students.get_by_id(student_id)
        if not student:
            raise ValidationError("Student not found")

        new_value = not student.is_leader
        if not self._students.set_leader(student_id=student_id, is_leader=new_value):
            raise ValidationError("Failed to update leader flag")

        return Student(
            student_id=student.student_id,
            number=student.number,
            name=student.name,
            score=student.score,
            is_leader=new_value,
        )

    @staticmethod
    def parse_payload(items: Any) -> List[Student]:
        """Build a roster from JSON objects ({id, number, name, score|point, isLeader|is_leader}).

        One bad entry rejects the whole payload.
        """
        if not isinstance(items, list):
            raise ValidationError("students must be a list")

        roster: List[Student] = []
        for pos, item in enumerate(items, start=1):
            if not isinstance(item, dict):
                raise ValidationError(f"Student #{pos} is not an object")

            raw_id = item.get("id", item.get("student_id"))
            if raw_id is None or isinstance(raw_id, bool):
                raise ValidationError(f"Student #{pos}: id is required")

            score_key = "score" if "score" in item else "point"
            leader = item.get("isLeader", item.get("is_leader"))

            roster.append(
                Student(
                    student_id=require_non_empty(str(raw_id), f"Student #{pos} id"),
                    number=require_int(item.get("number") or 0, f"Student #{pos} number"),
                    name=require_non_empty(item.get("name"), f"Student #{pos} name"),
                    score=optional_score(item.get(score_key), f"Student #{pos} score"),
                    is_leader=optional_bool(leader, f"Student #{pos} isLeader"),
                )
            )
        return roster

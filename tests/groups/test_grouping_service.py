from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from src.class_tracker.class_tracker.core.exceptions import EmptyRosterError, InvalidGroupCountError
from src.class_tracker.class_tracker.groups.service import GroupingService
from src.class_tracker.class_tracker.students.model import Student
from src.class_tracker.class_tracker.students.service import RosterService


@dataclass
class InMemoryStudents:
    by_class: dict[tuple[str, str], list[Student]] = field(default_factory=dict)

    def list_by_class(self, *, school_id: str, class_name: str):
        return list(self.by_class.get((school_id, class_name), []))

    def get_by_id(self, student_id: str) -> Optional[Student]:
        for students in self.by_class.values():
            for s in students:
                if s.student_id == student_id:
                    return s
        return None

    def set_leader(self, *, student_id: str, is_leader: bool) -> bool:
        return False


ROSTER = [
    Student("s4", 4, "Dana", 60),
    Student("s1", 1, "Ari", 90),
    Student("s3", 3, "Cho", 70),
    Student("s2", 2, "Bom", 80),
]


def _service(default_num_groups: int = 2) -> GroupingService:
    repo = InMemoryStudents(by_class={("sch", "2-1"): ROSTER})
    return GroupingService(RosterService(repo), default_num_groups=default_num_groups)


def test_create_groups_parses_exclusions():
    service = _service()

    result = service.create_groups(roster=ROSTER, num_groups=2, exclusion_text="Ari, Bom\nAri Nobody")

    assert len(result.constraints) == 1
    assert [s.student_id for s in result.groups[0].students] == ["s1"]
    assert not result.has_violations


def test_create_groups_uses_default_group_count():
    result = _service(default_num_groups=3).create_groups(roster=ROSTER)

    assert len(result.groups) == 3


def test_create_groups_for_class_loads_roster_sorted_by_number():
    result = _service().create_groups_for_class(school_id="sch", class_name="2-1", num_groups=1)

    assert [s.number for s in result.groups[0].students] == [1, 2, 3, 4]


def test_unknown_class_is_an_empty_roster():
    with pytest.raises(EmptyRosterError):
        _service().create_groups_for_class(school_id="sch", class_name="9-9", num_groups=1)


def test_too_many_groups_is_rejected():
    with pytest.raises(InvalidGroupCountError):
        _service().create_groups(roster=ROSTER, num_groups=5)


def test_to_ui_marks_violating_students():
    service = _service()
    result = service.create_groups(roster=ROSTER, num_groups=1, exclusion_text="Ari Bom\nCho Dana")

    ui = service.to_ui(result)

    assert ui["constraint_count"] == 2
    assert [v["label"] for v in ui["violations"]] == ["A", "B"]
    assert ui["violations"][0]["names"] == ["Ari", "Bom"]
    assert ui["violations"][0]["group_index"] == 1
    assert ui["violations"][1]["color"] == "yellow"
    assert "Ari, Bom" in ui["violations"][0]["message"]

    group = ui["groups"][0]
    assert group["total_score"] == 300
    assert group["average_score"] == 75
    css = {s["id"]: s["css_class"] for s in group["students"]}
    assert css["s1"].startswith("bg-red-100")
    assert css["s3"].startswith("bg-yellow-100")

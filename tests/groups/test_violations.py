from src.class_tracker.class_tracker.core.enums import ViolationColor
from src.class_tracker.class_tracker.groups.model import ExclusionConstraint, Group
from src.class_tracker.class_tracker.groups.violations import detect_violations
from src.class_tracker.class_tracker.students.model import Student


def _group(index, *students):
    return Group(index=index, students=tuple(students), total_score=0.0, leader_count=0)


A = Student("a", 1, "Alice")
B = Student("b", 2, "Bob")
C = Student("c", 3, "Carol")
D = Student("d", 4, "Dan")


def test_reports_only_first_conflicting_group():
    groups = [_group(1, A, B), _group(2, C, D)]
    rule = ExclusionConstraint(position=3, student_ids=("c", "d", "a", "b"))

    violations = detect_violations(groups, [rule])

    assert len(violations) == 1
    assert violations[0].group_index == 1
    # constraint order, not group order
    assert violations[0].student_ids == ("a", "b")
    assert violations[0].student_names == ("Alice", "Bob")
    assert violations[0].color_index == 3
    assert violations[0].color == ViolationColor.BLUE
    assert violations[0].label == "D"


def test_split_constraint_is_not_a_violation():
    groups = [_group(1, A, C), _group(2, B, D)]

    assert detect_violations(groups, [ExclusionConstraint(position=0, student_ids=("a", "b"))]) == []


def test_violations_follow_constraint_order():
    groups = [_group(1, A, B), _group(2, C, D)]
    rules = [
        ExclusionConstraint(position=0, student_ids=("c", "d")),
        ExclusionConstraint(position=1, student_ids=("a", "b")),
    ]

    violations = detect_violations(groups, rules)

    assert [v.group_index for v in violations] == [2, 1]
    assert [v.label for v in violations] == ["A", "B"]

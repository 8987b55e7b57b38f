"""Example: group a roster through the service layer (no Flask, no database).

Controllers are thin; the grouping rules live in GroupingService/GroupPartitioner.
"""

from src.class_tracker.class_tracker.container import build_services
from src.class_tracker.class_tracker.students.model import Student


class StaticRoster:
    def __init__(self, students):
        self._students = list(students)

    def list_by_class(self, *, school_id, class_name):
        return self._students

    def get_by_id(self, student_id):
        return next((s for s in self._students if s.student_id == student_id), None)

    def set_leader(self, *, student_id, is_leader):
        return False


def main():
    roster = [
        Student("s-01", 1, "Minsu", 88.5, True),
        Student("s-02", 2, "Jihoon", 72.0),
        Student("s-03", 3, "Hyunwoo", 95.0),
        Student("s-04", 4, "Younghee", None, True),
        Student("s-05", 5, "Sora", 64.0),
        Student("s-06", 6, "Dohyun", 81.0),
    ]
    container = build_services(StaticRoster(roster))
    result = container.grouping_service.create_groups(
        roster=roster,
        num_groups=2,
        exclusion_text="Hyunwoo, Dohyun",
    )
    print(container.grouping_service.to_ui(result))


if __name__ == "__main__":
    main()

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from .model import Student
from .repository import StudentRepository


def _to_student(row: Dict[str, Any]) -> Student:
    score = row.get("score")
    return Student(
        student_id=str(row["student_id"]),
        number=int(row.get("number") or 0),
        name=row.get("name") or "",
        score=float(score) if score is not None else None,
        is_leader=bool(row.get("is_leader", False)),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_by_class(self, *, school_id: str, class_name: str) -> Sequence[Student]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                SELECT student_id, number, name, score, is_leader
                FROM students
                WHERE school_id=%s AND class_name=%s
                ORDER BY number ASC
                """,
                (school_id, class_name),
            )
            return [_to_student(r) for r in cur.fetchall()]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                SELECT student_id, number, name, score, is_leader
                FROM students
                WHERE student_id=%s
                """,
                (student_id,),
            )
            row = cur.fetchone()
            return _to_student(row) if row else None

    def set_leader(self, *, student_id: str, is_leader: bool) -> bool:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                "UPDATE students SET is_leader=%s WHERE student_id=%s",
                (1 if is_leader else 0, student_id),
            )
            return cur.rowcount > 0

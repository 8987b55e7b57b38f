from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_by_class(self, *, school_id: str, class_name: str) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def set_leader(self, *, student_id: str, is_leader: bool) -> bool:
        """Persist the leader flag.

        Returns False when no row was updated.
        """

        raise NotImplementedError

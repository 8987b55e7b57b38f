from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_NUM_GROUPS
from .database.connection import DBConfig, DatabaseConnection
from .groups.partitioner import GroupPartitioner
from .groups.service import GroupingService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import RosterService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    students_repo: StudentRepository

    roster_service: RosterService
    grouping_service: GroupingService


def build_services(
    students_repo: StudentRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    default_num_groups: int = DEFAULT_NUM_GROUPS,
) -> Container:
    roster_service = RosterService(students_repo)
    grouping_service = GroupingService(
        roster_service,
        partitioner=GroupPartitioner(),
        default_num_groups=default_num_groups,
    )
    return Container(
        conn=conn,
        students_repo=students_repo,
        roster_service=roster_service,
        grouping_service=grouping_service,
    )


def build_container(*, db_config: dict, default_num_groups: int = DEFAULT_NUM_GROUPS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(MySQLStudentRepository(conn), conn=conn, default_num_groups=default_num_groups)

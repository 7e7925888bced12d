from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AssignedPerson, NewAssignment, WeeklyAssignment
from .repository import AssignmentRepository

_COLUMNS = "a.assignment_id, a.member_id, a.person_id, a.week_start, a.completed, a.completed_at, a.undo_deadline"


def _row_to_assignment(r: dict) -> WeeklyAssignment:
    return WeeklyAssignment(
        assignment_id=int(r["assignment_id"]),
        member_id=int(r["member_id"]),
        person_id=int(r["person_id"]),
        week_start=r["week_start"],
        completed=bool(r.get("completed", False)),
        completed_at=r.get("completed_at"),
        undo_deadline=r.get("undo_deadline"),
    )


class MySQLAssignmentRepository(AssignmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_week(self, week_start: date) -> Sequence[WeeklyAssignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM weekly_assignments a
                WHERE a.week_start=%s
                ORDER BY a.member_id ASC, a.assignment_id ASC
                """,
                (week_start,),
            )
            return [_row_to_assignment(r) for r in fetchall(cur)]

    def exists_for_week(self, week_start: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT assignment_id FROM weekly_assignments WHERE week_start=%s LIMIT 1", (week_start,))
            return fetchone(cur) is not None

    def delete_for_week(self, week_start: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM weekly_assignments WHERE week_start=%s", (week_start,))
            return int(cur.rowcount)

    def bulk_insert(self, records: Sequence[NewAssignment]) -> int:
        if not records:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT INTO weekly_assignments(member_id, person_id, week_start) VALUES(%s,%s,%s)",
                [(int(r.member_id), int(r.person_id), r.week_start) for r in records],
            )
            return len(records)

    def get_by_id(self, assignment_id: int) -> Optional[WeeklyAssignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM weekly_assignments a WHERE a.assignment_id=%s",
                (int(assignment_id),),
            )
            r = fetchone(cur)
            return _row_to_assignment(r) if r else None

    def mark_completed(self, *, assignment_id: int, completed_at: datetime, undo_deadline: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE weekly_assignments
                SET completed=1, completed_at=%s, undo_deadline=%s
                WHERE assignment_id=%s AND completed=0
                """,
                (completed_at, undo_deadline, int(assignment_id)),
            )
            return cur.rowcount > 0

    def clear_completion(self, *, assignment_id: int, now: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE weekly_assignments
                SET completed=0, completed_at=NULL, undo_deadline=NULL
                WHERE assignment_id=%s AND completed=1 AND undo_deadline >= %s
                """,
                (int(assignment_id), now),
            )
            return cur.rowcount > 0

    def list_for_member(self, *, member_id: int, week_start: date) -> Sequence[AssignedPerson]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS},
                       p.name, p.phone, p.gender, p.last_attendance_date
                FROM weekly_assignments a
                JOIN people p ON p.person_id = a.person_id
                WHERE a.member_id=%s AND a.week_start=%s
                ORDER BY a.completed ASC, p.name ASC
                """,
                (int(member_id), week_start),
            )
            return [
                AssignedPerson(
                    assignment=_row_to_assignment(r),
                    name=r["name"],
                    phone=r["phone"],
                    gender=Gender(r["gender"]),
                    last_attendance_date=r.get("last_attendance_date"),
                )
                for r in fetchall(cur)
            ]

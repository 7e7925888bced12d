from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_since(self, since: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT person_id, attended_on
                FROM attendance
                WHERE attended_on >= %s
                ORDER BY attended_on ASC
                """,
                (since,),
            )
            return [
                AttendanceRecord(person_id=int(r["person_id"]), attended_on=r["attended_on"])
                for r in fetchall(cur)
            ]

    def record(self, *, person_id: int, attended_on: date) -> bool:
        # Both statements share one transaction (db_cursor commits once).
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT person_id FROM people WHERE person_id=%s FOR UPDATE", (int(person_id),))
            if not fetchone(cur):
                return False

            cur.execute(
                "INSERT IGNORE INTO attendance(person_id, attended_on) VALUES(%s,%s)",
                (int(person_id), attended_on),
            )
            cur.execute(
                """
                UPDATE people
                SET last_attendance_date = GREATEST(COALESCE(last_attendance_date, %s), %s)
                WHERE person_id=%s
                """,
                (attended_on, attended_on, int(person_id)),
            )
            return True

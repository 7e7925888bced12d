from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Person
from .repository import PeopleRepository


def _row_to_person(r: dict) -> Person:
    return Person(
        person_id=int(r["person_id"]),
        name=r["name"],
        phone=r["phone"],
        gender=Gender(r["gender"]),
        last_attendance_date=r.get("last_attendance_date"),
    )


class MySQLPeopleRepository(PeopleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, search: Optional[str] = None) -> Sequence[Person]:
        sql = "SELECT person_id, name, phone, gender, last_attendance_date FROM people"
        params: tuple = ()
        if search:
            sql += " WHERE LOWER(name) LIKE %s"
            params = (f"%{search.strip().lower()}%",)
        sql += " ORDER BY name ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_row_to_person(r) for r in fetchall(cur)]

    def get_by_id(self, person_id: int) -> Optional[Person]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT person_id, name, phone, gender, last_attendance_date
                FROM people
                WHERE person_id=%s
                """,
                (int(person_id),),
            )
            r = fetchone(cur)
            return _row_to_person(r) if r else None

    def create(self, *, name: str, phone: str, gender: Gender) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO people(name, phone, gender) VALUES(%s,%s,%s)",
                (name, phone, gender.value),
            )
            return int(cur.lastrowid)

    def update(self, *, person_id: int, name: str, phone: str, gender: Gender) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE people SET name=%s, phone=%s, gender=%s WHERE person_id=%s",
                (name, phone, gender.value, int(person_id)),
            )
            # MySQL reports 0 affected rows when values are unchanged; treat existence as success.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM people WHERE person_id=%s", (int(person_id),))
            return fetchone(cur) is not None

    def delete(self, person_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM people WHERE person_id=%s", (int(person_id),))
            return cur.rowcount > 0

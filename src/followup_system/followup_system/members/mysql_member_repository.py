from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Gender, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Member, MemberProfile
from .repository import MemberRepository

_MEMBER_COLUMNS = "member_id, name, username, password_hash, gender, role, approved"


def _row_to_member(r: dict) -> Member:
    return Member(
        member_id=int(r["member_id"]),
        name=r["name"],
        username=r["username"],
        password_hash=r["password_hash"],
        gender=Gender(r["gender"]),
        role=Role(r["role"]),
        approved=bool(r.get("approved", False)),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_MEMBER_COLUMNS} FROM members WHERE member_id=%s", (int(member_id),))
            r = fetchone(cur)
            return _row_to_member(r) if r else None

    def get_by_username(self, username: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_MEMBER_COLUMNS} FROM members WHERE username=%s", (username,))
            r = fetchone(cur)
            return _row_to_member(r) if r else None

    def create_member(
        self,
        *,
        name: str,
        username: str,
        password_hash: str,
        gender: Gender,
        role: Role = Role.PENDING,
        approved: bool = False,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO members(name, username, password_hash, gender, role, approved)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (name, username, password_hash, gender.value, role.value, int(bool(approved))),
            )
            return int(cur.lastrowid)

    def list_member_ids(self, role: Role) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT member_id FROM members WHERE role=%s ORDER BY member_id", (role.value,))
            return [int(r["member_id"]) for r in fetchall(cur)]

    def list_profiles(self, member_ids: Sequence[int], *, approved: Optional[bool] = None) -> Sequence[MemberProfile]:
        if not member_ids:
            return []

        ids = [int(i) for i in member_ids]
        sql = f"SELECT member_id, name, gender, approved FROM members WHERE member_id IN ({in_clause(ids)})"
        params: list[object] = list(ids)
        if approved is not None:
            sql += " AND approved=%s"
            params.append(int(approved))
        sql += " ORDER BY member_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [
                MemberProfile(
                    member_id=int(r["member_id"]),
                    name=r["name"],
                    gender=Gender(r["gender"]),
                    approved=bool(r["approved"]),
                )
                for r in fetchall(cur)
            ]

    def list_by_role(self, role: Role) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_MEMBER_COLUMNS} FROM members WHERE role=%s ORDER BY name", (role.value,))
            return [_row_to_member(r) for r in fetchall(cur)]

    def set_role(self, member_id: int, *, role: Role, approved: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE members SET role=%s, approved=%s WHERE member_id=%s",
                (role.value, int(bool(approved)), int(member_id)),
            )
            return cur.rowcount > 0

    def count_by_role(self, role: Role, *, approved: Optional[bool] = None) -> int:
        sql = "SELECT COUNT(*) AS n FROM members WHERE role=%s"
        params: list[object] = [role.value]
        if approved is not None:
            sql += " AND approved=%s"
            params.append(int(approved))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            r = fetchone(cur)
            return int(r["n"]) if r else 0

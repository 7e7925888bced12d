"""In-memory repositories implementing the repository protocols for tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from src.followup_system.followup_system.assignments.model import AssignedPerson, NewAssignment, WeeklyAssignment
from src.followup_system.followup_system.attendance.model import AttendanceRecord
from src.followup_system.followup_system.core.enums import Gender, Role
from src.followup_system.followup_system.members.model import Member, MemberProfile
from src.followup_system.followup_system.people.model import Person


class InMemoryPeople:
    def __init__(self, people=()):
        self.people: dict[int, Person] = {p.person_id: p for p in people}
        self._id = max(self.people, default=0)

    def list_all(self, *, search: Optional[str] = None):
        items = sorted(self.people.values(), key=lambda p: p.name)
        if search:
            items = [p for p in items if search.lower() in p.name.lower()]
        return items

    def get_by_id(self, person_id: int) -> Optional[Person]:
        return self.people.get(person_id)

    def create(self, *, name: str, phone: str, gender: Gender) -> int:
        self._id += 1
        self.people[self._id] = Person(person_id=self._id, name=name, phone=phone, gender=gender)
        return self._id

    def update(self, *, person_id: int, name: str, phone: str, gender: Gender) -> bool:
        p = self.people.get(person_id)
        if not p:
            return False
        self.people[person_id] = replace(p, name=name, phone=phone, gender=gender)
        return True

    def delete(self, person_id: int) -> bool:
        return self.people.pop(person_id, None) is not None


class InMemoryMembers:
    def __init__(self, members=()):
        self.members: dict[int, Member] = {m.member_id: m for m in members}
        self._id = max(self.members, default=0)
        self.profile_calls: list[tuple] = []

    def get_by_id(self, member_id: int) -> Optional[Member]:
        return self.members.get(member_id)

    def get_by_username(self, username: str) -> Optional[Member]:
        return next((m for m in self.members.values() if m.username == username), None)

    def create_member(self, *, name, username, password_hash, gender, role=Role.PENDING, approved=False) -> int:
        self._id += 1
        self.members[self._id] = Member(
            member_id=self._id,
            name=name,
            username=username,
            password_hash=password_hash,
            gender=gender,
            role=role,
            approved=approved,
        )
        return self._id

    def list_member_ids(self, role: Role):
        return sorted(m.member_id for m in self.members.values() if m.role == role)

    def list_profiles(self, member_ids, *, approved=None):
        self.profile_calls.append((tuple(member_ids), approved))
        out = []
        for mid in member_ids:
            m = self.members.get(mid)
            if not m or (approved is not None and m.approved != approved):
                continue
            out.append(MemberProfile(member_id=m.member_id, name=m.name, gender=m.gender, approved=m.approved))
        return out

    def list_by_role(self, role: Role):
        return sorted((m for m in self.members.values() if m.role == role), key=lambda m: m.name)

    def set_role(self, member_id: int, *, role: Role, approved: bool) -> bool:
        m = self.members.get(member_id)
        if not m:
            return False
        self.members[member_id] = replace(m, role=role, approved=approved)
        return True

    def count_by_role(self, role: Role, *, approved=None) -> int:
        return sum(
            1
            for m in self.members.values()
            if m.role == role and (approved is None or m.approved == approved)
        )


class InMemoryAttendance:
    def __init__(self, people: InMemoryPeople, records=()):
        self._people = people
        self.records: set[AttendanceRecord] = set(records)

    def list_since(self, since: date):
        return sorted((r for r in self.records if r.attended_on >= since), key=lambda r: r.attended_on)

    def record(self, *, person_id: int, attended_on: date) -> bool:
        p = self._people.get_by_id(person_id)
        if not p:
            return False
        self.records.add(AttendanceRecord(person_id=person_id, attended_on=attended_on))
        last = p.last_attendance_date
        if last is None or attended_on > last:
            self._people.people[person_id] = replace(p, last_attendance_date=attended_on)
        return True


class InMemoryAssignments:
    def __init__(self, people: Optional[InMemoryPeople] = None):
        self._people = people
        self.rows: dict[int, WeeklyAssignment] = {}
        self._id = 0
        self.calls: list[str] = []

    def list_for_week(self, week_start: date):
        return [a for a in self.rows.values() if a.week_start == week_start]

    def exists_for_week(self, week_start: date) -> bool:
        self.calls.append("exists")
        return any(a.week_start == week_start for a in self.rows.values())

    def delete_for_week(self, week_start: date) -> int:
        self.calls.append("delete")
        doomed = [k for k, a in self.rows.items() if a.week_start == week_start]
        for k in doomed:
            del self.rows[k]
        return len(doomed)

    def bulk_insert(self, records) -> int:
        self.calls.append("insert")
        for r in records:
            assert isinstance(r, NewAssignment)
            self._id += 1
            self.rows[self._id] = WeeklyAssignment(
                assignment_id=self._id,
                member_id=r.member_id,
                person_id=r.person_id,
                week_start=r.week_start,
            )
        return len(records)

    def get_by_id(self, assignment_id: int):
        return self.rows.get(assignment_id)

    def mark_completed(self, *, assignment_id: int, completed_at: datetime, undo_deadline: datetime) -> bool:
        a = self.rows.get(assignment_id)
        if not a or a.completed:
            return False
        self.rows[assignment_id] = replace(a, completed=True, completed_at=completed_at, undo_deadline=undo_deadline)
        return True

    def clear_completion(self, *, assignment_id: int, now: datetime) -> bool:
        a = self.rows.get(assignment_id)
        if not a or not a.completed or a.undo_deadline is None or a.undo_deadline < now:
            return False
        self.rows[assignment_id] = replace(a, completed=False, completed_at=None, undo_deadline=None)
        return True

    def list_for_member(self, *, member_id: int, week_start: date):
        out = []
        for a in self.rows.values():
            if a.member_id != member_id or a.week_start != week_start:
                continue
            p = self._people.get_by_id(a.person_id) if self._people else None
            if p:
                out.append(
                    AssignedPerson(
                        assignment=a,
                        name=p.name,
                        phone=p.phone,
                        gender=p.gender,
                        last_attendance_date=p.last_attendance_date,
                    )
                )
        return out


def person(person_id: int, gender: Gender = Gender.MALE, *, last: Optional[date] = None, name: str = "") -> Person:
    return Person(
        person_id=person_id,
        name=name or f"Person {person_id:02d}",
        phone=f"010{person_id:08d}",
        gender=gender,
        last_attendance_date=last,
    )


def member(
    member_id: int,
    gender: Gender = Gender.MALE,
    *,
    role: Role = Role.MEMBER,
    approved: bool = True,
    password_hash: str = "x",
    username: str = "",
) -> Member:
    return Member(
        member_id=member_id,
        name=f"Member {member_id}",
        username=username or f"member{member_id}",
        password_hash=password_hash,
        gender=gender,
        role=role,
        approved=approved,
    )

from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local, week_start
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..members.repository import MemberRepository
from ..people.repository import PeopleRepository
from .model import AttendanceStats
from .repository import AttendanceRepository
from .stats import compute_attendance_stats


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        people: PeopleRepository,
        members: MemberRepository,
        *,
        anchor_weekday: int = 5,
    ):
        self._attendance = attendance
        self._people = people
        self._members = members
        self._anchor_weekday = int(anchor_weekday)

    def mark_present(self, person_id: int, *, today: Optional[date] = None) -> None:
        today = today or now_local().date()
        if not self._attendance.record(person_id=int(person_id), attended_on=today):
            raise ValidationError("Person not found.")

    def compute_stats(self, *, today: Optional[date] = None) -> AttendanceStats:
        today = today or now_local().date()
        start = week_start(today, self._anchor_weekday)

        people = self._people.list_all()
        records = self._attendance.list_since(start)

        return compute_attendance_stats(
            people,
            records,
            today=today,
            anchor_weekday=self._anchor_weekday,
            approved_members=self._members.count_by_role(Role.MEMBER, approved=True),
            pending_requests=self._members.count_by_role(Role.PENDING),
        )

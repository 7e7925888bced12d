"""Attendance statistics for the admin dashboard.

Absence buckets are measured from ``today``:

* last attended more than 21 days ago -> absent three weeks or more
* last attended more than 7 days ago  -> absent one week
* never attended                      -> counted in both buckets
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import week_start
from ..core.constants import ABSENT_ONE_WEEK_DAYS, ABSENT_THREE_WEEKS_DAYS
from ..core.enums import Gender
from ..people.model import Person
from .model import AttendanceRecord, AttendanceStats


def compute_attendance_stats(
    people: Sequence[Person],
    records: Iterable[AttendanceRecord],
    *,
    today: date,
    anchor_weekday: int,
    approved_members: int = 0,
    pending_requests: int = 0,
) -> AttendanceStats:
    start = week_start(today, anchor_weekday)
    roster_ids = {p.person_id for p in people}
    present_ids = {r.person_id for r in records if r.attended_on >= start and r.person_id in roster_ids}

    one_week_ago = today - timedelta(days=ABSENT_ONE_WEEK_DAYS)
    three_weeks_ago = today - timedelta(days=ABSENT_THREE_WEEKS_DAYS)

    absent_1w = 0
    absent_3w = 0
    never = 0
    for p in people:
        last = p.last_attendance_date
        if last is None:
            never += 1
            absent_1w += 1
            absent_3w += 1
        elif last < three_weeks_ago:
            absent_3w += 1
        elif last < one_week_ago:
            absent_1w += 1

    return AttendanceStats(
        week_start=start,
        total=len(people),
        male=sum(1 for p in people if p.gender == Gender.MALE),
        female=sum(1 for p in people if p.gender == Gender.FEMALE),
        present=len(present_ids),
        absent=len(people) - len(present_ids),
        absent_1w=absent_1w,
        absent_3w=absent_3w,
        never_attended=never,
        approved_members=int(approved_members),
        pending_requests=int(pending_requests),
    )

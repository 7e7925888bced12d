from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: a person was present on a given day (append-only)."""

    person_id: int
    attended_on: date


@dataclass(frozen=True)
class AttendanceStats:
    """Dashboard counters for the current week."""

    week_start: date
    total: int
    male: int
    female: int
    present: int
    absent: int
    absent_1w: int
    absent_3w: int
    never_attended: int
    approved_members: int
    pending_requests: int

    def as_dict(self) -> dict:
        return {
            "week_start": self.week_start.strftime("%Y-%m-%d"),
            "total": self.total,
            "male": self.male,
            "female": self.female,
            "present": self.present,
            "absent": self.absent,
            "absent_1w": self.absent_1w,
            "absent_3w": self.absent_3w,
            "never_attended": self.never_attended,
            "approved_members": self.approved_members,
            "pending_requests": self.pending_requests,
        }

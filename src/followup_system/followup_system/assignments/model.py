from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class NewAssignment:
    """Row produced by the generator before it is stored."""

    member_id: int
    person_id: int
    week_start: date


@dataclass(frozen=True)
class WeeklyAssignment:
    """Domain entity: one person to visit, given to one member for one week.

    Lifecycle: created (not completed) -> completed -> back to not completed,
    the last step only until ``undo_deadline``.
    """

    assignment_id: int
    member_id: int
    person_id: int
    week_start: date
    completed: bool = False
    completed_at: Optional[datetime] = None
    undo_deadline: Optional[datetime] = None

    def can_undo(self, now: datetime) -> bool:
        return self.completed and self.undo_deadline is not None and now <= self.undo_deadline


@dataclass(frozen=True)
class AssignedPerson:
    """Read-model for the member dashboard (assignment joined with the person)."""

    assignment: WeeklyAssignment
    name: str
    phone: str
    gender: Gender
    last_attendance_date: Optional[date] = None

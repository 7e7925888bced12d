from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AssignedPerson, NewAssignment, WeeklyAssignment


class AssignmentRepository(Protocol):
    def list_for_week(self, week_start: date) -> Sequence[WeeklyAssignment]:
        raise NotImplementedError

    def exists_for_week(self, week_start: date) -> bool:
        raise NotImplementedError

    def delete_for_week(self, week_start: date) -> int:
        raise NotImplementedError

    def bulk_insert(self, records: Sequence[NewAssignment]) -> int:
        raise NotImplementedError

    def get_by_id(self, assignment_id: int) -> Optional[WeeklyAssignment]:
        raise NotImplementedError

    def mark_completed(self, *, assignment_id: int, completed_at: datetime, undo_deadline: datetime) -> bool:
        raise NotImplementedError

    def clear_completion(self, *, assignment_id: int, now: datetime) -> bool:
        """Undo a completion; must return False once ``undo_deadline`` has passed."""

        raise NotImplementedError

    def list_for_member(self, *, member_id: int, week_start: date) -> Sequence[AssignedPerson]:
        raise NotImplementedError

from __future__ import annotations

from datetime import date

from ..repository import AssignmentRepository
from .base import RegenerationStrategy


class OverwriteStrategy(RegenerationStrategy):
    """Existing assignments of the week are deleted and generated again."""

    def before_generate(self, *, week_start: date, existing: bool) -> None:
        return None

    def clear_existing(self, *, assignments: AssignmentRepository, week_start: date, existing: bool) -> int:
        if not existing:
            return 0
        return assignments.delete_for_week(week_start)

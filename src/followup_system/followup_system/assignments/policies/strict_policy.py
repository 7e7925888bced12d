from __future__ import annotations

from datetime import date

from ...core.exceptions import AssignmentsAlreadyExistError
from ..repository import AssignmentRepository
from .base import RegenerationStrategy


class StrictStrategy(RegenerationStrategy):
    """A week is generated once; later runs are refused without writing anything."""

    def before_generate(self, *, week_start: date, existing: bool) -> None:
        if existing:
            raise AssignmentsAlreadyExistError()

    def clear_existing(self, *, assignments: AssignmentRepository, week_start: date, existing: bool) -> int:
        return 0

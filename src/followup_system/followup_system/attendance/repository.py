from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_since(self, since: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def record(self, *, person_id: int, attended_on: date) -> bool:
        """Store attendance and move the person's last attendance date forward.

        Returns False when the person does not exist.
        """

        raise NotImplementedError

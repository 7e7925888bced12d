from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ..repository import AssignmentRepository


class RegenerationStrategy(ABC):
    """Strategy Pattern: decide what happens to a week that already has assignments."""

    @abstractmethod
    def before_generate(self, *, week_start: date, existing: bool) -> None:
        """Runs before anything is read or written; may refuse the run."""
        raise NotImplementedError

    @abstractmethod
    def clear_existing(self, *, assignments: AssignmentRepository, week_start: date, existing: bool) -> int:
        """Runs right before the new rows are inserted; returns how many rows were removed."""
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class Person:
    """Domain entity: someone on the follow-up roster."""

    person_id: int
    name: str
    phone: str
    gender: Gender
    last_attendance_date: Optional[date] = None

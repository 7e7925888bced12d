from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Gender
from .model import Person


class PeopleRepository(Protocol):
    """Repository interface for the follow-up roster."""

    def list_all(self, *, search: Optional[str] = None) -> Sequence[Person]:
        raise NotImplementedError

    def get_by_id(self, person_id: int) -> Optional[Person]:
        raise NotImplementedError

    def create(self, *, name: str, phone: str, gender: Gender) -> int:
        raise NotImplementedError

    def update(self, *, person_id: int, name: str, phone: str, gender: Gender) -> bool:
        raise NotImplementedError

    def delete(self, person_id: int) -> bool:
        raise NotImplementedError

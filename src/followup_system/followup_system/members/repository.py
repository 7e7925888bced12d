from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Gender, Role
from .model import Member, MemberProfile


class MemberRepository(Protocol):
    """Repository interface for member accounts and profiles.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Member]:
        raise NotImplementedError

    def create_member(
        self,
        *,
        name: str,
        username: str,
        password_hash: str,
        gender: Gender,
        role: Role = Role.PENDING,
        approved: bool = False,
    ) -> int:
        raise NotImplementedError

    def list_member_ids(self, role: Role) -> Sequence[int]:
        raise NotImplementedError

    def list_profiles(self, member_ids: Sequence[int], *, approved: Optional[bool] = None) -> Sequence[MemberProfile]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[Member]:
        raise NotImplementedError

    def set_role(self, member_id: int, *, role: Role, approved: bool) -> bool:
        raise NotImplementedError

    def count_by_role(self, role: Role, *, approved: Optional[bool] = None) -> int:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Gender, Role


@dataclass(frozen=True)
class Member:
    """Domain entity: a volunteer (or admin) account with its profile.

    Note: role is a single column, so a member never holds two roles at once.
    """

    member_id: int
    name: str
    username: str
    password_hash: str
    gender: Gender
    role: Role
    approved: bool = False

    def is_eligible(self, *, require_approval: bool = True) -> bool:
        """Can receive and work on weekly assignments."""
        return self.role == Role.MEMBER and (self.approved or not require_approval)


@dataclass(frozen=True)
class MemberProfile:
    """Read-model used by the assignment generator."""

    member_id: int
    name: str
    gender: Gender
    approved: bool

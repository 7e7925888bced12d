from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import capitalize_name, require_gender, require_min_length, require_non_empty
from ..core.enums import Gender, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import Member
from .repository import MemberRepository


@dataclass(frozen=True)
class SessionMember:
    """What we store into Flask session after login."""

    member_id: int
    name: str
    role: Role
    gender: Gender
    approved: bool


class AuthService:
    """Use case: sign in and sign up."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def authenticate(self, username: str, password: str) -> SessionMember:
        member = self._members.get_by_username((username or "").strip())
        if not member:
            raise AuthenticationError("Invalid username or password.")

        try:
            ok = check_password_hash(member.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password.")

        return SessionMember(
            member_id=member.member_id,
            name=member.name,
            role=member.role,
            gender=member.gender,
            approved=member.approved,
        )

    def sign_up(self, *, name: str, username: str, password: str, gender: str) -> int:
        """New accounts start as pending and unapproved until an admin approves them."""
        name = capitalize_name(require_non_empty(name, "Name"))
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", 6)
        member_gender = require_gender(gender)

        if self._members.get_by_username(username):
            raise ValidationError("Username already exists.")

        return self._members.create_member(
            name=name,
            username=username,
            password_hash=generate_password_hash(password),
            gender=member_gender,
            role=Role.PENDING,
            approved=False,
        )


class MemberService:
    """Use case: admin approves or rejects volunteer accounts."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def _get_target(self, current_role: Role, member_id: int) -> Member:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission.")

        member = self._members.get_by_id(int(member_id))
        if not member:
            raise ValidationError("Member not found.")
        if member.role == Role.ADMIN:
            raise ValidationError("Admin accounts cannot be changed here.")
        return member

    def approve(self, *, current_role: Role, member_id: int) -> None:
        member = self._get_target(current_role, member_id)
        if member.is_eligible():
            raise ValidationError("Member is already approved.")
        if not self._members.set_role(member.member_id, role=Role.MEMBER, approved=True):
            raise ValidationError("Approving the member failed.")

    def reject(self, *, current_role: Role, member_id: int) -> None:
        """Send the account back to pending; it stops receiving assignments."""
        member = self._get_target(current_role, member_id)
        if not self._members.set_role(member.member_id, role=Role.PENDING, approved=False):
            raise ValidationError("Rejecting the member failed.")

    def get_member(self, member_id: int) -> Member:
        member = self._members.get_by_id(int(member_id))
        if not member:
            raise ValidationError("Member not found.")
        return member

    def list_pending(self):
        return self._members.list_by_role(Role.PENDING)

    def list_members(self):
        return self._members.list_by_role(Role.MEMBER)

    def count_approved(self) -> int:
        return self._members.count_by_role(Role.MEMBER, approved=True)

    def count_pending(self) -> int:
        return self._members.count_by_role(Role.PENDING)

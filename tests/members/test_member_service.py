from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from src.followup_system.followup_system.core.enums import Gender, Role
from src.followup_system.followup_system.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)
from src.followup_system.followup_system.members.service import AuthService, MemberService
from tests.fakes import InMemoryMembers, member


@pytest.fixture
def members():
    return InMemoryMembers(
        [
            member(1, role=Role.ADMIN, password_hash=generate_password_hash("admin123"), username="admin"),
            member(2, Gender.FEMALE, role=Role.PENDING, approved=False),
            member(3),
        ]
    )


def test_sign_up_creates_pending_account(members):
    auth = AuthService(members)

    member_id = auth.sign_up(name="  mARINA   youssef ", username="marina", password="secret1", gender="female")

    created = members.get_by_id(member_id)
    assert created.name == "Marina Youssef"
    assert created.role == Role.PENDING
    assert created.approved is False
    assert created.gender == Gender.FEMALE
    assert created.password_hash != "secret1"


def test_sign_up_rejects_duplicate_username(members):
    with pytest.raises(ValidationError, match="already exists"):
        AuthService(members).sign_up(name="Other", username="admin", password="secret1", gender="male")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "username": "x", "password": "secret1", "gender": "male"},
        {"name": "X", "username": "x", "password": "123", "gender": "male"},
        {"name": "X", "username": "x", "password": "secret1", "gender": ""},
    ],
)
def test_sign_up_validates_input(members, kwargs):
    with pytest.raises(ValidationError):
        AuthService(members).sign_up(**kwargs)


def test_authenticate(members):
    s = AuthService(members).authenticate("admin", "admin123")
    assert s.member_id == 1
    assert s.role == Role.ADMIN


def test_authenticate_wrong_password_raises(members):
    with pytest.raises(AuthenticationError):
        AuthService(members).authenticate("admin", "wrong")


def test_authenticate_with_placeholder_hash_raises(members):
    # member2 has the placeholder hash "x"
    with pytest.raises(AuthenticationError):
        AuthService(members).authenticate("member2", "x")


def test_approve_makes_member_eligible(members):
    MemberService(members).approve(current_role=Role.ADMIN, member_id=2)

    approved = members.get_by_id(2)
    assert approved.role == Role.MEMBER
    assert approved.approved
    assert approved.is_eligible()


def test_reject_moves_member_back_to_pending(members):
    svc = MemberService(members)
    svc.reject(current_role=Role.ADMIN, member_id=3)

    rejected = members.get_by_id(3)
    assert rejected.role == Role.PENDING
    assert not rejected.approved
    assert svc.count_pending() == 2
    assert svc.count_approved() == 0


def test_approval_requires_admin(members):
    with pytest.raises(AuthorizationError):
        MemberService(members).approve(current_role=Role.MEMBER, member_id=2)


def test_admin_accounts_cannot_be_rejected(members):
    with pytest.raises(ValidationError):
        MemberService(members).reject(current_role=Role.ADMIN, member_id=1)


def test_approving_twice_is_rejected(members):
    with pytest.raises(ValidationError, match="already approved"):
        MemberService(members).approve(current_role=Role.ADMIN, member_id=3)


def test_lists(members):
    svc = MemberService(members)
    assert [m.member_id for m in svc.list_pending()] == [2]
    assert [m.member_id for m in svc.list_members()] == [3]

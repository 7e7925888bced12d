from __future__ import annotations

import random

import pytest
from werkzeug.security import generate_password_hash

from src.followup_system.followup_system.container import build_services
from src.followup_system.followup_system.core.enums import Gender, Role
from src.followup_system.followup_system.main import create_app
from tests.fakes import InMemoryAssignments, InMemoryAttendance, InMemoryMembers, InMemoryPeople, member, person


@pytest.fixture
def repos():
    people = InMemoryPeople([person(1), person(2), person(3, Gender.FEMALE)])
    members = InMemoryMembers(
        [
            member(1, role=Role.ADMIN, password_hash=generate_password_hash("admin123"), username="admin"),
            member(2),
            member(3, Gender.FEMALE),
            member(4, role=Role.PENDING, approved=False),
        ]
    )
    return {
        "people_repo": people,
        "members_repo": members,
        "attendance_repo": InMemoryAttendance(people),
        "assignments_repo": InMemoryAssignments(people),
    }


@pytest.fixture
def app(monkeypatch, repos):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(**repos, rng=random.Random(1))
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


def sign_in_as(client, member_id: int, role: Role):
    with client.session_transaction() as s:
        s["member_id"] = member_id
        s["name"] = f"Member {member_id}"
        s["role"] = role.value


def test_login_page_renders(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Sign in" in resp.data


def test_admin_pages_require_login(client):
    resp = client.get("/admin")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_login_redirects_to_dashboard(client):
    resp = client.post("/", data={"username": "admin", "password": "admin123"})
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/dashboard")


def test_wrong_password_stays_on_login(client):
    resp = client.post("/", data={"username": "admin", "password": "nope"})
    assert resp.status_code == 200
    assert b"Invalid username or password." in resp.data


def test_admin_dashboard_shows_stats(client):
    sign_in_as(client, 1, Role.ADMIN)
    resp = client.get("/admin")
    assert resp.status_code == 200
    assert b"Generate weekly assignment" in resp.data
    assert b"https://wa.me/20" in resp.data


def test_member_cannot_open_admin_pages(client):
    sign_in_as(client, 2, Role.MEMBER)
    resp = client.get("/admin")
    assert resp.status_code == 403


def test_pending_member_sees_pending_page(client):
    sign_in_as(client, 4, Role.PENDING)
    resp = client.get("/dashboard")
    assert resp.status_code == 200
    assert b"pending admin approval" in resp.data


def test_generate_then_member_completes(client, repos):
    sign_in_as(client, 1, Role.ADMIN)
    resp = client.post("/admin/assignments/generate")
    assert resp.status_code == 302
    rows = list(repos["assignments_repo"].rows.values())
    assert len(rows) == 3

    mine = next(a for a in rows if a.member_id == 3)
    sign_in_as(client, 3, Role.MEMBER)
    page = client.get("/dashboard")
    assert page.status_code == 200
    assert b"Person 03" in page.data

    resp = client.post(f"/assignments/{mine.assignment_id}/complete")
    assert resp.status_code == 302
    assert repos["assignments_repo"].get_by_id(mine.assignment_id).completed


def test_member_marks_assigned_person_present(client, repos):
    sign_in_as(client, 1, Role.ADMIN)
    client.post("/admin/assignments/generate")

    sign_in_as(client, 3, Role.MEMBER)
    client.post("/people/3/present")
    client.post("/people/1/present")  # not on this member's list

    assert repos["people_repo"].get_by_id(3).last_attendance_date is not None
    assert repos["people_repo"].get_by_id(1).last_attendance_date is None


def test_add_person_form_shows_inline_errors(client, repos):
    sign_in_as(client, 1, Role.ADMIN)
    resp = client.post("/admin/people/add", data={"name": "x", "phone": "123", "gender": "male"})
    assert resp.status_code == 200
    assert b"Egyptian number must start with 01." in resp.data
    assert len(repos["people_repo"].people) == 3


def test_role_only_member_sees_list_when_approval_not_required(monkeypatch, repos):
    repos["members_repo"].members[3] = member(3, Gender.FEMALE, approved=False)
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(**repos, require_approval=False, rng=random.Random(1))
    client = create_app(container).test_client()

    sign_in_as(client, 1, Role.ADMIN)
    client.post("/admin/assignments/generate")
    sign_in_as(client, 3, Role.MEMBER)
    page = client.get("/dashboard")

    assert page.status_code == 200
    assert b"WhatsApp" in page.data
    assert b"pending admin approval" not in page.data


def test_rejected_member_with_live_session_cannot_act(client, repos):
    sign_in_as(client, 1, Role.ADMIN)
    client.post("/admin/assignments/generate")
    mine = next(a for a in repos["assignments_repo"].rows.values() if a.member_id == 2)

    sign_in_as(client, 2, Role.MEMBER)
    repos["members_repo"].set_role(2, role=Role.PENDING, approved=False)

    client.post(f"/assignments/{mine.assignment_id}/complete")
    client.post(f"/people/{mine.person_id}/present")

    assert not repos["assignments_repo"].get_by_id(mine.assignment_id).completed
    assert repos["people_repo"].get_by_id(mine.person_id).last_attendance_date is None

from __future__ import annotations

from dataclasses import dataclass

from .assignments.factory import RegenerationStrategyFactory
from .assignments.mysql_assignment_repository import MySQLAssignmentRepository
from .assignments.service import AssignmentService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import parse_weekday
from .core.constants import DEFAULT_UNDO_GRACE_SECONDS, DEFAULT_WEEK_START_DAY
from .core.enums import RegenerationPolicy
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .members.service import AuthService, MemberService
from .people.mysql_people_repository import MySQLPeopleRepository
from .people.service import PeopleService


@dataclass(frozen=True)
class Container:
    people_repo: object
    members_repo: object
    attendance_repo: object
    assignments_repo: object

    auth_service: AuthService
    member_service: MemberService
    people_service: PeopleService
    attendance_service: AttendanceService
    assignment_service: AssignmentService


def build_services(
    *,
    people_repo,
    members_repo,
    attendance_repo,
    assignments_repo,
    week_start_day: str | int = DEFAULT_WEEK_START_DAY,
    regeneration_policy: str = RegenerationPolicy.STRICT.value,
    require_approval: bool = True,
    undo_grace_seconds: int = DEFAULT_UNDO_GRACE_SECONDS,
    rng=None,
) -> Container:
    """Wire services on top of any repositories (MySQL in the app, in-memory fakes in tests)."""
    anchor = parse_weekday(week_start_day)

    return Container(
        people_repo=people_repo,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        assignments_repo=assignments_repo,
        auth_service=AuthService(members_repo),
        member_service=MemberService(members_repo),
        people_service=PeopleService(people_repo),
        attendance_service=AttendanceService(attendance_repo, people_repo, members_repo, anchor_weekday=anchor),
        assignment_service=AssignmentService(
            assignments_repo,
            people_repo,
            members_repo,
            policy=regeneration_policy,
            strategy_factory=RegenerationStrategyFactory(),
            anchor_weekday=anchor,
            require_approval=require_approval,
            undo_grace_seconds=undo_grace_seconds,
            rng=rng,
        ),
    )


def build_container(*, db_config: dict, **options) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        people_repo=MySQLPeopleRepository(conn),
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        assignments_repo=MySQLAssignmentRepository(conn),
        **options,
    )

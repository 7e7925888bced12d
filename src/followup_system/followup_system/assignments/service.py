from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local, week_start
from ..core.constants import DEFAULT_UNDO_GRACE_SECONDS
from ..core.enums import Gender, RegenerationPolicy, Role
from ..core.exceptions import (
    AuthorizationError,
    NoMemberProfilesError,
    NoMembersError,
    NoPeopleError,
    UndoWindowExpiredError,
    ValidationError,
)
from ..members.model import Member
from ..members.repository import MemberRepository
from ..people.repository import PeopleRepository
from .factory import RegenerationStrategyFactory
from .generator import distribute
from .model import WeeklyAssignment
from .repository import AssignmentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    week_start: date
    created: int
    per_member: dict[int, int] = field(default_factory=dict)
    unassigned: dict[Gender, int] = field(default_factory=dict)
    replaced: int = 0

    @property
    def skipped_people(self) -> int:
        return sum(self.unassigned.values())


class AssignmentService:
    """Use case: generate the weekly visitation list and let members work through it."""

    def __init__(
        self,
        assignments: AssignmentRepository,
        people: PeopleRepository,
        members: MemberRepository,
        *,
        policy: RegenerationPolicy | str = RegenerationPolicy.STRICT,
        strategy_factory: RegenerationStrategyFactory | None = None,
        anchor_weekday: int = 5,
        require_approval: bool = True,
        undo_grace_seconds: int = DEFAULT_UNDO_GRACE_SECONDS,
        rng: Optional[random.Random] = None,
    ):
        self._assignments = assignments
        self._people = people
        self._members = members
        self._factory = strategy_factory or RegenerationStrategyFactory()
        self._strategy = self._factory.for_policy(policy)
        self._anchor_weekday = int(anchor_weekday)
        self._require_approval = bool(require_approval)
        self._undo_grace = timedelta(seconds=int(undo_grace_seconds))
        self._rng = rng

    def current_week_start(self, today: Optional[date] = None) -> date:
        return week_start(today or now_local().date(), self._anchor_weekday)

    def generate(self, *, current_role: Role, today: Optional[date] = None) -> GenerationResult:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission.")

        start = self.current_week_start(today)
        existing = self._assignments.exists_for_week(start)
        self._strategy.before_generate(week_start=start, existing=existing)

        people = self._people.list_all()
        if not people:
            raise NoPeopleError()

        member_ids = self._members.list_member_ids(Role.MEMBER)
        if not member_ids:
            raise NoMembersError()

        approved = True if self._require_approval else None
        profiles = self._members.list_profiles(member_ids, approved=approved)
        if not profiles:
            raise NoMemberProfilesError()

        dist = distribute(people, profiles, week_start=start, rng=self._rng)
        for gender, count in dist.unassigned.items():
            logger.warning(
                "No eligible %s members for week %s; %d %s people left unassigned",
                gender.value, start, count, gender.value,
            )

        replaced = self._strategy.clear_existing(assignments=self._assignments, week_start=start, existing=existing)
        if replaced:
            logger.info("Replaced %d existing assignments for week %s", replaced, start)

        created = self._assignments.bulk_insert(dist.records)
        logger.info("Generated %d assignments for week %s across %d members", created, start, len(profiles))

        return GenerationResult(
            week_start=start,
            created=created,
            per_member=dict(Counter(r.member_id for r in dist.records)),
            unassigned=dict(dist.unassigned),
            replaced=replaced,
        )

    def list_for_week(self, *, today: Optional[date] = None):
        return self._assignments.list_for_week(self.current_week_start(today))

    def list_for_member(self, member_id: int, *, today: Optional[date] = None):
        return self._assignments.list_for_member(member_id=int(member_id), week_start=self.current_week_start(today))

    def is_eligible(self, member: Member) -> bool:
        return member.is_eligible(require_approval=self._require_approval)

    def _require_eligible(self, member_id: int) -> None:
        # Account state is read fresh on every call, never from the session.
        member = self._members.get_by_id(int(member_id))
        if not member or not self.is_eligible(member):
            raise AuthorizationError("Your account is not approved for assignments.")

    def _get_owned(self, member_id: int, assignment_id: int) -> WeeklyAssignment:
        self._require_eligible(member_id)
        assignment = self._assignments.get_by_id(int(assignment_id))
        if not assignment:
            raise ValidationError("Assignment not found.")
        if assignment.member_id != int(member_id):
            raise AuthorizationError("This assignment belongs to another member.")
        return assignment

    def complete(self, *, member_id: int, assignment_id: int, now: Optional[datetime] = None) -> WeeklyAssignment:
        now = now or now_local()
        assignment = self._get_owned(member_id, assignment_id)
        if assignment.completed:
            raise ValidationError("Assignment is already completed.")

        deadline = now + self._undo_grace
        if not self._assignments.mark_completed(
            assignment_id=assignment.assignment_id, completed_at=now, undo_deadline=deadline
        ):
            raise ValidationError("Assignment is already completed.")
        return self._assignments.get_by_id(assignment.assignment_id) or assignment

    def undo(self, *, member_id: int, assignment_id: int, now: Optional[datetime] = None) -> None:
        now = now or now_local()
        assignment = self._get_owned(member_id, assignment_id)
        if not assignment.completed:
            raise ValidationError("Assignment is not completed.")
        if not assignment.can_undo(now):
            raise UndoWindowExpiredError()

        # The store re-checks the deadline; a False here means it passed in between.
        if not self._assignments.clear_completion(assignment_id=assignment.assignment_id, now=now):
            raise UndoWindowExpiredError()

    def require_assigned(self, *, member_id: int, person_id: int, today: Optional[date] = None) -> None:
        self._require_eligible(member_id)
        assigned = self.list_for_member(member_id, today=today)
        if not any(ap.assignment.person_id == int(person_id) for ap in assigned):
            raise AuthorizationError("This person is not on your list this week.")

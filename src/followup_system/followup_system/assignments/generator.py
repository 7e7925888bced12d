"""Weekly visitation distribution.

People and members are split by gender. Within a gender the people are
shuffled and dealt out round-robin, so each member ends up with either
floor(N/M) or ceil(N/M) people.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence, TypeVar

from ..core.enums import Gender
from ..members.model import MemberProfile
from ..people.model import Person
from .model import NewAssignment

T = TypeVar("T")


@dataclass(frozen=True)
class Distribution:
    records: list[NewAssignment]
    # gender -> number of people left without a member of that gender
    unassigned: dict[Gender, int] = field(default_factory=dict)


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Uniformly shuffled copy of ``items`` (Fisher-Yates); the input is left untouched."""
    out = list(items)
    (rng or random).shuffle(out)
    return out


def round_robin(person_ids: Sequence[int], member_ids: Sequence[int], *, week_start: date) -> list[NewAssignment]:
    if not member_ids:
        return []
    return [
        NewAssignment(member_id=member_ids[i % len(member_ids)], person_id=pid, week_start=week_start)
        for i, pid in enumerate(person_ids)
    ]


def distribute(
    people: Sequence[Person],
    members: Sequence[MemberProfile],
    *,
    week_start: date,
    rng: Optional[random.Random] = None,
) -> Distribution:
    records: list[NewAssignment] = []
    unassigned: dict[Gender, int] = {}

    for gender in Gender:
        group = [p.person_id for p in people if p.gender == gender]
        servants = [m.member_id for m in members if m.gender == gender]
        if not group:
            continue
        if not servants:
            unassigned[gender] = len(group)
            continue
        records.extend(round_robin(shuffled(group, rng), servants, week_start=week_start))

    return Distribution(records=records, unassigned=unassigned)

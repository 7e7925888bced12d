from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Single role per member account, used for access control."""

    PENDING = "pending"
    MEMBER = "member"
    ADMIN = "admin"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class RegenerationPolicy(str, Enum):
    """What to do when assignments already exist for the requested week."""

    STRICT = "strict"
    OVERWRITE = "overwrite"

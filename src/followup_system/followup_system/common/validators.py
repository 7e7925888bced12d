from __future__ import annotations

import re
from typing import Optional

from ..core.enums import Gender
from ..core.exceptions import ValidationError

_NON_DIGITS = re.compile(r"\D")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required.")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters.")
    return value


def validate_phone(phone: str) -> Optional[str]:
    """Return an error message for an invalid phone number, ``None`` when valid.

    Numbers starting with ``+`` are treated as international and only need
    ten digits after the plus sign. Anything else must be an Egyptian mobile
    number: eleven digits starting with ``01``.
    """
    trimmed = (phone or "").strip()
    if not trimmed:
        return "Phone number is required."

    if trimmed.startswith("+"):
        digits = _NON_DIGITS.sub("", trimmed[1:])
        if len(digits) < 10:
            return "International number must have at least 10 digits after +."
        return None

    digits = _NON_DIGITS.sub("", trimmed)
    if digits != trimmed:
        return "Only digits allowed (or start with + for international)."
    if not digits.startswith("01"):
        return "Egyptian number must start with 01."
    if len(digits) != 11:
        return "Egyptian mobile number must be exactly 11 digits."
    return None


def require_valid_phone(phone: str) -> str:
    error = validate_phone(phone)
    if error:
        raise ValidationError(error)
    return phone.strip()


def capitalize_name(name: str) -> str:
    return " ".join(w[:1].upper() + w[1:].lower() for w in (name or "").split())


def require_gender(value: str | Gender) -> Gender:
    try:
        return Gender(str(getattr(value, "value", value) or "").strip().lower())
    except ValueError:
        raise ValidationError("Gender must be male or female.")

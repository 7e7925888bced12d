from __future__ import annotations

import pytest

from src.followup_system.followup_system.common.validators import (
    capitalize_name,
    require_gender,
    require_valid_phone,
    validate_phone,
)
from src.followup_system.followup_system.common.whatsapp import format_egyptian_phone, get_whatsapp_url
from src.followup_system.followup_system.core.enums import Gender
from src.followup_system.followup_system.core.exceptions import ValidationError


@pytest.mark.parametrize("phone", ["01012345678", "01123456789", "01234567890", "01598765432", "  01012345678  "])
def test_valid_egyptian_numbers(phone):
    assert validate_phone(phone) is None


@pytest.mark.parametrize("phone", ["+201012345678", "+44 7700 900123", "+1-555-123-4567"])
def test_valid_international_numbers(phone):
    assert validate_phone(phone) is None


@pytest.mark.parametrize(
    "phone, message",
    [
        ("", "Phone number is required."),
        ("   ", "Phone number is required."),
        ("+12345", "International number must have at least 10 digits after +."),
        ("0101234567a", "Only digits allowed (or start with + for international)."),
        ("010 1234 5678", "Only digits allowed (or start with + for international)."),
        ("02012345678", "Egyptian number must start with 01."),
        ("0101234567", "Egyptian mobile number must be exactly 11 digits."),
        ("010123456789", "Egyptian mobile number must be exactly 11 digits."),
    ],
)
def test_invalid_numbers_report_reason(phone, message):
    assert validate_phone(phone) == message


@pytest.mark.parametrize("phone", ["abc", "01-012345678", "0101234567x", "(010)12345678"])
def test_any_non_digit_without_plus_is_rejected(phone):
    assert validate_phone(phone) is not None


def test_require_valid_phone_raises_with_message():
    with pytest.raises(ValidationError, match="must start with 01"):
        require_valid_phone("09012345678")
    assert require_valid_phone(" 01012345678 ") == "01012345678"


def test_capitalize_name():
    assert capitalize_name("  jOHN   smith ") == "John Smith"
    assert capitalize_name("mINA") == "Mina"
    assert capitalize_name("   ") == ""


def test_require_gender():
    assert require_gender("Female ") == Gender.FEMALE
    assert require_gender(Gender.MALE) == Gender.MALE
    with pytest.raises(ValidationError):
        require_gender("other")


def test_format_egyptian_phone():
    assert format_egyptian_phone("01012345678") == "201012345678"
    assert format_egyptian_phone("+20 101 234 5678") == "201012345678"
    assert format_egyptian_phone("1012345678") == "201012345678"


def test_whatsapp_url():
    assert get_whatsapp_url("01012345678") == "https://wa.me/201012345678"

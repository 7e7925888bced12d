from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import capitalize_name, require_gender, validate_phone
from ..core.enums import Gender
from ..core.exceptions import ValidationError
from .model import Person
from .repository import PeopleRepository


@dataclass(frozen=True)
class PersonForm:
    """Validated form input, ready to be stored."""

    name: str
    phone: str
    gender: Gender


class PeopleService:
    """Use case: admin manages the follow-up roster."""

    def __init__(self, people: PeopleRepository):
        self._people = people

    @staticmethod
    def validate_form(*, name: str, phone: str, gender: str) -> tuple[Optional[PersonForm], dict[str, str]]:
        """Return the cleaned form or a field -> message map for inline errors."""
        errors: dict[str, str] = {}

        clean_name = capitalize_name(name or "")
        if not clean_name:
            errors["name"] = "Name is required."

        phone_error = validate_phone(phone or "")
        if phone_error:
            errors["phone"] = phone_error

        clean_gender = None
        try:
            clean_gender = require_gender(gender)
        except ValidationError as e:
            errors["gender"] = str(e)

        if errors:
            return None, errors
        return PersonForm(name=clean_name, phone=phone.strip(), gender=clean_gender), {}

    def _require_form(self, *, name: str, phone: str, gender: str) -> PersonForm:
        form, errors = self.validate_form(name=name, phone=phone, gender=gender)
        if errors:
            raise ValidationError(" ".join(errors.values()))
        return form

    def list_people(self, *, search: Optional[str] = None):
        search = (search or "").strip() or None
        return self._people.list_all(search=search)

    def get_person(self, person_id: int) -> Person:
        person = self._people.get_by_id(int(person_id))
        if not person:
            raise ValidationError("Person not found.")
        return person

    def add_person(self, *, name: str, phone: str, gender: str) -> int:
        form = self._require_form(name=name, phone=phone, gender=gender)
        return self._people.create(name=form.name, phone=form.phone, gender=form.gender)

    def update_person(self, *, person_id: int, name: str, phone: str, gender: str) -> None:
        form = self._require_form(name=name, phone=phone, gender=gender)
        if not self._people.update(person_id=int(person_id), name=form.name, phone=form.phone, gender=form.gender):
            raise ValidationError("Person not found.")

    def delete_person(self, person_id: int) -> None:
        if not self._people.delete(int(person_id)):
            raise ValidationError("Person not found.")

"""Domain records carrying phone numbers: ContactCard and AccountProfile."""

from dataclasses import dataclass

from phonecodec.domain.optional_value import optional_field
from phonecodec.domain.phone_number import PhoneNumber
from phonecodec.domain.record import JsonRecord
from phonecodec.domain.validatable import require, require_not_blank

# Max length for free-text fields.
BIO_MAX_LENGTH = 2000
NAME_MAX_LENGTH = 500


def _require_parsed(phone_number: PhoneNumber | None, message: str) -> None:
    require(phone_number is not None, f"{message}: missing, expected PhoneNumber.absent()")
    require(not phone_number.has_absent_raw(), message)


@dataclass(frozen=True)
class ContactCard(JsonRecord):
    """
    A contact as exchanged over JSON: a name and an optional phone number.
    phone_number is never None once decoded; a missing one is PhoneNumber.absent().
    """

    name: str
    phone_number: PhoneNumber = optional_field()

    def validate(self) -> None:
        require_not_blank(self.name, "Name is required")
        require(
            len(self.name) <= NAME_MAX_LENGTH,
            f"Name must be at most {NAME_MAX_LENGTH} chars",
        )
        _require_parsed(self.phone_number, "Invalid phone number")


@dataclass(frozen=True)
class AccountProfile(ContactCard):
    """Profile of an account owner: a contact card with a work phone and a bio."""

    work_phone: PhoneNumber = optional_field()
    bio: str | None = None

    def validate(self) -> None:
        super().validate()
        _require_parsed(self.work_phone, "Invalid work phone number")
        if self.bio is not None:
            require(
                len(self.bio) <= BIO_MAX_LENGTH,
                f"Bio must be at most {BIO_MAX_LENGTH} chars",
            )

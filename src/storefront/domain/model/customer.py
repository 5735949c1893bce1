"""User and Address.

A User owns a book of addresses; exactly one of them is the default
whenever the book is non-empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError


@dataclass
class User:
    id: int | None
    name: str
    email: str

    @staticmethod
    def create(name: str, email: str) -> User:
        if not name or not name.strip():
            raise ValidationError("User name is required")
        if not email or "@" not in email:
            raise ValidationError(f"Invalid e-mail address: {email!r}")
        return User(id=None, name=name.strip(), email=email.strip().lower())


@dataclass(frozen=True)
class AddressFields:
    """The caller-editable part of an address."""

    name: str
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    phone: str

    def validate(self) -> None:
        missing = [
            label
            for label, value in (
                ("name", self.name),
                ("street", self.street),
                ("city", self.city),
                ("state", self.state),
                ("postal_code", self.postal_code),
                ("country", self.country),
                ("phone", self.phone),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise ValidationError(
                f"All address fields are required (missing: {', '.join(missing)})"
            )


@dataclass
class Address:
    """A shipping address.

    ``is_default`` is read-only from the outside: it is changed only by the
    singleton flag maintainer, never by a plain field update.
    """

    id: int | None
    user_id: int
    fields: AddressFields
    is_default: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(user_id: int, fields: AddressFields) -> Address:
        fields.validate()
        return Address(id=None, user_id=user_id, fields=fields)

    def edit(self, fields: AddressFields) -> None:
        fields.validate()
        self.fields = fields
        self.updated_at = datetime.now(timezone.utc)

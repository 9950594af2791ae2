"""User aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError


@dataclass
class User:
    """A customer who can place orders.

    Email uniqueness spans the whole collection, so it is checked by the
    application handlers against the entity store rather than here.
    """

    id: int | None
    name: str
    email: str
    age: int | None = None
    city: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        email: str,
        age: int | None = None,
        city: str | None = None,
    ) -> User:
        if not name or not name.strip():
            raise ValidationError("Name and email are required")
        if not email or not email.strip():
            raise ValidationError("Name and email are required")
        return User(id=None, name=name.strip(), email=email.strip(), age=age, city=city)

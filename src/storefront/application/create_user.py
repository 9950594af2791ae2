"""Application service: Create User use case."""

from __future__ import annotations

import logging

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.exceptions import ConflictError
from storefront.domain.model.user import User

logger = logging.getLogger(__name__)


class CreateUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        email: str,
        age: int | None = None,
        city: str | None = None,
    ) -> User:
        """Register a user; the email must not belong to anyone else."""
        user = User.create(name=name, email=email, age=age, city=city)

        with self._uow.write() as store:
            if store.find_user_by_email(user.email) is not None:
                raise ConflictError(f"Email '{user.email}' is already registered")
            store.add_user(user)

        logger.info("Created user #%s", user.id)
        return user

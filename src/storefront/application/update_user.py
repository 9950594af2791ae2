"""Application service: Update User use case.

Only the fields present on the patch change. Empty ``name``/``email``
values are ignored rather than stored; ``age`` and ``city`` may be
cleared by supplying ``None``.
"""

from __future__ import annotations

import logging

from storefront.application.dto import UserPatch
from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.exceptions import ConflictError
from storefront.domain.model.user import User
from storefront.domain.service.catalog_resolver import CatalogResolver

logger = logging.getLogger(__name__)


class UpdateUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, patch: UserPatch) -> User:
        changes = patch.supplied()

        with self._uow.write() as store:
            user = CatalogResolver(store).require_user(user_id)

            email = (changes.get("email") or "").strip()
            if email:
                owner = store.find_user_by_email(email)
                if owner is not None and owner.id != user_id:
                    raise ConflictError(
                        f"Email '{email}' is already in use by another user"
                    )
                user.email = email

            name = (changes.get("name") or "").strip()
            if name:
                user.name = name
            if "age" in changes:
                user.age = changes["age"]
            if "city" in changes:
                user.city = changes["city"]

        logger.info("Updated user #%s (%s)", user_id, ", ".join(sorted(changes)) or "no fields")
        return user

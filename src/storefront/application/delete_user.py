"""Application service: Delete User use case.

Orders that reference the user are kept; their enriched views show no
user summary afterwards.
"""

from __future__ import annotations

import logging

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.model.user import User
from storefront.domain.service.catalog_resolver import CatalogResolver

logger = logging.getLogger(__name__)


class DeleteUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int) -> User:
        with self._uow.write() as store:
            user = CatalogResolver(store).require_user(user_id)
            store.remove_user(user_id)

        logger.info("Deleted user #%s", user_id)
        return user

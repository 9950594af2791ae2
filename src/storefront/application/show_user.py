"""Application service: Show/List Users use cases (queries)."""

from __future__ import annotations

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.model.user import User
from storefront.domain.service.catalog_resolver import CatalogResolver


class ShowUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int) -> User:
        return CatalogResolver(self._uow.read()).require_user(user_id)


class ListUsersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[User]:
        return list(self._uow.read().users)

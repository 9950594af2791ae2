"""EntityStore — the in-memory snapshot of the whole document.

One EntityStore lives for exactly one load/mutate/save cycle. Handlers
look entities up, mutate them in place, insert and remove them; the
repository then persists the store as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User


class _Identified(Protocol):
    id: int | None


E = TypeVar("E", bound=_Identified)


def next_id(collection: list) -> int:
    """One past the highest id present, or 1 for an empty collection."""
    ids = [entity.id for entity in collection if entity.id is not None]
    return max(ids) + 1 if ids else 1


@dataclass
class EntityStore:

    users: list[User] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)

    # --- Lookup ---------------------------------------------------------------

    def get_user(self, user_id: int) -> User | None:
        return _find(self.users, user_id)

    def get_product(self, product_id: int) -> Product | None:
        return _find(self.products, product_id)

    def get_order(self, order_id: int) -> Order | None:
        return _find(self.orders, order_id)

    def find_user_by_email(self, email: str) -> User | None:
        for user in self.users:
            if user.email == email:
                return user
        return None

    # --- Insert ---------------------------------------------------------------
    # Ids are allocated against the collection as it is at insertion time,
    # so several inserts in one cycle never collide.

    def add_user(self, user: User) -> User:
        return _insert(self.users, user)

    def add_product(self, product: Product) -> Product:
        return _insert(self.products, product)

    def add_order(self, order: Order) -> Order:
        return _insert(self.orders, order)

    # --- Remove ---------------------------------------------------------------

    def remove_user(self, user_id: int) -> User | None:
        return _remove(self.users, user_id)

    def remove_product(self, product_id: int) -> Product | None:
        return _remove(self.products, product_id)

    def remove_order(self, order_id: int) -> Order | None:
        return _remove(self.orders, order_id)


def _find(collection: list[E], entity_id: int) -> E | None:
    for entity in collection:
        if entity.id == entity_id:
            return entity
    return None


def _insert(collection: list[E], entity: E) -> E:
    entity.id = next_id(collection)
    collection.append(entity)
    return entity


def _remove(collection: list[E], entity_id: int) -> E | None:
    for i, entity in enumerate(collection):
        if entity.id == entity_id:
            return collection.pop(i)
    return None

"""JSON-file-backed implementation of DocumentRepository."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import DomainException, PersistenceError
from storefront.domain.model.entity_store import EntityStore
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class JsonDocumentRepository(DocumentRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- DocumentRepository interface -----------------------------------------

    def load(self) -> EntityStore:
        """Read the whole document.

        A missing or unparseable file yields an empty store. A file that
        parses but holds a record that cannot be rehydrated raises
        PersistenceError, so no write can replace it with a partial store.
        """
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.info("No document at %s; starting empty", self._file_path)
            return EntityStore()
        except (OSError, ValueError) as exc:
            logger.warning("Could not parse %s (%s); starting empty", self._file_path, exc)
            return EntityStore()
        if not isinstance(raw, dict):
            logger.warning("%s does not hold a document object; starting empty", self._file_path)
            return EntityStore()

        try:
            return self._to_domain(raw)
        except (
            ValueError, ArithmeticError, AttributeError, KeyError, TypeError, DomainException,
        ) as exc:
            logger.error("Unreadable record in %s: %s", self._file_path, exc)
            raise PersistenceError(
                f"The document at {self._file_path} holds an unreadable record ({exc})"
            ) from exc

    def save(self, store: EntityStore) -> bool:
        """Write the document to a temp file and atomically swap it in."""
        payload = json.dumps(self._to_raw(store), indent=2) + "\n"
        tmp_name = None
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            logger.error("Could not write %s: %s", self._file_path, exc)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(store: EntityStore) -> dict:
        return {
            "users": [
                {
                    "id": u.id,
                    "name": u.name,
                    "email": u.email,
                    "age": u.age,
                    "city": u.city,
                    "created_at": u.created_at.isoformat(),
                }
                for u in store.users
            ],
            "products": [
                {
                    "id": p.id,
                    "name": p.name,
                    "description": p.description,
                    "price": _money_to_raw(p.price),
                    "category": p.category,
                    "stock": p.stock,
                    "created_at": p.created_at.isoformat(),
                }
                for p in store.products
            ],
            "orders": [
                {
                    "id": o.id,
                    "user_id": o.user_id,
                    "products": [
                        {"product_id": item.product_id, "quantity": item.quantity.value}
                        for item in o.items
                    ],
                    "total": _money_to_raw(o.total),
                    "status": o.status.value,
                    "created_at": o.created_at.isoformat(),
                }
                for o in store.orders
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> EntityStore:
        users = [
            User(
                id=_as_int(u["id"]),
                name=u["name"],
                email=u["email"],
                age=u.get("age"),
                city=u.get("city"),
                created_at=_parse_timestamp(u.get("created_at")),
            )
            for u in raw.get("users", [])
        ]
        products = [
            Product(
                id=_as_int(p["id"]),
                name=p["name"],
                price=Money(Decimal(str(p["price"]))),
                category=p.get("category", ""),
                description=p.get("description") or "",
                stock=_as_int(p.get("stock") or 0),
                created_at=_parse_timestamp(p.get("created_at")),
            )
            for p in raw.get("products", [])
        ]
        orders = [
            Order(
                id=_as_int(o["id"]),
                user_id=_as_int(o["user_id"]),
                items=[
                    OrderLineItem(
                        product_id=_as_int(i["product_id"]),
                        quantity=Quantity(_as_int(i["quantity"])),
                    )
                    for i in o.get("products", [])
                ],
                total=Money(Decimal(str(o["total"]))),
                status=OrderStatus(o.get("status", OrderStatus.PENDING.value)),
                created_at=_parse_timestamp(o.get("created_at")),
            )
            for o in raw.get("orders", [])
        ]
        return EntityStore(users=users, products=products, orders=orders)


def _as_int(value: object) -> int:
    # Older documents may hold numbers as posted, e.g. "2" or 2.0.
    if isinstance(value, bool):
        raise TypeError(f"expected a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected a whole number, got {value!r}")
    return int(value)  # type: ignore[call-overload]


def _money_to_raw(money: Money) -> float:
    return float(money.rounded().amount)


def _parse_timestamp(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    # Documents written by other tools use a trailing "Z".
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)

"""Tests for the JSON file repository (real files under tmp_path)."""

import json

import pytest

from storefront.application.create_user import CreateUserHandler
from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.entity_store import EntityStore
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_document_repository import (
    JsonDocumentRepository,
)
from tests.fakes import make_product, make_user


def _populated_store() -> EntityStore:
    widget = make_product(1, "Widget", price="10.50", stock=3)
    order = Order.create(user_id=1, reserved=[(widget, 2)])
    order.id = 1
    order.change_status(OrderStatus.PROCESSING)
    return EntityStore(users=[make_user(1, "Ana")], products=[widget], orders=[order])


class TestLoad:

    def test_missing_file_loads_empty(self, tmp_path):
        store = JsonDocumentRepository(tmp_path / "nope.json").load()
        assert store == EntityStore()

    def test_corrupt_file_loads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        assert JsonDocumentRepository(path).load() == EntityStore()

    def test_wrong_shape_loads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert JsonDocumentRepository(path).load() == EntityStore()

    def test_reads_documents_written_by_other_tools(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(
            json.dumps({
                "users": [{"id": 1, "name": "Ana", "email": "ana@x.com", "age": None,
                           "city": None, "created_at": "2024-01-02T03:04:05.000Z"}],
                "products": [{"id": 1, "name": "Widget", "description": "", "price": 10,
                              "category": "tools", "stock": 2,
                              "created_at": "2024-01-02T03:04:05.000Z"}],
                "orders": [{"id": 1, "user_id": 1,
                            "products": [{"product_id": 1, "quantity": 3}],
                            "total": 30, "status": "pending",
                            "created_at": "2024-01-02T03:04:05.000Z"}],
            }),
            encoding="utf-8",
        )

        store = JsonDocumentRepository(path).load()

        assert store.get_user(1).created_at.year == 2024
        assert store.get_product(1).price == Money.of("10")
        assert store.get_order(1).items[0].quantity.value == 3
        assert store.get_order(1).status == OrderStatus.PENDING

    def test_numbers_stored_as_text_are_coerced(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(
            json.dumps({
                "users": [{"id": 1, "name": "Ana", "email": "ana@x.com"}],
                "products": [{"id": 1, "name": "Widget", "price": "10.00",
                              "category": "tools", "stock": "4"}],
                "orders": [{"id": 1, "user_id": "1",
                            "products": [{"product_id": "1", "quantity": "2"}],
                            "total": 20, "status": "pending"}],
            }),
            encoding="utf-8",
        )

        store = JsonDocumentRepository(path).load()

        assert store.get_product(1).stock == 4
        assert store.get_order(1).user_id == 1
        assert store.get_order(1).items[0].product_id == 1
        assert store.get_order(1).items[0].quantity.value == 2


class TestUnreadableRecord:

    @staticmethod
    def _write(path, price):
        path.write_text(
            json.dumps({
                "users": [{"id": 1, "name": "Ana", "email": "ana@x.com"}],
                "products": [{"id": 1, "name": "Widget", "price": price,
                              "category": "tools", "stock": 2}],
                "orders": [],
            }),
            encoding="utf-8",
        )

    @pytest.mark.parametrize("price", [None, "abc", -1])
    def test_load_raises_instead_of_starting_empty(self, tmp_path, price):
        path = tmp_path / "store.json"
        self._write(path, price)

        with pytest.raises(PersistenceError, match="unreadable record"):
            JsonDocumentRepository(path).load()

    def test_write_leaves_the_document_untouched(self, tmp_path):
        path = tmp_path / "store.json"
        self._write(path, None)
        before = path.read_bytes()
        uow = UnitOfWork(JsonDocumentRepository(path))

        with pytest.raises(PersistenceError):
            CreateUserHandler(uow).handle(name="Bo", email="bo@x.com")

        assert path.read_bytes() == before

    def test_legacy_text_quantity_survives_an_unrelated_write(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(
            json.dumps({
                "users": [{"id": 1, "name": "Ana", "email": "ana@x.com"}],
                "products": [{"id": 1, "name": "Widget", "price": 10,
                              "category": "tools", "stock": 2}],
                "orders": [{"id": 1, "user_id": 1,
                            "products": [{"product_id": 1, "quantity": "2"}],
                            "total": 20, "status": "pending"}],
            }),
            encoding="utf-8",
        )
        uow = UnitOfWork(JsonDocumentRepository(path))

        CreateUserHandler(uow).handle(name="Bo", email="bo@x.com")

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert [u["email"] for u in raw["users"]] == ["ana@x.com", "bo@x.com"]
        assert [p["id"] for p in raw["products"]] == [1]
        assert raw["orders"][0]["products"] == [{"product_id": 1, "quantity": 2}]


class TestSave:

    def test_round_trip(self, tmp_path):
        repo = JsonDocumentRepository(tmp_path / "store.json")
        original = _populated_store()

        assert repo.save(original) is True

        assert repo.load() == original

    def test_document_layout(self, tmp_path):
        path = tmp_path / "store.json"
        JsonDocumentRepository(path).save(_populated_store())

        raw = json.loads(path.read_text(encoding="utf-8"))

        assert set(raw) == {"users", "products", "orders"}
        assert raw["products"][0]["price"] == 10.5
        assert raw["orders"][0]["products"] == [{"product_id": 1, "quantity": 2}]
        assert raw["orders"][0]["total"] == 21.0
        assert raw["orders"][0]["status"] == "processing"

    def test_creates_missing_directory(self, tmp_path):
        repo = JsonDocumentRepository(tmp_path / "nested" / "dir" / "store.json")
        assert repo.save(EntityStore()) is True
        assert (tmp_path / "nested" / "dir" / "store.json").exists()

    def test_unwritable_location_returns_false(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        repo = JsonDocumentRepository(blocker / "store.json")

        assert repo.save(EntityStore()) is False

    def test_no_temp_files_left_behind(self, tmp_path):
        repo = JsonDocumentRepository(tmp_path / "store.json")
        repo.save(_populated_store())
        repo.save(EntityStore())
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    def test_unit_of_work_over_file(self, tmp_path):
        uow = UnitOfWork(JsonDocumentRepository(tmp_path / "store.json"))
        with uow.write() as store:
            store.add_user(make_user(None, "Ana"))  # type: ignore[arg-type]
        assert uow.read().get_user(1).name == "Ana"

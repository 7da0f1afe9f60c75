"""Product store — ORM pass-through CRUD and failure mapping.

Invariants:
    - create returns a persisted product with a generated id
    - find_many returns rows in id order; find_unique returns None when absent
    - SQLAlchemy errors roll back and surface as DatabaseError
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError

from products_api.core.errors import DatabaseError
from products_api.models.product import Product
from products_api.services.product_store import ProductStore


def _make_failing_db():
    """Mock AsyncSession whose IO methods can be told to fail."""
    db = AsyncMock()
    db.add = MagicMock()
    db.rollback = AsyncMock()
    return db


async def test_create_assigns_id_and_persists(test_db):
    store = ProductStore(test_db)

    product = await store.create(name="A", price=10, description="d")

    assert product.id is not None
    result = await test_db.execute(select(Product).where(Product.id == product.id))
    row = result.scalar_one()
    assert (row.name, row.price, row.description) == ("A", 10, "d")


async def test_find_many_empty(test_db):
    assert await ProductStore(test_db).find_many() == []


async def test_find_many_orders_by_id(test_db):
    store = ProductStore(test_db)
    created = [
        await store.create(name=n, price=1, description="") for n in ("x", "y", "z")
    ]

    rows = await store.find_many()

    assert [r.id for r in rows] == sorted(p.id for p in created)
    assert [r.name for r in rows] == ["x", "y", "z"]


async def test_find_unique_hit_and_miss(test_db):
    store = ProductStore(test_db)
    product = await store.create(name="A", price=2.5, description="d")

    assert (await store.find_unique(product.id)).name == "A"
    assert await store.find_unique(product.id + 100) is None


async def test_find_many_maps_operational_error():
    db = _make_failing_db()
    db.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

    with pytest.raises(DatabaseError) as exc_info:
        await ProductStore(db).find_many()

    assert exc_info.value.operation == "find_many"
    assert exc_info.value.http_status == 503
    db.rollback.assert_awaited_once()


async def test_find_unique_maps_error_with_resource_id():
    db = _make_failing_db()
    db.get.side_effect = OperationalError("SELECT", {}, Exception("down"))

    with pytest.raises(DatabaseError) as exc_info:
        await ProductStore(db).find_unique(5)

    assert exc_info.value.context.resource_id == "5"
    assert exc_info.value.context.resource_type == "Product"


async def test_create_maps_integrity_error_and_rolls_back():
    db = _make_failing_db()
    db.commit.side_effect = IntegrityError("INSERT", {}, Exception("constraint"))

    with pytest.raises(DatabaseError) as exc_info:
        await ProductStore(db).create(name="A", price=1, description="d")

    assert exc_info.value.operation == "create"
    assert isinstance(exc_info.value.__cause__, IntegrityError)
    db.rollback.assert_awaited_once()
    db.refresh.assert_not_awaited()

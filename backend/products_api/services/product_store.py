"""Product Store — ORM-backed persistence for the products resource.

Invariants:
    - find_many returns rows ordered by id ascending
    - find_unique returns None for a missing id (absence is not an error)
    - create commits and refreshes, so the returned Product carries its generated id
    - Any SQLAlchemyError rolls back and is re-raised as DatabaseError; no retries

Design Decisions:
    - One store per request session, built by the get_product_store dependency
    - Pass-through CRUD only: no business rules between routes and the ORM
"""

import logging
from typing import Sequence

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.errors import DatabaseError, ErrorContext
from products_api.infrastructure.database import get_db
from products_api.models.product import Product

logger = logging.getLogger(__name__)


class ProductStore:
    """Products table access over a single AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_many(self) -> Sequence[Product]:
        try:
            result = await self._db.execute(
                select(Product).order_by(Product.id),
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise _database_error(e, "find_many") from e

    async def find_unique(self, product_id: int) -> Product | None:
        try:
            return await self._db.get(Product, product_id)
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise _database_error(e, "find_unique", str(product_id)) from e

    async def create(
        self, *, name: str, price: float, description: str,
    ) -> Product:
        product = Product(name=name, price=price, description=description)
        try:
            self._db.add(product)
            await self._db.commit()
            await self._db.refresh(product)
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise _database_error(e, "create") from e
        logger.info("Product created", extra={"product_id": product.id})
        return product


def _database_error(
    exc: SQLAlchemyError, operation: str, resource_id: str | None = None,
) -> DatabaseError:
    logger.error(
        f"Product store {operation} failed: {exc}",
        extra={"operation": operation},
    )
    return DatabaseError(
        "Product storage unavailable", operation,
        ErrorContext(resource_type="Product", resource_id=resource_id),
    )


async def get_product_store(
    db: AsyncSession = Depends(get_db),
) -> ProductStore:
    """FastAPI dependency: a ProductStore bound to the request session."""
    return ProductStore(db)

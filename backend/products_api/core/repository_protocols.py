"""Boundary Protocols — contracts between route handlers and persistence.

Invariants:
    - Routes depend on ProductRepository, never on a concrete store class
    - Absence is returned as None, never raised

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol, Sequence

from products_api.models.product import Product


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by services/product_store.py."""
    async def find_many(self) -> Sequence[Product]: ...
    async def find_unique(self, product_id: int) -> Product | None: ...
    async def create(
        self, *, name: str, price: float, description: str,
    ) -> Product: ...

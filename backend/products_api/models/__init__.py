"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity (ADR: ExMA max 3-4 files to understand a feature)
    - All models imported here so Base.metadata is complete for create_all and alembic
"""

from products_api.models.product import Product  # noqa: F401

"""Product ORM — the single persisted resource.

Invariants:
    - id is generated by the database and never reassigned
    - name, price and description are non-nullable

Design Decisions:
    - Integer autoincrement key: ids are bound from the URL path as int
    - price as Float: serialized as a JSON number, no Decimal string encoding
"""

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from products_api.db.base import Base


class Product(Base):
    """Product entity."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"

"""Product Schemas — request body and response shape for /products.

Invariants:
    - ProductCreate carries exactly name, price, description (all required)
    - ProductRead is readable from ORM attributes (from_attributes=True)

Design Decisions:
    - No length or range constraints: type binding is the only validation applied
"""

from pydantic import BaseModel, ConfigDict


class ProductCreate(BaseModel):
    """POST /products body."""
    name: str
    price: float
    description: str


class ProductRead(BaseModel):
    """Public product representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
    description: str

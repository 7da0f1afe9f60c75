"""Products Routes — list, lookup and create for the products resource.

Invariants:
    - GET /products → {data, _self, _count}
    - GET /products/{product_id} → {datum, _self}; a missing row is 200 with datum null
    - product_id must be an optionally signed run of digits within INT4 range;
      anything else is rejected by request binding (400) before the handler runs
    - POST /products → the created record, unwrapped, 201
    - /products and /products/ are served alike (no redirect)

Design Decisions:
    - Create stays unwrapped while reads are enveloped (ADR: public contract kept as shipped)
    - Missing product is not a 404 (ADR: public contract kept as shipped)
"""

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status
from pydantic import BeforeValidator

from products_api.api.envelopes import data_envelope, datum_envelope
from products_api.core.repository_protocols import ProductRepository
from products_api.schemas.envelope import DataResponse, DatumResponse
from products_api.schemas.product import ProductCreate, ProductRead
from products_api.services.product_store import get_product_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["products"])

_INTEGER_ID = re.compile(r"-?\d+")
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


def _digits_only(value: object) -> object:
    """Reject lax int spellings ("1.0", "+5", "1_0", " 5") before int coercion."""
    if isinstance(value, str) and not _INTEGER_ID.fullmatch(value):
        raise ValueError("product_id must be an integer")
    return value


ProductId = Annotated[
    int,
    BeforeValidator(_digits_only),
    Path(ge=INT4_MIN, le=INT4_MAX),
]


@router.get("", response_model=DataResponse[ProductRead])
@router.get(
    "/", response_model=DataResponse[ProductRead], include_in_schema=False,
)
@data_envelope
async def list_products(
    request: Request,
    store: ProductRepository = Depends(get_product_store),
):
    """List all products."""
    return await store.find_many()


@router.get("/{product_id}", response_model=DatumResponse[ProductRead])
@datum_envelope
async def get_product(
    request: Request,
    product_id: ProductId,
    store: ProductRepository = Depends(get_product_store),
):
    """Look up one product by id; absent ids yield a null datum."""
    return await store.find_unique(product_id)


@router.post(
    "", response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/", response_model=ProductRead,
    status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
async def create_product(
    body: ProductCreate,
    store: ProductRepository = Depends(get_product_store),
):
    """Create a product from name, price and description."""
    return await store.create(
        name=body.name, price=body.price, description=body.description,
    )

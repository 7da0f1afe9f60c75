"""Product and envelope schemas — binding rules and alias serialization."""

import pytest
from pydantic import ValidationError

from products_api.models.product import Product
from products_api.schemas.envelope import DataResponse, DatumResponse
from products_api.schemas.product import ProductCreate, ProductRead


def test_product_create_requires_all_fields():
    with pytest.raises(ValidationError):
        ProductCreate(name="A", price=1)


def test_product_create_coerces_numeric_price():
    assert ProductCreate(name="A", price="10.5", description="d").price == 10.5


def test_product_create_ignores_unknown_fields():
    body = ProductCreate(name="A", price=1, description="d", id=99)
    assert body.model_dump() == {"name": "A", "price": 1.0, "description": "d"}


def test_product_read_from_orm_attributes():
    read = ProductRead.model_validate(
        Product(id=3, name="A", price=10, description="d"),
    )
    assert read.model_dump() == {"id": 3, "name": "A", "price": 10.0, "description": "d"}


def test_data_response_serializes_aliases():
    resp = DataResponse[ProductRead].model_validate({
        "data": [{"id": 1, "name": "A", "price": 10, "description": "d"}],
        "_self": "/products",
        "_count": 1,
    })
    assert resp.model_dump(by_alias=True) == {
        "data": [{"id": 1, "name": "A", "price": 10.0, "description": "d"}],
        "_self": "/products",
        "_count": 1,
    }


def test_datum_response_accepts_null():
    resp = DatumResponse[ProductRead].model_validate(
        {"datum": None, "_self": "/products/5"},
    )
    assert resp.model_dump(by_alias=True) == {"datum": None, "_self": "/products/5"}

"""Envelope Schemas — typed response models for the collection and single-item shapes.

Invariants:
    - Wire names are data/_self/_count and datum/_self (aliases; FastAPI serializes by alias)
    - DatumResponse.datum is nullable: a missing row is a valid response

Design Decisions:
    - Generic models so OpenAPI documents the item type per route
    - Trailing-underscore field names: pydantic treats leading-underscore attributes as private
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Collection envelope."""
    model_config = ConfigDict(populate_by_name=True)

    data: list[T]
    self_: str = Field(alias="_self")
    count: int = Field(alias="_count")


class DatumResponse(BaseModel, Generic[T]):
    """Single-item envelope."""
    model_config = ConfigDict(populate_by_name=True)

    datum: T | None
    self_: str = Field(alias="_self")

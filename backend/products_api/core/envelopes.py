"""Response Envelopes — pure builders for the two public response shapes.

Invariants:
    - Collection envelope: data is the input sequence itself, _count == len(data)
    - Single-item envelope: datum is the input item, None passes through as-is
    - _self is the caller-supplied request URL, never rewritten
    - No IO, no mutation of items or sequences

Design Decisions:
    - Builders take the URL as a plain string: request handling stays in api/
      (ADR: ExMA impureim sandwich)
    - Absence is not an error here; a missing row is a 200 with null datum
"""

from typing import Any, Sequence, TypeVar

T = TypeVar("T")


def build_data_envelope(items: Sequence[T], self_url: str) -> dict[str, Any]:
    """Wrap a sequence as {data, _self, _count}."""
    return {
        "data": items,
        "_self": self_url,
        "_count": len(items),
    }


def build_datum_envelope(item: T | None, self_url: str) -> dict[str, Any]:
    """Wrap a single item (or None) as {datum, _self}."""
    return {
        "datum": item,
        "_self": self_url,
    }

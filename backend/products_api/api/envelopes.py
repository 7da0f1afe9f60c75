"""Envelope Decorators — per-route interceptors that wrap handler results.

Invariants:
    - Decorated handlers declare a `request: Request` parameter (checked at decoration time)
    - The envelope is built only after the handler returns; exceptions propagate untouched
    - _self is the raw (undecoded) request path plus "?query" when a query string is present

Design Decisions:
    - Decorator per shape over a global middleware: the shape is chosen by the route,
      and the body is wrapped before response_model serialization
    - functools.wraps keeps the handler signature, so FastAPI still resolves its
      parameters and dependencies
"""

import functools
import inspect
from typing import Any, Awaitable, Callable

from fastapi import Request

from products_api.core.envelopes import build_data_envelope, build_datum_envelope

Handler = Callable[..., Awaitable[Any]]


def request_self_url(request: Request) -> str:
    """The originating request URL as the client sent it (raw path + query string)."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        url = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        url = request.url.path
    query = request.scope.get("query_string", b"").decode("latin-1")
    if query:
        url = f"{url}?{query}"
    return url


def data_envelope(handler: Handler) -> Handler:
    """Wrap a handler's sequence result as {data, _self, _count}."""
    return _wrap(handler, build_data_envelope)


def datum_envelope(handler: Handler) -> Handler:
    """Wrap a handler's single result (or None) as {datum, _self}."""
    return _wrap(handler, build_datum_envelope)


def _wrap(
    handler: Handler, build: Callable[[Any, str], dict[str, Any]],
) -> Handler:
    if "request" not in inspect.signature(handler).parameters:
        raise TypeError(
            f"{handler.__name__} must declare a 'request: Request' "
            "parameter to be wrapped in a response envelope",
        )

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> dict[str, Any]:
        result = await handler(*args, **kwargs)
        return build(result, request_self_url(kwargs["request"]))

    return wrapper

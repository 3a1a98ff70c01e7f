"""Conversion of results into framework-neutral HTTP responses."""

from __future__ import annotations

import http
from typing import Any, Optional

import attrs

from .results import DataResult, Result


@attrs.frozen
class HttpResponse:
    """Status and body of an HTTP response.

    Web frameworks can build their own response objects from this one.
    """

    status: http.HTTPStatus
    body: Optional[Any] = None


def to_response(result: Result | DataResult[Any]) -> HttpResponse:
    """Convert the outcome of an operation into an HTTP response.

    * A success holding data gives 200 OK with the data as body.
    * A success without data gives 204 No Content.
    * Any other outcome gives 500 Internal Server Error without body.

    The message and fault of the result are not exposed to the client.
    """

    if not result.is_success:
        return HttpResponse(http.HTTPStatus.INTERNAL_SERVER_ERROR)
    if isinstance(result, DataResult) and result.has_data:
        return HttpResponse(http.HTTPStatus.OK, result.data)
    return HttpResponse(http.HTTPStatus.NO_CONTENT)

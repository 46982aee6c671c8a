"""Generic envelopes a handler can return around its payload.

The documented response schema is the payload type, so ``ResponseEntity[User]``
is documented as ``User``.
"""

from typing import Generic, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

T = TypeVar("T")


class HttpEntity(Generic[T]):
    """A body plus optional headers."""

    def __init__(self, body: T, headers: dict[str, str] | None = None):
        self.body = body
        self.headers = headers or {}


class ResponseEntity(HttpEntity[T]):
    """An HttpEntity carrying a status code."""

    def __init__(self, body: T, status_code: int = 200, headers: dict[str, str] | None = None):
        super().__init__(body, headers)
        self.status_code = status_code

    def to_response(self) -> JSONResponse:
        return JSONResponse(content=jsonable_encoder(self.body), status_code=self.status_code, headers=self.headers)

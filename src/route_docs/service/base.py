"""Documentation models shared by the defaults and the documentation pipeline."""

from enum import Enum
from http import HTTPStatus

from pydantic import BaseModel, ConfigDict

from route_docs.schema.types import ResolvedType


class HttpMethod(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"


class ResponseMessage(BaseModel):
    """A documented possible response of an operation."""

    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    response_model: ResolvedType | None = None

    @classmethod
    def of(cls, status: HTTPStatus, response_model: ResolvedType | None = None) -> "ResponseMessage":
        return cls(code=status.value, message=status.phrase, response_model=response_model)


class Operation(BaseModel):
    """One HTTP method on one route."""

    method: HttpMethod
    nickname: str
    position: int = 0  # declared position, assigned upstream
    summary: str = ""
    notes: str = ""
    response_messages: tuple[ResponseMessage, ...] = ()
    tags: list[str] = []


class ApiDescription(BaseModel):
    """A route path and the operations available on it."""

    path: str  # /pets/{pet_id}
    description: str = ""
    operations: list[Operation] = []
    hidden: bool = False


class ApiListingReference(BaseModel):
    """Reference to a group of API descriptions, e.g. one router's docs."""

    path: str
    description: str = ""
    position: int = 0

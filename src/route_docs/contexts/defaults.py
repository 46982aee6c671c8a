"""Default configuration for documenting FastAPI/Starlette routes.

Build one Defaults per documentation context and pass it along; everything it
returns is immutable, so a single instance can be shared between threads.
"""

import logging
import typing
from http import HTTPStatus
from types import MappingProxyType, UnionType
from typing import Annotated, Any, Mapping

from fastapi import BackgroundTasks
from fastapi.security import SecurityScopes
from starlette.datastructures import URL, Headers
from starlette.requests import HTTPConnection, Request
from starlette.responses import Response
from starlette.websockets import WebSocket

from route_docs.annotations import ApiIgnore
from route_docs.contexts.orderings import (
    Ordering,
    api_path_comparator,
    listing_position_comparator,
    listing_reference_path_comparator,
    nickname_comparator,
    position_comparator,
)
from route_docs.entities import HttpEntity, ResponseEntity
from route_docs.schema.rules import AlternateTypeRule, new_rule
from route_docs.schema.types import TypeResolver, WildcardType
from route_docs.service.base import (
    ApiDescription,
    ApiListingReference,
    HttpMethod,
    Operation,
    ResponseMessage,
)

logger = logging.getLogger(__name__)

# Status codes documented for every operation of a method unless overridden.
READ_STATUSES = (HTTPStatus.OK, HTTPStatus.NOT_FOUND, HTTPStatus.FORBIDDEN, HTTPStatus.UNAUTHORIZED)
WRITE_STATUSES = (HTTPStatus.CREATED, HTTPStatus.NOT_FOUND, HTTPStatus.FORBIDDEN, HTTPStatus.UNAUTHORIZED)
NO_CONTENT_STATUSES = (HTTPStatus.NO_CONTENT, HTTPStatus.FORBIDDEN, HTTPStatus.UNAUTHORIZED)

DEFAULT_RESPONSE_STATUSES = {
    HttpMethod.GET: READ_STATUSES,
    HttpMethod.PUT: WRITE_STATUSES,
    HttpMethod.POST: WRITE_STATUSES,
    HttpMethod.DELETE: NO_CONTENT_STATUSES,
    HttpMethod.PATCH: NO_CONTENT_STATUSES,
    HttpMethod.TRACE: NO_CONTENT_STATUSES,
    HttpMethod.OPTIONS: NO_CONTENT_STATUSES,
    HttpMethod.HEAD: NO_CONTENT_STATUSES,
}


class Defaults:
    """Ignored types, excluded annotations, default responses, orderings and rules."""

    def __init__(self):
        self._ignored = self._init_ignorable_types()
        self._responses = self._init_response_messages()
        self._annotations = self._init_exclude_annotations()
        self._init_orderings()
        logger.debug(
            "Built documentation defaults: %d ignored types, %d exclude annotations, "
            "response defaults for %d methods",
            len(self._ignored),
            len(self._annotations),
            len(self._responses),
        )

    def default_ignorable_parameter_types(self) -> frozenset[type]:
        return self._ignored

    def default_response_messages(self) -> Mapping[HttpMethod, tuple[ResponseMessage, ...]]:
        """Default response messages set on all api operations."""
        return self._responses

    def default_exclude_annotations(self) -> tuple[type, ...]:
        return self._annotations

    def operation_ordering(self) -> Ordering[Operation]:
        return self._operation_ordering

    def api_description_ordering(self) -> Ordering[ApiDescription]:
        return self._api_description_ordering

    def api_listing_reference_ordering(self) -> Ordering[ApiListingReference]:
        return self._api_listing_reference_ordering

    def default_rules(self, type_resolver: TypeResolver) -> list[AlternateTypeRule]:
        """Alternate type rules in precedence order.

        Mapping rules come before the envelope rules so that a dict nested in
        a ResponseEntity collapses before the envelope is unwrapped.
        """
        rules = [
            new_rule(type_resolver.resolve(dict), type_resolver.resolve(object)),
            new_rule(type_resolver.resolve(dict, str, object), type_resolver.resolve(object)),
            new_rule(type_resolver.resolve(dict, object, object), type_resolver.resolve(object)),
            new_rule(type_resolver.resolve(dict, str, str), type_resolver.resolve(object)),
            new_rule(
                type_resolver.resolve(ResponseEntity, WildcardType),
                type_resolver.resolve(WildcardType),
            ),
            new_rule(
                type_resolver.resolve(HttpEntity, WildcardType),
                type_resolver.resolve(WildcardType),
            ),
        ]
        return rules

    def response_messages_for(self, method: HttpMethod | str) -> tuple[ResponseMessage, ...]:
        """Look up the defaults for ``method``; names are case-insensitive."""
        if isinstance(method, str) and not isinstance(method, HttpMethod):
            try:
                method = HttpMethod(method.upper())
            except ValueError:
                raise ValueError(f"Unknown HTTP method: {method}") from None
        return self._responses.get(method, ())

    def is_ignorable(self, param_type: Any) -> bool:
        """Whether a parameter of this type is left out of the docs."""
        if typing.get_origin(param_type) is Annotated:
            base, *metadata = typing.get_args(param_type)
            if any(self._is_excluded_annotation(m) for m in metadata):
                return True
            param_type = base

        if typing.get_origin(param_type) in (typing.Union, UnionType):
            members = [a for a in typing.get_args(param_type) if a is not type(None)]
            if len(members) != 1:
                return False
            return self.is_ignorable(members[0])

        cls = typing.get_origin(param_type) or param_type
        if not isinstance(cls, type):
            return False
        return any(klass in self._ignored for klass in cls.__mro__)

    def _is_excluded_annotation(self, marker: Any) -> bool:
        for annotation in self._annotations:
            if marker is annotation or isinstance(marker, annotation):
                return True
        return False

    def _init_orderings(self):
        self._operation_ordering = position_comparator().compound(nickname_comparator())
        self._api_description_ordering = api_path_comparator()
        self._api_listing_reference_ordering = listing_position_comparator().compound(
            listing_reference_path_comparator()
        )

    def _init_exclude_annotations(self) -> tuple[type, ...]:
        return (ApiIgnore,)

    def _init_ignorable_types(self) -> frozenset[type]:
        ignored = set()
        ignored.add(HTTPConnection)
        ignored.add(type)
        ignored.add(Headers)
        ignored.add(Response)
        ignored.add(Request)
        ignored.add(WebSocket)
        ignored.add(Headers)
        ignored.add(SecurityScopes)
        ignored.add(BackgroundTasks)
        ignored.add(URL)
        ignored.add(ApiIgnore)
        return frozenset(ignored)

    def _init_response_messages(self) -> Mapping[HttpMethod, tuple[ResponseMessage, ...]]:
        responses = {
            method: tuple(ResponseMessage.of(status) for status in statuses)
            for method, statuses in DEFAULT_RESPONSE_STATUSES.items()
        }
        return MappingProxyType(responses)

"""Resolved type references used while documenting handler signatures.

A ResolvedType is the erased class plus its resolved type parameters, so
``dict[str, int]`` becomes ``ResolvedType(dict, (str, int))``. Rules match
and substitute on these references rather than on raw typing objects.
"""

import types
import typing
from typing import Any

from pydantic import BaseModel, ConfigDict


class TypeResolutionError(TypeError):
    """Raised when a value cannot be turned into a ResolvedType."""


class WildcardType:
    """Marker standing for "any type" inside an alternate type rule pattern."""


class ResolvedType(BaseModel):
    """A class together with its resolved type parameters."""

    model_config = ConfigDict(frozen=True)

    erased_type: type[Any]
    type_parameters: tuple["ResolvedType", ...] = ()

    def is_wildcard(self) -> bool:
        return self.erased_type is WildcardType

    def has_wildcards(self) -> bool:
        return self.is_wildcard() or any(p.has_wildcards() for p in self.type_parameters)

    def __str__(self) -> str:
        name = self.erased_type.__name__
        if not self.type_parameters:
            return name
        return f"{name}[{', '.join(str(p) for p in self.type_parameters)}]"


ResolvedType.model_rebuild()


class TypeResolver:
    """Turns classes and generic aliases into ResolvedType references."""

    def resolve(self, raw: Any, *type_parameters: Any) -> ResolvedType:
        """Resolve ``raw``, optionally parameterized by ``type_parameters``.

        ``resolve(dict, str, object)`` and ``resolve(dict[str, object])`` give
        the same result. Explicit parameters replace any already present on a
        subscripted alias.
        """
        if isinstance(raw, ResolvedType) and not type_parameters:
            return raw

        erased, params = self._split(raw)
        if type_parameters:
            params = tuple(self.resolve(p) for p in type_parameters)
        return ResolvedType(erased_type=erased, type_parameters=params)

    def _split(self, raw: Any) -> tuple[type, tuple[ResolvedType, ...]]:
        if isinstance(raw, ResolvedType):
            return raw.erased_type, raw.type_parameters
        if raw is Any:
            return object, ()

        origin = typing.get_origin(raw)
        if origin is typing.Union or origin is types.UnionType:
            raise TypeResolutionError(f"Cannot resolve union {raw!r} to a single type")
        if origin is not None and isinstance(origin, type):
            args = typing.get_args(raw)
            return origin, tuple(self.resolve(a) for a in args)

        if isinstance(raw, type):
            return raw, ()

        raise TypeResolutionError(f"Cannot resolve {raw!r} to a type")

"""Orderings for deterministic documentation output.

An Ordering compares items by a sequence of key extractors: the first key
decides, later keys break ties.
"""

from typing import Any, Callable, Generic, Iterable, TypeVar

from route_docs.service.base import ApiDescription, ApiListingReference, Operation

T = TypeVar("T")


class Ordering(Generic[T]):
    """Compare items by each key in turn."""

    def __init__(self, *keys: Callable[[T], Any]):
        if not keys:
            raise ValueError("An ordering needs at least one key")
        self._keys = tuple(keys)

    @property
    def keys(self) -> tuple[Callable[[T], Any], ...]:
        return self._keys

    def sort_key(self, item: T) -> tuple:
        return tuple(key(item) for key in self._keys)

    def compare(self, a: T, b: T) -> int:
        for key in self._keys:
            left, right = key(a), key(b)
            if left < right:
                return -1
            if left > right:
                return 1
        return 0

    def __call__(self, a: T, b: T) -> int:
        return self.compare(a, b)

    def compound(self, other: "Ordering[T]") -> "Ordering[T]":
        """Return an ordering that falls back to ``other`` on ties."""
        return Ordering(*self._keys, *other.keys)

    def sorted(self, items: Iterable[T]) -> list[T]:
        return sorted(items, key=self.sort_key)


def position_comparator() -> Ordering[Operation]:
    return Ordering(lambda op: op.position)


def nickname_comparator() -> Ordering[Operation]:
    return Ordering(lambda op: op.nickname)


def method_comparator() -> Ordering[Operation]:
    return Ordering(lambda op: op.method.value)


def api_path_comparator() -> Ordering[ApiDescription]:
    return Ordering(lambda api: api.path)


def listing_position_comparator() -> Ordering[ApiListingReference]:
    return Ordering(lambda ref: ref.position)


def listing_reference_path_comparator() -> Ordering[ApiListingReference]:
    return Ordering(lambda ref: ref.path)

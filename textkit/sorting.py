"""Keyed insertion sort."""
from collections.abc import Mapping
from typing import Any, List, MutableSequence, TypeVar

from textkit.errors import InvalidArgumentError

T = TypeVar("T")


def _key_of(item: Any, sort_key: str, index: int) -> Any:
    if isinstance(item, Mapping):
        if sort_key not in item:
            raise InvalidArgumentError(
                f"Item {index} has no key {sort_key!r}",
                details={"index": index, "sort_key": sort_key},
            )
        return item[sort_key]
    try:
        return getattr(item, sort_key)
    except AttributeError:
        raise InvalidArgumentError(
            f"Item {index} has no attribute {sort_key!r}",
            details={"index": index, "sort_key": sort_key},
        ) from None


def insertion_sort(items: MutableSequence[T], sort_key: str) -> MutableSequence[T]:
    """
    Sort ``items`` in place by ``item[sort_key]`` (or the attribute) and return it.

    Stable: an element only moves left past strictly greater keys. Keys that
    cannot be compared with each other raise InvalidArgumentError, leaving
    ``items`` partially sorted.
    """
    keys: List[Any] = [_key_of(item, sort_key, i) for i, item in enumerate(items)]

    try:
        for current in range(1, len(items)):
            item, key = items[current], keys[current]
            previous = current - 1
            while previous >= 0 and keys[previous] > key:
                items[previous + 1] = items[previous]
                keys[previous + 1] = keys[previous]
                previous -= 1
            items[previous + 1] = item
            keys[previous + 1] = key
    except TypeError as e:
        raise InvalidArgumentError(
            f"Values of {sort_key!r} are not comparable: {e}",
            details={"sort_key": sort_key},
        ) from e

    return items

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar


T = TypeVar("T")


def _check_limit(limit: int) -> int:
    limit = int(limit)
    if limit < 0:
        raise ValueError(f"Limit must be >= 0, got {limit}")
    return limit


class BoundedList(Generic[T]):
    """
    Insertion-ordered sequence that never holds more than `limit` items.

    Appends go through `try_append`, which reports failure instead of raising.
    """

    def __init__(self, limit: int) -> None:
        self._limit = _check_limit(limit)
        self._items: list[T] = []

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._limit

    def try_append(self, item: T) -> bool:
        if self.is_full:
            return False
        self._items.append(item)
        return True

    def remove_where(self, predicate: Callable[[T], bool]) -> int:
        """Drop every item matching `predicate`; return how many were removed."""

        kept = [item for item in self._items if not predicate(item)]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def snapshot(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))


class BoundedCounter:
    """Count constrained to `0 <= value <= limit`."""

    def __init__(self, limit: int, value: int = 0) -> None:
        self._limit = _check_limit(limit)
        if not 0 <= value <= self._limit:
            raise ValueError(f"Initial value {value} outside [0, {self._limit}]")
        self._value = int(value)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_full(self) -> bool:
        return self._value >= self._limit

    def try_increment(self) -> bool:
        if self.is_full:
            return False
        self._value += 1
        return True

    def try_decrement(self) -> bool:
        if self._value <= 0:
            return False
        self._value -= 1
        return True

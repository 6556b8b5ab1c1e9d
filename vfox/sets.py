"""Set containers: an unordered hash set and an insertion-ordered set."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class MapSet(Generic[T]):
    """A plain hash set with no ordering guarantees."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: set[T] = set()
        for value in values:
            self.add(value)

    def add(self, value: T) -> bool:
        """Add a value; return True if it was not present before."""
        if value in self._values:
            return False
        self._values.add(value)
        return True

    def remove(self, value: T) -> None:
        """Remove a value if present."""
        self._values.discard(value)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def to_list(self) -> list[T]:
        """Return the values as a new list."""
        return list(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


class SortedSet(Generic[T]):
    """A set that keeps its values in the order they were first added."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: dict[T, None] = {}
        for value in values:
            self.add(value)

    def add(self, value: T) -> bool:
        """Append a value; return True if it was not present before."""
        if value in self._values:
            return False
        self._values[value] = None
        return True

    def remove(self, value: T) -> None:
        """Remove a value if present, keeping the order of the others."""
        self._values.pop(value, None)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def to_list(self) -> list[T]:
        """Return the values, in insertion order, as a new list."""
        return list(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
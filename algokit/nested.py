"""Lazy flattening of nested integer lists."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Union


@dataclass
class NestedInteger:
    """Either a single integer or a list of further nested integers."""

    value: Union[int, list["NestedInteger"]]

    def is_integer(self) -> bool:
        """Tell whether this holds a single integer rather than a list."""
        return isinstance(self.value, int)


class NestedIterator:
    """Iterator over the integers of a nested list, in left-to-right order."""

    def __init__(self, nested_list: Sequence[NestedInteger]) -> None:
        self._stack: list[NestedInteger] = list(reversed(nested_list))

    def has_next(self) -> bool:
        """Tell whether another integer remains, unpacking lists as needed."""
        while self._stack:
            top = self._stack[-1]
            if top.is_integer():
                return True
            self._stack.pop()
            self._stack.extend(reversed(top.value))  # type: ignore[arg-type]
        return False

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self._stack.pop().value  # type: ignore[return-value]


def flatten(nested_list: Sequence[NestedInteger]) -> list[int]:
    """Return every integer of the nested list in order."""
    return list(NestedIterator(nested_list))
"""Transformations applied to a collection of integer arrays."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any

from arrayops.miscutils import (
    greater_than,
    intersection,
    print_arrays,
    quick_sort,
    unique_elements_from_arrays,
)


class Transformation(Enum):
    """Kinds of transformation a transformer can perform."""

    SORT = auto()
    INTERSECT = auto()
    UNIQUE_REVERSE_SORTED = auto()


class ArrayTransformer(ABC):
    """Base for transformers; results accumulate across calls to ``transform``."""

    _title = "ArrayTransformer result"

    def __init__(self) -> None:
        self._data: list[Any] = []

    @abstractmethod
    def transform(self, arrays: list[list[int]], print_result: bool = True) -> None:
        """Apply the transformation to ``arrays`` and store the outcome."""

    @property
    def result(self) -> list[Any]:
        """Everything produced so far."""
        return list(self._data)

    def _record(self, data: list[Any], print_result: bool) -> None:
        if print_result:
            print(self._title)
            print_arrays(data)
            print()
        self._data.extend(data)


class ManualSortTransformer(ArrayTransformer):
    """Sorts every array in place, ascending."""

    _title = "ManualSortTransformer result"

    def transform(self, arrays: list[list[int]], print_result: bool = True) -> None:
        for array in arrays:
            quick_sort(array)
        self._record([list(array) for array in arrays], print_result)

    @property
    def result(self) -> list[list[int]]:
        return [list(array) for array in self._data]


class IntersectionTransformer(ArrayTransformer):
    """Finds the values common to all arrays."""

    _title = "IntersectionTransformer result"

    def transform(self, arrays: list[list[int]], print_result: bool = True) -> None:
        self._record(intersection(arrays), print_result)


class UniqueReverseSortedTransformer(ArrayTransformer):
    """Collects values occurring exactly once overall, in descending order."""

    _title = "UniqueReverseSortedTransformer result"

    def transform(self, arrays: list[list[int]], print_result: bool = True) -> None:
        unique = unique_elements_from_arrays(arrays)
        quick_sort(unique, greater_than)
        self._record(unique, print_result)


_TRANSFORMERS: dict[Transformation, type[ArrayTransformer]] = {
    Transformation.SORT: ManualSortTransformer,
    Transformation.INTERSECT: IntersectionTransformer,
    Transformation.UNIQUE_REVERSE_SORTED: UniqueReverseSortedTransformer,
}


def create_transformer(transformation: Transformation) -> ArrayTransformer:
    """Build a fresh transformer for ``transformation``."""
    try:
        return _TRANSFORMERS[transformation]()
    except (KeyError, TypeError):
        raise ValueError(f"Unknown transformation type: {transformation!r}") from None
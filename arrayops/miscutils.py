"""Helpers for parsing, formatting, counting and sorting integer arrays."""

from __future__ import annotations

import re
import sys
from collections import Counter
from collections.abc import Callable, Iterable, Mapping, MutableSequence, Sequence
from typing import Any, TextIO, TypeVar

T = TypeVar("T")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_TOKEN_CHARS = frozenset("0123456789+-")
_SEPARATORS = frozenset(" ,")
_INT_PREFIX = re.compile(r"[+-]?[0-9]+")


def less_than(a: Any, b: Any) -> bool:
    """Strict ascending comparator."""
    return a < b


def greater_than(a: Any, b: Any) -> bool:
    """Strict descending comparator."""
    return a > b


def _to_int(token: str) -> int:
    """Convert the leading integer of ``token``, ignoring anything after it."""
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"invalid integer: {token!r}")
    value = int(match.group())
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"integer out of range: {token!r}")
    return value


def parse_line_to_numbers(line: str) -> list[int]:
    """Extract the integers of one line.

    Digits and signs build a token, spaces and commas end it, and every
    other character is skipped.
    """
    numbers: list[int] = []
    token: list[str] = []
    for ch in line:
        if ch in _TOKEN_CHARS:
            token.append(ch)
        elif ch in _SEPARATORS and token:
            numbers.append(_to_int("".join(token)))
            token.clear()
    if token:
        numbers.append(_to_int("".join(token)))
    return numbers


def read_arrays_from_file(filename: str) -> list[list[int]]:
    """Read one array of integers per line of ``filename``."""
    with open(filename, encoding="utf-8") as handle:
        return [parse_line_to_numbers(line.rstrip("\n")) for line in handle]


def custom_format(data: Any) -> str:
    """Format a flat list, a list of lists or a mapping as space-separated text."""
    if isinstance(data, Mapping):
        return " ".join(f"{key} {value}" for key, value in sorted(data.items()))
    parts: list[str] = []
    for item in data:
        if isinstance(item, Iterable) and not isinstance(item, str):
            parts.extend(str(value) for value in item)
        else:
            parts.append(str(item))
    return " ".join(parts)


def print_arrays(arrays: Sequence[Any], file: TextIO | None = None) -> None:
    """Print a flat array on one line, or each nested array as ``Vector N:``."""
    out = sys.stdout if file is None else file
    if arrays and all(isinstance(item, int) for item in arrays):
        out.write("".join(f"{num} " for num in arrays) + "\n")
        return
    for number, array in enumerate(arrays, start=1):
        out.write(f"Vector {number}: " + "".join(f"{num} " for num in array) + "\n")


def count_elements(arrays: Iterable[Iterable[T]]) -> dict[T, int]:
    """Count occurrences over all arrays, keyed in ascending order."""
    counter: Counter[T] = Counter()
    for array in arrays:
        counter.update(array)
    return dict(sorted(counter.items()))


def unique_elements_from_arrays(arrays: Iterable[Iterable[T]]) -> list[T]:
    """Values occurring exactly once across all arrays, ascending."""
    return [value for value, count in count_elements(arrays).items() if count == 1]


def remove_duplicates(values: Iterable[T]) -> list[T]:
    """Drop every value that occurs more than once, keeping the order of the rest."""
    items = list(values)
    counter = Counter(items)
    return [value for value in items if counter[value] == 1]


def intersection(arrays: Sequence[Iterable[T]]) -> list[T]:
    """Values present in every array, ascending.

    Values repeated within one array are dropped from it first.
    """
    cleaned = [remove_duplicates(array) for array in arrays]
    total = len(cleaned)
    return [value for value, count in count_elements(cleaned).items() if count == total]


def quick_sort(
    items: MutableSequence[T], comp: Callable[[T, T], bool] = less_than
) -> None:
    """Sort ``items`` in place with a last-element-pivot quicksort."""
    pending = [(0, len(items))]
    while pending:
        low, high = pending.pop()
        if high - low < 2:
            continue
        store = low
        for j in range(low, high):
            if comp(items[j], items[high - 1]):
                items[j], items[store] = items[store], items[j]
                store += 1
        items[store], items[high - 1] = items[high - 1], items[store]
        pending.append((low, store))
        pending.append((store + 1, high))
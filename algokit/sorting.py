"""Sorting, selection and search routines over integer lists and matrices."""

from __future__ import annotations

import bisect
import random
from typing import NamedTuple, Sequence


class MaxMin(NamedTuple):
    """Largest and smallest values of a sequence with their first positions."""

    maximum: int
    max_index: int
    minimum: int
    min_index: int


def random_values(size: int) -> list[int]:
    """Return ``size`` random integers in the range -8..8."""
    return [random.randint(0, 8) - random.randint(0, 8) for _ in range(size)]


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a new ascending list using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def insertion_sort(values: Sequence[int]) -> list[int]:
    """Return a new ascending list using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def selection_sort(values: Sequence[int]) -> list[int]:
    """Return a new ascending list using selection sort."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def merge_sorted(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Merge two ascending sequences by filling the result from the back."""
    m, n = len(a), len(b)
    result = list(a) + [0] * n
    while n:
        if m and a[m - 1] > b[n - 1]:
            result[m + n - 1] = a[m - 1]
            m -= 1
        else:
            result[m + n - 1] = b[n - 1]
            n -= 1
    return result


def partition(values: list[int], low: int, high: int) -> int:
    """Partition ``values[low:high+1]`` in place around its last element.

    Returns the final position of the pivot.
    """
    pivot = values[high]
    store = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[high] = values[high], values[store]
    return store


def kth_largest(values: Sequence[int], k: int) -> int:
    """Return the k-th largest value using quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}, got {k}")
    target = len(items) - k
    low, high = 0, len(items) - 1
    while True:
        pos = partition(items, low, high)
        if pos == target:
            return items[pos]
        if target < pos:
            high = pos - 1
        else:
            low = pos + 1


def find_max_min(values: Sequence[int]) -> MaxMin:
    """Return the maximum and minimum of ``values`` with their first indices."""
    if not values:
        raise ValueError("find_max_min() requires at least one value")
    positions = range(len(values))
    max_index = max(positions, key=values.__getitem__)
    min_index = min(positions, key=values.__getitem__)
    return MaxMin(values[max_index], max_index, values[min_index], min_index)


def find_element(matrix: Sequence[Sequence[int]], key: int) -> tuple[int, int] | None:
    """Locate ``key`` in a matrix sorted along rows and columns.

    Returns ``(row, column)`` or ``None`` when the key is absent.
    """
    if not matrix or not matrix[0]:
        return None
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == key:
            return row, col
        if value > key:
            col -= 1
        else:
            row += 1
    return None


def first_one(row: Sequence[int]) -> int | None:
    """Return the index of the first 1 in an ascending 0/1 row, or ``None``."""
    index = bisect.bisect_left(row, 1)
    if index < len(row) and row[index] == 1:
        return index
    return None


def row_with_most_ones(matrix: Sequence[Sequence[int]]) -> int:
    """Return the index of the row holding the most ones.

    Rows are ascending 0/1 sequences; ties go to the earliest row and a
    matrix without ones yields 0.
    """
    best_row, best_count = 0, -1
    for index, row in enumerate(matrix):
        first = first_one(row)
        if first is not None and len(row) - first > best_count:
            best_row, best_count = index, len(row) - first
    return best_row
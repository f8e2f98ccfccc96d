"""Classic comparison sorts that also report how many swaps they made."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Sort with bubble sort, stopping early once a pass makes no swap.

    Returns the sorted list and the number of swaps performed.
    """
    items = list(values)
    swaps = 0
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for left in range(end):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
                swapped = True
                swaps += 1
        if not swapped:
            break
    return items, swaps


def _insert_in_order(ordered: list[int], key: int) -> None:
    position = len(ordered)
    while position > 0 and key < ordered[position - 1]:
        position -= 1
    ordered.insert(position, key)


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort with insertion sort and return a new list."""
    ordered: list[int] = []
    for value in values:
        _insert_in_order(ordered, value)
    return ordered


def selection_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Sort with selection sort, swapping only when a smaller item was found.

    Returns the sorted list and the number of swaps performed.
    """
    items = list(values)
    swaps = 0
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        if items[smallest] < items[start]:
            items[start], items[smallest] = items[smallest], items[start]
            swaps += 1
    return items, swaps
"""Contiguous memory placement strategies and linked disk block allocation."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

Allocation = list["int | None"]


class AllocationError(Exception):
    """Raised when a disk allocation request cannot be satisfied."""


def _place(
    processes: Sequence[int],
    blocks: Sequence[int],
    choose: Callable[[list[int], list[int]], int],
) -> list[int | None]:
    free = list(blocks)
    allocation: list[int | None] = []
    for size in processes:
        candidates = [index for index, room in enumerate(free) if room >= size]
        if candidates:
            chosen = choose(candidates, free)
            free[chosen] -= size
            allocation.append(chosen)
        else:
            allocation.append(None)
    return allocation


def first_fit(processes: Sequence[int], blocks: Sequence[int]) -> list[int | None]:
    """Place each process in the first block with enough room.

    Returns the zero-based block index for each process, or None.
    """
    return _place(processes, blocks, lambda candidates, free: candidates[0])


def best_fit(processes: Sequence[int], blocks: Sequence[int]) -> list[int | None]:
    """Place each process in the smallest block with enough room."""
    return _place(
        processes, blocks, lambda candidates, free: min(candidates, key=free.__getitem__)
    )


def worst_fit(processes: Sequence[int], blocks: Sequence[int]) -> list[int | None]:
    """Place each process in the largest block with enough room."""
    return _place(
        processes, blocks, lambda candidates, free: max(candidates, key=free.__getitem__)
    )


def format_allocation(
    processes: Sequence[int], allocation: Sequence[int | None]
) -> str:
    """Render a placement as a table with one-based process and block numbers."""
    lines = ["\n process no\t\t\tprocess_size\t\t\tblock_size\n"]
    for number, (size, block) in enumerate(zip(processes, allocation), start=1):
        placed = "not allocated" if block is None else str(block + 1)
        lines.append(f"{number}\t\t\t\t {size}\t\t\t    {placed}\n\n")
    return "".join(lines)


def linked_allocate(
    allocated: Iterable[int], start: int, length: int, disk_size: int = 100
) -> list[int]:
    """Allocate ``length`` free blocks walking forward from ``start``.

    Blocks already in use are skipped. Returns the newly allocated blocks in
    order. Raises AllocationError if the start block is taken, a block number
    is outside the disk, or the disk runs out of blocks.
    """
    used = set(allocated)
    for block in used | {start}:
        if not 0 <= block < disk_size:
            raise AllocationError(f"block {block} is outside the disk")
    if length < 0:
        raise AllocationError("length must not be negative")
    if start in used:
        raise AllocationError("start is already allocated")

    chain: list[int] = []
    block = start
    while len(chain) < length:
        if block >= disk_size:
            raise AllocationError("not enough free blocks after the start block")
        if block not in used:
            chain.append(block)
        block += 1
    return chain
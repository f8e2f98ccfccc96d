from collections import defaultdict

import pytest

from ossim.allocation import (
    AllocationError,
    best_fit,
    first_fit,
    format_allocation,
    linked_allocate,
    worst_fit,
)


def _usage_within_capacity(processes, blocks, allocation):
    used = defaultdict(int)
    for size, block in zip(processes, allocation):
        if block is not None:
            used[block] += size
    return all(used[index] <= capacity for index, capacity in enumerate(blocks))


def test_first_fit_worked_example():
    assert first_fit([212, 417, 112, 426], [100, 500, 200, 300, 600]) == [1, 4, 1, None]


def test_best_fit_worked_example():
    assert best_fit([20, 45, 100, 426], [100, 50, 25, 430, 600]) == [2, 1, 0, 3]


def test_worst_fit_worked_example():
    result = worst_fit([350, 300, 100, 200, 500], [100, 500, 200, 300, 600])
    assert result == [4, 1, 3, 4, None]


def test_capacity_never_exceeded():
    processes = [212, 417, 112, 426, 50, 90]
    blocks = [100, 500, 200, 300, 600]
    allocations = [
        first_fit(processes, blocks),
        best_fit(processes, blocks),
        worst_fit(processes, blocks),
    ]
    for allocation in allocations:
        assert len(allocation) == len(processes)
        assert _usage_within_capacity(processes, blocks, allocation)


def test_oversized_process_is_not_allocated():
    assert first_fit([1000], [10, 20, 30]) == [None]
    assert best_fit([1000], [10, 20, 30]) == [None]
    assert worst_fit([1000], [10, 20, 30]) == [None]


def test_no_processes():
    assert first_fit([], [1, 2, 3]) == []
    assert best_fit([], [1, 2, 3]) == []
    assert worst_fit([], [1, 2, 3]) == []


def test_format_allocation_rows():
    processes = [212, 417, 112, 426]
    allocation = first_fit(processes, [100, 500, 200, 300, 600])
    text = format_allocation(processes, allocation)
    assert text.startswith("\n process no\t\t\tprocess_size\t\t\tblock_size\n")
    assert "1\t\t\t\t 212\t\t\t    2\n\n" in text
    assert "4\t\t\t\t 426\t\t\t    not allocated\n\n" in text


def test_linked_allocate_skips_used_blocks():
    used = {2, 3, 7}
    chain = linked_allocate(used, 1, 5)
    assert len(chain) == 5
    assert chain[0] == 1
    assert chain == sorted(chain)
    assert not used & set(chain)


def test_linked_allocate_zero_length():
    assert linked_allocate([], 10, 0) == []


def test_linked_allocate_start_taken():
    with pytest.raises(AllocationError):
        linked_allocate([5], 5, 2)


def test_linked_allocate_runs_off_disk():
    with pytest.raises(AllocationError):
        linked_allocate([], 98, 5)


def test_linked_allocate_block_outside_disk():
    with pytest.raises(AllocationError):
        linked_allocate([150], 0, 1)
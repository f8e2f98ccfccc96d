# ossim

Small simulations of classic operating-system algorithms, for study and
experiment. Everything is plain Python with no dependencies.

| Module | What it offers |
| --- | --- |
| `ossim.scheduling` | `fcfs`, `sjf` and `priority_schedule` for non-preemptive CPU scheduling, with waiting and turnaround times |
| `ossim.allocation` | `first_fit`, `best_fit` and `worst_fit` memory placement, and `linked_allocate` for disk blocks |
| `ossim.paging` | `fifo_page_replacement` with a frame-by-frame record and a page-fault count |
| `ossim.sorting` | `bubble_sort`, `insertion_sort` and `selection_sort` |
| `ossim.directories` | `SingleLevelDirectory` and `TwoLevelDirectory` |
| `ossim.cli` | the `ossim` command |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
ossim --help
```

The command has three subcommands.

**Scheduling.** Give an algorithm (`fcfs`, `sjf` or `priority`) and the burst
time of each process. Processes are numbered from 1 in the order given.
Priorities are optional (they default to 0); lower values run first.

```
ossim schedule fcfs 5 8 2 7
ossim schedule sjf 5 4 8 2
ossim schedule priority 10 1 2 --priorities 3 1 2
```

It prints a table of process id, burst time, priority, waiting time and
turnaround time, followed by the average waiting and turnaround times.
Giving a different number of priorities than bursts, or a negative burst
time, is an error.

**Directories.** `ossim single` and `ossim two-level` start interactive menu
sessions on a single-level or a two-level directory. Menu choices and names
are read from standard input as whitespace-separated words, so a session can
also be piped in:

```
printf '1 a.txt 1 b.txt 3 2 a.txt 3 4' | ossim single
printf '1 docs 2 docs notes.txt 4 5' | ossim two-level
```

The session ends at the exit choice or at the end of input.

## Library use

### Scheduling

```python
from ossim.scheduling import Process, fcfs, sjf, priority_schedule, format_schedule

schedule = fcfs([Process(1, 5), Process(2, 8), Process(3, 2), Process(4, 7)])
for entry in schedule:
    print(entry.process.pid, entry.waiting_time, entry.turnaround_time)
print(schedule.average_waiting_time())      # 8.25
print(schedule.average_turnaround_time())
print(format_schedule(schedule))
```

`sjf` orders by burst time and `priority_schedule` by priority. Both are
stable, so ties keep the order they were given in. A `Process` with a
negative burst time raises `ValueError`. Asking an empty `Schedule` for an
average also raises `ValueError`.

### Memory allocation

```python
from ossim.allocation import first_fit, best_fit, worst_fit, format_allocation

processes = [212, 417, 112, 426]
allocation = first_fit(processes, [100, 500, 200, 300, 600])
print(allocation)                           # [1, 4, 1, None]
print(format_allocation(processes, allocation))
```

Each strategy returns the zero-based block index for every process, or `None`
where no block had room. Placed processes use up space in their block. The
block list passed in is not changed. `format_allocation` numbers processes
and blocks from 1.

### Linked disk allocation

```python
from ossim.allocation import linked_allocate, AllocationError

print(linked_allocate([3, 5], start=2, length=4))   # [2, 4, 6, 7]
```

Starting at `start`, it walks forward and takes `length` free blocks,
skipping blocks that are already in use. The disk has 100 blocks by default,
which `disk_size` changes. `AllocationError` is raised in these cases:

- the start block is already taken
- a block number lies outside the disk
- the length is negative
- the disk runs out of blocks

### Page replacement

```python
from ossim.paging import fifo_page_replacement, format_paging_table

refs = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
result = fifo_page_replacement(refs, frames=3)
print(result.faults, result.hits)           # 15 5
print(format_paging_table(result))
```

`result.steps` holds the frame contents after each reference, with `None`
for an empty frame. Fewer than one frame raises `ValueError`.

### Sorting

```python
from ossim.sorting import bubble_sort, insertion_sort, selection_sort

print(bubble_sort([5, 1, 4, 2]))        # (sorted list, number of swaps)
print(selection_sort([5, 1, 4, 2]))     # (sorted list, number of swaps)
print(insertion_sort([5, 1, 4, 2]))     # sorted list
```

All three return new lists and leave their input alone. Bubble sort stops
early after a pass with no swaps. Selection sort swaps only when it finds a
smaller item.

### Directories

```python
from ossim.directories import SingleLevelDirectory, TwoLevelDirectory, DirectoryError

flat = SingleLevelDirectory()
flat.add("a.txt")
flat.add("b.txt")
flat.add("c.txt")
flat.delete("a.txt")
print(flat.files())                     # ['c.txt', 'b.txt']

root = TwoLevelDirectory()
root.create_directory("docs")
root.add_file("docs", "notes.txt")
print(root.listing())                   # [('docs', ['notes.txt'])]
```

Deleting a file moves the last file into its place, so the order changes.
A single-level directory holds 100 files by default. A two-level directory
holds 10 directories of 100 files each. Each limit can be set in the
constructor.

`DirectoryError` is raised in these cases:

- adding to a full directory
- creating a directory past the limit
- naming a directory or file that does not exist

## What it does not do

- The `ossim` command covers only scheduling and the two directory sessions.
  Memory allocation, linked disk allocation, page replacement and sorting are
  available only from Python.
- The scheduling is non-preemptive. All processes arrive at time zero, and
  arrival times are not modelled.
- The directories live in memory only. Nothing is saved between sessions.
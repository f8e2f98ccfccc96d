"""FIFO page replacement simulation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class PagingResult:
    """Outcome of a page replacement run.

    ``steps`` holds the frame contents after each reference; empty frames
    are None.
    """

    references: tuple[int, ...]
    frames: int
    steps: tuple[tuple[int | None, ...], ...]
    faults: int

    @property
    def hits(self) -> int:
        return len(self.references) - self.faults


def fifo_page_replacement(references: Iterable[int], frames: int) -> PagingResult:
    """Simulate FIFO page replacement with the given number of frames."""
    if frames < 1:
        raise ValueError("frames must be at least 1")
    refs = tuple(references)
    slots: list[int | None] = [None] * frames
    steps: list[tuple[int | None, ...]] = []
    faults = 0
    for page in refs:
        if page not in slots:
            slots[faults % frames] = page
            faults += 1
        steps.append(tuple(slots))
    return PagingResult(refs, frames, tuple(steps), faults)


def format_paging_table(result: PagingResult) -> str:
    """Render a run as a table of frame contents per reference."""
    header = "\t".join(f"frame-{number}" for number in range(1, result.frames + 1))
    lines = [f"\n string-reference\t  {header}\n"]
    for page, snapshot in zip(result.references, result.steps):
        cells = "".join("\t-" if slot is None else f"\t{slot}" for slot in snapshot)
        lines.append(f" {page}\t\t\t{cells}\n\n")
    lines.append(f"\n total no.of pagefaults is : {result.faults}")
    return "".join(lines)
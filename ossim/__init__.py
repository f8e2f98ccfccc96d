"""Simulations of classic operating-system algorithms: CPU scheduling, memory
and disk allocation, FIFO page replacement, sorting and directory structures."""

__version__ = "0.1.0"
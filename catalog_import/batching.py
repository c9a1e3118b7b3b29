"""Fixed-size batching for backend submissions."""

import math
from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class BatchJob(Generic[T]):
    """An ordered slice of a larger work list."""
    items: list[T]
    index: int
    total: int
    start: int

    @property
    def label(self) -> str:
        return f"{self.index}/{self.total}"

    def __len__(self) -> int:
        return len(self.items)


def batch_count(length: int, batch_size: int) -> int:
    """Number of batches needed to cover ``length`` items."""
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return math.ceil(length / batch_size)


def iter_batches(items: Sequence[T], batch_size: int) -> Iterator[BatchJob[T]]:
    """
    Partition ``items`` into consecutive batches of ``batch_size``.

    Every batch but possibly the last holds exactly ``batch_size`` items;
    concatenating the batches in order reproduces ``items``.
    """
    total = batch_count(len(items), batch_size)
    for number, start in enumerate(range(0, len(items), batch_size), start=1):
        yield BatchJob(
            items=list(items[start:start + batch_size]),
            index=number,
            total=total,
            start=start,
        )

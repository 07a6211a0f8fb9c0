"""Index blocks describing one dimension of a tensor subset."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["IndexBlock", "span", "single", "empty"]


@dataclass
class IndexBlock:
    """One dimension's selection: a span, a single index, or everything.

    An empty block selects the whole dimension; a single block drops it.
    """

    start: int = 0
    stop: int = 0
    is_empty: bool = False
    is_single: bool = False

    def extent(self) -> int:
        """Number of indices covered by ``start..stop`` inclusive."""
        return self.stop - self.start + 1

    def update(self, external_start: int, external_stride: int) -> None:
        """Map this block into an outer index space in place."""
        if self.is_empty:
            return
        self.start = external_start + external_stride * self.start
        if self.is_single:
            return
        self.stop = external_start + external_stride * self.stop


def span(start: int, stop: int) -> IndexBlock:
    """Block selecting ``start..stop`` inclusive."""
    return IndexBlock(start=start, stop=stop)


def single(index: int) -> IndexBlock:
    """Block selecting one index, dropping the dimension."""
    return IndexBlock(start=index, stop=0, is_single=True)


def empty() -> IndexBlock:
    """Block selecting the whole dimension."""
    return IndexBlock(start=0, stop=0, is_empty=True)
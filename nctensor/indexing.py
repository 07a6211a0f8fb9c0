"""Indexing a tensor by a vector, a scalar, or sequences of positions.

:class:`IndexByVecView` replaces one dimension of a column-major tensor by
an index vector, so that ``x[, f(1:5), ]``-style nested indexing can be
read and written. :func:`index_by_scalar` drops one dimension at a fixed
offset, and :func:`index_by_seqs` takes inclusive ranges on some
dimensions. The last two return numpy views that share memory with the
input.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence

import numpy as np

__all__ = ["IndexByVecView", "index_by_vec", "index_by_scalar", "index_by_seqs"]


def _check_dim(arr: np.ndarray, dim: int) -> int:
    dim = int(dim)
    if not 0 <= dim < arr.ndim:
        raise ValueError(f"dimension {dim} is out of range for a {arr.ndim}-D tensor")
    return dim


class IndexByVecView:
    """A tensor with dimension ``dim`` replaced by an index vector.

    Output element ``(..., k, ...)`` is input element ``(..., indices[k], ...)``.
    With ``r_indexing`` the indices count from 1. Reads and writes go
    straight to ``x``.
    """

    def __init__(
        self,
        x: Any,
        dim: int,
        indices: Any,
        r_indexing: bool = False,
    ) -> None:
        arr = np.asarray(x)
        if arr.ndim == 0:
            raise ValueError("cannot index a 0-dimensional tensor by a vector")
        dim = _check_dim(arr, dim)
        raw = np.asarray(indices).reshape(-1, order="F")
        if raw.size and not np.issubdtype(raw.dtype, np.integer):
            as_float = raw.astype(float)
            if not np.all(as_float == np.round(as_float)):
                raise ValueError("index vector must hold whole numbers")
        positions = raw.astype(np.int64) - (1 if r_indexing else 0)
        extent = arr.shape[dim]
        bad = (positions < 0) | (positions >= extent)
        if np.any(bad):
            first = int(raw[np.argmax(bad)])
            raise IndexError(
                f"index {first} is out of range for dimension {dim} of size {extent}"
            )

        self._x = arr
        self._dim = dim
        self._r_indexing = bool(r_indexing)
        self._positions = positions
        input_dims = arr.shape
        self._stride_dim = math.prod(input_dims[:dim])
        self._is_first = dim == 0
        self._is_last = dim == arr.ndim - 1
        updated = positions.size
        self._stride_next_input = self._stride_dim * input_dims[dim]
        self._stride_next = self._stride_dim * updated
        dims = list(input_dims)
        dims[dim] = updated
        self._dimensions = tuple(dims)

    @property
    def dim(self) -> int:
        """The dimension replaced by the index vector."""
        return self._dim

    @property
    def dimensions(self) -> tuple[int, ...]:
        """Shape of the indexed view."""
        return self._dimensions

    @property
    def size(self) -> int:
        """Total number of elements in the view."""
        return math.prod(self._dimensions)

    def process_index(self, index: int) -> int:
        """Flat column-major input position of the ``index``-th output element."""
        index = int(index)
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range for {self.size} elements")
        iv = self._positions
        if self._is_last:
            if self._is_first:
                return int(iv[index])
            input_index = 0
        else:
            idx = index // self._stride_next
            input_index = idx * self._stride_next_input
            index -= idx * self._stride_next
        if self._is_first:
            input_index += int(iv[index])
        else:
            idx = index // self._stride_dim
            input_index += int(iv[idx]) * self._stride_dim
            index -= idx * self._stride_dim
            input_index += index
        return input_index

    def _linear(self, index: Any) -> int:
        if isinstance(index, (int, np.integer)):
            return int(index)
        idx = tuple(int(i) for i in index)
        if len(idx) != len(self._dimensions):
            raise IndexError(
                f"expected {len(self._dimensions)} indices, got {len(idx)}"
            )
        linear = 0
        scale = 1
        for i, n in zip(idx, self._dimensions):
            if not 0 <= i < n:
                raise IndexError(f"index {idx} out of range for {self._dimensions}")
            linear += i * scale
            scale *= n
        return linear

    def _source(self, index: Any) -> tuple[int, ...]:
        flat = self.process_index(self._linear(index))
        return tuple(
            int(i) for i in np.unravel_index(flat, self._x.shape, order="F")
        )

    def __getitem__(self, index: Any) -> Any:
        return self._x[self._source(index)]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._x[self._source(index)] = value

    def to_array(self) -> np.ndarray:
        """Copy the indexed elements into a new column-major array."""
        flat = np.array(
            [self[i] for i in range(self.size)], dtype=self._x.dtype
        )
        return flat.reshape(self._dimensions, order="F")

    def assign(self, other: Any) -> None:
        """Write ``other`` (broadcast to the view's shape) into the tensor."""
        values = np.broadcast_to(np.asarray(other), self._dimensions)
        for i, value in enumerate(values.reshape(-1, order="F")):
            self[i] = value

    def __repr__(self) -> str:
        return (
            f"IndexByVecView(dim={self._dim}, dimensions={self._dimensions}, "
            f"r_indexing={self._r_indexing})"
        )


def index_by_vec(
    x: Any, dim: int, indices: Any, r_indexing: bool = False
) -> IndexByVecView:
    """Index dimension ``dim`` of ``x`` by the vector ``indices``."""
    return IndexByVecView(x, dim, indices, r_indexing)


def index_by_scalar(x: Any, dim: int, offset: int) -> np.ndarray:
    """Fix dimension ``dim`` of ``x`` at ``offset``, dropping that dimension.

    The result is a view sharing memory with ``x``.
    """
    arr = np.asarray(x)
    if arr.ndim == 0:
        raise ValueError("cannot chip a 0-dimensional tensor")
    dim = _check_dim(arr, dim)
    offset = int(offset)
    if not 0 <= offset < arr.shape[dim]:
        raise IndexError(
            f"offset {offset} is out of range for dimension {dim} of size {arr.shape[dim]}"
        )
    key = (slice(None),) * dim + (offset,)
    return arr[key]


def index_by_seqs(x: Any, seqs: Iterable[Sequence[int]]) -> np.ndarray:
    """Slice ``x`` by ``(dim, start, end)`` triples, ends inclusive.

    Dimensions not named are kept whole. The result is a view sharing
    memory with ``x``.
    """
    arr = np.asarray(x)
    slices = [slice(None)] * arr.ndim
    for seq in seqs:
        if len(seq) != 3:
            raise ValueError(f"sequence must be (dim, start, end), got {tuple(seq)!r}")
        dim, start, end = (int(v) for v in seq)
        dim = _check_dim(arr, dim)
        size = arr.shape[dim]
        extent = end - start + 1
        if start < 0 or extent < 0 or start + extent > size:
            raise IndexError(
                f"range {start}..{end} is out of bounds for dimension {dim} of size {size}"
            )
        slices[dim] = slice(start, start + extent)
    return arr[tuple(slices)]
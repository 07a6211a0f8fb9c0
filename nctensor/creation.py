"""Tensor creation and logical-index helpers for column-major arrays."""

from __future__ import annotations

from typing import Any

import numpy as np

__all__ = ["create_tensor", "set_which", "set_which0"]


def _dims(ndim: int, args: tuple[Any, ...]) -> tuple[int, ...]:
    if len(args) == 1 and np.ndim(args[0]) > 0:
        vector = np.asarray(args[0]).ravel()
        if vector.size < ndim:
            raise ValueError(
                f"dimension vector has {vector.size} entries, need {ndim}"
            )
        raw = vector[:ndim]
    else:
        if len(args) != ndim:
            raise ValueError(f"expected {ndim} dimensions, got {len(args)}")
        raw = args
    dims = tuple(int(d) for d in raw)
    if any(d < 0 for d in dims):
        raise ValueError(f"dimensions must be non-negative, got {dims}")
    return dims


def create_tensor(value: Any, ndim: int, *args: Any) -> np.ndarray:
    """Create an ``ndim``-dimensional tensor.

    Dimensions come as ``ndim`` separate numbers (truncated to integers) or
    as a single vector. A scalar ``value`` fills the tensor; an array value
    is reshaped in column-major order and must have the matching size.
    """
    dims = _dims(ndim, args)
    if np.ndim(value) == 0:
        return np.full(dims, value, dtype=np.asarray(value).dtype, order="F")
    source = np.asarray(value)
    if source.size != int(np.prod(dims, dtype=np.int64)):
        raise ValueError(
            f"cannot reshape {source.size} elements into dimensions {dims}"
        )
    flat = source.reshape(-1, order="F")
    return np.asfortranarray(flat.reshape(dims, order="F"))


def set_which(mask: Any) -> np.ndarray:
    """One-based positions of true elements, in column-major order."""
    flags = np.asarray(mask, dtype=bool).reshape(-1, order="F")
    return (np.flatnonzero(flags) + 1).astype(int)


def set_which0(flag: bool) -> np.ndarray:
    """``[1]`` for a true scalar, an empty vector otherwise."""
    return np.array([1] if flag else [], dtype=int)
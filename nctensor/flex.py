"""Assignment that adapts to the dimensions of the right-hand side.

These helpers settle at run time whether a value can be assigned to a
target with a different number of dimensions. Dimensions of size 1 may
be dropped or added, but the non-1 dimensions must line up in order.
Data move in column-major order throughout.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

__all__ = [
    "DimensionMismatchError",
    "check_dims_all_one",
    "check_dims",
    "check_and_setup_dims",
    "assign_fixed_size",
    "assign_whole_object",
    "assign_to_scalar",
    "scalar_cast",
]


class DimensionMismatchError(ValueError):
    """Raised when the right-hand side cannot fit the target's dimensions."""


def _non_one(dims: Sequence[int]) -> list[int]:
    return [int(d) for d in dims if int(d) != 1]


def check_dims_all_one(dims: Sequence[int]) -> bool:
    """True when every dimension is 1 (or there are none)."""
    return all(int(d) == 1 for d in dims)


def check_dims(less_dims: Sequence[int], more_dims: Sequence[int]) -> bool:
    """True when both shapes have the same non-1 dimensions in the same order."""
    return _non_one(less_dims) == _non_one(more_dims)


def check_and_setup_dims(lhs_ndim: int, rhs_dims: Sequence[int]) -> tuple[int, ...]:
    """Fit ``rhs_dims`` into ``lhs_ndim`` dimensions.

    Dimensions of size 1 are dropped and the result is padded with 1s at
    the end. Raises :class:`DimensionMismatchError` when there are more
    non-1 dimensions than ``lhs_ndim``.
    """
    kept = _non_one(rhs_dims)
    if len(kept) > lhs_ndim:
        raise DimensionMismatchError(
            f"cannot fit dimensions {tuple(rhs_dims)} into {lhs_ndim} dimensions"
        )
    return tuple(kept + [1] * (lhs_ndim - len(kept)))


def assign_fixed_size(lhs: np.ndarray, rhs: Any) -> np.ndarray:
    """Copy ``rhs`` into ``lhs`` in place, without changing the shape of ``lhs``.

    With equal numbers of dimensions the shapes must match exactly;
    otherwise their non-1 dimensions must match. Returns ``lhs``.
    """
    if not isinstance(lhs, np.ndarray):
        raise TypeError("lhs must be a numpy array")
    source = np.asarray(rhs)
    if source.ndim == lhs.ndim:
        if source.shape != lhs.shape:
            raise DimensionMismatchError(
                f"cannot assign shape {source.shape} to shape {lhs.shape}"
            )
        lhs[...] = source
        return lhs
    if not check_dims(lhs.shape, source.shape):
        raise DimensionMismatchError(
            f"cannot assign shape {source.shape} to shape {lhs.shape}"
        )
    lhs[...] = source.reshape(lhs.shape, order="F")
    return lhs


def assign_whole_object(lhs_ndim: int, rhs: Any) -> np.ndarray:
    """Return a new ``lhs_ndim``-dimensional array holding the values of ``rhs``.

    The target's sizes are taken from the non-1 dimensions of ``rhs``,
    padded with 1s.
    """
    source = np.asarray(rhs)
    if source.ndim == lhs_ndim:
        return np.array(source, order="F", copy=True)
    dims = check_and_setup_dims(lhs_ndim, source.shape)
    return np.asfortranarray(source.reshape(dims, order="F")).copy(order="F")


def _cast(value: Any, scalar_type: Callable[[Any], Any]) -> Any:
    if isinstance(value, np.generic):
        value = value.item()
    return scalar_type(value)


def assign_to_scalar(rhs: Any, scalar_type: Callable[[Any], Any] = float) -> Any:
    """Convert ``rhs`` to a scalar of ``scalar_type``.

    ``rhs`` may be a scalar, a 0-dimensional array, or an array whose
    dimensions are all 1; anything else raises
    :class:`DimensionMismatchError`.
    """
    source = np.asarray(rhs)
    if source.ndim == 0:
        return _cast(source[()], scalar_type)
    if not check_dims_all_one(source.shape):
        raise DimensionMismatchError(
            f"cannot assign shape {source.shape} to a scalar"
        )
    return _cast(source.reshape(-1)[0], scalar_type)


def scalar_cast(x: Any, scalar_type: Callable[[Any], Any]) -> Any:
    """Cast a scalar or 0-dimensional array to ``scalar_type``."""
    source = np.asarray(x)
    if source.ndim != 0:
        raise DimensionMismatchError(
            f"scalar_cast needs a 0-dimensional value, got shape {source.shape}"
        )
    return _cast(source[()], scalar_type)
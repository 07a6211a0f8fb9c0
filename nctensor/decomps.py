"""Result objects for matrix decompositions and derivatives.

Each class exposes named fields that can be read and written by name.
Writing a field converts the value to the field's declared kind: a tensor
of fixed rank and scalar type, a real or integer scalar, or a vector of
strings. One-dimensional tensor fields accept input of any shape and
flatten it in column-major order. Fields of higher rank need input of
exactly that rank.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Mapping

import numpy as np

from .flex import DimensionMismatchError, assign_to_scalar

__all__ = ["FieldInterface", "EigenDecomp", "SVDDecomp", "DerivResult"]


@dataclass(frozen=True)
class _Field:
    attr: str
    convert: Callable[[Any], Any]


def _tensor(ndim: int, dtype: Any = float) -> Callable[[Any], np.ndarray]:
    def convert(value: Any) -> np.ndarray:
        arr = np.asarray(value, dtype=dtype)
        if ndim == 1:
            return arr.reshape(-1, order="F").copy()
        if arr.ndim != ndim:
            raise DimensionMismatchError(
                f"Dimension mismatch on input. Expected {ndim}, but got {max(arr.ndim, 1)}."
            )
        return np.array(arr, order="F", copy=True)

    return convert


def _real(value: Any) -> float:
    return assign_to_scalar(value, float)


def _integer(value: Any) -> int | None:
    if value is None:
        return None
    return assign_to_scalar(value, int)


def _strings(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in np.asarray(value, dtype=object).reshape(-1, order="F"))


def _empty(ndim: int, dtype: Any = float) -> Callable[[], np.ndarray]:
    return lambda: np.zeros((0,) * ndim, dtype=dtype)


class FieldInterface:
    """Access to an object's declared fields by their exposed names."""

    _fields: ClassVar[Mapping[str, _Field]] = {}

    def __post_init__(self) -> None:
        for spec in self._fields.values():
            setattr(self, spec.attr, spec.convert(getattr(self, spec.attr)))

    def _field(self, name: str) -> _Field:
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(
                f"{type(self).__name__} has no field named {name!r}"
            ) from None

    def field_names(self) -> tuple[str, ...]:
        """Exposed field names, in declaration order."""
        return tuple(self._fields)

    def get_value(self, name: str) -> Any:
        """Current value of the field ``name``."""
        return getattr(self, self._field(name).attr)

    def set_value(self, name: str, value: Any) -> None:
        """Convert ``value`` to the kind of field ``name`` and store it."""
        spec = self._field(name)
        setattr(self, spec.attr, spec.convert(value))


@dataclass(eq=False)
class EigenDecomp(FieldInterface):
    """Eigenvalues and eigenvectors of a square matrix."""

    values: np.ndarray = field(default_factory=_empty(1))
    vectors: np.ndarray = field(default_factory=_empty(2))

    _fields: ClassVar[Mapping[str, _Field]] = {
        "values": _Field("values", _tensor(1)),
        "vectors": _Field("vectors", _tensor(2)),
    }


@dataclass(eq=False)
class SVDDecomp(FieldInterface):
    """Singular values ``d`` and singular vectors ``v`` and ``u``."""

    d: np.ndarray = field(default_factory=_empty(1))
    v: np.ndarray = field(default_factory=_empty(2))
    u: np.ndarray = field(default_factory=_empty(2))

    _fields: ClassVar[Mapping[str, _Field]] = {
        "d": _Field("d", _tensor(1)),
        "v": _Field("v", _tensor(2)),
        "u": _Field("u", _tensor(2)),
    }


@dataclass(eq=False)
class DerivResult(FieldInterface):
    """Function value, gradient and Hessian from a derivative evaluation."""

    value: np.ndarray = field(default_factory=_empty(1))
    gradient: np.ndarray = field(default_factory=_empty(2))
    hessian: np.ndarray = field(default_factory=_empty(3))

    _fields: ClassVar[Mapping[str, _Field]] = {
        "value": _Field("value", _tensor(1)),
        "gradient": _Field("gradient", _tensor(2)),
        "hessian": _Field("hessian", _tensor(3)),
    }
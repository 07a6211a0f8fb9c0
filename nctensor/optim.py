"""Control settings and results for numerical optimisation."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

import numpy as np

from .creation import create_tensor
from .decomps import (
    FieldInterface,
    _empty,
    _Field,
    _integer,
    _real,
    _strings,
    _tensor,
)

__all__ = ["OptimResultList", "OptimControlList"]


@dataclass(eq=False)
class OptimResultList(FieldInterface):
    """Outcome of an optimisation run."""

    par: np.ndarray = field(default_factory=_empty(1))
    value: float = 0.0
    hessian: np.ndarray = field(default_factory=_empty(2))
    counts: np.ndarray = field(default_factory=_empty(1, int))
    convergence: int = 0
    message: tuple[str, ...] = ()

    _fields: ClassVar[Mapping[str, _Field]] = {
        "par": _Field("par", _tensor(1)),
        "value": _Field("value", _real),
        "hessian": _Field("hessian", _tensor(2)),
        "counts": _Field("counts", _tensor(1, int)),
        "convergence": _Field("convergence", _integer),
        "message": _Field("message", _strings),
    }


@dataclass(eq=False)
class OptimControlList(FieldInterface):
    """Tuning settings for an optimiser; ``maxit`` of ``None`` means unset."""

    trace: int = 0
    fnscale: float = 0.0
    parscale: np.ndarray = field(default_factory=_empty(1))
    ndeps: np.ndarray = field(default_factory=_empty(1))
    maxit: int | None = None
    abstol: float = 0.0
    reltol: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0
    report: int = 0
    type: int = 0
    lmm: int = 0
    factr: float = 0.0
    pgtol: float = 0.0
    tmax: int = 0
    temp: float = 0.0

    _fields: ClassVar[Mapping[str, _Field]] = {
        "trace": _Field("trace", _integer),
        "fnscale": _Field("fnscale", _real),
        "parscale": _Field("parscale", _tensor(1)),
        "ndeps": _Field("ndeps", _tensor(1)),
        "maxit": _Field("maxit", _integer),
        "abstol": _Field("abstol", _real),
        "reltol": _Field("reltol", _real),
        "alpha": _Field("alpha", _real),
        "beta": _Field("beta", _real),
        "gamma": _Field("gamma", _real),
        "REPORT": _Field("report", _integer),
        "type": _Field("type", _integer),
        "lmm": _Field("lmm", _integer),
        "factr": _Field("factr", _real),
        "pgtol": _Field("pgtol", _real),
        "tmax": _Field("tmax", _integer),
        "temp": _Field("temp", _real),
    }
    _methods: ClassVar[Mapping[str, str]] = {"initToDefaults": "init_to_defaults"}

    def init_to_defaults(self) -> None:
        """Reset every setting to its standard default."""
        self.trace = 0
        self.fnscale = 1.0
        self.parscale = create_tensor(1.0, 1, 1.0)
        self.ndeps = create_tensor(0.001, 1, 1.0)
        self.abstol = -math.inf
        self.reltol = math.sqrt(sys.float_info.epsilon)
        self.maxit = None
        self.alpha = 1.0
        self.beta = 0.5
        self.gamma = 2.0
        self.report = 10
        self.type = 1
        self.lmm = 5
        self.factr = 1e7
        self.pgtol = 0.0
        self.tmax = 10
        self.temp = 10.0

    def call_method(self, name: str, *args: Any) -> Any:
        """Call the method exposed as ``name`` with ``args``."""
        try:
            attr = self._methods[name]
        except KeyError:
            raise KeyError(
                f"{type(self).__name__} has no method named {name!r}"
            ) from None
        return getattr(self, attr)(*args)
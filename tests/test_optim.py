import math

import numpy as np
import pytest

from nctensor.flex import DimensionMismatchError
from nctensor.optim import OptimControlList, OptimResultList


def test_control_field_names():
    assert OptimControlList().field_names() == (
        "trace", "fnscale", "parscale", "ndeps", "maxit", "abstol", "reltol",
        "alpha", "beta", "gamma", "REPORT", "type", "lmm", "factr", "pgtol",
        "tmax", "temp",
    )


def test_init_to_defaults_values():
    control = OptimControlList()
    control.init_to_defaults()
    assert control.trace == 0
    assert control.fnscale == 1.0
    assert control.parscale.tolist() == [1.0]
    assert control.ndeps.tolist() == [0.001]
    assert control.maxit is None
    assert control.abstol == -math.inf
    assert control.reltol == pytest.approx(1.4901161193847656e-08)
    assert control.alpha == 1.0
    assert control.beta == 0.5
    assert control.gamma == 2.0
    assert control.report == 10
    assert control.type == 1
    assert control.lmm == 5
    assert control.factr == 1e7
    assert control.pgtol == 0.0
    assert control.tmax == 10
    assert control.temp == 10.0


def test_call_method_init_to_defaults():
    control = OptimControlList()
    assert control.call_method("initToDefaults") is None
    assert control.get_value("REPORT") == 10
    assert control.get_value("fnscale") == 1.0


def test_call_unknown_method():
    with pytest.raises(KeyError):
        OptimControlList().call_method("missing")


def test_call_method_rejects_extra_arguments():
    with pytest.raises(TypeError):
        OptimControlList().call_method("initToDefaults", 1)


def test_generic_get_and_set_value():
    control = OptimControlList()
    control.set_value("temp", 3)
    assert control.get_value("temp") == 3.0
    assert isinstance(control.temp, float)


def test_report_field_maps_to_attribute():
    control = OptimControlList()
    control.set_value("REPORT", 4)
    assert control.report == 4


def test_integer_fields_truncate_and_accept_unset():
    control = OptimControlList()
    control.set_value("maxit", 2.7)
    assert control.maxit == 2
    control.set_value("maxit", None)
    assert control.maxit is None


def test_scalar_field_accepts_all_one_array():
    control = OptimControlList()
    control.set_value("trace", [[3]])
    assert control.trace == 3


def test_scalar_field_rejects_vector():
    with pytest.raises(DimensionMismatchError):
        OptimControlList().set_value("fnscale", [1.0, 2.0])


def test_unknown_field():
    with pytest.raises(KeyError):
        OptimControlList().set_value("missing", 1)


def test_result_list_conversions():
    result = OptimResultList(
        par=[1, 2], value=3, counts=[4.0, 5.0], convergence=0, message="ok"
    )
    assert result.par.tolist() == [1.0, 2.0]
    assert result.value == 3.0
    assert np.issubdtype(result.counts.dtype, np.integer)
    assert result.counts.tolist() == [4, 5]
    assert result.message == ("ok",)


def test_result_list_hessian_rank():
    result = OptimResultList()
    with pytest.raises(DimensionMismatchError):
        result.set_value("hessian", [1.0])
    result.set_value("hessian", np.eye(2))
    assert result.hessian.tolist() == [[1.0, 0.0], [0.0, 1.0]]


def test_result_list_message_from_sequence():
    result = OptimResultList()
    result.set_value("message", ["a", "b"])
    assert result.get_value("message") == ("a", "b")
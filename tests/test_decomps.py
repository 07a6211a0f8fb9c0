import numpy as np
import pytest

from nctensor.decomps import DerivResult, EigenDecomp, SVDDecomp
from nctensor.flex import DimensionMismatchError


def test_field_names_in_declaration_order():
    assert EigenDecomp().field_names() == ("values", "vectors")
    assert SVDDecomp().field_names() == ("d", "v", "u")
    assert DerivResult().field_names() == ("value", "gradient", "hessian")


def test_default_fields_are_empty_with_declared_rank():
    decomp = DerivResult()
    assert decomp.value.shape == (0,)
    assert decomp.gradient.shape == (0, 0)
    assert decomp.hessian.shape == (0, 0, 0)


def test_new_object_field_round_trip():
    decomp = EigenDecomp()
    decomp.set_value("values", [2.5])
    assert decomp.get_value("values").tolist() == [2.5]


def test_constructor_converts_to_float():
    decomp = EigenDecomp(values=[1, 2])
    assert decomp.values.dtype == np.float64
    assert decomp.values.tolist() == [1.0, 2.0]


def test_vector_field_flattens_column_major():
    decomp = EigenDecomp()
    decomp.set_value("values", [[1, 2], [3, 4]])
    assert decomp.values.tolist() == [1.0, 3.0, 2.0, 4.0]


def test_scalar_into_vector_field_gives_length_one():
    decomp = SVDDecomp()
    decomp.set_value("d", 7)
    assert decomp.d.tolist() == [7.0]


def test_matrix_field_requires_matching_rank():
    decomp = EigenDecomp()
    with pytest.raises(DimensionMismatchError):
        decomp.set_value("vectors", [1.0, 2.0])


def test_hessian_requires_three_dimensions():
    result = DerivResult()
    with pytest.raises(DimensionMismatchError):
        result.set_value("hessian", np.zeros((2, 2)))
    result.set_value("hessian", np.ones((1, 2, 3)))
    assert result.hessian.shape == (1, 2, 3)


def test_matrix_field_stores_copy():
    source = np.arange(4.0).reshape(2, 2)
    decomp = SVDDecomp()
    decomp.set_value("u", source)
    source[0, 0] = 99.0
    assert decomp.u[0, 0] == 0.0


def test_get_value_matches_attribute():
    decomp = SVDDecomp(v=np.eye(2))
    assert np.array_equal(decomp.get_value("v"), np.eye(2))
    assert decomp.get_value("v") is decomp.v


def test_unknown_field_raises_key_error():
    decomp = EigenDecomp()
    with pytest.raises(KeyError):
        decomp.get_value("missing")
    with pytest.raises(KeyError):
        decomp.set_value("missing", 1.0)


def test_constructor_rejects_wrong_rank():
    with pytest.raises(DimensionMismatchError):
        DerivResult(gradient=[1.0, 2.0])
"""Tests for the algebra and operations back-end."""

import numpy as np
import pytest
from qphase_ode.algebra import (
    DefaultOperations,
    RangeAlgebra,
    ScaleSum,
    VectorSpaceAlgebra,
    algebra_dispatcher,
    make_algebra,
    register_algebra,
)
from qphase_ode.core.errors import QPSAlgebraError
from qphase_ode.states import FixedShape


def test_scale_sum_combines_operands():
    op = DefaultOperations.scale_sum(1.0, 2.0, -1.0)
    assert isinstance(op, ScaleSum)
    assert op(1.0, 2.0, 3.0) == pytest.approx(2.0)
    assert np.allclose(op(np.ones(2), np.ones(2), np.zeros(2)), [3.0, 3.0])


def test_scale_sum_rejects_wrong_arity():
    with pytest.raises(QPSAlgebraError, match="202"):
        ScaleSum(1.0, 1.0)(1.0)
    with pytest.raises(QPSAlgebraError, match="201"):
        ScaleSum()


def test_vector_space_for_each_allows_aliasing():
    x = np.array([1.0, 2.0])
    VectorSpaceAlgebra().for_each(ScaleSum(2.0, 1.0), x, x, np.array([1.0, 1.0]))
    assert np.allclose(x, [3.0, 5.0])


def test_range_for_each_on_lists():
    out = [0.0, 0.0, 0.0]
    RangeAlgebra().for_each(ScaleSum(1.0, 0.5), out, [1.0, 2.0, 3.0], [2.0, 2.0, 2.0])
    assert out == [2.0, 3.0, 4.0]


def test_range_for_each_length_mismatch():
    with pytest.raises(QPSAlgebraError, match="210"):
        RangeAlgebra().for_each(ScaleSum(1.0, 1.0), [0.0, 0.0], [1.0, 2.0], [1.0])


def test_dispatcher_by_value_and_type():
    assert isinstance(algebra_dispatcher(np.zeros(3)), VectorSpaceAlgebra)
    assert isinstance(algebra_dispatcher(np.ndarray), VectorSpaceAlgebra)
    assert isinstance(algebra_dispatcher([1.0]), RangeAlgebra)
    assert isinstance(algebra_dispatcher(tuple), RangeAlgebra)
    assert isinstance(algebra_dispatcher(FixedShape((2,))), VectorSpaceAlgebra)


def test_dispatcher_unknown_type():
    with pytest.raises(QPSAlgebraError, match="220"):
        algebra_dispatcher(3.0)
    with pytest.raises(QPSAlgebraError, match="220"):
        algebra_dispatcher("abc")


def test_register_algebra():
    class Grid:
        pass

    register_algebra(Grid, RangeAlgebra)
    assert isinstance(algebra_dispatcher(Grid()), RangeAlgebra)


def test_make_algebra():
    assert isinstance(make_algebra("range"), RangeAlgebra)
    assert isinstance(make_algebra("vector_space"), VectorSpaceAlgebra)
    with pytest.raises(QPSAlgebraError, match="221"):
        make_algebra("tensor")

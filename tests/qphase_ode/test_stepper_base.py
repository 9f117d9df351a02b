"""Tests for the explicit stepper skeleton."""

import copy

import numpy as np
import pytest
from qphase_ode.core.errors import QPSStepperError
from qphase_ode.states import FixedShape
from qphase_ode.stepper import ExplicitStepperBase, NeverResizer, StepperCategory


class RecordingStepper(ExplicitStepperBase):
    """Stepper whose combination routine only records its arguments."""

    order_value = 3

    def __init__(self, *args, **kwargs):
        self.log = []
        super().__init__(*args, **kwargs)

    def do_step_impl(self, system, x_in, dxdt, t, x_out, dt):
        self.log.append(("impl", system, x_in, dxdt, t, x_out, dt))

    def resize_impl(self, x):
        self.log.append(("resize", np.shape(x)))


def _events(stepper):
    return [entry[0] for entry in stepper.log]


def test_adjust_size_is_idempotent_once_shape_matches():
    stepper = RecordingStepper()
    assert stepper.adjust_size(np.zeros(4)) is True
    assert stepper.adjust_size(np.ones(4)) is False
    assert _events(stepper) == ["resize"]
    assert stepper.dxdt.m_v.shape == (4,)


def test_adjust_size_follows_shape_changes():
    stepper = RecordingStepper()
    stepper.adjust_size(np.zeros(2))
    assert stepper.adjust_size(np.zeros((3, 2))) is True
    assert stepper.dxdt.m_v.shape == (3, 2)
    assert stepper.log[-1] == ("resize", (3, 2))


def test_do_step_resizes_mismatched_cache(counting_system):
    stepper = RecordingStepper()
    stepper.adjust_size(np.zeros(5))
    x = np.array([1.0, 0.0])

    stepper.do_step(counting_system, x, 0.0, 0.1)

    assert stepper.dxdt.m_v.shape == x.shape
    assert _events(stepper) == ["resize", "resize", "impl"]


def test_do_step_orders_resize_system_and_combination():
    stepper = RecordingStepper()

    def system(x, dxdt, t):
        stepper.log.append(("system",))
        dxdt[:] = 2.0 * x

    x = np.array([1.0, 3.0])
    stepper.do_step(system, x, 0.5, 0.1)

    assert _events(stepper) == ["resize", "system", "impl"]
    _, sys_arg, x_in, dxdt, t, x_out, dt = stepper.log[-1]
    assert sys_arg is system
    assert x_in is x and x_out is x
    assert dxdt is stepper.dxdt.m_v
    assert np.allclose(dxdt, [2.0, 6.0])
    assert (t, dt) == (0.5, 0.1)


def test_do_step_to_uses_cache_and_separate_output(counting_system):
    stepper = RecordingStepper()
    x_in = np.array([1.0, 0.0])
    x_out = np.empty(2)

    stepper.do_step_to(counting_system, x_in, 0.0, x_out, 0.1)

    assert counting_system.calls == [(2, 0.0)]
    _, _, got_in, dxdt, _, got_out, _ = stepper.log[-1]
    assert got_in is x_in and got_out is x_out
    assert dxdt is stepper.dxdt.m_v
    assert np.array_equal(x_in, [1.0, 0.0])


def test_do_step_with_deriv_skips_system_and_resize(counting_system):
    stepper = RecordingStepper()
    x = np.array([1.0, 0.0])
    dxdt = np.array([0.0, -1.0])

    stepper.do_step_with_deriv(counting_system, x, dxdt, 0.0, 0.1)

    assert counting_system.calls == []
    assert _events(stepper) == ["impl"]
    _, _, x_in, got_dxdt, _, x_out, _ = stepper.log[-1]
    assert x_in is x and x_out is x and got_dxdt is dxdt
    assert stepper.dxdt.m_v.shape == (0,)


def test_do_step_to_with_deriv_is_pure_delegate(counting_system):
    stepper = RecordingStepper()
    x_in = np.array([1.0, 0.0, 2.0])
    dxdt = np.array([0.5, 0.5, 0.5])
    x_out = np.empty(3)

    stepper.do_step_to_with_deriv(counting_system, x_in, dxdt, 1.5, x_out, 0.25)

    assert counting_system.calls == []
    assert stepper.log == [("impl", counting_system, x_in, dxdt, 1.5, x_out, 0.25)]
    assert stepper.dxdt.m_v.shape == (0,)


def test_order_is_constant_across_instances_and_steps(counting_system):
    a = RecordingStepper()
    b = RecordingStepper(resizer=NeverResizer())
    assert a.order() == b.order() == RecordingStepper.order_value == 3
    a.do_step(counting_system, np.array([1.0, 0.0]), 0.0, 0.1)
    assert a.order() == 3


def test_fixed_shape_deriv_never_resizes():
    stepper = RecordingStepper(deriv_type=FixedShape((3,)))
    cache = stepper.dxdt.m_v

    assert stepper.is_resizeable is False
    assert stepper.adjust_size(np.zeros(5)) is False
    assert stepper.adjust_size(np.zeros((2, 2))) is False
    assert stepper.dxdt.m_v is cache
    assert cache.shape == (3,)
    assert "resize" not in _events(stepper)


def test_fixed_shape_deriv_steps_without_resize(counting_system):
    stepper = RecordingStepper(deriv_type=FixedShape((2,)))
    stepper.do_step(counting_system, np.array([1.0, 0.0]), 0.0, 0.1)
    assert _events(stepper) == ["impl"]
    assert np.allclose(stepper.dxdt.m_v, [0.0, -1.0])


def test_system_failure_propagates_unchanged():
    stepper = RecordingStepper()
    error = ValueError("bad rhs")

    def system(x, dxdt, t):
        raise error

    with pytest.raises(ValueError) as excinfo:
        stepper.do_step(system, np.zeros(2), 0.0, 0.1)
    assert excinfo.value is error
    assert "impl" not in _events(stepper)


def test_combination_failure_propagates_unchanged(counting_system):
    class Failing(RecordingStepper):
        def do_step_impl(self, system, x_in, dxdt, t, x_out, dt):
            raise FloatingPointError("overflow")

    with pytest.raises(FloatingPointError, match="overflow"):
        Failing().do_step_to(counting_system, np.zeros(2), 0.0, np.zeros(2), 0.1)


def test_invalid_order_value_is_rejected():
    with pytest.raises(QPSStepperError):

        class Bad(RecordingStepper):
            order_value = 0


def test_missing_order_value_is_rejected():
    class NoOrder(ExplicitStepperBase):
        def do_step_impl(self, system, x_in, dxdt, t, x_out, dt):
            pass

        def resize_impl(self, x):
            pass

    with pytest.raises(QPSStepperError):
        NoOrder()


def test_copy_does_not_share_cache():
    stepper = RecordingStepper()
    stepper.adjust_size(np.zeros(2))
    clone = copy.copy(stepper)

    assert clone.dxdt is not stepper.dxdt
    clone.adjust_size(np.zeros(6))
    assert clone.dxdt.m_v.shape == (6,)
    assert stepper.dxdt.m_v.shape == (2,)


@pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
def test_copy_rearms_initially_resizer(copier, counting_system):
    stepper = RecordingStepper({"resizer": "initially"})
    stepper.do_step(counting_system, np.ones(2), 0.0, 0.1)
    clone = copier(stepper)

    clone.do_step(counting_system, np.ones(3), 0.0, 0.1)
    assert clone.dxdt.m_v.shape == (3,)
    assert stepper.dxdt.m_v.shape == (2,)
    assert clone.resizer is not stepper.resizer
    assert clone.adjust_size(np.ones(4))
    assert clone.dxdt.m_v.shape == (4,)


def test_stepper_category():
    assert RecordingStepper().stepper_category is StepperCategory.STEPPER

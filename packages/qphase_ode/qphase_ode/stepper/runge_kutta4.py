"""qphase_ode: Classic Runge-Kutta Stepper
--------------------------------------
Fourth-order classic Runge-Kutta scheme.

Behavior
--------
- Three extra system evaluations per step at ``t + dt/2`` (twice) and
  ``t + dt``, combined with weights ``(1, 2, 2, 1) / 6``.
- Scratch buffers (one intermediate state, three stage derivatives) are
  wrappers of the stepper's derivative type. They are resized together with
  the derivative cache, and additionally on entry to ``do_step_impl`` so that
  the entry points taking a precomputed derivative also work on a fresh
  stepper.

"""

from typing import Any, ClassVar

from ..core.config import StepperConfig
from ..states import make_state_wrapper
from .base import ExplicitStepperBase, System

__all__ = [
    "RungeKutta4",
    "RungeKutta4Config",
]


class RungeKutta4Config(StepperConfig):
    """Configuration for the classic Runge-Kutta stepper."""

    pass


class RungeKutta4(ExplicitStepperBase):
    """Classic explicit Runge-Kutta stepper (order 4).

    Examples
    --------
    >>> import numpy as np
    >>> def growth(x, dxdt, t):
    ...     dxdt[:] = x
    >>> x = np.array([1.0])
    >>> RungeKutta4().do_step(growth, x, 0.0, 0.1)
    >>> round(float(x[0]), 6)
    1.105171

    References
    ----------
    - Butcher, J. C. (2016). Numerical Methods for Ordinary Differential
      Equations (3rd ed.). Wiley. doi:10.1002/9781119121534

    """

    name: ClassVar[str] = "runge_kutta4"
    description: ClassVar[str] = "Classic fourth-order Runge-Kutta scheme"
    config_schema: ClassVar[type[RungeKutta4Config]] = RungeKutta4Config
    order_value: ClassVar[int] = 4

    def __init__(self, config: Any = None, **kwargs: Any) -> None:
        super().__init__(config, **kwargs)
        self._x_tmp = make_state_wrapper(self.deriv_type)
        self._dxt = make_state_wrapper(self.deriv_type)
        self._dxm = make_state_wrapper(self.deriv_type)
        self._dxh = make_state_wrapper(self.deriv_type)
        if self.is_resizeable:
            self._scratch_path = self._adjust_scratch_resizeable
        else:
            self._scratch_path = self._adjust_scratch_fixed

    def do_step_impl(
        self, system: System, x_in: Any, dxdt: Any, t: float, x_out: Any, dt: float
    ) -> None:
        self._scratch_path(x_in)

        algebra = self.algebra
        ops = self.operations
        x_tmp = self._x_tmp.m_v
        dxt = self._dxt.m_v
        dxm = self._dxm.m_v
        dxh = self._dxh.m_v

        dh = dt / 2
        th = t + dh

        algebra.for_each(ops.scale_sum(1.0, dh), x_tmp, x_in, dxdt)
        system(x_tmp, dxt, th)

        algebra.for_each(ops.scale_sum(1.0, dh), x_tmp, x_in, dxt)
        system(x_tmp, dxm, th)

        algebra.for_each(ops.scale_sum(1.0, dt), x_tmp, x_in, dxm)
        system(x_tmp, dxh, t + dt)

        algebra.for_each(
            ops.scale_sum(1.0, dt / 6, dt / 3, dt / 3, dt / 6),
            x_out,
            x_in,
            dxdt,
            dxt,
            dxm,
            dxh,
        )

    def resize_impl(self, x: Any) -> None:
        for w in (self._x_tmp, self._dxt, self._dxm, self._dxh):
            if not w.same_size(x):
                w.resize(x)

    def _adjust_scratch_resizeable(self, x: Any) -> None:
        if not self._x_tmp.same_size(x):
            self.resize_impl(x)

    def _adjust_scratch_fixed(self, x: Any) -> None:
        pass

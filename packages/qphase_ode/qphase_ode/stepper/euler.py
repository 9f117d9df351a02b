"""qphase_ode: Explicit Euler Stepper
----------------------------------
First-order explicit Euler scheme ``x_out = x_in + dt * dxdt``.
"""

from typing import Any, ClassVar

from ..core.config import StepperConfig
from .base import ExplicitStepperBase, System

__all__ = [
    "Euler",
    "EulerConfig",
]


class EulerConfig(StepperConfig):
    """Configuration for the explicit Euler stepper."""

    pass


class Euler(ExplicitStepperBase):
    """Explicit Euler stepper (order 1).

    The scheme needs no buffers beyond the derivative cache, so
    ``resize_impl`` has nothing to do.

    Examples
    --------
    >>> import numpy as np
    >>> def oscillator(x, dxdt, t):
    ...     dxdt[0] = x[1]
    ...     dxdt[1] = -x[0]
    >>> x = np.array([1.0, 0.0])
    >>> Euler().do_step(oscillator, x, 0.0, 0.1)
    >>> x.tolist()
    [1.0, -0.1]

    References
    ----------
    - Hairer, E., Nørsett, S. P., & Wanner, G. (1993). Solving Ordinary
      Differential Equations I: Nonstiff Problems (2nd ed.). Springer.

    """

    name: ClassVar[str] = "euler"
    description: ClassVar[str] = "Explicit Euler scheme"
    config_schema: ClassVar[type[EulerConfig]] = EulerConfig
    order_value: ClassVar[int] = 1

    def do_step_impl(
        self, system: System, x_in: Any, dxdt: Any, t: float, x_out: Any, dt: float
    ) -> None:
        self.algebra.for_each(self.operations.scale_sum(1.0, dt), x_out, x_in, dxdt)

    def resize_impl(self, x: Any) -> None:
        pass

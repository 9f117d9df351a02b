"""qphase_ode: Stepper Subpackage
-----------------------------
Explicit single-step ODE steppers: the shared skeleton, resizer policies,
and the Euler and classic Runge-Kutta schemes.
"""

from .base import ExplicitStepperBase, StepperCategory, System
from .euler import Euler, EulerConfig
from .resizer import (
    AlwaysResizer,
    InitiallyResizer,
    NeverResizer,
    Resizer,
    make_resizer,
)
from .runge_kutta4 import RungeKutta4, RungeKutta4Config

__all__ = [
    "ExplicitStepperBase",
    "StepperCategory",
    "System",
    "Euler",
    "EulerConfig",
    "RungeKutta4",
    "RungeKutta4Config",
    "Resizer",
    "AlwaysResizer",
    "InitiallyResizer",
    "NeverResizer",
    "make_resizer",
]

"""ODE Stepping Framework
======================

Single-step explicit ODE steppers sharing one skeleton that owns a lazily
resized derivative cache, with pluggable algebras and state wrappers.

Public API
----------
ExplicitStepperBase
    Base class for explicit steppers; subclass it to add a scheme.
Euler, RungeKutta4
    Reference schemes of order 1 and 4.
FixedShape
    Descriptor for derivative types with a shape fixed at type level.
StepperConfig, load_stepper_config
    Pydantic configuration and YAML loading.
"""

from .core.config import StepperConfig, load_stepper_config
from .core.errors import QPSError, configure_logging, get_logger
from .states import FixedShape
from .stepper import (
    Euler,
    EulerConfig,
    ExplicitStepperBase,
    RungeKutta4,
    RungeKutta4Config,
    StepperCategory,
)

__version__ = "0.1.0"

__all__ = [
    "ExplicitStepperBase",
    "StepperCategory",
    "Euler",
    "EulerConfig",
    "RungeKutta4",
    "RungeKutta4Config",
    "FixedShape",
    "StepperConfig",
    "load_stepper_config",
    "QPSError",
    "configure_logging",
    "get_logger",
    "__version__",
]

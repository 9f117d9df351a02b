"""qphase_ode: Core Subpackage
--------------------------
Lightweight core containing the error taxonomy, logging and configuration.
"""

from .config import StepperConfig, load_stepper_config
from .errors import (
    QPSAlgebraError,
    QPSConfigError,
    QPSError,
    QPSStateError,
    QPSStepperError,
    configure_logging,
    get_logger,
)

__all__ = [
    "StepperConfig",
    "load_stepper_config",
    "QPSError",
    "QPSAlgebraError",
    "QPSConfigError",
    "QPSStateError",
    "QPSStepperError",
    "configure_logging",
    "get_logger",
]

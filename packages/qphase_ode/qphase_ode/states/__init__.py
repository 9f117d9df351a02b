"""qphase_ode: State Wrappers
-------------------------
Containers that own derivative and scratch buffers for steppers, with a
factory resolving the container for a given derivative type.
"""

from .base import StateWrapperBase
from .factory import (
    get_wrapper_class,
    is_resizeable,
    make_state_wrapper,
    register_state_wrapper,
)
from .fixed_state import FixedShape, FixedStateWrapper
from .list_state import ListStateWrapper
from .numpy_state import NumpyStateWrapper

__all__ = [
    "StateWrapperBase",
    "FixedShape",
    "FixedStateWrapper",
    "ListStateWrapper",
    "NumpyStateWrapper",
    "get_wrapper_class",
    "is_resizeable",
    "make_state_wrapper",
    "register_state_wrapper",
]

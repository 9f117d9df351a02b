"""qphase_ode: NumPy State Wrapper
------------------------------
Resizeable wrapper around a NumPy buffer, the default derivative container.

Behavior
--------
- The buffer starts empty and is reallocated whenever the state's shape or
  derivative dtype changes. Dtype follows the state but is promoted to at
  least float64, so integer-valued initial conditions still carry fractional
  derivatives and complex states keep complex derivatives.

"""

from typing import Any, ClassVar

import numpy as np

__all__ = [
    "NumpyStateWrapper",
]


def _deriv_dtype(x: np.ndarray) -> np.dtype:
    return np.result_type(x.dtype, np.float64)


class NumpyStateWrapper:
    """NumPy-backed derivative buffer with dynamic shape.

    Examples
    --------
    >>> w = NumpyStateWrapper()
    >>> w.same_size(np.zeros(3))
    False
    >>> w.resize(np.zeros(3))
    >>> w.m_v.shape
    (3,)

    """

    resizeable: ClassVar[bool] = True

    def __init__(self) -> None:
        self.m_v: np.ndarray = np.empty(0, dtype=np.float64)

    def same_size(self, x: Any) -> bool:
        # dtype is part of the size: a real buffer cannot hold a complex derivative
        x = np.asarray(x)
        return self.m_v.shape == x.shape and self.m_v.dtype == _deriv_dtype(x)

    def resize(self, x: Any) -> None:
        x = np.asarray(x)
        self.m_v = np.zeros(x.shape, dtype=_deriv_dtype(x))

    def __repr__(self) -> str:
        return f"NumpyStateWrapper(shape={self.m_v.shape}, dtype={self.m_v.dtype})"

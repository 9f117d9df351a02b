"""qphase_ode: Fixed-Shape State Wrapper
-------------------------------------
Non-resizeable wrapper for derivative types whose shape is part of the type.

Behavior
--------
- ``FixedShape`` describes such a type: a frozen ``(shape, dtype)`` pair used
  in place of a Python type wherever a ``deriv_type`` is expected.
- ``FixedStateWrapper`` allocates its buffer once, at construction. Steppers
  bound to it take the no-op resize path and never call ``resize``.

Notes
-----
- Using a fixed-shape derivative with a state of another shape is a caller
  error that is not detected.

"""

from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np

from ..core.errors import QPSStateError

__all__ = [
    "FixedShape",
    "FixedStateWrapper",
]


@dataclass(frozen=True)
class FixedShape:
    """Type-level shape descriptor for a non-resizeable derivative.

    Parameters
    ----------
    shape : tuple[int, ...]
        Shape of every state and derivative handled by the stepper.
    dtype : Any, default np.float64
        Element dtype of the derivative buffer.

    Examples
    --------
    >>> stepper = Euler(deriv_type=FixedShape((2,)))  # doctest: +SKIP
    >>> stepper.is_resizeable  # doctest: +SKIP
    False

    """

    shape: tuple[int, ...]
    dtype: Any = np.float64

    def __post_init__(self) -> None:
        shape = (self.shape,) if isinstance(self.shape, int) else tuple(self.shape)
        if any(int(n) < 0 for n in shape):
            raise QPSStateError(f"[701] FixedShape dimensions must be >= 0: {shape}")
        object.__setattr__(self, "shape", tuple(int(n) for n in shape))


class FixedStateWrapper:
    """Preallocated derivative buffer of a fixed shape."""

    resizeable: ClassVar[bool] = False

    def __init__(self, spec: FixedShape) -> None:
        self.spec = spec
        self.m_v: np.ndarray = np.zeros(spec.shape, dtype=spec.dtype)

    def same_size(self, x: Any) -> bool:
        return self.m_v.shape == np.shape(x)

    def resize(self, x: Any) -> None:
        raise QPSStateError(
            f"[702] Fixed-shape buffer {self.spec.shape} cannot be resized to {np.shape(x)}"
        )

    def __repr__(self) -> str:
        return f"FixedStateWrapper(shape={self.spec.shape})"

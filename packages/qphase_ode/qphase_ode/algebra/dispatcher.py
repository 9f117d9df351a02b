"""qphase_ode: Algebra Dispatcher
-----------------------------
Resolve the default algebra for a state or derivative type.

Behavior
--------
- Registered types are matched along the MRO first; unregistered
  sequence types fall back to ``RangeAlgebra``.
- ``FixedShape`` descriptors describe NumPy buffers and map to
  ``VectorSpaceAlgebra``.

"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from ..core.errors import QPSAlgebraError
from ..states.fixed_state import FixedShape
from .algebras import RangeAlgebra, VectorSpaceAlgebra

__all__ = [
    "register_algebra",
    "algebra_dispatcher",
    "make_algebra",
]

_ALGEBRAS: dict[type, type] = {
    np.ndarray: VectorSpaceAlgebra,
}

_BY_NAME: dict[str, type] = {
    "vector_space": VectorSpaceAlgebra,
    "range": RangeAlgebra,
}


def register_algebra(state_type: type, algebra_cls: type) -> None:
    """Map ``state_type`` (and its subclasses) to ``algebra_cls``."""
    _ALGEBRAS[state_type] = algebra_cls


def algebra_dispatcher(state: Any) -> Any:
    """Return an algebra instance suited to ``state``.

    Parameters
    ----------
    state : Any
        A state value, a state type, or a ``FixedShape`` descriptor.

    Returns
    -------
    Algebra
        ``VectorSpaceAlgebra`` for arrays, ``RangeAlgebra`` for sequences.

    Raises
    ------
    QPSAlgebraError
        - [220] No algebra is known for the type.

    Examples
    --------
    >>> algebra_dispatcher(np.zeros(3))
    VectorSpaceAlgebra()
    >>> algebra_dispatcher(list)
    RangeAlgebra()

    """
    if isinstance(state, FixedShape):
        return VectorSpaceAlgebra()
    tp = state if isinstance(state, type) else type(state)
    for base in tp.__mro__:
        if base in _ALGEBRAS:
            return _ALGEBRAS[base]()
    if issubclass(tp, Sequence) and not issubclass(tp, (str, bytes)):
        return RangeAlgebra()
    raise QPSAlgebraError(f"[220] No algebra registered for {tp.__name__}")


def make_algebra(name: str) -> Any:
    """Construct an algebra by config name (``vector_space`` or ``range``).

    Raises
    ------
    QPSAlgebraError
        - [221] Unknown algebra name.

    """
    try:
        return _BY_NAME[name]()
    except KeyError:
        raise QPSAlgebraError(
            f"[221] Unknown algebra '{name}'; expected one of {sorted(_BY_NAME)}"
        ) from None

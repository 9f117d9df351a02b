"""qphase_ode: State Wrapper Factory
---------------------------------
Select the wrapper class for a derivative type and construct instances.

Behavior
--------
- Python types are resolved through a registry keyed by type; lookup walks
  the MRO so subclasses of ``np.ndarray`` or ``list`` reuse their base's
  wrapper. ``FixedShape`` descriptors always resolve to the fixed wrapper.
- ``is_resizeable`` answers from the wrapper class alone, without
  allocating a buffer.

"""

from typing import Any

import numpy as np

from ..core.errors import QPSStateError
from .base import StateWrapperBase
from .fixed_state import FixedShape, FixedStateWrapper
from .list_state import ListStateWrapper
from .numpy_state import NumpyStateWrapper

__all__ = [
    "register_state_wrapper",
    "get_wrapper_class",
    "is_resizeable",
    "make_state_wrapper",
]

_WRAPPERS: dict[type, type] = {
    np.ndarray: NumpyStateWrapper,
    list: ListStateWrapper,
}


def register_state_wrapper(
    deriv_type: type, wrapper_cls: type, *, override: bool = False
) -> None:
    """Register the wrapper class used for ``deriv_type``.

    Parameters
    ----------
    deriv_type : type
        Python type of derivative values.
    wrapper_cls : type
        Class satisfying ``StateWrapperBase`` and constructible without
        arguments.
    override : bool, default False
        Replace an existing registration instead of failing.

    Raises
    ------
    QPSStateError
        - [710] ``deriv_type`` is already registered and ``override`` is False.

    """
    if deriv_type in _WRAPPERS and not override:
        raise QPSStateError(
            f"[710] A state wrapper is already registered for {deriv_type.__name__}"
        )
    _WRAPPERS[deriv_type] = wrapper_cls


def get_wrapper_class(deriv_type: Any) -> type:
    """Resolve the wrapper class for ``deriv_type``.

    Raises
    ------
    QPSStateError
        - [711] No wrapper is registered for the type or any of its bases.

    """
    if isinstance(deriv_type, FixedShape):
        return FixedStateWrapper
    for base in getattr(deriv_type, "__mro__", ()):
        if base in _WRAPPERS:
            return _WRAPPERS[base]
    raise QPSStateError(f"[711] No state wrapper registered for {deriv_type!r}")


def is_resizeable(deriv_type: Any) -> bool:
    """Return True when derivatives of ``deriv_type`` can change shape."""
    return bool(get_wrapper_class(deriv_type).resizeable)


def make_state_wrapper(deriv_type: Any) -> StateWrapperBase:
    """Construct an empty (or, for fixed shapes, preallocated) wrapper.

    Examples
    --------
    >>> w = make_state_wrapper(np.ndarray)
    >>> w.m_v.shape
    (0,)
    >>> make_state_wrapper(FixedShape((2,))).m_v.shape
    (2,)

    """
    wrapper_cls = get_wrapper_class(deriv_type)
    if isinstance(deriv_type, FixedShape):
        return wrapper_cls(deriv_type)
    return wrapper_cls()

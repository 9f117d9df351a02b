"""qphase_ode: State Wrapper Protocols
-----------------------------------

Minimal contract for containers that own a derivative or scratch buffer
on behalf of a stepper.

This module is dependency-light and safe to import in any environment.
"""

from typing import Any, ClassVar, Protocol, runtime_checkable

__all__ = [
    "StateWrapperBase",
]


@runtime_checkable
class StateWrapperBase(Protocol):
    """Owner of one buffer shaped like a state.

    A wrapper holds its buffer in ``m_v`` and knows how to compare it with,
    and adapt it to, the shape of an incoming state. Whether it may adapt at
    all is a property of the wrapper class, not of an instance: steppers
    read ``resizeable`` once and bind their resize path accordingly.

    Attributes
    ----------
    m_v : Any
        The wrapped buffer (e.g. an ndarray or a list).
    resizeable : ClassVar[bool]
        True when ``resize`` may change the shape of ``m_v``.

    Methods
    -------
    same_size(x) -> bool
        True when ``m_v`` already has the shape of ``x``.
    resize(x) -> None
        Reallocate ``m_v`` to the shape of ``x``.

    """

    m_v: Any
    resizeable: ClassVar[bool]

    def same_size(self, x: Any) -> bool: ...

    def resize(self, x: Any) -> None: ...

"""qphase_ode: List State Wrapper
-----------------------------
Resizeable wrapper for plain Python lists of scalars.
"""

from collections.abc import Sized
from typing import ClassVar

__all__ = [
    "ListStateWrapper",
]


class ListStateWrapper:
    """List-backed derivative buffer.

    ``resize`` keeps the same list object and truncates or zero-extends it,
    so references handed out earlier stay valid.
    """

    resizeable: ClassVar[bool] = True

    def __init__(self) -> None:
        self.m_v: list[float] = []

    def same_size(self, x: Sized) -> bool:
        return len(self.m_v) == len(x)

    def resize(self, x: Sized) -> None:
        n = len(x)
        del self.m_v[n:]
        self.m_v.extend([0.0] * (n - len(self.m_v)))

    def __repr__(self) -> str:
        return f"ListStateWrapper(len={len(self.m_v)})"

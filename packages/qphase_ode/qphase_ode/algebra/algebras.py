"""qphase_ode: Algebras
-------------------
Strategies for applying an operation across the elements of a state.

Behavior
--------
- ``VectorSpaceAlgebra`` evaluates the operation once on whole arrays and
  writes the result into ``out`` with ``out[...] = ...``.
- ``RangeAlgebra`` loops over indices, for plain sequences such as lists.
- In both, every operand is read before ``out`` is written at the same
  position, so ``out`` may alias one of the inputs.

"""

from collections.abc import Callable
from typing import Any, ClassVar, Protocol, runtime_checkable

from ..core.errors import QPSAlgebraError

__all__ = [
    "Algebra",
    "VectorSpaceAlgebra",
    "RangeAlgebra",
]


@runtime_checkable
class Algebra(Protocol):
    """Protocol for algebras used by concrete steppers.

    Methods
    -------
    for_each(op, out, *ins)
        Write ``op(*ins)`` into ``out``, element-wise or as a whole.

    """

    name: ClassVar[str]

    def for_each(self, op: Callable[..., Any], out: Any, *ins: Any) -> None: ...


class VectorSpaceAlgebra:
    """Whole-array algebra for NumPy-like containers."""

    name: ClassVar[str] = "vector_space"

    def for_each(self, op: Callable[..., Any], out: Any, *ins: Any) -> None:
        out[...] = op(*ins)

    def __repr__(self) -> str:
        return "VectorSpaceAlgebra()"


class RangeAlgebra:
    """Index-wise algebra for mutable sequences."""

    name: ClassVar[str] = "range"

    def for_each(self, op: Callable[..., Any], out: Any, *ins: Any) -> None:
        n = len(out)
        for x in ins:
            if len(x) != n:
                raise QPSAlgebraError(
                    f"[210] RangeAlgebra operand length {len(x)} does not match output length {n}"
                )
        for i in range(n):
            out[i] = op(*[x[i] for x in ins])

    def __repr__(self) -> str:
        return "RangeAlgebra()"

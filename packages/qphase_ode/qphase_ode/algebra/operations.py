"""qphase_ode: Operations
---------------------
Element-wise operation builders consumed by algebras.

An operation is a callable applied to one element (or one whole array) of
each operand. Algebras decide how it is mapped across a state.
"""

from typing import Any

from ..core.errors import QPSAlgebraError

__all__ = [
    "ScaleSum",
    "DefaultOperations",
]


class ScaleSum:
    """Linear combination ``c_0*x_0 + c_1*x_1 + ... + c_{n-1}*x_{n-1}``.

    Parameters
    ----------
    *coeffs : Any
        Scalar coefficients, one per operand.

    Examples
    --------
    >>> op = ScaleSum(1.0, 0.5)
    >>> op(2.0, 4.0)
    4.0

    """

    __slots__ = ("coeffs",)

    def __init__(self, *coeffs: Any) -> None:
        if not coeffs:
            raise QPSAlgebraError("[201] ScaleSum requires at least one coefficient")
        self.coeffs = coeffs

    def __call__(self, *xs: Any) -> Any:
        if len(xs) != len(self.coeffs):
            raise QPSAlgebraError(
                f"[202] ScaleSum expected {len(self.coeffs)} operands, got {len(xs)}"
            )
        acc = self.coeffs[0] * xs[0]
        for c, x in zip(self.coeffs[1:], xs[1:]):
            acc = acc + c * x
        return acc

    def __repr__(self) -> str:
        return f"ScaleSum{self.coeffs!r}"


class DefaultOperations:
    """Operations built from Python arithmetic operators."""

    @staticmethod
    def scale_sum(*coeffs: Any) -> ScaleSum:
        return ScaleSum(*coeffs)

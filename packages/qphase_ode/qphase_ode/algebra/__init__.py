"""qphase_ode: Algebra Subpackage
-----------------------------
Element-wise numeric back-end used by concrete steppers to combine states
and derivatives.
"""

from .algebras import Algebra, RangeAlgebra, VectorSpaceAlgebra
from .dispatcher import algebra_dispatcher, make_algebra, register_algebra
from .operations import DefaultOperations, ScaleSum

__all__ = [
    "Algebra",
    "RangeAlgebra",
    "VectorSpaceAlgebra",
    "DefaultOperations",
    "ScaleSum",
    "algebra_dispatcher",
    "make_algebra",
    "register_algebra",
]

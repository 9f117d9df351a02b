"""qphase_ode: Explicit Stepper Base
---------------------------------

Skeleton shared by all single-step explicit ODE steppers.

The base class owns the derivative cache and exposes the four step entry
points. Concrete algorithms subclass it and implement two hooks:

``do_step_impl(system, x_in, dxdt, t, x_out, dt)``
    Combine ``x_in`` and ``dxdt`` into ``x_out``. ``x_out`` may be
    ``x_in`` itself.
``resize_impl(x)``
    Adapt algorithm-internal scratch buffers to the shape of ``x``.

Behavior
--------
- Every entry point reduces to one ``do_step_impl`` call. Entry points without
  a derivative first run the resizer policy, then evaluate
  ``system(x, dxdt, t)`` into the cache.
- Whether the cache can be resized is a property of the derivative type.
  It is resolved once per instance at construction into one of two
  bound resize paths; stepping never branches on it.
- Failures raised by ``system`` or ``do_step_impl`` propagate unchanged.

Notes
-----
- A stepper instance is not safe for concurrent use: the cache is mutated in
  place on every call that evaluates the system.

"""

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Any, ClassVar

import numpy as np

from ..algebra import DefaultOperations, algebra_dispatcher, make_algebra
from ..core.config import StepperConfig
from ..core.errors import QPSStepperError, get_logger
from ..states import StateWrapperBase, is_resizeable, make_state_wrapper
from .resizer import Resizer, make_resizer

__all__ = [
    "System",
    "StepperCategory",
    "ExplicitStepperBase",
]

logger = get_logger()

System = Callable[[Any, Any, float], None]
"""Type for a system function ``system(x, dxdt, t)``.

Parameters
----------
x : Any
    Current state; must not be mutated.
dxdt : Any
    Derivative buffer to fill completely with d(x)/dt at ``(x, t)``.
t : float
    Current time.
"""


class StepperCategory(Enum):
    """Tag describing which stepping protocol a stepper models."""

    STEPPER = "stepper"
    ERROR_STEPPER = "error_stepper"
    DENSE_OUTPUT = "dense_output"


class ExplicitStepperBase(ABC):
    """Base class for explicit single-step ODE steppers.

    Subclasses must define the class variable ``order_value`` and implement
    ``do_step_impl`` and ``resize_impl``.

    Parameters
    ----------
    config : StepperConfig or dict, optional
        Stepper configuration; validated through ``config_schema.from_raw``.
    deriv_type : type or FixedShape, optional
        Type of derivative values. Defaults to ``default_deriv_type``.
    resizer : Resizer, optional
        Resizer policy; overrides ``config.resizer``.
    algebra : Algebra, optional
        Algebra used by the combination routine; overrides ``config.algebra``.
    operations : Any, optional
        Operations provider; defaults to ``DefaultOperations``.

    Examples
    --------
    >>> import numpy as np
    >>> from qphase_ode.stepper import Euler
    >>> def decay(x, dxdt, t):
    ...     dxdt[:] = -x
    >>> x = np.array([1.0])
    >>> Euler().do_step(decay, x, 0.0, 0.1)
    >>> float(x[0])
    0.9

    """

    name: ClassVar[str] = "explicit_stepper"
    description: ClassVar[str] = "Explicit single-step ODE stepper"
    config_schema: ClassVar[type[StepperConfig]] = StepperConfig
    order_value: ClassVar[int]
    default_deriv_type: ClassVar[Any] = np.ndarray
    stepper_category: ClassVar[StepperCategory] = StepperCategory.STEPPER

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "order_value" in cls.__dict__:
            order = cls.__dict__["order_value"]
            if isinstance(order, bool) or not isinstance(order, int) or order < 1:
                raise QPSStepperError(
                    f"[301] {cls.__name__}.order_value must be a positive int, got {order!r}"
                )

    def __init__(
        self,
        config: StepperConfig | dict[str, Any] | None = None,
        *,
        deriv_type: Any = None,
        resizer: Resizer | None = None,
        algebra: Any = None,
        operations: Any = None,
    ) -> None:
        if getattr(type(self), "order_value", None) is None:
            raise QPSStepperError(f"[302] {type(self).__name__} does not define order_value")
        self.config = self.config_schema.from_raw(config)
        self._deriv_type = self.default_deriv_type if deriv_type is None else deriv_type
        # Explicit arguments win; record them so self.config reflects what is used.
        overrides: dict[str, Any] = {}
        if resizer is None:
            resizer = make_resizer(self.config.resizer)
        else:
            overrides["resizer"] = getattr(resizer, "name", type(resizer).__name__)
        self._resizer = resizer
        if algebra is None:
            if self.config.algebra == "auto":
                algebra = algebra_dispatcher(self._deriv_type)
            else:
                algebra = make_algebra(self.config.algebra)
        else:
            overrides["algebra"] = getattr(algebra, "name", type(algebra).__name__)
        self._algebra = algebra
        if overrides:
            self.config = self.config.model_copy(update=overrides)
        self._operations = DefaultOperations() if operations is None else operations

        self._dxdt: StateWrapperBase = make_state_wrapper(self._deriv_type)
        self._is_resizeable = is_resizeable(self._deriv_type)
        if self._is_resizeable:
            self._resize_path = self._adjust_size_resizeable
        else:
            self._resize_path = self._adjust_size_fixed

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def order(self) -> int:
        """Return the accuracy order of this stepper type."""
        return self.order_value

    @property
    def deriv_type(self) -> Any:
        return self._deriv_type

    @property
    def is_resizeable(self) -> bool:
        """True when the derivative cache can follow the state's shape."""
        return self._is_resizeable

    @property
    def resizer(self) -> Resizer:
        return self._resizer

    @property
    def algebra(self) -> Any:
        return self._algebra

    @property
    def operations(self) -> Any:
        return self._operations

    @property
    def dxdt(self) -> StateWrapperBase:
        """The derivative cache wrapper owned by this instance."""
        return self._dxdt

    # ------------------------------------------------------------------
    # Step entry points
    # ------------------------------------------------------------------

    def do_step(self, system: System, x: Any, t: float, dt: float) -> None:
        """Advance ``x`` in place by ``dt``, evaluating the derivative.

        Parameters
        ----------
        system : System
            Callable ``system(x, dxdt, t)`` filling ``dxdt``.
        x : Any
            Mutable state, overwritten with the state at ``t + dt``.
        t : float
            Current time.
        dt : float
            Step size.

        """
        self._resizer.adjust_size(self, x)
        dxdt = self._dxdt.m_v
        system(x, dxdt, t)
        self.do_step_impl(system, x, dxdt, t, x, dt)

    def do_step_with_deriv(
        self, system: System, x: Any, dxdt: Any, t: float, dt: float
    ) -> None:
        """Advance ``x`` in place using the precomputed derivative ``dxdt``.

        The system is not evaluated here and the cache is left untouched.
        """
        self.do_step_impl(system, x, dxdt, t, x, dt)

    def do_step_to(
        self, system: System, x_in: Any, t: float, x_out: Any, dt: float
    ) -> None:
        """Write the state at ``t + dt`` into ``x_out``; ``x_in`` is not mutated."""
        self._resizer.adjust_size(self, x_in)
        dxdt = self._dxdt.m_v
        system(x_in, dxdt, t)
        self.do_step_impl(system, x_in, dxdt, t, x_out, dt)

    def do_step_to_with_deriv(
        self, system: System, x_in: Any, dxdt: Any, t: float, x_out: Any, dt: float
    ) -> None:
        """Write the state at ``t + dt`` into ``x_out`` from a given derivative.

        Pure delegate to ``do_step_impl`` with exactly these arguments.
        """
        self.do_step_impl(system, x_in, dxdt, t, x_out, dt)

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def adjust_size(self, x: Any) -> bool:
        """Bring the derivative cache to the shape of ``x``.

        Returns
        -------
        bool
            True when a resize happened. Always False for derivative types
            that cannot be resized, in which case nothing is mutated.

        """
        return self._resize_path(x)

    def _adjust_size_resizeable(self, x: Any) -> bool:
        if self._dxdt.same_size(x):
            return False
        self._dxdt.resize(x)
        self.resize_impl(x)
        logger.debug(f"{type(self).__name__}: resized derivative cache to {np.shape(x)}")
        return True

    def _adjust_size_fixed(self, x: Any) -> bool:
        return False

    def __deepcopy__(self, memo: dict[int, Any]) -> "ExplicitStepperBase":
        cls = type(self)
        clone = cls.__new__(cls)
        memo[id(self)] = clone
        for key, value in self.__dict__.items():
            clone.__dict__[key] = copy.deepcopy(value, memo)
        # A clone starts with a fresh policy, e.g. an unspent InitiallyResizer.
        clone._resizer.reset()
        return clone

    def __copy__(self) -> "ExplicitStepperBase":
        # Buffers are owned per instance, so a shallow copy would alias them.
        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Algorithm hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def do_step_impl(
        self, system: System, x_in: Any, dxdt: Any, t: float, x_out: Any, dt: float
    ) -> None:
        """Combine ``x_in`` and ``dxdt`` over ``dt`` into ``x_out``."""
        ...

    @abstractmethod
    def resize_impl(self, x: Any) -> None:
        """Adapt internal scratch buffers to the shape of ``x``."""
        ...

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(order={self.order_value}, "
            f"deriv_type={getattr(self._deriv_type, '__name__', self._deriv_type)}, "
            f"resizer={self._resizer!r})"
        )

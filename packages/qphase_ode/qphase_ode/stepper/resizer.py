"""qphase_ode: Resizer Policies
---------------------------
Policies deciding when a stepper compares its derivative cache against the
incoming state.

Behavior
--------
- ``AlwaysResizer``: check on every call that evaluates the system. The
  cache follows the state whenever its shape changes.
- ``InitiallyResizer``: check on the first such call only; ``reset()``
  re-arms it.
- ``NeverResizer``: never check; the caller guarantees the cache shape.

A policy only decides whether ``stepper.adjust_size`` is called. Whether
that call can resize anything is decided by the stepper's derivative type.
"""

from typing import Any, ClassVar, Protocol, runtime_checkable

from ..core.errors import QPSConfigError

__all__ = [
    "Resizer",
    "AlwaysResizer",
    "InitiallyResizer",
    "NeverResizer",
    "make_resizer",
]


@runtime_checkable
class Resizer(Protocol):
    """Protocol for resizer policies."""

    name: ClassVar[str]

    def adjust_size(self, stepper: Any, x: Any) -> bool: ...

    def reset(self) -> None: ...


class AlwaysResizer:
    name: ClassVar[str] = "always"

    def adjust_size(self, stepper: Any, x: Any) -> bool:
        return stepper.adjust_size(x)

    def reset(self) -> None:
        pass

    def __repr__(self) -> str:
        return "AlwaysResizer()"


class InitiallyResizer:
    name: ClassVar[str] = "initially"

    def __init__(self) -> None:
        self._initialized = False

    def adjust_size(self, stepper: Any, x: Any) -> bool:
        if self._initialized:
            return False
        self._initialized = True
        return stepper.adjust_size(x)

    def reset(self) -> None:
        """Check again on the next call."""
        self._initialized = False

    def __repr__(self) -> str:
        return f"InitiallyResizer(initialized={self._initialized})"


class NeverResizer:
    name: ClassVar[str] = "never"

    def adjust_size(self, stepper: Any, x: Any) -> bool:
        return False

    def reset(self) -> None:
        pass

    def __repr__(self) -> str:
        return "NeverResizer()"


_BY_NAME: dict[str, type] = {
    "always": AlwaysResizer,
    "initially": InitiallyResizer,
    "never": NeverResizer,
}


def make_resizer(name: str) -> Resizer:
    """Construct a fresh resizer policy by name.

    Raises
    ------
    QPSConfigError
        - [520] Unknown resizer name.

    """
    try:
        return _BY_NAME[name]()
    except KeyError:
        raise QPSConfigError(
            f"[520] Unknown resizer '{name}'; expected one of {sorted(_BY_NAME)}"
        ) from None

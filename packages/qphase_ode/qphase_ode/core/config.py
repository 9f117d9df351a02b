"""qphase_ode: Stepper Configuration
---------------------------------

Pydantic models for stepper configuration and YAML loading helpers.

Public API
----------
``StepperConfig`` : Base configuration for all explicit steppers
``load_yaml_file`` : Load a YAML mapping with error handling
``load_stepper_config`` : Load and validate a stepper config from YAML

Notes
-----
- A YAML file may either hold the config fields at top level or nest them
  under a ``stepper:`` key.

"""

from pathlib import Path
from typing import Any, Literal, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import QPSConfigError, get_logger

__all__ = [
    "StepperConfig",
    "load_yaml_file",
    "load_stepper_config",
]

logger = get_logger()

_C = TypeVar("_C", bound="StepperConfig")


class StepperConfig(BaseModel):
    """Base configuration class for explicit steppers.

    Concrete steppers subclass this to add algorithm-specific fields.
    Explicit keyword arguments given to a stepper constructor take
    precedence over the values stored here.
    """

    model_config = ConfigDict(extra="allow")

    resizer: Literal["always", "initially", "never"] = Field(
        default="always",
        description="When the stepper checks the derivative cache against the "
        "incoming state: on every call, only on the first call, or never.",
    )
    algebra: Literal["auto", "vector_space", "range"] = Field(
        default="auto",
        description="Algebra used by the combination routine. 'auto' resolves "
        "it from the derivative type when the stepper is built.",
    )

    @classmethod
    def from_raw(cls: type[_C], raw: Any | None = None) -> _C:
        """Normalize and validate ``raw`` into an instance of this config class.

        Accepts:
        - None -> produce default instance (using defaults)
        - dict-like -> validate and construct
        - already an instance of cls -> returned as-is

        Raises:
        - pydantic.ValidationError on invalid input (preserved)

        """
        if raw is None:
            return cls.model_validate({})
        if isinstance(raw, cls):
            return raw
        return cls.model_validate(raw)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load YAML file with error handling.

    Parameters
    ----------
    path : Path
        Path to the YAML file

    Returns
    -------
    dict[str, Any]
        Loaded YAML data as dictionary

    Raises
    ------
    QPSConfigError
        - [501] File does not exist.
        - [502] File cannot be parsed or is not a mapping.

    """
    if not path.exists():
        raise QPSConfigError(f"[501] File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise QPSConfigError(f"[502] Failed to parse YAML file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise QPSConfigError(
            f"[502] Expected a mapping at top level of {path}, got {type(data).__name__}"
        )
    return data


def load_stepper_config(
    path: str | Path, schema: type[_C] = StepperConfig  # type: ignore[assignment]
) -> _C:
    """Load a stepper configuration from a YAML file.

    Parameters
    ----------
    path : str or Path
        YAML file holding the config fields, optionally under ``stepper:``.
    schema : type[StepperConfig], default StepperConfig
        Config model to validate against, e.g. ``RungeKutta4Config``.

    Returns
    -------
    StepperConfig
        Validated config instance of ``schema``.

    Raises
    ------
    QPSConfigError
        - [501]/[502] The file is missing or unreadable.
        - [503] The content does not validate against ``schema``.

    Examples
    --------
    >>> cfg = load_stepper_config("rk4.yaml", RungeKutta4Config)  # doctest: +SKIP
    >>> stepper = RungeKutta4(cfg)  # doctest: +SKIP

    """
    path = Path(path)
    raw = load_yaml_file(path)
    if isinstance(raw.get("stepper"), dict):
        raw = raw["stepper"]
    try:
        config = schema.from_raw(raw)
    except ValidationError as e:
        raise QPSConfigError(f"[503] Invalid stepper configuration in {path}: {e}") from e
    logger.debug(f"Loaded {schema.__name__} from {path}")
    return config

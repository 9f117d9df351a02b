"""qphase_ode: Error Taxonomy and Logging
-------------------------------------

Independent error system for the qphase_ode package.

Error Hierarchy
---------------
- QPSError: Base exception for all qphase_ode errors
- QPSAlgebraError: Algebra/operations back-end errors (200-299)
- QPSStepperError: Stepper construction errors (300-399)
- QPSConfigError: Configuration errors (500-599)
- QPSStateError: State wrapper errors (700-799)

Failures raised by a user system function or by a stepper's combination
routine are never wrapped into this hierarchy; they reach the caller of
``do_step`` exactly as raised.

Warning Hierarchy
-----------------
- QPSWarning: Base warning for all qphase_ode warnings

Logging
-------
The shared logger is named "qphase_ode" and can be configured for
console and file output with optional JSON formatting.
"""

import logging
import os

__all__ = [
    "QPSError",
    "QPSAlgebraError",
    "QPSStepperError",
    "QPSConfigError",
    "QPSStateError",
    "QPSWarning",
    "get_logger",
    "configure_logging",
]


# =============================================================================
# Exception Hierarchy
# =============================================================================


class QPSError(Exception):
    """Base exception for all qphase_ode errors.

    Examples
    --------
    >>> try:
    ...     make_state_wrapper(dict)
    ... except QPSError as e:
    ...     print(f"ODE error occurred: {e}")

    """

    pass


class QPSAlgebraError(QPSError):
    """Algebra-related errors (Code 200-299).

    Raised when no algebra can be resolved for a state type or when an
    element-wise operation receives incompatible operands.
    """

    pass


class QPSStepperError(QPSError):
    """Stepper-related errors (Code 300-399).

    Raised when a stepper class or instance is configured inconsistently,
    e.g. a concrete algorithm without a valid order.
    """

    pass


class QPSConfigError(QPSError):
    """Configuration-related errors (Code 500-599).

    Raised when configuration loading, validation or resolution fails.
    """

    pass


class QPSStateError(QPSError):
    """State-related errors (Code 700-799).

    Raised when a derivative type has no registered wrapper or a wrapper
    is asked for an operation its type does not support.
    """

    pass


class QPSWarning(Warning):
    """Base warning for all qphase_ode warnings."""

    pass


# =============================================================================
# Logger Configuration
# =============================================================================

_logger: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Get the shared qphase_ode logger instance.

    Returns
    -------
    logging.Logger
        The singleton logger named "qphase_ode" configured at INFO level by
        default with a console handler. Handlers are created lazily on first use.

    Examples
    --------
    >>> logger = get_logger()
    >>> logger.name
    'qphase_ode'

    """
    global _logger
    if _logger is None:
        _logger = logging.getLogger("qphase_ode")
        _logger.setLevel(logging.INFO)
        if not _logger.handlers:
            h = logging.StreamHandler()
            fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            h.setFormatter(fmt)
            _logger.addHandler(h)
    return _logger


def configure_logging(
    verbose: bool = False,
    log_file: str | None = None,
    as_json: bool = False,
) -> None:
    """Configure the shared logger outputs.

    Parameters
    ----------
    verbose : bool, default False
        When True, set logger level to DEBUG; otherwise INFO.
    log_file : str or None, default None
        Optional file path to append logs.
    as_json : bool, default False
        Emit logs in a compact JSON line format when True; otherwise plain text.

    Raises
    ------
    QPSConfigError
        - [510] The log file cannot be opened.

    """
    logger = get_logger()
    # Open the file first so a failure leaves the current handlers in place.
    fh = None
    if log_file:
        try:
            fh = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        except OSError as e:
            raise QPSConfigError(f"[510] Cannot open log file {log_file}: {e}") from e

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    ch = logging.StreamHandler()
    if as_json:
        fmt = logging.Formatter(
            '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","msg":"%(message)s"}'
        )
    else:
        fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if fh is not None:
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.WARNING)

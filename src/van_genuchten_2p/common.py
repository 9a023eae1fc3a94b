"""
Shared domain-check helpers for the van Genuchten relation evaluator.

Every check is always active and raises ``DomainError`` (a ``ValueError``)
instead of clamping. NaN never passes a check.
"""

import logging

import numpy as np

__all__ = [
    "DomainError",
    "as_float_array",
    "finalize",
    "check_params",
    "check_saturation",
    "check_interior_saturation",
    "check_capillary_pressure",
]

logger = logging.getLogger(__name__)


class DomainError(ValueError):
    """Input outside the domain on which a relation is defined."""


def as_float_array(val):
    """Convert a float or array-like to a float ndarray (0-d for scalars)."""
    return np.asarray(val, dtype=float)


def finalize(result, like):
    """Return a Python float for scalar input, the ndarray otherwise.

    Parameters
    ----------
    result : ndarray
        Computed values.
    like : ndarray
        The (converted) input the result was computed from.

    Returns
    -------
    float or ndarray
    """
    if np.ndim(like) == 0:
        return float(result)
    return result


def _reject(quantity, val, ok, expected):
    bad = val[~ok]
    logger.debug(f"Rejecting {bad.size} value(s) of {quantity}, expected {expected}")
    if np.ndim(val) == 0:
        raise DomainError(f"{quantity} = {float(val)} outside {expected}")
    raise DomainError(
        f"{quantity} outside {expected} at {bad.size} of {val.size} entries,"
        f" first offending value {bad[0]}"
    )


def check_params(params):
    """Require strictly positive alpha, n and m.

    These enter the relations as divisors and exponents. Anything beyond
    positivity (n > 1, m < 1) is the caller's business.

    Parameters
    ----------
    params : VanGenuchtenParams

    Raises
    ------
    DomainError
    """
    for name in ("alpha", "n", "m"):
        v = as_float_array(getattr(params, name))
        ok = v > 0.0
        if not ok:
            _reject(f"van Genuchten parameter {name}", v, ok, "(0, inf)")


def check_saturation(sw):
    """Require 0 <= sw <= 1 elementwise.

    Parameters
    ----------
    sw : ndarray
        Wetting saturation [-].

    Raises
    ------
    DomainError
    """
    ok = (sw >= 0.0) & (sw <= 1.0)
    if not np.all(ok):
        _reject("wetting saturation", sw, ok, "[0, 1]")


def check_interior_saturation(sw):
    """Require 0 < sw < 1 elementwise (derivatives are singular at 0 and 1).

    Parameters
    ----------
    sw : ndarray
        Wetting saturation [-].

    Raises
    ------
    DomainError
    """
    ok = (sw > 0.0) & (sw < 1.0)
    if not np.all(ok):
        _reject("wetting saturation", sw, ok, "(0, 1)")


def check_capillary_pressure(pc):
    """Require pc >= 0 elementwise (+inf allowed).

    Parameters
    ----------
    pc : ndarray
        Capillary pressure p_n - p_w [Pa].

    Raises
    ------
    DomainError
    """
    ok = pc >= 0.0
    if not np.all(ok):
        _reject("capillary pressure", pc, ok, "[0, inf]")

"""
Parameter sets for the two-phase van Genuchten-Mualem law.

All capillary pressures are in pascal, so ``alpha`` is in 1/Pa. Soil data
tabulated per metre of pressure head can be brought over with
``VanGenuchtenParams.from_pressure_head``.
"""

import logging
from dataclasses import dataclass

__all__ = [
    "VanGenuchtenParams",
    "SANDY_LOAM",
    "CLAY",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class VanGenuchtenParams:
    """Shape coefficients of the van Genuchten curves.

    The parameter set is read-only once built. Only positivity of the three
    coefficients is checked, and only by the evaluator.

    Parameters
    ----------
    alpha : float
        Inverse capillary pressure scale [1/Pa], > 0.
    n : float
        Pore-size distribution exponent [-], conventionally > 1.
    m : float
        Shape exponent [-], conventionally m = 1 - 1/n in (0, 1).
    """

    alpha: float  # [1/Pa]
    n: float  # [-]
    m: float  # [-]

    @classmethod
    def from_n(cls, alpha, n):
        """Build a parameter set with the Mualem restriction m = 1 - 1/n.

        Parameters
        ----------
        alpha : float
            [1/Pa].
        n : float
            [-].

        Returns
        -------
        VanGenuchtenParams

        Raises
        ------
        ZeroDivisionError
            For n = 0, after logging the same warning as for m <= 0.
        """
        try:
            m = 1.0 - 1.0 / n
        except ZeroDivisionError:
            logger.warning(f"n = {n} gives no finite m = 1 - 1/n")
            raise
        if m <= 0.0:
            logger.warning(f"n = {n} gives non-positive m = {m}")
        return cls(alpha=alpha, n=n, m=m)

    @classmethod
    def from_pressure_head(cls, alpha_head, n, *, density=1000.0, gravity=9.81):
        """Build a parameter set from alpha given per metre of pressure head.

        alpha [1/Pa] = alpha_head [1/m] / (density * gravity), m = 1 - 1/n.

        Parameters
        ----------
        alpha_head : float
            van Genuchten alpha [1/m].
        n : float
            [-].
        density : float
            Wetting-phase density [kg/m^3].
        gravity : float
            Gravitational acceleration [m/s^2].

        Returns
        -------
        VanGenuchtenParams
        """
        return cls.from_n(alpha_head / (density * gravity), n)


# ── Presets ──────────────────────────────────────────────────────────────

# Hydraulic soils of Gatti et al. 2024, alpha converted from [1/m] of water
# head to [1/Pa].

SANDY_LOAM = VanGenuchtenParams.from_pressure_head(2.0, 3.0)

CLAY = VanGenuchtenParams.from_pressure_head(0.2, 1.5)

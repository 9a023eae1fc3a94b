"""
Two-phase van Genuchten capillary pressure and Mualem relative permeability.

Raw curves only: all saturations are the effective wetting saturation S_w,
conversion from absolute saturations happens elsewhere.

Module-level functions take S_w (or p_c) explicitly and accept floats or
NumPy arrays. ``VanGenuchten`` binds a wetting/non-wetting phase index pair
and reads S_w and the phase pressures from a ``FluidState``.

Capillary pressure is p_c = p_n - p_w >= 0, the wetting phase is the
pressure reference.
"""

import logging

import numpy as np

from .common import (
    as_float_array,
    check_capillary_pressure,
    check_interior_saturation,
    check_params,
    check_saturation,
    finalize,
)
from .fluid_state import (
    NONWETTING_PHASE,
    WETTING_PHASE,
    FluidState,
    check_phase_indices,
)
from .materials import VanGenuchtenParams

__all__ = [
    "VanGenuchten",
    "capillary_pressure",
    "saturation_from_pressure",
    "dpc_dsw",
    "krw",
    "dkrw_dsw",
    "krn",
    "dkrn_dsw",
]

logger = logging.getLogger(__name__)


# ── Saturation-based functions ──────────────────────────────────────────


def capillary_pressure(params, sw):
    """Capillary pressure p_c(S_w) [Pa].

    p_c = (S_w^{-1/m} - 1)^{1/n} / alpha
        = S_w^{-1/(mn)} (1 - S_w^{1/m})^{1/n} / alpha.

    The factored form is evaluated, so p_c only overflows when it exceeds
    the float range. Returns 0 at S_w = 1 and +inf at S_w = 0.

    Parameters
    ----------
    params : VanGenuchtenParams
    sw : float or ndarray
        Wetting saturation [-], 0 <= S_w <= 1.

    Returns
    -------
    float or ndarray
    """
    check_params(params)
    s = as_float_array(sw)
    check_saturation(s)
    m, n = params.m, params.n
    with np.errstate(divide="ignore", over="ignore"):
        pc = (
            s ** (-1.0 / (m * n))
            * (1.0 - s ** (1.0 / m)) ** (1.0 / n)
            / params.alpha
        )
    return finalize(pc, s)


def saturation_from_pressure(params, pc):
    """Inverse van Genuchten: S_w(p_c) [-].

    S_w = ((alpha * p_c)^n + 1)^{-m}, in (0, 1]; p_c = +inf gives 0.

    For alpha * p_c > 1 the equivalent form
    (alpha * p_c)^{-mn} (1 + (alpha * p_c)^{-n})^{-m} is used, which stays
    finite where (alpha * p_c)^n overflows.

    Parameters
    ----------
    params : VanGenuchtenParams
    pc : float or ndarray
        Capillary pressure [Pa], p_c >= 0.

    Returns
    -------
    float or ndarray
    """
    check_params(params)
    p = as_float_array(pc)
    check_capillary_pressure(p)
    m, n = params.m, params.n
    y = params.alpha * p
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        sw = np.where(
            y > 1.0,
            y ** (-m * n) * (1.0 + y ** (-n)) ** (-m),
            (y**n + 1.0) ** (-m),
        )
    return finalize(sw, p)


def dpc_dsw(params, sw):
    """Derivative d p_c / d S_w [Pa], strictly negative.

    With u = S_w^{-1/m} - 1:
    d p_c / d S_w = -1 / (alpha n m S_w) * u^{1/n - 1} * S_w^{-1/m}
                  = -(1 - S_w^{1/m})^{1/n - 1} S_w^{-1/(mn)} / (alpha n m S_w).

    The second form is evaluated; near S_w = 0 it may reach -inf, never NaN.

    Singular at both ends, so S_w must lie strictly inside (0, 1).

    Parameters
    ----------
    params : VanGenuchtenParams
    sw : float or ndarray
        Wetting saturation [-].

    Returns
    -------
    float or ndarray
    """
    check_params(params)
    s = as_float_array(sw)
    check_interior_saturation(s)
    a, n, m = params.alpha, params.n, params.m
    with np.errstate(divide="ignore", over="ignore"):
        dpc = (
            -((1.0 - s ** (1.0 / m)) ** (1.0 / n - 1.0))
            * (s ** (-1.0 / (m * n)) / s)
            / (a * n * m)
        )
    return finalize(dpc, s)


def krw(params, sw):
    """Wetting-phase relative permeability (Mualem) k_rw(S_w) [-].

    k_rw = sqrt(S_w) * [1 - (1 - S_w^{1/m})^m]^2.

    Parameters
    ----------
    params : VanGenuchtenParams
    sw : float or ndarray
        Wetting saturation [-], 0 <= S_w <= 1.

    Returns
    -------
    float or ndarray
        In [0, 1].
    """
    check_params(params)
    s = as_float_array(sw)
    check_saturation(s)
    m = params.m
    r = 1.0 - (1.0 - s ** (1.0 / m)) ** m
    return finalize(np.sqrt(s) * r * r, s)


def dkrw_dsw(params, sw):
    """Derivative d k_rw / d S_w [-].

    With x = 1 - S_w^{1/m}:
    d k_rw / d S_w = (1 - x^m) / sqrt(S_w)
                     * [(1 - x^m) / 2 + 2 x^m (1 - x) / x].

    Parameters
    ----------
    params : VanGenuchtenParams
    sw : float or ndarray
        Wetting saturation [-], 0 < S_w < 1.

    Returns
    -------
    float or ndarray
    """
    check_params(params)
    s = as_float_array(sw)
    check_interior_saturation(s)
    m = params.m
    x = 1.0 - s ** (1.0 / m)
    x_to_m = x**m
    dkr = (1.0 - x_to_m) / np.sqrt(s) * (
        (1.0 - x_to_m) / 2.0 + 2.0 * x_to_m * (1.0 - x) / x
    )
    return finalize(dkr, s)


def krn(params, sw):
    """Non-wetting-phase relative permeability k_rn(S_w) [-].

    k_rn = (1 - S_w)^{1/3} * (1 - S_w^{1/m})^{2m}.

    Parameters
    ----------
    params : VanGenuchtenParams
    sw : float or ndarray
        Wetting saturation [-], 0 <= S_w <= 1.

    Returns
    -------
    float or ndarray
        In [0, 1].
    """
    check_params(params)
    s = as_float_array(sw)
    check_saturation(s)
    m = params.m
    kr = (1.0 - s) ** (1.0 / 3.0) * (1.0 - s ** (1.0 / m)) ** (2.0 * m)
    return finalize(kr, s)


def dkrn_dsw(params, sw):
    """Derivative d k_rn / d S_w [-].

    With x = S_w^{1/m}:
    d k_rn / d S_w = -(1 - x)^{2m} (1 - S_w)^{-2/3}
                     * [1/3 + 2 x (1 - S_w) / (S_w (1 - x))].

    Parameters
    ----------
    params : VanGenuchtenParams
    sw : float or ndarray
        Wetting saturation [-], 0 < S_w < 1.

    Returns
    -------
    float or ndarray
    """
    check_params(params)
    s = as_float_array(sw)
    check_interior_saturation(s)
    m = params.m
    x = s ** (1.0 / m)
    dkr = (
        -((1.0 - x) ** (2.0 * m))
        * (1.0 - s) ** (-2.0 / 3.0)
        * (1.0 / 3.0 + 2.0 * x * (1.0 - s) / (s * (1.0 - x)))
    )
    return finalize(dkr, s)


# ── Fluid-state evaluator ───────────────────────────────────────────────


class VanGenuchten:
    """Van Genuchten-Mualem law for a fixed wetting/non-wetting index pair.

    Holds nothing but the two phase indices, so one instance can serve any
    number of parameter sets and threads.

    Parameters
    ----------
    wetting_phase : int
        Index of the wetting phase in the fluid state.
    nonwetting_phase : int
        Index of the non-wetting phase. Together with ``wetting_phase`` a
        permutation of (0, 1).
    """

    num_phases = 2

    def __init__(
        self,
        *,
        wetting_phase: int = WETTING_PHASE,
        nonwetting_phase: int = NONWETTING_PHASE,
    ):
        check_phase_indices(wetting_phase, nonwetting_phase)
        self.wetting_phase = wetting_phase
        self.nonwetting_phase = nonwetting_phase
        logger.debug(
            f"VanGenuchten evaluator: wetting phase {wetting_phase}, "
            f"non-wetting phase {nonwetting_phase}"
        )

    def capillary_pressures(
        self, params: VanGenuchtenParams, fs: FluidState, out=None
    ) -> np.ndarray:
        """Phase pressures relative to the wetting phase.

        Writes 0 at the wetting index and p_c at the non-wetting index.

        Parameters
        ----------
        params : VanGenuchtenParams
        fs : FluidState
        out : array-like, optional
            Phase-indexed buffer to write into. Allocated if not given.

        Returns
        -------
        ndarray or the given buffer
            Shape (2,) for scalar states, (2, ...) for array states.
        """
        pc = self.pcwn(params, fs)
        if out is None:
            out = np.zeros((self.num_phases,) + np.shape(pc))
        out[self.wetting_phase] = 0.0
        out[self.nonwetting_phase] = pc
        return out

    def relative_permeabilities(
        self, params: VanGenuchtenParams, fs: FluidState, out=None
    ) -> np.ndarray:
        """Phase-indexed k_rw and k_rn of the state.

        Parameters
        ----------
        params : VanGenuchtenParams
        fs : FluidState
        out : array-like, optional
            Phase-indexed buffer to write into. Allocated if not given.

        Returns
        -------
        ndarray or the given buffer
        """
        kw = self.krw(params, fs)
        kn = self.krn(params, fs)
        if out is None:
            out = np.zeros((self.num_phases,) + np.shape(kw))
        out[self.wetting_phase] = kw
        out[self.nonwetting_phase] = kn
        return out

    def pcwn(self, params: VanGenuchtenParams, fs: FluidState) -> float | np.ndarray:
        """p_c = p_n - p_w from the wetting saturation of ``fs``."""
        return capillary_pressure(params, fs.saturation(self.wetting_phase))

    def sw(self, params: VanGenuchtenParams, fs: FluidState) -> float | np.ndarray:
        """Wetting saturation implied by the phase pressures of ``fs``."""
        pc = fs.pressure(self.nonwetting_phase) - fs.pressure(self.wetting_phase)
        return saturation_from_pressure(params, pc)

    def krw(self, params: VanGenuchtenParams, fs: FluidState) -> float | np.ndarray:
        """k_rw from the wetting saturation of ``fs``."""
        return krw(params, fs.saturation(self.wetting_phase))

    def krn(self, params: VanGenuchtenParams, fs: FluidState) -> float | np.ndarray:
        """k_rn from the wetting saturation of ``fs``."""
        return krn(params, fs.saturation(self.wetting_phase))

    # Derivatives take S_w directly, not a fluid state.

    def dpcwn_dsw(
        self, params: VanGenuchtenParams, sw: float | np.ndarray
    ) -> float | np.ndarray:
        return dpc_dsw(params, sw)

    def dkrw_dsw(
        self, params: VanGenuchtenParams, sw: float | np.ndarray
    ) -> float | np.ndarray:
        return dkrw_dsw(params, sw)

    def dkrn_dsw(
        self, params: VanGenuchtenParams, sw: float | np.ndarray
    ) -> float | np.ndarray:
        return dkrn_dsw(params, sw)

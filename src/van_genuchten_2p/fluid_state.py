"""
Fluid-state interface consumed by the van Genuchten evaluator.

The evaluator reads a state through exactly two accessors, ``saturation``
and ``pressure``, both indexed by phase. ``TwoPhaseState`` is a minimal
implementation for callers that do not bring their own.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "WETTING_PHASE",
    "NONWETTING_PHASE",
    "FluidState",
    "TwoPhaseState",
    "check_phase_indices",
]

WETTING_PHASE = 0
NONWETTING_PHASE = 1


def check_phase_indices(wetting_phase, nonwetting_phase):
    """Raise ValueError unless the indices are a permutation of (0, 1)."""
    if sorted((wetting_phase, nonwetting_phase)) != [0, 1]:
        raise ValueError(
            f"Phase indices must be distinct and in {{0, 1}}, got wetting="
            f"{wetting_phase}, non-wetting={nonwetting_phase}"
        )


@runtime_checkable
class FluidState(Protocol):
    """Read-only view of a two-phase fluid state."""

    def saturation(self, phase_idx: int):
        """Saturation [-] of the given phase (float or ndarray)."""
        ...

    def pressure(self, phase_idx: int):
        """Pressure [Pa] of the given phase (float or ndarray)."""
        ...


@dataclass(frozen=True)
class TwoPhaseState:
    """Per-phase saturations and pressures.

    Entries may be floats or NumPy arrays of equal shape (cell-wise states).

    Parameters
    ----------
    saturations : tuple
        Saturation per phase index [-].
    pressures : tuple
        Pressure per phase index [Pa].
    """

    saturations: tuple
    pressures: tuple = (0.0, 0.0)

    def saturation(self, phase_idx: int):
        return self.saturations[phase_idx]

    def pressure(self, phase_idx: int):
        return self.pressures[phase_idx]

    @classmethod
    def from_wetting_saturation(
        cls, sw, *, wetting_phase=WETTING_PHASE, nonwetting_phase=NONWETTING_PHASE
    ):
        """State with S_w = sw and S_n = 1 - sw; pressures zero.

        Parameters
        ----------
        sw : float or ndarray
            Wetting saturation [-].
        wetting_phase, nonwetting_phase : int
            Phase indices, a permutation of (0, 1).

        Returns
        -------
        TwoPhaseState
        """
        check_phase_indices(wetting_phase, nonwetting_phase)
        sats = [None, None]
        sats[wetting_phase] = sw
        sats[nonwetting_phase] = 1.0 - sw
        return cls(saturations=tuple(sats))

    @classmethod
    def from_pressures(
        cls,
        p_w,
        p_n,
        *,
        wetting_phase=WETTING_PHASE,
        nonwetting_phase=NONWETTING_PHASE,
    ):
        """State carrying only phase pressures; saturations are NaN.

        Parameters
        ----------
        p_w, p_n : float or ndarray
            Wetting and non-wetting phase pressure [Pa].
        wetting_phase, nonwetting_phase : int
            Phase indices, a permutation of (0, 1).

        Returns
        -------
        TwoPhaseState
        """
        check_phase_indices(wetting_phase, nonwetting_phase)
        pres = [None, None]
        pres[wetting_phase] = p_w
        pres[nonwetting_phase] = p_n
        return cls(saturations=(float("nan"), float("nan")), pressures=tuple(pres))

"""
Two-phase van Genuchten-Mualem capillary pressure and relative permeability.
"""

from .common import DomainError
from .constitutive import (
    VanGenuchten,
    capillary_pressure,
    dkrn_dsw,
    dkrw_dsw,
    dpc_dsw,
    krn,
    krw,
    saturation_from_pressure,
)
from .fluid_state import NONWETTING_PHASE, WETTING_PHASE, FluidState, TwoPhaseState
from .materials import CLAY, SANDY_LOAM, VanGenuchtenParams

__all__ = [
    "VanGenuchtenParams",
    "SANDY_LOAM",
    "CLAY",
    "FluidState",
    "TwoPhaseState",
    "WETTING_PHASE",
    "NONWETTING_PHASE",
    "DomainError",
    "VanGenuchten",
    "capillary_pressure",
    "saturation_from_pressure",
    "dpc_dsw",
    "krw",
    "dkrw_dsw",
    "krn",
    "dkrn_dsw",
]

"""Shared fixtures for the van Genuchten tests."""

import pytest

from van_genuchten_2p import CLAY, SANDY_LOAM, VanGenuchten, VanGenuchtenParams


@pytest.fixture
def params():
    """Parameter set of the worked example: alpha = 1e-4 1/Pa, n = 2, m = 0.5."""
    return VanGenuchtenParams(alpha=1.0e-4, n=2.0, m=0.5)


@pytest.fixture(
    params=[
        VanGenuchtenParams(alpha=1.0e-4, n=2.0, m=0.5),
        VanGenuchtenParams(alpha=5.0e-5, n=4.0, m=0.6),
        SANDY_LOAM,
        CLAY,
    ],
    ids=["example", "independent-m", "sandy-loam", "clay"],
)
def any_params(request):
    """A spread of parameter sets, including m set independently of n."""
    return request.param


@pytest.fixture
def law():
    return VanGenuchten()

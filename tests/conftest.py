"""Pytest configuration and shared fixtures for gfpoly tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Make the package importable when running from a source checkout
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from gfpoly.common.field import GF4, field_elements  # noqa: E402
from gfpoly.common.polynomial import Polynomial  # noqa: E402
from gfpoly.sampling.core import RandomContext  # noqa: E402


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so failures are reproducible."""
    return np.random.default_rng(20240601)


@pytest.fixture
def ctx(rng) -> RandomContext:
    return RandomContext(rng=rng)


@pytest.fixture
def gf4_elements():
    """All four GF(4) elements in encoding order."""
    return field_elements(GF4)


@pytest.fixture
def irreducible_quadratic() -> Polynomial:
    """x^2 + x + α: no roots in GF(4), hence irreducible."""
    return Polynomial.from_coefficients([GF4.ALPHA, GF4.ONE, GF4.ONE])

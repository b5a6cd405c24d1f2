"""
gfpoly
======

Exact arithmetic over finite fields and over the polynomial rings built on
them, including inversion modulo a polynomial. This is the algebra behind
algebraic error-correcting codes and extension-field cryptography.

Modules:
    - common: Field contract, GF(4), polynomials, extended Euclid
    - sampling: Reproducible random field data for tests and experiments

Quick Start:
    >>> from gfpoly.common import GF4, poly_from_numbers
    >>> p = poly_from_numbers(GF4, [1, 0, 1])         # x^2 + 1
    >>> m = poly_from_numbers(GF4, [0, 1, 0, 2])      # α·x^3 + x
    >>> print(p.invert(m))
    (α+1)·x^2 + 1
"""

__version__ = "0.1.0"

from . import common
from . import sampling

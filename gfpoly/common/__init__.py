"""
Core algebra for gfpoly.

This module provides:
    - The finite field contract (GaloisField) and GF(4) reference field
    - Polynomials over any GaloisField (Polynomial)
    - The extended Euclidean algorithm for modular inversion (xgcd)
"""

from .field import GaloisField, GF4, field_elements
from .polynomial import Polynomial, poly_from_numbers
from .euclid import xgcd

__all__ = [
    "GaloisField",
    "GF4",
    "field_elements",
    "Polynomial",
    "poly_from_numbers",
    "xgcd",
]

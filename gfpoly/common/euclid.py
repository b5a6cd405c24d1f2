"""
Extended Euclidean Algorithm for Polynomials.

Given a polynomial p and a modulus m with deg(m) > deg(p), the extended
Euclidean algorithm finds g = gcd(p, m) together with a Bézout coefficient
t such that

    t * p ≡ g (mod m)

When g is a unit the pair is coprime and t (scaled so that g = 1) is the
inverse of p in the quotient ring F[x] / (m). This is how extension-field
elements are inverted when the extension is modelled as polynomials modulo
an irreducible polynomial.

Recurrence:
    r_0 = m,   r_1 = p
    t_0 = 0,   t_1 = 1
    q_i, r_{i+1} = divmod(r_{i-1}, r_i)
    t_{i+1} = t_{i-1} - q_i * t_i

The degree of r_i strictly decreases, so the loop runs at most deg(m) times.
"""

from __future__ import annotations
from typing import Optional, Tuple
import logging

from .polynomial import Polynomial

_logger = logging.getLogger(__name__)


def xgcd(poly: Polynomial, modulus: Polynomial) -> Tuple[Optional[Polynomial], Optional[Polynomial]]:
    """
    Compute (gcd, inverse) of `poly` modulo `modulus`.

    Args:
        poly: Polynomial to invert; must be non-zero
        modulus: Modulus; must have strictly larger degree than `poly`

    Returns:
        (gcd, inverse) where:
            - (1, t) if poly and modulus are coprime, with t * poly ≡ 1 (mod modulus)
            - (g, None) if they share the non-trivial factor g
            - (None, None) if a precondition is violated

        A non-zero constant gcd is a unit and is always normalised to 1 (t
        is scaled to match), so a non-zero constant `poly` is invertible.

    Example:
        >>> p = poly_from_numbers(GF4, [1, 0, 1])
        >>> m = poly_from_numbers(GF4, [0, 1, 0, 2])
        >>> gcd, inv = xgcd(p, m)
        >>> gcd.is_one(), inv.coefficients
        (True, (GF4(1), GF4(0), GF4(α+1)))
    """
    if modulus.degree <= poly.degree or poly.is_zero():
        _logger.debug("xgcd: precondition failed (deg(poly)=%d, deg(modulus)=%d, zero poly=%s)",
                      poly.degree, modulus.degree, poly.is_zero())
        return None, None

    field = poly.field
    r_last, r_current = modulus, poly
    t_last, t_current = Polynomial.new(field), Polynomial.one(field)

    step = 0
    while True:
        # A non-zero constant remainder is a unit: normalize it to 1.
        # This also covers the ordinary case r_current == 1.
        if r_current.degree == 0:
            unit_inverse = r_current.leading_coefficient.inverse()
            _logger.debug("xgcd: coprime after %d steps (unit remainder %s)", step, r_current)
            return r_current.scale(unit_inverse), t_current.scale(unit_inverse)

        division = r_last.div_mod(r_current)
        if division is None:
            return None, None
        quotient, remainder = division

        t_next = t_last.sub(quotient.mul(t_current))
        r_last, r_current = r_current, remainder
        t_last, t_current = t_current, t_next
        step += 1
        _logger.debug("xgcd: step %d, remainder degree %d, t = %s",
                      step, r_current.degree, t_current)

        if r_current.is_zero():
            _logger.debug("xgcd: not coprime, gcd = %s", r_last)
            return r_last, None

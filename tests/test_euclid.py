"""Tests for the extended Euclidean algorithm."""

import logging

import pytest

from gfpoly.common.euclid import xgcd
from gfpoly.common.field import GF4
from gfpoly.common.polynomial import Polynomial, poly_from_numbers


def P(*numbers: int) -> Polynomial:
    return poly_from_numbers(GF4, numbers)


class TestXgcd:
    """Tests for xgcd(poly, modulus)."""

    def test_coprime(self) -> None:
        gcd, inverse = xgcd(P(1, 0, 1), P(0, 1, 0, 2))
        assert gcd is not None and gcd.is_one()
        assert inverse is not None
        assert inverse.degree == 2
        assert inverse.coefficient(0) == GF4.ONE
        assert inverse.coefficient(1) == GF4.ZERO
        assert inverse.coefficient(2) == GF4.ALPHA_PLUS_ONE

    def test_not_coprime(self) -> None:
        """(1 + αx) divides x^3 + x^2 + x, so it is the gcd."""
        poly = P(1, 2)
        gcd, inverse = xgcd(poly, P(0, 1, 1, 1))
        assert inverse is None
        assert gcd is not None
        assert gcd.degree == 1
        assert gcd == poly

    def test_common_factor_of_higher_degree(self) -> None:
        # x (x + 1) and x (x + 1) (x + α)
        factor = P(0, 1, 1)
        poly = factor
        modulus = factor.mul(P(2, 1))
        gcd, inverse = xgcd(poly, modulus)
        assert inverse is None
        assert gcd == factor

    @pytest.mark.parametrize("poly,modulus", [
        (P(), P(0, 1, 1)),          # zero poly
        (P(1, 1), P(1, 1)),         # equal degrees
        (P(1, 1, 1), P(0, 1)),      # modulus of lower degree
        (P(1), P()),                # zero modulus
    ])
    def test_precondition_violations(self, poly, modulus) -> None:
        assert xgcd(poly, modulus) == (None, None)

    def test_constant_poly(self) -> None:
        gcd, inverse = xgcd(P(3), P(1, 1, 1))
        assert gcd.is_one()
        assert inverse == P(2)

    def test_unit_remainder_normalized(self) -> None:
        """A constant remainder other than 1 still means coprime."""
        gcd, inverse = xgcd(P(0, 1), P(2, 0, 1))
        assert gcd.is_one()
        assert inverse == P(0, 3)

    def test_bezout_relation(self) -> None:
        """t * poly ≡ gcd (mod modulus) for every coprime pair of small degree."""
        modulus = P(1, 1, 0, 1)  # x^3 + x + 1
        for c0 in range(4):
            for c1 in range(4):
                poly = P(c0, c1, 1)
                gcd, inverse = xgcd(poly, modulus)
                if inverse is None:
                    _, remainder = modulus.div_mod(gcd)
                    assert remainder.is_zero()
                    assert gcd.degree >= 1
                else:
                    assert poly.mul(inverse).div_mod(modulus)[1] == gcd

    def test_logs_steps(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="gfpoly.common.euclid"):
            xgcd(P(1, 0, 1), P(0, 1, 0, 2))
        assert any("coprime" in message for message in caplog.messages)

    def test_logs_precondition_failure(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="gfpoly.common.euclid"):
            xgcd(P(), P(0, 1))
        assert any("precondition" in message for message in caplog.messages)

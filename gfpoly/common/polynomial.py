"""
Univariate Polynomials over a Finite Field.

This module provides the polynomial ring F[x] for any field type that
implements the GaloisField contract. Polynomials are the objects that
error-correcting codes and extension-field constructions are built from:
codewords, generator polynomials, and extension-field elements reduced
modulo an irreducible polynomial.

Key Concepts:
    - Coefficients are stored lowest power first: index 0 = constant term
    - Canonical form: no trailing zero coefficients, except that the zero
      polynomial is stored as a single zero coefficient
    - Degree = number of coefficients - 1, so the zero polynomial has
      degree 0 (not -infinity). Code relying on degree laws must treat the
      zero polynomial separately.
    - Polynomials are immutable values; every operation returns a new one

Example:
    >>> p = Polynomial.from_coefficients([GF4.ONE, GF4.ZERO, GF4.ONE])  # x^2 + 1
    >>> m = Polynomial.from_coefficients([GF4.ZERO, GF4.ONE, GF4.ZERO, GF4.ALPHA])
    >>> print(p.invert(m))
    (α+1)·x^2 + 1
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, Sequence, Tuple, Type
import logging

from .field import F

_logger = logging.getLogger(__name__)


def _strip_trailing_zeros(coefficients: Sequence[F], field: Type[F]) -> Tuple[F, ...]:
    """Drop high-order zero coefficients, keeping at least one coefficient."""
    end = len(coefficients)
    while end > 0 and coefficients[end - 1].is_zero():
        end -= 1
    if end == 0:
        return (field.zero(),)
    return tuple(coefficients[:end])


@dataclass(frozen=True)
class Polynomial(Generic[F]):
    """
    A polynomial with coefficients in a finite field.

    Construct through `Polynomial.new` or `Polynomial.from_coefficients`
    rather than directly; the constructor canonicalizes either way.

    Attributes:
        field: The GaloisField subclass the coefficients belong to
        coefficients: Canonical coefficient tuple, constant term first

    Example:
        >>> p = Polynomial.from_coefficients([GF4.ALPHA, GF4.ONE, GF4.ZERO])
        >>> p.degree
        1
        >>> p.coefficients
        (GF4(α), GF4(1))
    """
    field: Type[F]
    coefficients: Tuple[F, ...] = ()

    def __post_init__(self):
        """Validate coefficient types and put the sequence in canonical form."""
        coefficients = tuple(self.coefficients)
        for c in coefficients:
            if not isinstance(c, self.field):
                raise TypeError(
                    f"Coefficient {c!r} is not an element of {self.field.__name__}"
                )
        object.__setattr__(self, "coefficients", _strip_trailing_zeros(coefficients, self.field))

    # Construction

    @classmethod
    def new(cls, field: Type[F]) -> Polynomial[F]:
        """Return the zero polynomial over `field`."""
        return cls(field, (field.zero(),))

    @classmethod
    def one(cls, field: Type[F]) -> Polynomial[F]:
        """Return the constant polynomial 1 over `field`."""
        return cls(field, (field.one(),))

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[F],
                          field: Optional[Type[F]] = None) -> Polynomial[F]:
        """
        Build a polynomial from coefficients, constant term first.

        Trailing zeros are stripped; an empty or all-zero sequence gives the
        zero polynomial.

        Args:
            coefficients: Field elements, lowest power first
            field: Field type. Inferred from the first coefficient if omitted.

        Raises:
            ValueError: If `coefficients` is empty and no field is given
        """
        coefficients = list(coefficients)
        if field is None:
            if not coefficients:
                raise ValueError("Cannot infer the field of an empty coefficient list")
            field = type(coefficients[0])
        if not coefficients:
            return cls.new(field)
        return cls(field, tuple(coefficients))

    # Inspection

    @property
    def degree(self) -> int:
        """Number of coefficients minus one (0 for the zero polynomial)."""
        return len(self.coefficients) - 1

    @property
    def leading_coefficient(self) -> F:
        """Highest-index coefficient (zero only for the zero polynomial)."""
        return self.coefficients[-1]

    def is_zero(self) -> bool:
        """True iff this is the zero polynomial."""
        return self.degree == 0 and self.coefficients[0].is_zero()

    def is_one(self) -> bool:
        """True iff this is the constant polynomial 1."""
        return self.degree == 0 and self.coefficients[0].is_one()

    def coefficient(self, i: int) -> Optional[F]:
        """Coefficient of x^i, or None if i is outside the stored range."""
        if 0 <= i < len(self.coefficients):
            return self.coefficients[i]
        return None

    def evaluate(self, x: F) -> F:
        """Evaluate at x using Horner's method."""
        result = self.field.zero()
        for c in reversed(self.coefficients):
            result = result.mul(x).add(c)
        return result

    # Ring operations

    def _check_compatible(self, other: Polynomial) -> None:
        if other.field is not self.field:
            raise TypeError(
                f"Cannot combine polynomials over {self.field.__name__} "
                f"and {other.field.__name__}"
            )

    def add(self, other: Polynomial[F]) -> Polynomial[F]:
        """Coefficient-wise sum."""
        self._check_compatible(other)
        longer, shorter = (self, other) if self.degree >= other.degree else (other, self)
        coefficients = list(longer.coefficients)
        for i, c in enumerate(shorter.coefficients):
            coefficients[i] = coefficients[i].add(c)
        return Polynomial(self.field, tuple(coefficients))

    def sub(self, other: Polynomial[F]) -> Polynomial[F]:
        """
        Coefficient-wise difference self - other.

        The shorter operand is padded with zeros so that field subtraction is
        always applied as self[i] - other[i], which matters for fields of odd
        characteristic.
        """
        self._check_compatible(other)
        zero = self.field.zero()
        length = max(len(self.coefficients), len(other.coefficients))
        coefficients = [
            (self.coefficient(i) or zero).sub(other.coefficient(i) or zero)
            for i in range(length)
        ]
        return Polynomial(self.field, tuple(coefficients))

    def mul(self, other: Polynomial[F]) -> Polynomial[F]:
        """Schoolbook product: O(deg(self) * deg(other)) field operations."""
        self._check_compatible(other)
        coefficients: List[F] = [self.field.zero()] * (self.degree + other.degree + 1)
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                coefficients[i + j] = coefficients[i + j].add(a.mul(b))
        return Polynomial(self.field, tuple(coefficients))

    def scale(self, scalar: F) -> Polynomial[F]:
        """Multiply every coefficient by a field element."""
        return Polynomial(self.field, tuple(c.mul(scalar) for c in self.coefficients))

    def div_mod(self, other: Polynomial[F]) -> Optional[Tuple[Polynomial[F], Polynomial[F]]]:
        """
        Euclidean division: find (q, r) with self = q * other + r.

        Returns:
            (quotient, remainder) with deg(r) < deg(other) or r zero, or
            None if `other` is the zero polynomial.

        Algorithm:
            Repeatedly cancel the leading term of the running remainder with
            a multiple of `other` shifted to the same degree. Each step makes
            the remainder strictly shorter, so the loop terminates.
        """
        self._check_compatible(other)
        if self.degree < other.degree:
            return Polynomial.new(self.field), self
        if other.is_zero():
            _logger.debug("div_mod: division of %s by the zero polynomial", self)
            return None

        lead = other.leading_coefficient
        remainder = list(self.coefficients)
        quotient: List[F] = [self.field.zero()] * len(remainder)

        # A zero remainder would otherwise loop forever on constant divisors
        while len(remainder) - 1 >= other.degree and not (
            len(remainder) == 1 and remainder[0].is_zero()
        ):
            # Never None: lead is non-zero in canonical form
            d = remainder[-1].div(lead)
            offset = len(remainder) - len(other.coefficients)
            quotient[offset] = d
            for i, c in enumerate(other.coefficients):
                remainder[i + offset] = remainder[i + offset].sub(c.mul(d))
            remainder = list(_strip_trailing_zeros(remainder, self.field))
            _logger.debug("div_mod: quotient[%d] = %s, remainder degree %d",
                          offset, d, len(remainder) - 1)

        return Polynomial(self.field, tuple(quotient)), Polynomial(self.field, tuple(remainder))

    def invert(self, modulus: Polynomial[F]) -> Optional[Polynomial[F]]:
        """
        Multiplicative inverse in the quotient ring F[x] / (modulus).

        Requires deg(modulus) > deg(self). Returns None when self is zero,
        when the degree requirement fails, or when self and modulus share a
        non-trivial common factor.
        """
        from .euclid import xgcd

        _, inverse = xgcd(self, modulus)
        return inverse

    # Operators

    def __add__(self, other: Polynomial[F]) -> Polynomial[F]:
        return self.add(other)

    def __sub__(self, other: Polynomial[F]) -> Polynomial[F]:
        return self.sub(other)

    def __mul__(self, other: Polynomial[F]) -> Polynomial[F]:
        return self.mul(other)

    def __repr__(self) -> str:
        return f"Polynomial[{self.field.__name__}]({list(self.coefficients)})"

    def __str__(self) -> str:
        """Human-readable form, highest power first: "α·x^2 + x + (α+1)"."""
        terms = []
        for power in range(self.degree, -1, -1):
            c = self.coefficients[power]
            if c.is_zero():
                continue
            coef = str(c)
            if "+" in coef or "-" in coef:
                coef = f"({coef})"
            if power == 0:
                terms.append(coef)
                continue
            monomial = "x" if power == 1 else f"x^{power}"
            terms.append(monomial if c.is_one() else f"{coef}·{monomial}")
        return " + ".join(terms) if terms else str(self.field.zero())


def poly_from_numbers(field: Type[F], numbers: Iterable[int]) -> Polynomial[F]:
    """
    Build a polynomial from integer encodings, constant term first.

    Convenience for fields with a `from_number` decoder (such as GF4).

    Raises:
        ValueError: If any number is not a valid encoding for `field`
        NotImplementedError: If `field` has no integer encoding
    """
    coefficients: List[F] = []
    for n in numbers:
        element = field.from_number(n)
        if element is None:
            raise ValueError(f"{n} is not a valid {field.__name__} encoding")
        coefficients.append(element)
    return Polynomial.from_coefficients(coefficients, field)

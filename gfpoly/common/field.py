"""
Finite Field Arithmetic for Polynomial Computations.

This module defines the contract every finite field type must satisfy so
that polynomials and the extended Euclidean algorithm can be written once
and reused over any field, plus GF(4) as the reference instantiation.

Key Concepts:
    - A field has an additive identity (zero) and a multiplicative identity (one)
    - Every non-zero element has exactly one multiplicative inverse
    - Division by zero is not an error: it returns None and the caller checks
    - Elements are immutable; operations always produce new values

GF(4) Structure:
    The field has four elements {0, 1, α, α+1} where α is a root of
    x^2 + x + 1, i.e. α^2 = α + 1. It has characteristic 2, so every
    element is its own additive inverse and subtraction equals addition.

    Encoding used by the lookup tables:
        0 -> 0,  1 -> 1,  α -> 2,  α+1 -> 3

Example:
    >>> a = GF4.ALPHA
    >>> b = GF4.ALPHA_PLUS_ONE
    >>> print(a * b)  # α(α+1) = α^2 + α = 1
    1
    >>> print(GF4.ONE.div(GF4.ZERO))
    None
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, TypeVar, Type

import numpy as np


F = TypeVar("F", bound="GaloisField")


class GaloisField(ABC):
    """
    Capability contract for elements of a finite field.

    Polynomial and xgcd only ever talk to coefficients through these
    methods, so any concrete field that implements them (and satisfies the
    field laws) can be plugged in.

    Subclasses must be immutable and hashable, and equality must be total.
    """

    @classmethod
    @abstractmethod
    def zero(cls: Type[F]) -> F:
        """Return the additive identity."""

    @classmethod
    @abstractmethod
    def one(cls: Type[F]) -> F:
        """Return the multiplicative identity."""

    @classmethod
    @abstractmethod
    def random(cls: Type[F], rng: np.random.Generator) -> F:
        """
        Draw a uniformly distributed element.

        Args:
            rng: Caller-owned randomness source. Implementations must not
                 fall back to any process-wide generator.
        """

    @classmethod
    def from_number(cls: Type[F], number: int) -> Optional[F]:
        """
        Decode an integer encoding, or None if `number` is not one.

        Optional: only fields with a small integer encoding implement it.
        `field_elements` and `poly_from_numbers` depend on it.
        """
        raise NotImplementedError(f"{cls.__name__} has no integer encoding")

    @abstractmethod
    def add(self: F, other: F) -> F:
        """Field addition."""

    @abstractmethod
    def sub(self: F, other: F) -> F:
        """Field subtraction: self + (-other)."""

    @abstractmethod
    def mul(self: F, other: F) -> F:
        """Field multiplication."""

    @abstractmethod
    def div(self: F, other: F) -> Optional[F]:
        """Field division self * other^(-1), or None if other is zero."""

    def is_zero(self) -> bool:
        """Check if this element is zero."""
        return self == type(self).zero()

    def is_one(self) -> bool:
        """Check if this element is one."""
        return self == type(self).one()

    def inverse(self: F) -> Optional[F]:
        """Multiplicative inverse, or None for zero."""
        return type(self).one().div(self)

    def __add__(self: F, other: F) -> F:
        return self.add(other)

    def __sub__(self: F, other: F) -> F:
        return self.sub(other)

    def __mul__(self: F, other: F) -> F:
        return self.mul(other)


# GF(4) lookup tables, indexed by the integer encoding of the operands.
_ADDITION = np.array([
    [0, 1, 2, 3],
    [1, 0, 3, 2],
    [2, 3, 0, 1],
    [3, 2, 1, 0],
], dtype=np.uint8)

_MULTIPLICATION = np.array([
    [0, 0, 0, 0],
    [0, 1, 2, 3],
    [0, 2, 3, 1],
    [0, 3, 1, 2],
], dtype=np.uint8)

# Column j holds division by the element encoded as j + 1 (no zero column).
_DIVISION = np.array([
    [0, 0, 0],
    [1, 3, 2],
    [2, 1, 3],
    [3, 2, 1],
], dtype=np.uint8)

_SYMBOLS = ("0", "1", "α", "α+1")


@dataclass(frozen=True)
class GF4(GaloisField):
    """
    An element of the Galois field GF(4).

    Attributes:
        value: Integer encoding in [0, 3] (0, 1, α, α+1)

    Example:
        >>> GF4(2)
        GF4(α)
        >>> GF4.ALPHA + GF4.ONE
        GF4(α+1)
    """
    value: int

    ZERO = None  # type: GF4
    ONE = None  # type: GF4
    ALPHA = None  # type: GF4
    ALPHA_PLUS_ONE = None  # type: GF4

    def __post_init__(self):
        """Reject encodings outside the field."""
        if not 0 <= self.value < len(_SYMBOLS):
            raise ValueError(f"GF4 value must be in [0, 3], got {self.value}")

    def __repr__(self) -> str:
        return f"GF4({_SYMBOLS[self.value]})"

    def __str__(self) -> str:
        return _SYMBOLS[self.value]

    @classmethod
    def from_number(cls, number: int) -> Optional[GF4]:
        """Decode an integer, returning None if it is not a valid encoding."""
        if 0 <= number < len(_SYMBOLS):
            return cls(number)
        return None

    def to_number(self) -> int:
        """Integer encoding of this element."""
        return self.value

    @classmethod
    def zero(cls) -> GF4:
        return cls(0)

    @classmethod
    def one(cls) -> GF4:
        return cls(1)

    @classmethod
    def random(cls, rng: np.random.Generator) -> GF4:
        return cls(int(rng.integers(0, len(_SYMBOLS))))

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def add(self, other: GF4) -> GF4:
        return GF4(int(_ADDITION[self.value, other.value]))

    def sub(self, other: GF4) -> GF4:
        # Characteristic 2: -b == b
        return self.add(other)

    def mul(self, other: GF4) -> GF4:
        return GF4(int(_MULTIPLICATION[self.value, other.value]))

    def div(self, other: GF4) -> Optional[GF4]:
        if other.is_zero():
            return None
        return GF4(int(_DIVISION[self.value, other.value - 1]))


GF4.ZERO = GF4(0)
GF4.ONE = GF4(1)
GF4.ALPHA = GF4(2)
GF4.ALPHA_PLUS_ONE = GF4(3)


def field_elements(field: Type[F]) -> List[F]:
    """
    Enumerate every element of a small field with a `from_number` decoder.

    Used by tests and demos to sweep the whole field. Stops at the first
    integer the field rejects.
    """
    elements: List[F] = []
    number = 0
    while True:
        element = field.from_number(number)
        if element is None:
            return elements
        elements.append(element)
        number += 1

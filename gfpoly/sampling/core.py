"""
Random Sampling of Field Elements, Vectors and Polynomials.

Every draw goes through a numpy Generator owned by a RandomContext. There
is no module-level generator: two contexts built from the same seed
produce the same sequence, and contexts never influence each other.
"""

from __future__ import annotations
from typing import List, Optional, Type
import logging

import numpy as np

from ..common.field import F
from ..common.polynomial import Polynomial
from .config import SamplingConfig

_logger = logging.getLogger(__name__)


class RandomContext:
    """
    Source of random field data for tests and experiments.

    Attributes:
        rng: The numpy Generator all draws come from

    Example:
        >>> ctx = RandomContext(seed=42)
        >>> e = ctx.random_error_vector(GF4, length=6, weight=2)
        >>> sum(not x.is_zero() for x in e)
        2
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        """
        Args:
            rng: Existing generator to draw from. Takes precedence over `seed`.
            seed: Seed for a new numpy default generator
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: SamplingConfig) -> RandomContext:
        """Create a context seeded from a SamplingConfig."""
        return cls(seed=config.seed)

    def random_element(self, field: Type[F]) -> F:
        """Uniform element of `field`, zero included."""
        return field.random(self.rng)

    def random_nonzero_element(self, field: Type[F]) -> F:
        """Uniform non-zero element of `field` (rejection sampling)."""
        while True:
            element = field.random(self.rng)
            if not element.is_zero():
                return element

    def random_vector(self, field: Type[F], length: int) -> List[F]:
        """Vector of `length` independent uniform elements."""
        if length < 0:
            raise ValueError("length must be non-negative")
        return [field.random(self.rng) for _ in range(length)]

    def random_error_vector(self, field: Type[F], length: int, weight: int) -> List[F]:
        """
        Vector with exactly `weight` non-zero entries at random positions.

        The non-zero values are uniform over the non-zero elements and the
        positions are uniform over all subsets of size `weight`.

        Raises:
            ValueError: If weight is negative or larger than length
        """
        if length < 0:
            raise ValueError("length must be non-negative")
        if not 0 <= weight <= length:
            raise ValueError(f"weight must be in [0, {length}], got {weight}")

        vector = [self.random_nonzero_element(field) for _ in range(weight)]
        vector.extend(field.zero() for _ in range(length - weight))
        self.rng.shuffle(vector)
        _logger.debug("random_error_vector: length=%d weight=%d", length, weight)
        return vector

    def random_polynomial(self, field: Type[F], degree: int) -> Polynomial[F]:
        """
        Polynomial of exactly `degree` (non-zero leading coefficient).

        Degree 0 gives a non-zero constant.
        """
        if degree < 0:
            raise ValueError("degree must be non-negative")
        coefficients = self.random_vector(field, degree)
        coefficients.append(self.random_nonzero_element(field))
        return Polynomial.from_coefficients(coefficients, field)

    def random_polynomial_from_config(self, field: Type[F],
                                      config: SamplingConfig) -> Polynomial[F]:
        """Polynomial whose degree is uniform over [0, config.max_degree]."""
        degree = int(self.rng.integers(0, config.max_degree + 1))
        _logger.debug("random_polynomial_from_config: degree=%d (max %d)",
                      degree, config.max_degree)
        return self.random_polynomial(field, degree)

    def random_error_vectors(self, field: Type[F], config: SamplingConfig,
                             count: int) -> List[List[F]]:
        """Draw `count` error vectors shaped by `config`."""
        return [
            self.random_error_vector(field, config.code_length, config.error_weight)
            for _ in range(count)
        ]

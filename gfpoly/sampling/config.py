"""
Sampling Configuration for Test-Data Generation.

This module defines the parameters used when drawing random test data for
code experiments: how long a vector is, how many positions an error
touches, and which seed makes the draw reproducible.

Key Parameters:
    - code_length: Number of symbols in a sampled vector (n)
    - error_weight: Number of non-zero positions in an error vector (t)
    - max_degree: Largest degree drawn by RandomContext.random_polynomial_from_config
    - seed: Seed for the randomness source; None draws fresh OS entropy
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class SamplingConfig:
    """
    Parameters for random vector and error-vector generation.

    Attributes:
        name: Configuration name for identification
        code_length: Length of sampled vectors
        error_weight: Non-zero entries per error vector
        max_degree: Upper bound on the degree of sampled polynomials
                    (see RandomContext.random_polynomial_from_config)
        seed: Seed for numpy's default generator (None = unseeded)

    Example:
        >>> config = SamplingConfig(name="rs-like", code_length=15, error_weight=3, seed=7)
        >>> ctx = RandomContext.from_config(config)
    """

    name: str = "default"
    code_length: int = 8
    error_weight: int = 2
    max_degree: int = 6
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration."""
        if self.code_length < 0:
            raise ValueError("code_length must be non-negative")
        if self.error_weight < 0:
            raise ValueError("error_weight must be non-negative")
        if self.error_weight > self.code_length:
            raise ValueError("error_weight cannot exceed code_length")
        if self.max_degree < 0:
            raise ValueError("max_degree must be non-negative")

    @property
    def untouched_fraction(self) -> float:
        """Fraction of positions left untouched by an error vector."""
        if self.code_length == 0:
            return 1.0
        return 1.0 - self.error_weight / self.code_length

    def summary(self) -> str:
        """Return configuration summary string."""
        seed = "unseeded" if self.seed is None else str(self.seed)
        return (
            f"SamplingConfig '{self.name}':\n"
            f"  Code length: {self.code_length}\n"
            f"  Error weight: {self.error_weight}\n"
            f"  Untouched fraction: {self.untouched_fraction:.2f}\n"
            f"  Max polynomial degree: {self.max_degree}\n"
            f"  Seed: {seed}"
        )


def create_default_config(seed: Optional[int] = None) -> SamplingConfig:
    """Length-8 vectors with two errors."""
    return SamplingConfig(name="default", seed=seed)


def create_short_code_config(seed: Optional[int] = None) -> SamplingConfig:
    """
    Length-3 vectors with a single error.

    GF(4) has three non-zero elements, so this matches the length of a
    Reed-Solomon code over GF(4).
    """
    return SamplingConfig(
        name="short-code",
        code_length=3,
        error_weight=1,
        max_degree=2,
        seed=seed,
    )

"""
Random Test-Data Generation

This module draws random field elements, vectors, fixed-weight error
vectors and polynomials from an explicitly owned numpy Generator.

Key Components:
    - SamplingConfig: Vector length, error weight and seed
    - RandomContext: All sampling operations

Usage:
    >>> from gfpoly.common import GF4
    >>> from gfpoly.sampling import RandomContext, create_default_config
    >>>
    >>> config = create_default_config(seed=42)
    >>> ctx = RandomContext.from_config(config)
    >>> error = ctx.random_error_vector(GF4, config.code_length, config.error_weight)
"""

from .config import SamplingConfig, create_default_config, create_short_code_config
from .core import RandomContext

__all__ = [
    "SamplingConfig",
    "create_default_config",
    "create_short_code_config",
    "RandomContext",
]

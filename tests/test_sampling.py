"""Tests for sampling configuration and the random context."""

import numpy as np
import pytest

from gfpoly.common.field import GF4
from gfpoly.sampling.config import (
    SamplingConfig,
    create_default_config,
    create_short_code_config,
)
from gfpoly.sampling.core import RandomContext


class TestSamplingConfig:
    """Tests for SamplingConfig validation and factories."""

    def test_defaults(self) -> None:
        config = SamplingConfig()
        assert config.code_length == 8
        assert config.error_weight == 2
        assert config.max_degree == 6
        assert config.seed is None

    @pytest.mark.parametrize("kwargs", [
        {"code_length": -1, "error_weight": 0},
        {"error_weight": -1},
        {"code_length": 3, "error_weight": 4},
        {"max_degree": -1},
    ])
    def test_invalid(self, kwargs) -> None:
        with pytest.raises(ValueError):
            SamplingConfig(**kwargs)

    def test_factories(self) -> None:
        assert create_default_config(seed=1).seed == 1
        short = create_short_code_config()
        assert (short.code_length, short.error_weight) == (3, 1)

    def test_untouched_fraction(self) -> None:
        """Share of positions an error vector leaves at zero."""
        assert SamplingConfig(code_length=8, error_weight=2).untouched_fraction == pytest.approx(0.75)
        assert SamplingConfig(code_length=0, error_weight=0).untouched_fraction == 1.0

    def test_summary(self) -> None:
        text = create_short_code_config(seed=5).summary()
        assert "short-code" in text
        assert "Seed: 5" in text
        assert "Max polynomial degree: 2" in text
        assert "Untouched fraction: 0.67" in text


class TestRandomContext:
    """Tests for RandomContext draws."""

    def test_same_seed_same_draws(self) -> None:
        a = RandomContext(seed=11)
        b = RandomContext(seed=11)
        assert a.random_vector(GF4, 30) == b.random_vector(GF4, 30)
        assert a.random_error_vector(GF4, 10, 3) == b.random_error_vector(GF4, 10, 3)
        assert a.random_polynomial(GF4, 5) == b.random_polynomial(GF4, 5)

    def test_uses_given_generator(self) -> None:
        rng = np.random.default_rng(9)
        ctx = RandomContext(rng=rng)
        assert ctx.rng is rng

    def test_from_config(self) -> None:
        config = create_default_config(seed=3)
        a = RandomContext.from_config(config)
        b = RandomContext(seed=3)
        assert a.random_vector(GF4, 20) == b.random_vector(GF4, 20)

    def test_contexts_are_independent(self) -> None:
        """Drawing from one context does not shift another."""
        a = RandomContext(seed=4)
        b = RandomContext(seed=4)
        RandomContext(seed=4).random_vector(GF4, 100)
        assert a.random_vector(GF4, 10) == b.random_vector(GF4, 10)

    def test_random_vector(self, ctx) -> None:
        vector = ctx.random_vector(GF4, 12)
        assert len(vector) == 12
        assert all(isinstance(x, GF4) for x in vector)
        assert ctx.random_vector(GF4, 0) == []

    def test_random_vector_negative_length(self, ctx) -> None:
        with pytest.raises(ValueError):
            ctx.random_vector(GF4, -1)

    def test_random_nonzero_element(self, ctx) -> None:
        assert not any(ctx.random_nonzero_element(GF4).is_zero() for _ in range(200))

    @pytest.mark.parametrize("length,weight", [(0, 0), (5, 0), (5, 2), (8, 8), (20, 7)])
    def test_error_vector_weight(self, ctx, length, weight) -> None:
        for _ in range(10):
            vector = ctx.random_error_vector(GF4, length, weight)
            assert len(vector) == length
            assert sum(not x.is_zero() for x in vector) == weight

    def test_error_positions_vary(self, ctx) -> None:
        supports = {
            tuple(i for i, x in enumerate(ctx.random_error_vector(GF4, 6, 1)) if not x.is_zero())
            for _ in range(200)
        }
        assert supports == {(i,) for i in range(6)}

    @pytest.mark.parametrize("length,weight", [(3, 4), (3, -1), (-1, 0)])
    def test_error_vector_invalid(self, ctx, length, weight) -> None:
        with pytest.raises(ValueError):
            ctx.random_error_vector(GF4, length, weight)

    def test_random_error_vectors(self, ctx) -> None:
        config = create_short_code_config()
        vectors = ctx.random_error_vectors(GF4, config, count=4)
        assert len(vectors) == 4
        assert all(len(v) == 3 for v in vectors)

    @pytest.mark.parametrize("degree", [0, 1, 4, 9])
    def test_random_polynomial_degree(self, ctx, degree) -> None:
        p = ctx.random_polynomial(GF4, degree)
        assert p.degree == degree
        assert not p.is_zero()

    def test_polynomial_from_config_covers_degrees(self, ctx) -> None:
        """Degrees are drawn from 0 up to and including max_degree."""
        config = SamplingConfig(max_degree=2)
        degrees = {ctx.random_polynomial_from_config(GF4, config).degree for _ in range(200)}
        assert degrees == {0, 1, 2}

    def test_polynomial_from_config_zero_max_degree(self, ctx) -> None:
        config = SamplingConfig(max_degree=0)
        for _ in range(20):
            p = ctx.random_polynomial_from_config(GF4, config)
            assert p.degree == 0
            assert not p.is_zero()

    def test_polynomial_from_config_reproducible(self) -> None:
        config = create_default_config(seed=8)
        a = RandomContext.from_config(config)
        b = RandomContext.from_config(config)
        assert [a.random_polynomial_from_config(GF4, config) for _ in range(5)] == \
            [b.random_polynomial_from_config(GF4, config) for _ in range(5)]

    def test_random_polynomial_negative_degree(self, ctx) -> None:
        with pytest.raises(ValueError):
            ctx.random_polynomial(GF4, -1)

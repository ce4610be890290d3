import math

import numpy as np
import pytest

from models.probability import RandomSource
from conftest import ScriptedUniforms


def test_box_muller_uses_cosine_branch():
    # sqrt(-2 ln u) == 1 and cos(2*pi*0.5) == -1
    source = ScriptedUniforms([math.exp(-0.5), 0.5])
    assert source.normal() == pytest.approx(-1.0)


def test_box_muller_redraws_exact_zero():
    source = ScriptedUniforms([0.0, math.exp(-2.0), 0.0, 0.0, 0.25])
    # u -> exp(-2) after one redraw, v -> 0.25 after two
    assert source.normal() == pytest.approx(2.0 * math.cos(math.pi / 2))
    assert source.values == []


def test_vectorised_normal_redraws_zeros():
    source = ScriptedUniforms([0.0, math.exp(-0.5), 0.5, 0.5, math.exp(-0.5)])
    # u = [0, e^-0.5] with the zero redrawn as 0.5; v = [0.5, e^-0.5]
    z = source.normal(2)
    assert z.shape == (2,)
    assert np.isfinite(z).all()
    assert z[1] == pytest.approx(math.cos(2 * math.pi * math.exp(-0.5)))


def test_normal_moments():
    z = RandomSource(seed=42).normal(200_000)
    assert abs(z.mean()) < 0.01
    assert z.std() == pytest.approx(1.0, abs=0.01)


def test_scalar_normal_is_float():
    assert isinstance(RandomSource(seed=1).normal(), float)


def test_seed_reproducible():
    a = RandomSource(seed=99).normal(5)
    b = RandomSource(seed=99).normal(5)
    np.testing.assert_array_equal(a, b)


def test_insert_position_bounds():
    source = RandomSource(seed=3)
    positions = {source.insert_position(4) for _ in range(500)}
    assert positions == {0, 1, 2, 3, 4}
    assert source.insert_position(0) == 0


def test_spawn_gives_independent_sources():
    children = RandomSource(seed=5).spawn(3)
    assert len(children) == 3
    draws = [c.uniform() for c in children]
    assert len(set(draws)) == 3

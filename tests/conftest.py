import numpy as np
import pytest

from models.probability import RandomSource
from models.team import TeamRating


class ZeroNoise(RandomSource):
    """Every normal draw is exactly 0, so simulated scores equal the rates."""

    def normal(self, size=None):
        if size is None:
            return 0.0
        return np.zeros(size)


class FixedNormals(RandomSource):
    """Normal draws come from a fixed array, reshaped to the requested size."""

    def __init__(self, values):
        super().__init__(seed=0)
        self.values = np.asarray(values, dtype=float)

    def normal(self, size=None):
        if size is None:
            return float(self.values.flat[0])
        return self.values.reshape(size)


class ScriptedUniforms(RandomSource):
    """Uniform draws replayed from a list, in order."""

    def __init__(self, values):
        super().__init__(seed=0)
        self.values = list(values)

    def uniform(self, size=None):
        if size is None:
            return self.values.pop(0)
        n = int(np.prod(size))
        out = [self.values.pop(0) for _ in range(n)]
        return np.array(out, dtype=float).reshape(size)


@pytest.fixture
def zero_noise():
    return ZeroNoise(seed=7)


@pytest.fixture
def rng():
    return RandomSource(seed=1234)


@pytest.fixture
def make_team():
    def _make(number, auto, teleop, endgame=0.0, rating=None, consistency=15.0, name=None):
        if rating is None:
            rating = auto + teleop + endgame
        return TeamRating(
            number=number,
            name=name or f"Team {number}",
            auto=auto,
            teleop=teleop,
            endgame=endgame,
            rating=rating,
            consistency=consistency,
        )
    return _make

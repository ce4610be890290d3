"""Random number source used by every simulation.

All randomness goes through a RandomSource so tests can swap in a
deterministic subclass. Normal variates come from the Box-Muller transform
applied to the source's own uniforms.
"""

import numpy as np


class RandomSource:
    """Wraps a numpy Generator behind the handful of draws the simulator needs."""

    def __init__(self, seed: int | None = None, rng: np.random.Generator | None = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def uniform(self, size=None):
        """Uniform draw(s) in [0, 1)."""
        if size is None:
            return float(self.rng.random())
        return self.rng.random(size)

    def normal(self, size=None):
        """Standard normal draw(s) via Box-Muller.

        One variate per (u, v) pair; the paired sine variate is discarded.
        Uniforms that come out exactly 0 are redrawn so log(u) stays finite.
        """
        u = self._nonzero_uniform(size)
        v = self._nonzero_uniform(size)
        z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
        return float(z) if size is None else z

    def shuffle(self, items: list) -> None:
        """Shuffle a list in place."""
        self.rng.shuffle(items)

    def insert_position(self, n: int) -> int:
        """Uniform insertion index into a sequence of length n (0..n inclusive)."""
        return int(self.rng.integers(0, n + 1))

    def _nonzero_uniform(self, size):
        if size is None:
            u = self.uniform()
            while u == 0:
                u = self.uniform()
            return u

        u = np.asarray(self.uniform(size), dtype=float)
        zeros = u == 0
        while zeros.any():
            u[zeros] = self.uniform(int(zeros.sum()))
            zeros = u == 0
        return u

    def spawn(self, n: int) -> list["RandomSource"]:
        """Independent child sources, e.g. one per worker thread."""
        return [RandomSource(rng=child) for child in self.rng.spawn(n)]

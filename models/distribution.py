"""Empirical score distribution built from simulated trials."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

import config


@dataclass(frozen=True)
class HistogramBin:
    range_label: str
    count: int
    percentage: float


@dataclass(frozen=True)
class ScoreDistribution:
    samples: tuple[float, ...]  # in trial order
    mean: float
    std_dev: float              # population (divides by n)
    min: float
    max: float
    median: float               # sorted[n // 2], the upper-middle value for even n.
                                # Required tie-break: never average the two middle values.
    histogram: tuple[HistogramBin, ...]

    @classmethod
    def from_samples(cls, samples, bins: int = config.HISTOGRAM_BINS) -> ScoreDistribution:
        arr = np.asarray(samples, dtype=float)
        n = len(arr)
        if n == 0:
            raise ValueError("Cannot build a distribution from zero samples")

        ordered = np.sort(arr)
        return cls(
            samples=tuple(float(s) for s in arr),
            mean=float(arr.mean()),
            std_dev=float(arr.std()),
            min=float(ordered[0]),
            max=float(ordered[-1]),
            median=float(ordered[n // 2]),
            histogram=_histogram(arr, float(ordered[0]), float(ordered[-1]), bins),
        )

    @property
    def iterations(self) -> int:
        return len(self.samples)

    def win_pct_against(self, target: float) -> float:
        """Percentage of trials scoring at least the target."""
        arr = np.asarray(self.samples)
        return float((arr >= target).sum()) / len(arr) * 100


def head_to_head_win_pct(ours: ScoreDistribution, theirs: ScoreDistribution) -> float:
    """Percentage of trial indices where our sample strictly beats theirs.

    Both distributions must come from the same number of trials; samples are
    compared index by index, not resampled. Ties count for neither side.
    """
    if ours.iterations != theirs.iterations:
        raise ValueError(
            f"Trial counts differ: {ours.iterations} vs {theirs.iterations}"
        )
    a = np.asarray(ours.samples)
    b = np.asarray(theirs.samples)
    return float((a > b).sum()) / len(a) * 100


def _histogram(arr: np.ndarray, lo: float, hi: float, bins: int) -> tuple[HistogramBin, ...]:
    n = len(arr)
    width = (hi - lo) / bins

    if width == 0:
        # Every sample is identical
        idx = np.zeros(n, dtype=int)
    else:
        idx = np.minimum(bins - 1, np.floor((arr - lo) / width).astype(int))

    counts = np.bincount(idx, minlength=bins)
    return tuple(
        HistogramBin(
            range_label=f"{round(lo + i * width)}-{round(lo + (i + 1) * width)}",
            count=int(c),
            percentage=int(c) / n * 100,
        )
        for i, c in enumerate(counts)
    )

import pytest

from models.distribution import ScoreDistribution, head_to_head_win_pct


def test_median_takes_sorted_index_n_over_2():
    dist = ScoreDistribution.from_samples([10, 20, 30, 40])
    assert dist.median == 30


def test_median_ignores_trial_order():
    dist = ScoreDistribution.from_samples([40, 10, 30, 20])
    assert dist.median == 30
    assert dist.samples == (40, 10, 30, 20)


def test_population_std_dev():
    dist = ScoreDistribution.from_samples([10, 20, 30, 40])
    assert dist.mean == 25
    assert dist.std_dev == pytest.approx(125 ** 0.5)  # divides by n, not n - 1
    assert dist.min == 10
    assert dist.max == 40


def test_histogram_counts_sum_to_samples():
    samples = [float(i % 37) * 1.7 for i in range(1000)]
    dist = ScoreDistribution.from_samples(samples)
    assert len(dist.histogram) == 20
    assert sum(b.count for b in dist.histogram) == 1000
    assert sum(b.percentage for b in dist.histogram) == pytest.approx(100.0)


def test_max_lands_in_last_bin():
    dist = ScoreDistribution.from_samples([0, 100])
    assert dist.histogram[0].count == 1
    assert dist.histogram[-1].count == 1
    assert dist.histogram[0].range_label == "0-5"
    assert dist.histogram[-1].range_label == "95-100"


def test_identical_samples_go_to_first_bin():
    dist = ScoreDistribution.from_samples([42.0] * 50)
    assert dist.std_dev == 0
    assert dist.histogram[0].count == 50
    assert all(b.count == 0 for b in dist.histogram[1:])


def test_std_dev_positive_when_samples_differ():
    assert ScoreDistribution.from_samples([1.0, 1.0, 1.5]).std_dev > 0


def test_empty_samples_rejected():
    with pytest.raises(ValueError):
        ScoreDistribution.from_samples([])


def test_win_pct_against_target_is_inclusive():
    dist = ScoreDistribution.from_samples([100, 150, 200, 250])
    assert dist.win_pct_against(150) == 75.0
    assert dist.win_pct_against(251) == 0.0


def test_head_to_head_is_trial_aligned_and_strict():
    ours = ScoreDistribution.from_samples([10, 50, 30, 40])
    theirs = ScoreDistribution.from_samples([20, 40, 30, 10])
    # index 0 loses, 1 wins, 2 ties, 3 wins
    assert head_to_head_win_pct(ours, theirs) == 50.0


def test_head_to_head_requires_equal_trials():
    with pytest.raises(ValueError):
        head_to_head_win_pct(ScoreDistribution.from_samples([1, 2]),
                             ScoreDistribution.from_samples([1, 2, 3]))

"""Monte Carlo alliance score simulator.

A simulated alliance score perturbs every phase rate of every team with its
own normal draw:

    team score     = max(0, sum over phases of rate * (1 + noise * N(0,1)))
    alliance score = sum of team scores

The floor applies to each team's total, never to single phases or to the
alliance sum. Rates are handled as numpy arrays shaped (..., teams, 3) so a
whole batch of trials, or a whole bracket round, is drawn in one call.
"""

import numpy as np

import config
from models.distribution import ScoreDistribution
from models.probability import RandomSource
from models.team import TeamRating


def phase_rates(teams) -> np.ndarray:
    """(teams, 3) array of auto / teleop / endgame rates."""
    return np.array([t.phases for t in teams], dtype=float)


def score_alliances(rates: np.ndarray, rng: RandomSource,
                    noise: float = config.MATCH_NOISE) -> np.ndarray:
    """Draw one score per alliance for an array of phase rates.

    Args:
        rates: (..., teams, 3) phase rates
        rng: Random source
        noise: Standard deviation of the multiplicative phase noise

    Returns:
        Scores with the leading (...) shape
    """
    draws = rng.normal(rates.shape)
    team_totals = (rates * (1 + draws * noise)).sum(axis=-1)
    return np.maximum(team_totals, 0.0).sum(axis=-1)


def simulate_score(teams, rng: RandomSource, noise: float = config.MATCH_NOISE) -> float:
    """Single simulated score for an alliance of one or two teams."""
    return float(score_alliances(phase_rates(teams), rng, noise))


def simulate_scores(teams, rng: RandomSource, iterations: int,
                    noise: float = config.MATCH_NOISE) -> np.ndarray:
    """Scores for `iterations` independent trials, in trial order."""
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    rates = phase_rates(teams)
    batch = np.broadcast_to(rates, (iterations,) + rates.shape)
    return score_alliances(batch, rng, noise)


def sample_distribution(team_a: TeamRating, team_b: TeamRating, rng: RandomSource,
                        iterations: int = config.DEFAULT_SIMULATIONS,
                        noise: float = config.MATCH_NOISE) -> ScoreDistribution:
    """Empirical score distribution of the alliance team_a + team_b."""
    scores = simulate_scores((team_a, team_b), rng, iterations, noise)
    return ScoreDistribution.from_samples(scores)


def target_win_pct(team_a: TeamRating, team_b: TeamRating, target: float,
                   rng: RandomSource,
                   iterations: int = config.QUICK_SIMULATIONS,
                   noise: float = config.PICK_LIST_NOISE) -> float:
    """Quick check: percentage of trials where the alliance reaches the target."""
    scores = simulate_scores((team_a, team_b), rng, iterations, noise)
    return float((scores >= target).sum()) / iterations * 100

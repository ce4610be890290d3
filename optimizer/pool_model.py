"""Rival field modeling.

Estimates how often a prospective alliance beats the other alliances that
could be formed from the rest of the event. Every unordered pair of the
remaining teams is treated as one rival, and each rival gets the same number
of head-to-head trials. The result answers "can we beat a random rival
alliance and still reach the target", not "can we win the bracket"; see
optimizer.tournament for the latter.
"""

from itertools import combinations

import numpy as np

import config
from models.probability import RandomSource
from models.team import TeamRating
from optimizer.simulator import phase_rates, score_alliances


def rival_alliances(pool: list[TeamRating], exclude) -> list[tuple[TeamRating, TeamRating]]:
    """All unordered pairs from the pool that contain none of the excluded teams."""
    remaining = [t for t in pool if t not in exclude]
    return list(combinations(remaining, 2))


def estimate_win_pct(your_team: TeamRating, candidate: TeamRating,
                     pool: list[TeamRating], target: float, rng: RandomSource,
                     iterations: int = config.RIVAL_SIMULATIONS,
                     noise: float = config.PICK_LIST_NOISE) -> float:
    """P(your_team + candidate beats a rival pair AND reaches target), in percent.

    Wins are pooled over every (rival pair, trial) combination and divided by
    pairs * iterations. When the pool leaves no rival pair the estimate is
    0.0 rather than undefined.

    Args:
        your_team: Your team
        candidate: Prospective partner
        pool: Every team at the event (your team and candidate are skipped)
        target: Score the alliance must also reach for a trial to count
        rng: Random source
        iterations: Trials per rival pair
        noise: Phase noise scale
    """
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")

    rivals = rival_alliances(pool, (your_team, candidate))
    if not rivals:
        return 0.0

    ours = phase_rates((your_team, candidate))
    theirs = np.array([phase_rates(pair) for pair in rivals])  # (pairs, 2, 3)

    # Trials for every rival run side by side: (iterations, pairs, 2, 3)
    our_scores = score_alliances(
        np.broadcast_to(ours, (iterations, len(rivals)) + ours.shape), rng, noise)
    rival_scores = score_alliances(
        np.broadcast_to(theirs, (iterations,) + theirs.shape), rng, noise)

    wins = (our_scores >= rival_scores) & (our_scores >= target)
    return float(wins.sum()) / (len(rivals) * iterations) * 100

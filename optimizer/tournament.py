"""Monte Carlo event simulator.

Estimates how often a fixed alliance wins a single-elimination bracket
made of every alliance the event pool could form. Seeding is random in
each trial, so the result carries sampling noise of roughly 1/sqrt(trials).
"""

from itertools import combinations

import numpy as np

import config
from models.alliance import Alliance
from models.bracket import Bracket
from models.probability import RandomSource
from models.team import TeamRating
from optimizer.simulator import phase_rates, score_alliances


def opponent_alliances(your_team: TeamRating, pool: list[TeamRating]) -> list[Alliance]:
    """Every two-team alliance from the pool that does not include your team.

    Alliances containing the candidate are kept; only the candidate's
    pairing with your team is added back, by the caller.
    """
    return [Alliance(a, b) for a, b in combinations(pool, 2)
            if your_team not in (a, b)]


def simulate_event_win(your_team: TeamRating, candidate: TeamRating,
                       pool: list[TeamRating], rng: RandomSource,
                       n_sims: int = config.TOURNAMENT_SIMULATIONS,
                       noise: float = config.PICK_LIST_NOISE) -> float:
    """Percentage of simulated brackets won by your_team + candidate.

    Args:
        your_team: Your team
        candidate: Prospective partner
        pool: Every team at the event
        rng: Random source
        n_sims: Number of brackets to play
        noise: Phase noise scale

    Returns:
        Win percentage (0-100); 0.0 when n_sims is 0
    """
    if n_sims <= 0:
        return 0.0

    ours = Alliance(your_team, candidate)
    opponents = opponent_alliances(your_team, pool)
    rates = {a: phase_rates(a.teams) for a in opponents + [ours]}

    wins = 0
    for _ in range(n_sims):
        field = list(opponents)
        rng.shuffle(field)
        field.insert(rng.insert_position(len(field)), ours)

        champion = play_bracket(Bracket(field), rng, noise, rates)
        if champion is ours:
            wins += 1

    return wins / n_sims * 100


def play_bracket(bracket: Bracket, rng: RandomSource,
                 noise: float = config.PICK_LIST_NOISE,
                 rates: dict[Alliance, np.ndarray] | None = None) -> Alliance:
    """Play a bracket to completion and return the surviving alliance.

    Each matchup draws one score per side; the higher score advances and the
    left alliance keeps a tie.

    Args:
        bracket: Bracket to play; it is advanced in place
        rng: Random source
        noise: Phase noise scale
        rates: Optional precomputed (teams, 3) phase rates per alliance
    """
    if rates is None:
        rates = {a: phase_rates(a.teams) for a in bracket.alliances}

    while not bracket.is_complete():
        matchups = bracket.get_matchups()
        left = np.stack([rates[a] for a, _ in matchups])
        right = np.stack([rates[b] for _, b in matchups])
        scores = score_alliances(np.stack([left, right], axis=1), rng, noise)  # (games, 2)
        winners = [a if s[0] >= s[1] else b
                   for (a, b), s in zip(matchups, scores)]
        bracket.advance(winners)
    return bracket.champion

"""Pick list and match prediction engine.

Ties the simulation pieces together:
1. Alliance simulation against a target score
2. Head-to-head match prediction between two alliances
3. Pick list ranking of every prospective partner at an event

Every call returns a fresh immutable result; nothing is kept between calls.
"""

from dataclasses import replace

from tqdm import tqdm

import config
from models.alliance import Alliance, AllianceCandidate, MatchPrediction, PickList
from models.distribution import ScoreDistribution, head_to_head_win_pct
from models.probability import RandomSource
from models.team import TeamRating
from optimizer.insights import generate_insights
from optimizer.pool_model import estimate_win_pct
from optimizer.scorer import complementary_score, pick_score
from optimizer.simulator import sample_distribution, target_win_pct
from optimizer.tournament import simulate_event_win


def simulate_alliance(team_a: TeamRating, team_b: TeamRating, target: float,
                      rng: RandomSource,
                      iterations: int = config.DEFAULT_SIMULATIONS) -> tuple[ScoreDistribution, float]:
    """Score distribution of team_a + team_b and the percentage reaching target."""
    dist = sample_distribution(team_a, team_b, rng, iterations, config.MATCH_NOISE)
    return dist, dist.win_pct_against(target)


def predict_match(your_alliance: Alliance, opponent_alliance: Alliance,
                  rng: RandomSource,
                  iterations: int = config.DEFAULT_SIMULATIONS) -> MatchPrediction:
    """Predict a match by comparing both alliances' trials index by index."""
    ours = sample_distribution(*your_alliance.teams, rng, iterations, config.MATCH_NOISE)
    theirs = sample_distribution(*opponent_alliance.teams, rng, iterations, config.MATCH_NOISE)

    prediction = MatchPrediction(
        your_alliance=your_alliance,
        opponent_alliance=opponent_alliance,
        your_distribution=ours,
        opponent_distribution=theirs,
        your_win_pct=head_to_head_win_pct(ours, theirs),
    )
    return replace(prediction, insights=tuple(generate_insights(prediction)))


def build_pick_list(event_name: str, event_code: str, your_team: TeamRating,
                    teams: list[TeamRating], rng: RandomSource,
                    target: float = config.PICK_LIST_TARGET_SCORE,
                    rival_field: bool = True,
                    event_sims: int = config.TOURNAMENT_SIMULATIONS,
                    show_progress: bool = True) -> PickList:
    """Rank every other team at the event as a partner for your_team.

    Args:
        event_name: Display name of the event
        event_code: Event code
        your_team: Your team's rating
        teams: Every team at the event (your team may or may not be listed)
        rng: Random source
        target: Score an alliance should reach to count as a win
        rival_field: Estimate win probability against every rival pair in the
            pool (slower); otherwise use the quick target-only check
        event_sims: Brackets simulated per candidate for the event win
            percentage; 0 skips the tournament simulation
        show_progress: Show progress bar

    Returns:
        PickList with candidates sorted by pick score, pick_order 1..N
    """
    pool = list(teams)
    candidates = [t for t in pool if t.number != your_team.number]

    iterator = candidates
    if show_progress:
        iterator = tqdm(candidates, desc=f"Ranking partners for {your_team.number}")

    scored = []
    for team in iterator:
        if rival_field:
            win_prob = estimate_win_pct(your_team, team, pool, target, rng)
        else:
            win_prob = target_win_pct(your_team, team, target, rng)
        complementary = complementary_score(your_team, team)
        event_win = simulate_event_win(your_team, team, pool, rng, n_sims=event_sims)
        scored.append((team, win_prob, complementary, event_win,
                       pick_score(team.rating, win_prob, complementary, team.consistency)))

    scored.sort(key=lambda row: row[4], reverse=True)

    ranked = tuple(
        AllianceCandidate(
            team=team,
            win_prob=win_prob,
            complementary=complementary,
            pick_score=score,
            event_win_pct=event_win,
            pick_order=i,
        )
        for i, (team, win_prob, complementary, event_win, score) in enumerate(scored, 1)
    )
    return PickList(event_name=event_name, event_code=event_code,
                    your_team=your_team, candidates=ranked)


# sort key -> (value getter, descending)
SORT_KEYS = {
    "pick_score": (lambda c: c.pick_score, True),
    "rating": (lambda c: c.team.rating, True),
    "auto": (lambda c: c.team.auto, True),
    "teleop": (lambda c: c.team.teleop, True),
    "consistency": (lambda c: c.team.consistency, False),
    "win_prob": (lambda c: c.win_prob, True),
    "complementary": (lambda c: c.complementary, True),
    "event_win": (lambda c: c.event_win_pct, True),
}

STRENGTH_FILTERS = ("auto", "teleop", "consistent")


def apply_filters_and_sort(pick_list: PickList, sort_by: str = "pick_score",
                           min_rating: float = 0,
                           strength: str | None = None) -> tuple[AllianceCandidate, ...]:
    """Filtered, re-sorted view of a pick list. The pick list is left as is.

    Args:
        pick_list: Ranked pick list
        sort_by: One of SORT_KEYS
        min_rating: Drop candidates rated below this
        strength: Optional specialist filter: "auto", "teleop" or "consistent"
    """
    if sort_by not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_by}")
    if strength is not None and strength not in STRENGTH_FILTERS:
        raise ValueError(f"Unknown strength filter: {strength}")

    kept = [c for c in pick_list.candidates
            if c.team.rating >= min_rating and _passes_strength(c.team, strength)]

    key, descending = SORT_KEYS[sort_by]
    return tuple(sorted(kept, key=key, reverse=descending))


def _passes_strength(team: TeamRating, strength: str | None) -> bool:
    if strength is None:
        return True
    if strength == "consistent":
        return team.consistency < config.CONSISTENT_MAX and team.rating >= config.CONSISTENT_MIN_RATING

    # Phase share filters are undefined for an unrated team
    if team.rating <= 0:
        return False
    if strength == "auto":
        return (team.auto / team.rating > config.AUTO_SPECIALIST_SHARE
                and team.auto >= config.AUTO_SPECIALIST_MIN)
    return (team.teleop / team.rating > config.TELEOP_SPECIALIST_SHARE
            and team.teleop >= config.TELEOP_SPECIALIST_MIN)

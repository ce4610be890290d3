"""Partner scoring.

Complementary scoring rewards a candidate whose strengths cover your
weaknesses, and the pick score folds it together with the other ranking
signals. Both are deterministic.
"""

import config
from models.team import TeamRating


def complementary_score(yours: TeamRating | None, theirs: TeamRating | None) -> float:
    """Rate how well `theirs` offsets the weaknesses of `yours` (0-100).

    Up to 40 points each for auto and teleop when the candidate is stronger
    than you there and clears a minimum, scaled by the gap and by whether you
    are weak in that phase. Up to 20 more for a candidate strong in both.
    """
    if yours is None or theirs is None or theirs.rating == 0:
        return 0
    if theirs.rating < config.MIN_CANDIDATE_RATING:
        return 0  # Too weak to matter regardless of fit

    auto_gap = theirs.auto - yours.auto
    teleop_gap = theirs.teleop - yours.teleop

    score = 0

    # Auto (max 40)
    if auto_gap > 0 and theirs.auto >= config.AUTO_MIN:
        if yours.auto < config.AUTO_WEAK:
            score += _tier(auto_gap, [(30, 40), (20, 30), (10, 20)], 10)
        else:
            score += _tier(auto_gap, [(20, 15), (10, 8)], 0)

    # Teleop (max 40)
    if teleop_gap > 0 and theirs.teleop >= config.TELEOP_MIN:
        if yours.teleop < config.TELEOP_WEAK:
            score += _tier(teleop_gap, [(40, 40), (25, 30), (15, 20)], 10)
        else:
            score += _tier(teleop_gap, [(30, 15), (15, 8)], 0)

    # Well-rounded bonus (max 20)
    if theirs.auto >= config.WELL_ROUNDED_AUTO and theirs.teleop >= config.WELL_ROUNDED_TELEOP:
        if auto_gap > 0 and teleop_gap > 0:
            if auto_gap >= 15 and teleop_gap >= 20:
                score += 20
            elif auto_gap >= 10 and teleop_gap >= 15:
                score += 15
            elif auto_gap >= 5 and teleop_gap >= 10:
                score += 10
        else:
            score += 5

    return min(score, config.MAX_COMPLEMENTARY)


def _tier(gap: float, tiers: list[tuple[float, int]], default: int) -> int:
    """Points for the first (threshold, points) tier the gap reaches."""
    for threshold, points in tiers:
        if gap >= threshold:
            return points
    return default


def pick_score(rating: float, win_prob: float, complementary: float,
               consistency: float) -> float:
    """Linear ranking score. Only meaningful relative to other candidates."""
    return (
        rating * config.RATING_WEIGHT
        + win_prob * config.WIN_PROB_WEIGHT
        + complementary * config.COMPLEMENTARY_WEIGHT
        + (config.CONSISTENCY_OFFSET - consistency) * config.CONSISTENCY_WEIGHT
    )

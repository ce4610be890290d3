"""Plain-language takeaways for a match prediction."""

import config
from models.alliance import Insight, MatchPrediction


def generate_insights(prediction: MatchPrediction) -> list[Insight]:
    """Build the ordered insight list: margin, consistency, auto edge, outlook."""
    insights = []

    diff = prediction.expected_differential
    if abs(diff) < config.CLOSE_MATCH_MARGIN:
        insights.append(Insight(
            "Close Match",
            f"Expected to be very close, only a {abs(diff):.1f} point difference. Every point matters.",
        ))
    elif diff > 0:
        insights.append(Insight(
            "Score Advantage",
            f"Your alliance has an expected {diff:.1f} point advantage. Stay consistent to secure the win.",
        ))
    else:
        insights.append(Insight(
            "Score Deficit",
            f"Opponents have an expected {abs(diff):.1f} point advantage. Focus on execution and avoiding penalties.",
        ))

    ours = prediction.your_distribution.std_dev
    theirs = prediction.opponent_distribution.std_dev
    if ours < theirs:
        insights.append(Insight(
            "Consistency Advantage",
            f"Your alliance is more consistent (±{ours:.1f} vs ±{theirs:.1f}), so your score is more predictable.",
        ))
    else:
        insights.append(Insight(
            "Consistency Challenge",
            "The opponent alliance is more consistent. Lean on reliable strategies to reduce variability.",
        ))

    your_auto = sum(t.auto for t in prediction.your_alliance.teams)
    opp_auto = sum(t.auto for t in prediction.opponent_alliance.teams)
    if your_auto > opp_auto + config.AUTO_EDGE_MARGIN:
        insights.append(Insight(
            "Auto Advantage",
            f"Your alliance is stronger in autonomous (+{your_auto - opp_auto:.1f}). Run your auto routine cleanly.",
        ))
    elif opp_auto > your_auto + config.AUTO_EDGE_MARGIN:
        insights.append(Insight(
            "TeleOp Critical",
            "Opponents have the auto advantage. Make up ground in TeleOp.",
        ))

    win_pct = prediction.your_win_pct
    if win_pct > config.FAVORABLE_WIN_PCT:
        insights.append(Insight(
            "Favorable Odds",
            "Strong win probability. Clean execution and no penalties should close it out.",
        ))
    elif win_pct < config.UNDERDOG_WIN_PCT:
        insights.append(Insight(
            "Underdog Position",
            "You're the underdog. Play aggressively and capitalize on opponent mistakes.",
        ))
    else:
        insights.append(Insight(
            "Toss-Up Match",
            "This match could go either way. Small mistakes or big plays will decide it.",
        ))

    return insights

"""Pretty-print simulation results."""

from tabulate import tabulate

from models.alliance import AllianceCandidate, MatchPrediction, PickList
from models.distribution import ScoreDistribution
from models.team import TeamRating


def print_teams(teams: list[TeamRating]):
    """Print the phase breakdown for a set of teams."""
    rows = [[t.number, t.name, f"{t.auto:.1f}", f"{t.teleop:.1f}",
             f"{t.endgame:.1f}", f"{t.rating:.1f}"] for t in teams]
    headers = ["Team", "Name", "Auto", "TeleOp", "Endgame", "Total"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))


def print_distribution(dist: ScoreDistribution, target: float | None = None,
                       win_pct: float | None = None):
    """Print summary statistics and the histogram of a score distribution."""
    print(f"\n  Mean score:   {dist.mean:.1f}  (±{dist.std_dev:.1f})")
    print(f"  Median:       {dist.median:.1f}")
    print(f"  Range:        {dist.min:.1f} - {dist.max:.1f}")
    if target is not None and win_pct is not None:
        print(f"  P(score >= {target:g}): {win_pct:.1f}%")

    peak = max(b.count for b in dist.histogram) or 1
    rows = [[b.range_label, b.count, f"{b.percentage:.1f}%", "#" * round(30 * b.count / peak)]
            for b in dist.histogram]
    print()
    print(tabulate(rows, headers=["Score", "Trials", "Share", ""], tablefmt="simple"))


def print_prediction(prediction: MatchPrediction):
    """Print a head-to-head match prediction with its insights."""
    print("\n" + "=" * 60)
    print("           MATCH PREDICTION")
    print("=" * 60)

    ours = prediction.your_distribution
    theirs = prediction.opponent_distribution
    rows = [
        ["Your alliance", str(prediction.your_alliance), f"{prediction.your_win_pct:.1f}%",
         round(ours.mean), f"{round(ours.mean - ours.std_dev)} - {round(ours.mean + ours.std_dev)}"],
        ["Opponents", str(prediction.opponent_alliance), f"{prediction.opponent_win_pct:.1f}%",
         round(theirs.mean), f"{round(theirs.mean - theirs.std_dev)} - {round(theirs.mean + theirs.std_dev)}"],
    ]
    headers = ["", "Teams", "Win %", "Expected", "Typical range"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))
    print(f"\n  Expected differential: {prediction.expected_differential:+.1f}")

    if prediction.insights:
        print("\n--- INSIGHTS ---")
        for insight in prediction.insights:
            print(f"  {insight.title}: {insight.description}")


def print_pick_list(pick_list: PickList, candidates: tuple[AllianceCandidate, ...] | None = None,
                    top: int | None = None):
    """Print a ranked pick list.

    Args:
        pick_list: The ranking result (for the event header)
        candidates: Optional filtered/re-sorted view; defaults to the full list
        top: Only show the first N rows
    """
    candidates = pick_list.candidates if candidates is None else candidates
    if top:
        candidates = candidates[:top]

    print("\n" + "=" * 60)
    print(f"  PICK LIST: {pick_list.event_name} ({pick_list.event_code})")
    print(f"  For team {pick_list.your_team}")
    print("=" * 60 + "\n")

    if not candidates:
        print("  No candidates match.")
        return

    rows = [[f"#{c.pick_order}", c.team.number, c.team.name, f"{c.pick_score:.1f}",
             f"{c.team.rating:.1f}", f"{c.team.auto:.1f}", f"{c.team.teleop:.1f}",
             f"{c.win_prob:.1f}%", f"{c.complementary:.0f}", f"{c.team.consistency:.1f}",
             f"{c.event_win_pct:.1f}%"]
            for c in candidates]
    headers = ["Pick", "Team", "Name", "Score", "OPR", "Auto", "TeleOp",
               "Win %", "Comp", "Consist", "Event win"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))

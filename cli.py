"""FTC Alliance Odds - CLI entry point.

Usage:
    python cli.py simulate TEAM1 TEAM2 [--target 200] [--sims 10000]
    python cli.py predict YOUR1 YOUR2 OPP1 OPP2 [--sims 10000]
    python cli.py pick-list --event CODE --team N [--quick] [--export path]
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from ingestion.ftcscout import RatingFetchError
from models.probability import RandomSource

EXIT_FETCH_ERROR = 1
EXIT_INPUT_ERROR = 2


def parse_team_numbers(values: list[str]) -> list[int] | None:
    """Validate team numbers before anything is fetched. Prints and returns None on error."""
    numbers = []
    for value in values:
        value = (value or "").strip()
        if not value:
            print("ERROR: Please enter all team numbers.")
            return None
        if not value.isdigit():
            print(f"ERROR: '{value}' is not a valid team number.")
            return None
        numbers.append(int(value))
    return numbers


def check_count(flag: str, value: int | None, minimum: int) -> bool:
    """Reject a count option below its minimum. Prints and returns False on error."""
    if value is not None and value < minimum:
        print(f"ERROR: {flag} must be at least {minimum}, got {value}.")
        return False
    return True


# --- Commands ---

def cmd_simulate(args):
    """Simulate one alliance against a target score."""
    numbers = parse_team_numbers([args.team1, args.team2])
    if numbers is None or not check_count("--sims", args.sims, 1):
        return EXIT_INPUT_ERROR

    from ingestion.ftcscout import fetch_team_ratings
    from optimizer.engine import simulate_alliance
    from output.printer import print_distribution, print_teams

    rng = RandomSource(args.seed)
    team_a, team_b = fetch_team_ratings(numbers, season=args.season, rng=rng)
    dist, win_pct = simulate_alliance(team_a, team_b, args.target, rng, iterations=args.sims)

    print_teams([team_a, team_b])
    print_distribution(dist, args.target, win_pct)
    return 0


def cmd_predict(args):
    """Predict a two-versus-two match."""
    numbers = parse_team_numbers(args.teams)
    if numbers is None or not check_count("--sims", args.sims, 1):
        return EXIT_INPUT_ERROR

    from ingestion.ftcscout import fetch_team_ratings
    from models.alliance import Alliance
    from optimizer.engine import predict_match
    from output.printer import print_prediction, print_teams

    rng = RandomSource(args.seed)
    y1, y2, o1, o2 = fetch_team_ratings(numbers, season=args.season, rng=rng)
    prediction = predict_match(Alliance(y1, y2), Alliance(o1, o2), rng, iterations=args.sims)

    print_teams([y1, y2, o1, o2])
    print_prediction(prediction)
    return 0


def cmd_pick_list(args):
    """Rank alliance partners at an event."""
    numbers = parse_team_numbers([args.team])
    if numbers is None:
        return EXIT_INPUT_ERROR
    if not (check_count("--event-sims", args.event_sims, 0) and check_count("--top", args.top, 1)):
        return EXIT_INPUT_ERROR
    your_number = numbers[0]

    rng = RandomSource(args.seed)

    if args.ratings_file:
        from ingestion.manual_entry import load_ratings_from_csv
        try:
            teams = load_ratings_from_csv(args.ratings_file, rng)
        except (OSError, ValueError) as e:
            print(f"ERROR: Could not read {args.ratings_file}: {e}")
            return EXIT_INPUT_ERROR
        event_name = event_code = args.event or os.path.basename(args.ratings_file)
    else:
        if not (args.event or "").strip():
            print("ERROR: Please enter an event code (e.g. USNYNYBRQ2).")
            return EXIT_INPUT_ERROR
        from ingestion.ftcscout import fetch_event
        event_name, event_code, teams = fetch_event(args.event, season=args.season, rng=rng)

    your_team = next((t for t in teams if t.number == your_number), None)
    if your_team is None:
        if args.ratings_file:
            print(f"ERROR: Team {your_number} is not in {args.ratings_file}.")
            return EXIT_INPUT_ERROR
        print(f"Warning: Team {your_number} is not registered at {event_code}; fetching its season stats.")
        from ingestion.ftcscout import fetch_team_rating
        your_team = fetch_team_rating(your_number, season=args.season, rng=rng)
    elif your_team.rating <= 0:
        if args.ratings_file:
            print(f"ERROR: Team {your_number} has no rating in {args.ratings_file}.")
            return EXIT_INPUT_ERROR
        raise RatingFetchError(f"No stats for team {your_number} in {args.season} season")

    from optimizer.engine import apply_filters_and_sort, build_pick_list
    from output.printer import print_pick_list

    pick_list = build_pick_list(
        event_name, event_code, your_team, teams, rng,
        target=args.target,
        rival_field=not args.quick,
        event_sims=args.event_sims,
    )
    view = apply_filters_and_sort(pick_list, sort_by=args.sort_by,
                                  min_rating=args.min_rating, strength=args.strength)
    print_pick_list(pick_list, view, top=args.top)

    if args.export:
        from output.export import export_pick_list_csv
        export_pick_list_csv(pick_list.candidates, args.export)
    return 0


# --- Main ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="FTC alliance odds: Monte Carlo match prediction and pick lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py simulate 16236 23014 --target 220     # Alliance score distribution
  python cli.py predict 16236 23014 11115 19234       # 2v2 match prediction
  python cli.py pick-list --event USNYNYBRQ2 --team 16236 --export picks.csv
        """
    )
    parser.add_argument("--season", type=int, default=config.DEFAULT_SEASON)
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # simulate
    p_sim = subparsers.add_parser("simulate", help="Simulate an alliance against a target score")
    p_sim.add_argument("team1")
    p_sim.add_argument("team2")
    p_sim.add_argument("--target", type=float, default=config.DEFAULT_TARGET_SCORE)
    p_sim.add_argument("--sims", type=int, default=config.DEFAULT_SIMULATIONS)

    # predict
    p_pred = subparsers.add_parser("predict", help="Predict a 2v2 match")
    p_pred.add_argument("teams", nargs=4, metavar="TEAM",
                        help="Your two teams, then the two opposing teams")
    p_pred.add_argument("--sims", type=int, default=config.DEFAULT_SIMULATIONS)

    # pick-list
    p_pick = subparsers.add_parser("pick-list", help="Rank alliance partners at an event")
    p_pick.add_argument("--event", help="Event code")
    p_pick.add_argument("--team", required=True, help="Your team number")
    p_pick.add_argument("--ratings-file", help="CSV of team ratings instead of FTC Scout")
    p_pick.add_argument("--target", type=float, default=config.PICK_LIST_TARGET_SCORE)
    p_pick.add_argument("--quick", action="store_true",
                        help="Target-only win check instead of simulating every rival pair")
    p_pick.add_argument("--event-sims", type=int, default=config.TOURNAMENT_SIMULATIONS,
                        help="Brackets per candidate for event win %% (0 to skip)")
    p_pick.add_argument("--sort-by", default="pick_score",
                        choices=["pick_score", "rating", "auto", "teleop", "consistency",
                                 "win_prob", "complementary", "event_win"])
    p_pick.add_argument("--min-rating", type=float, default=0)
    p_pick.add_argument("--strength", choices=["auto", "teleop", "consistent"])
    p_pick.add_argument("--top", type=int, help="Only show the first N picks")
    p_pick.add_argument("--export", help="Write the full ranked list to this CSV path")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "simulate": cmd_simulate,
        "predict": cmd_predict,
        "pick-list": cmd_pick_list,
    }

    try:
        return commands[args.command](args)
    except RatingFetchError as e:
        print(f"ERROR: {e}")
        return EXIT_FETCH_ERROR


if __name__ == "__main__":
    sys.exit(main())

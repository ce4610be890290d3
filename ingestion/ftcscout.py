"""FTC Scout data ingestion.

Queries team ratings from the FTC Scout GraphQL API. Free, no auth required.
Each team's season "quick stats" give OPR-style point rates:
- tot: aggregate rating
- auto, dc (driver-controlled / teleop), eg (endgame): per-phase rates,
  any of which may be missing
"""

from concurrent.futures import ThreadPoolExecutor

import requests

import config
from models.probability import RandomSource
from models.team import TeamRating, split_phases, synthetic_consistency

TEAM_QUERY = """
query GetTeamStats($teamNumber: Int!, $season: Int!) {
    teamByNumber(number: $teamNumber) {
        number
        name
        quickStats(season: $season) {
            tot { value }
            auto { value }
            dc { value }
            eg { value }
        }
    }
}
"""

EVENT_QUERY = """
query GetEventData($code: String!, $season: Int!) {
    eventByCode(code: $code, season: $season) {
        name
        code
        teams {
            teamNumber
            team {
                name
                quickStats(season: $season) {
                    tot { value }
                    auto { value }
                    dc { value }
                    eg { value }
                }
            }
        }
    }
}
"""


class RatingFetchError(Exception):
    """A team or event could not be fetched, or has no ratings for the season."""


def fetch_team_rating(team_number: int, season: int = config.DEFAULT_SEASON,
                      rng: RandomSource | None = None) -> TeamRating:
    """Fetch one team's season rating.

    Raises:
        RatingFetchError: Team not found, no stats for the season, or the
            request failed
    """
    rng = rng or RandomSource()
    try:
        data = _post(TEAM_QUERY, {"teamNumber": int(team_number), "season": season})
        team = data.get("teamByNumber")
        if not team:
            raise RatingFetchError(f"Team {team_number} not found")

        stats = team.get("quickStats")
        if not _value(stats, "tot"):
            raise RatingFetchError(f"No stats for team {team_number} in {season} season")

        return parse_team_stats(team["number"], team.get("name"), stats, rng.uniform())
    except RatingFetchError as e:
        raise RatingFetchError(f"Failed to fetch team {team_number}: {e}") from e


def fetch_team_ratings(team_numbers: list[int], season: int = config.DEFAULT_SEASON,
                       rng: RandomSource | None = None) -> list[TeamRating]:
    """Fetch several teams in parallel. Results follow the input order.

    Every request is joined before returning; the first failure is re-raised.
    """
    rng = rng or RandomSource()
    if not team_numbers:
        return []
    sources = rng.spawn(len(team_numbers))
    with ThreadPoolExecutor(max_workers=len(team_numbers)) as pool:
        futures = [pool.submit(fetch_team_rating, n, season, src)
                   for n, src in zip(team_numbers, sources)]
        return [f.result() for f in futures]


def fetch_event(event_code: str, season: int = config.DEFAULT_SEASON,
                rng: RandomSource | None = None) -> tuple[str, str, list[TeamRating]]:
    """Fetch every team registered at an event.

    Teams without stats for the season are kept with a zero rating so the
    pick list still lists them, and a warning names them.

    Returns:
        (event name, event code, team ratings)

    Raises:
        RatingFetchError: Event not found or the request failed
    """
    rng = rng or RandomSource()
    code = event_code.strip().upper()
    print(f"Fetching event {code} from FTC Scout...")

    data = _post(EVENT_QUERY, {"code": code, "season": season})
    event = data.get("eventByCode")
    if not event:
        raise RatingFetchError(f"Event {code} not found on FTC Scout")

    teams = []
    for entry in event.get("teams") or []:
        team = entry.get("team") or {}
        teams.append(parse_team_stats(
            entry["teamNumber"], team.get("name"), team.get("quickStats"), rng.uniform()))

    unrated = [str(t.number) for t in teams if t.rating <= 0]
    if unrated:
        print(f"Warning: no {season} stats for teams {', '.join(unrated)} (kept with a zero rating)")

    print(f"Loaded {len(teams)} teams for {event.get('name', code)}")
    return event.get("name", code), event.get("code", code), teams


def parse_team_stats(number: int, name: str | None, stats: dict | None,
                     jitter: float) -> TeamRating:
    """Turn a quickStats record into a TeamRating.

    Missing phase rates are derived from the aggregate; consistency is
    synthetic since the provider does not report match variance.
    """
    rating = _value(stats, "tot")
    auto, teleop, endgame = split_phases(
        rating, _value(stats, "auto"), _value(stats, "dc"), _value(stats, "eg"))
    return TeamRating(
        number=int(number),
        name=name or "Unknown",
        auto=auto,
        teleop=teleop,
        endgame=endgame,
        rating=rating,
        consistency=synthetic_consistency(rating, jitter),
    )


def _post(query: str, variables: dict) -> dict:
    """Run a GraphQL query and return its data payload."""
    try:
        resp = requests.post(
            config.FTCSCOUT_URL,
            json={"query": query, "variables": variables},
            timeout=config.REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        payload = resp.json()
    except (requests.RequestException, ValueError) as e:
        raise RatingFetchError(f"FTC Scout request failed: {e}") from e

    if payload.get("errors"):
        raise RatingFetchError(payload["errors"][0].get("message", "Unknown GraphQL error"))
    return payload.get("data") or {}


def _value(stats: dict | None, key: str) -> float:
    """Read stats[key].value, treating anything missing as 0."""
    if not stats:
        return 0.0
    entry = stats.get(key) or {}
    return float(entry.get("value") or 0.0)

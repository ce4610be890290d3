"""Manual data entry and CSV loading fallbacks.

Used when FTC Scout is unavailable or the user prefers their own scouting
numbers.
"""

import pandas as pd

from models.probability import RandomSource
from models.team import TeamRating, split_phases, synthetic_consistency

OPTIONAL_COLUMNS = ["auto", "teleop", "endgame", "consistency"]


def load_ratings_from_csv(filepath: str, rng: RandomSource | None = None) -> list[TeamRating]:
    """Load team ratings from a user-prepared CSV.

    Expected columns: team, name, rating [, auto, teleop, endgame, consistency]
    Missing or blank phase rates are split from the rating; a missing
    consistency is synthesized the same way as for FTC Scout data.
    """
    rng = rng or RandomSource()
    df = pd.read_csv(filepath)
    df.columns = [c.strip().lower() for c in df.columns]

    missing = [c for c in ("team", "rating") if c not in df.columns]
    if missing:
        raise ValueError(f"{filepath} is missing required column(s): {', '.join(missing)}")

    teams = []
    for _, row in df.iterrows():
        rating = float(row["rating"])
        opt = {c: _optional(row, c) for c in OPTIONAL_COLUMNS}
        auto, teleop, endgame = split_phases(rating, opt["auto"], opt["teleop"], opt["endgame"])
        consistency = opt["consistency"]
        if consistency is None:
            consistency = synthetic_consistency(rating, rng.uniform())

        teams.append(TeamRating(
            number=int(row["team"]),
            name=str(row["name"]).strip() if "name" in df.columns and pd.notna(row["name"]) else "Unknown",
            auto=auto,
            teleop=teleop,
            endgame=endgame,
            rating=rating,
            consistency=consistency,
        ))

    print(f"Loaded ratings for {len(teams)} teams from {filepath}")
    return teams


def _optional(row: pd.Series, col: str) -> float | None:
    if col not in row.index or pd.isna(row[col]):
        return None
    return float(row[col])

"""Pick list CSV export."""

import csv

import pandas as pd

from models.alliance import AllianceCandidate

EXPORT_COLUMNS = ["rank", "team", "pick_score", "rating", "auto", "teleop",
                  "complementary", "consistency", "event_win_pct"]


def pick_list_rows(candidates: tuple[AllianceCandidate, ...]) -> list[list]:
    """Flat rows, one per candidate, ranked 1..N in the given order."""
    return [
        [rank, c.team.number, f"{c.pick_score:.1f}", f"{c.team.rating:.1f}",
         f"{c.team.auto:.1f}", f"{c.team.teleop:.1f}", f"{c.complementary:.0f}",
         f"{c.team.consistency:.1f}", f"{c.event_win_pct:.1f}"]
        for rank, c in enumerate(candidates, 1)
    ]


def export_pick_list_csv(candidates: tuple[AllianceCandidate, ...], filepath: str):
    """Export a ranked pick list as a CSV file.

    Columns: rank, team, pick_score, rating, auto, teleop, complementary,
    consistency, event_win_pct
    """
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(EXPORT_COLUMNS)
        writer.writerows(pick_list_rows(candidates))

    print(f"Exported {len(candidates)} teams to {filepath}")


def read_exported_ranks(filepath: str) -> list[int]:
    """Read the rank column back from an exported pick list."""
    df = pd.read_csv(filepath)
    return [int(r) for r in df["rank"]]

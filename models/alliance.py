"""Alliance, pick list and match prediction data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from models.distribution import ScoreDistribution
from models.team import TeamRating


@dataclass(frozen=True)
class Alliance:
    """Two teams scored together. Order carries no meaning for scoring."""
    first: TeamRating
    second: TeamRating

    def __str__(self):
        return f"{self.first.number} + {self.second.number}"

    @property
    def teams(self) -> tuple[TeamRating, TeamRating]:
        return self.first, self.second

    def __contains__(self, team: TeamRating) -> bool:
        return team == self.first or team == self.second


@dataclass(frozen=True)
class AllianceCandidate:
    team: TeamRating
    win_prob: float        # 0-100
    complementary: float   # 0-100
    pick_score: float      # relative ranking signal, unbounded
    event_win_pct: float   # 0-100
    pick_order: int        # 1-based rank by pick score

    @property
    def number(self) -> int:
        return self.team.number


@dataclass(frozen=True)
class PickList:
    """Result of one ranking call, candidates ordered by pick_order."""
    event_name: str
    event_code: str
    your_team: TeamRating
    candidates: tuple[AllianceCandidate, ...] = ()

    def __len__(self):
        return len(self.candidates)


@dataclass(frozen=True)
class Insight:
    title: str
    description: str


@dataclass(frozen=True)
class MatchPrediction:
    your_alliance: Alliance
    opponent_alliance: Alliance
    your_distribution: ScoreDistribution
    opponent_distribution: ScoreDistribution
    your_win_pct: float
    insights: tuple[Insight, ...] = field(default=())

    @property
    def opponent_win_pct(self) -> float:
        return 100 - self.your_win_pct

    @property
    def expected_differential(self) -> float:
        return self.your_distribution.mean - self.opponent_distribution.mean

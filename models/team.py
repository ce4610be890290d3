"""Team rating data model."""

from dataclasses import dataclass

import config


@dataclass(frozen=True)
class TeamRating:
    number: int
    name: str
    auto: float       # Autonomous points contributed per match
    teleop: float     # Driver-controlled points per match
    endgame: float    # Endgame points per match
    rating: float     # Aggregate rating (total OPR)
    consistency: float = config.DEFAULT_CONSISTENCY  # Lower is better

    def __str__(self):
        return f"{self.number} {self.name}"

    @property
    def phases(self) -> tuple[float, float, float]:
        return self.auto, self.teleop, self.endgame


def split_phases(rating: float,
                 auto: float | None = None,
                 teleop: float | None = None,
                 endgame: float | None = None) -> tuple[float, float, float]:
    """Fill in missing phase rates as fixed fractions of the aggregate rating.

    A phase counts as missing when it is None or zero, matching how the
    stats provider reports phases it has no breakdown for.
    """
    return (
        auto or rating * config.AUTO_SHARE,
        teleop or rating * config.TELEOP_SHARE,
        endgame or rating * config.ENDGAME_SHARE,
    )


def synthetic_consistency(rating: float, jitter: float) -> float:
    """Dispersion proxy for teams without measured match-to-match variance.

    Args:
        rating: Aggregate rating
        jitter: Uniform draw in [0, 1)
    """
    value = config.CONSISTENCY_BASE - rating * config.CONSISTENCY_SLOPE + jitter * config.CONSISTENCY_JITTER
    return max(config.CONSISTENCY_FLOOR, value)

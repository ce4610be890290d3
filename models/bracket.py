"""Single-elimination bracket state.

The bracket is an ordered list of alliances. Each round pairs neighbours
(0 vs 1, 2 vs 3, ...) and the list is replaced by the winners in the same
order. With an odd count the trailing alliance has no opponent and moves on
without playing (a bye). The bracket is complete when one alliance remains.

    round 1:  [A B] [C D] [E]      ->  A, D, E
    round 2:  [A D] [E]            ->  D, E
    round 3:  [D E]                ->  E
"""

from __future__ import annotations

from models.alliance import Alliance


class Bracket:
    """A seeded single-elimination bracket of alliances."""

    def __init__(self, alliances: list[Alliance]):
        if not alliances:
            raise ValueError("A bracket needs at least one alliance")
        self.alliances: list[Alliance] = list(alliances)
        self.rounds_played = 0

    def get_matchups(self) -> list[tuple[Alliance, Alliance]]:
        """Pairs of neighbouring alliances that play this round."""
        a = self.alliances
        return [(a[i], a[i + 1]) for i in range(0, len(a) - 1, 2)]

    def get_bye(self) -> Alliance | None:
        """The trailing alliance that advances unopposed, if the count is odd."""
        if len(self.alliances) % 2 == 1:
            return self.alliances[-1]
        return None

    def advance(self, winners: list[Alliance]):
        """Replace the field with this round's winners (plus any bye)."""
        if len(winners) != len(self.alliances) // 2:
            raise ValueError(
                f"Expected {len(self.alliances) // 2} winners, got {len(winners)}"
            )
        bye = self.get_bye()
        self.alliances = list(winners) + ([bye] if bye is not None else [])
        self.rounds_played += 1

    def is_complete(self) -> bool:
        return len(self.alliances) == 1

    @property
    def champion(self) -> Alliance | None:
        return self.alliances[0] if self.is_complete() else None

"""Player and computer hands."""

from typing import Iterator

from twentyone.cards import CardId, CardRegistry, Pile
from twentyone.scoring import EMPTY_SCORE, HandScore, score_pile


class Hand:
    """
    A hand of cards with a derived score.

    The score and bust flag are only ever changed by rescore(), which
    recomputes them from the cards currently held.
    """

    def __init__(self, owner: str) -> None:
        """Initialize an empty hand for the given owner ("player", "computer")."""
        self.owner = owner
        self.pile = Pile(owner)
        self._score: HandScore = EMPTY_SCORE

    def rescore(self, registry: CardRegistry) -> HandScore:
        """Recompute score and bust flag from the held cards."""
        self._score = score_pile(self.pile, registry)
        return self._score

    @property
    def score(self) -> int:
        """Return the value computed by the last rescore."""
        return self._score.value

    @property
    def busted(self) -> bool:
        """Check if the last rescore went over 21."""
        return self._score.busted

    @property
    def is_soft(self) -> bool:
        """Check if the last rescore counted an ace as 11."""
        return self._score.soft

    def __len__(self) -> int:
        return len(self.pile)

    def __iter__(self) -> Iterator[CardId]:
        return iter(self.pile)

    def __repr__(self) -> str:
        return f"Hand({self.owner!r}, cards={list(self.pile)!r}, score={self.score})"

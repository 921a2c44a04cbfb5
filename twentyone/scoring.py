"""Hand scoring with flexible aces."""

from typing import Iterable, NamedTuple

from twentyone.cards import Card, CardRegistry, Pile

BUST_LIMIT = 21


class HandScore(NamedTuple):
    """Result of scoring a hand."""

    value: int
    busted: bool
    soft: bool = False  # an ace is counted as 11


EMPTY_SCORE = HandScore(0, False, False)


def score(cards: Iterable[Card]) -> HandScore:
    """
    Calculate the value of a hand.

    Number cards count their rank and face cards count 10. Aces are added
    after the rest of the hand, one at a time: 11 while the running total
    is 10 or less, otherwise 1.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.rank.is_ace:
            aces += 1
        elif card.rank.is_face:
            total += 10
        else:
            total += card.rank.value

    soft = False
    for _ in range(aces):
        if total <= BUST_LIMIT - 11:
            total += 11
            soft = True
        else:
            total += 1

    return HandScore(total, total > BUST_LIMIT, soft)


def score_pile(pile: Pile, registry: CardRegistry) -> HandScore:
    """Score the cards behind the handles of a pile."""
    return score(registry.resolve_all(pile))

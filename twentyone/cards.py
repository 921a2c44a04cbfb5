"""Card, CardRegistry, and Pile classes - immutable cards referenced by handle."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator

from twentyone.errors import EmptyPileError, InvariantViolation


class Suit(Enum):
    """Card suits, in canonical deck order."""

    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    def __str__(self) -> str:
        return {
            Suit.SPADES: "Spade",
            Suit.HEARTS: "Heart",
            Suit.DIAMONDS: "Diamond",
            Suit.CLUBS: "Club",
        }[self]

    @property
    def initial(self) -> str:
        """Return the single-letter suit code."""
        return self.value


class Rank(Enum):
    """Card ranks. Ace is 1, King is 13."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.token

    @property
    def token(self) -> str:
        """Return the display token ("1".."10", "J", "Q", "K")."""
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_face(self) -> bool:
        """Check if this rank is a Jack, Queen or King."""
        return self.value > 10


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.label()

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def label(self, ace_token: str = "1") -> str:
        """Render as suit initial followed by rank token, e.g. 'SK'."""
        token = ace_token if self.rank.is_ace else self.rank.token
        return f"{self.suit.initial}{token}"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a label like 'SK', 'h10', 'DA' or 'C1'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        suit_str = s[0]
        rank_str = s[1:]

        rank_map = {rank.token: rank for rank in Rank}
        rank_map["A"] = Rank.ACE

        suit_map = {suit.initial: suit for suit in Suit}

        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")
        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


# Stable handle of a card inside a CardRegistry
CardId = int


class CardRegistry:
    """
    Arena owning every card of a round.

    Piles hold CardIds into the registry instead of Card objects, so two
    cards with the same suit and rank (multi-deck play) stay distinct.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._cards: list[Card] = []

    def register(self, card: Card) -> CardId:
        """Store a card and return its new handle."""
        self._cards.append(card)
        return len(self._cards) - 1

    def resolve(self, card_id: CardId) -> Card:
        """
        Look up the card behind a handle.

        Raises:
            InvariantViolation: if the handle was never issued by this registry
        """
        if (
            isinstance(card_id, bool)
            or not isinstance(card_id, int)
            or not 0 <= card_id < len(self._cards)
        ):
            raise InvariantViolation(f"Card handle {card_id!r} does not resolve to a card")
        return self._cards[card_id]

    def resolve_all(self, card_ids: Iterable[CardId]) -> list[Card]:
        """Resolve several handles, preserving order."""
        return [self.resolve(card_id) for card_id in card_ids]

    def __len__(self) -> int:
        return len(self._cards)


class Pile:
    """An ordered collection of card handles. The last element is the top."""

    def __init__(self, name: str, card_ids: Iterable[CardId] = ()) -> None:
        """
        Initialize a pile.

        Args:
            name: Label used in messages ("dealer", "player", ...)
            card_ids: Initial handles, bottom first
        """
        self.name = name
        self._card_ids: list[CardId] = list(card_ids)

    def push(self, card_id: CardId) -> None:
        """Put a card on top of the pile."""
        self._card_ids.append(card_id)

    def pop(self) -> CardId:
        """Take the top card off the pile."""
        if not self._card_ids:
            raise EmptyPileError(self.name)
        return self._card_ids.pop()

    def remove(self, card_id: CardId) -> None:
        """Take a specific card out of the pile."""
        try:
            self._card_ids.remove(card_id)
        except ValueError:
            raise InvariantViolation(
                f"Card handle {card_id!r} is not in pile '{self.name}'"
            ) from None

    def shuffle(self, rng: Random) -> None:
        """Permute the pile in place."""
        rng.shuffle(self._card_ids)

    @property
    def card_ids(self) -> tuple[CardId, ...]:
        """Return a snapshot of the handles, bottom first."""
        return tuple(self._card_ids)

    @property
    def is_empty(self) -> bool:
        """Check if the pile has no cards."""
        return not self._card_ids

    def __len__(self) -> int:
        return len(self._card_ids)

    def __iter__(self) -> Iterator[CardId]:
        return iter(self._card_ids)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._card_ids

    def __repr__(self) -> str:
        return f"Pile({self.name!r}, {len(self._card_ids)} cards)"

"""Dealing engine - building, shuffling and drawing from piles."""

from random import Random

from twentyone.cards import Card, CardId, CardRegistry, Pile, Rank, Suit
from twentyone.logging_utils import get_logger

log = get_logger("twentyone.dealing")

CARDS_PER_DECK = 52


def build_standard_deck(
    registry: CardRegistry,
    num_decks: int = 1,
    name: str = "dealer",
) -> Pile:
    """
    Register every card of one or more standard decks and pile them up.

    Cards are produced in canonical order: for each rank from Ace to King,
    one card of each suit (Spade, Heart, Diamond, Club).

    Args:
        registry: Arena that will own the new cards
        num_decks: Number of 52-card decks to include
        name: Name of the resulting pile

    Returns:
        An unshuffled pile of 52 * num_decks distinct handles
    """
    if num_decks < 1:
        raise ValueError("num_decks must be at least 1")

    pile = Pile(name)
    for _ in range(num_decks):
        for rank in Rank:
            for suit in Suit:
                pile.push(registry.register(Card(rank, suit)))

    log.debug(f"Built {num_decks} deck(s): {len(pile)} cards in '{name}'")
    return pile


def shuffle(pile: Pile, rng: Random) -> None:
    """Shuffle a pile in place with the given random source."""
    pile.shuffle(rng)
    log.debug(f"Shuffled '{pile.name}' ({len(pile)} cards)")


def draw(source: Pile, dest: Pile) -> CardId:
    """
    Move the top card of source onto dest.

    Returns:
        The handle of the moved card

    Raises:
        EmptyPileError: if source has no cards; nothing is moved
    """
    card_id = source.pop()
    dest.push(card_id)
    log.debug(f"Moved card #{card_id} from '{source.name}' to '{dest.name}'")
    return card_id

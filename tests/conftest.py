"""Pytest fixtures for twenty-one tests."""

from random import Random

import pytest

from config import GameConfig
from twentyone.cards import Card, CardId, CardRegistry, Pile
from twentyone.dealing import build_standard_deck, shuffle
from twentyone.game import TwentyOneGame
from twentyone.game.engine import Round
from twentyone.hand import Hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def registry():
    """An empty card registry."""
    return CardRegistry()


@pytest.fixture
def deck(registry):
    """An unshuffled single deck."""
    return build_standard_deck(registry)


@pytest.fixture
def shuffled_deck(registry, rng):
    """A shuffled single deck."""
    pile = build_standard_deck(registry)
    shuffle(pile, rng)
    return pile


@pytest.fixture
def game_config():
    """Single deck, unseeded (the rng fixture provides determinism)."""
    return GameConfig(num_decks=1, seed=None)


@pytest.fixture
def game(game_config, rng):
    """A new game instance, still in setup."""
    return TwentyOneGame(game_config, rng=rng)


@pytest.fixture
def started_game(game):
    """A game that has been set up and is waiting for input."""
    game.setup()
    return game


@pytest.fixture
def hand_of(registry):
    """Build a scored hand from card labels, e.g. hand_of("SK", "HQ")."""

    def _hand_of(*labels: str) -> Hand:
        hand = Hand("player")
        for label in labels:
            hand.pile.push(registry.register(Card.from_string(label)))
        hand.rescore(registry)
        return hand

    return _hand_of


def find_card(rnd: Round, pile: Pile, label: str) -> CardId:
    """Return the handle of the first card in pile matching label."""
    wanted = Card.from_string(label)
    for card_id in pile:
        if rnd.registry.resolve(card_id) == wanted:
            return card_id
    raise LookupError(f"{label} not in pile '{pile.name}'")


@pytest.fixture
def give_player():
    """Move named cards from the dealer pile into the player's hand."""

    def _give(rnd: Round, *labels: str) -> None:
        for label in labels:
            card_id = find_card(rnd, rnd.dealer_pile, label)
            rnd.dealer_pile.remove(card_id)
            rnd.player.pile.push(card_id)

    return _give


@pytest.fixture
def stack_top():
    """Move a named card to the top of the dealer pile."""

    def _stack(rnd: Round, label: str) -> CardId:
        card_id = find_card(rnd, rnd.dealer_pile, label)
        rnd.dealer_pile.remove(card_id)
        rnd.dealer_pile.push(card_id)
        return card_id

    return _stack

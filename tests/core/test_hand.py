"""Tests for player and computer hands."""

from twentyone.cards import Card
from twentyone.hand import Hand


class TestHand:
    """Tests for the Hand class."""

    def test_new_hand(self):
        """A new hand is empty, scores 0 and is not busted."""
        hand = Hand("computer")
        assert len(hand) == 0
        assert hand.score == 0
        assert not hand.busted
        assert hand.owner == "computer"
        assert hand.pile.name == "computer"

    def test_score_only_changes_on_rescore(self, registry):
        """Adding a card does not touch the score until rescore."""
        hand = Hand("player")
        hand.pile.push(registry.register(Card.from_string("SK")))
        assert hand.score == 0

        result = hand.rescore(registry)
        assert result.value == 10
        assert hand.score == 10

    def test_soft_hand(self, hand_of):
        """A-6 is a soft 17."""
        hand = hand_of("SA", "H6")
        assert hand.score == 17
        assert hand.is_soft

    def test_busted_hand(self, hand_of):
        """K-Q-5 is 25 and busted."""
        hand = hand_of("SK", "HQ", "D5")
        assert hand.score == 25
        assert hand.busted

    def test_rescore_is_idempotent(self, registry, hand_of):
        """Rescoring an unchanged hand gives the same result."""
        hand = hand_of("SA", "HA", "D9")
        assert hand.rescore(registry) == hand.rescore(registry)
        assert hand.score == 21

    def test_iterates_handles(self, hand_of):
        """Iterating a hand yields its card handles."""
        hand = hand_of("S2", "H3")
        assert list(hand) == list(hand.pile)

"""Core twenty-one engine - 100% UI-agnostic."""

from twentyone.cards import Card, CardId, CardRegistry, Pile, Rank, Suit
from twentyone.hand import Hand
from twentyone.scoring import HandScore, score

__all__ = [
    "Card",
    "CardId",
    "CardRegistry",
    "Pile",
    "Rank",
    "Suit",
    "Hand",
    "HandScore",
    "score",
]

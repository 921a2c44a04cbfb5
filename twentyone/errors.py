"""Error taxonomy for a round of twenty-one."""


class GameError(Exception):
    """Base class for all game errors."""


class UnrecognizedCommand(GameError, ValueError):
    """Input that is neither 'draw' nor 'stand'."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unrecognized command: {command!r}")
        self.command = command


class EmptyPileError(GameError, IndexError):
    """Draw attempted against a pile with no cards left."""

    def __init__(self, pile_name: str) -> None:
        super().__init__(f"Cannot draw from empty pile '{pile_name}'")
        self.pile_name = pile_name


class InvariantViolation(GameError, RuntimeError):
    """
    Card bookkeeping is corrupted.

    Raised when a handle no longer resolves to a card or when cards are
    lost or duplicated between piles. Never recovered: the round must stop.
    """

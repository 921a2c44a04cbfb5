"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: SETUP → INPUT ⇄ CHECKING → GAME_OVER
    """

    # Building the deck and hands, entered once
    SETUP = auto()

    # Waiting for a command from the player
    INPUT = auto()

    # Scoring hands after a draw
    CHECKING = auto()

    # Round finished
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.SETUP: [GameState.INPUT],
    GameState.INPUT: [GameState.CHECKING, GameState.GAME_OVER],
    GameState.CHECKING: [GameState.INPUT, GameState.GAME_OVER],
    GameState.GAME_OVER: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])

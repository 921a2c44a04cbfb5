"""I/O boundary between the engine and a text console."""

from typing import Callable, Protocol

from twentyone.game.engine import TwentyOneGame
from twentyone.game.events import EventType, GameEvent


class IOBoundary(Protocol):
    """What the control loop needs from the outside world."""

    def read_command(self) -> str:
        """Block until one line of input is available."""
        ...

    def report(self, message: str) -> None:
        """Show informational text."""
        ...

    def terminate(self) -> None:
        """End the process after a normal game over."""
        ...


class ConsoleBoundary:
    """IOBoundary over stdin/stdout."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        prompt: str = "> ",
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self._prompt = prompt

    def read_command(self) -> str:
        return self._input(self._prompt)

    def report(self, message: str) -> None:
        self._output(message)

    def terminate(self) -> None:
        raise SystemExit(0)


def _render_game_ended(data: dict, ace_token: str) -> str:
    return f"Final score: {data['score']}\nYou {data['result']}!"


# Event type -> message builder
_RENDERERS: dict[EventType, Callable[[dict, str], str]] = {
    EventType.ROUND_STARTED: lambda d, _: f"Shuffled {d['cards']} cards. Good luck!",
    EventType.PROMPT: lambda d, _: (
        "Enter 'draw' to draw a card\nEnter 'stand' to end the game"
    ),
    EventType.COMMAND_RECEIVED: lambda d, _: f"You input: {d['text'].strip()}",
    EventType.CARD_DRAWN: lambda d, _: "Drawing card",
    EventType.CARD_SHOWN: lambda d, ace: d["card"].label(ace),
    EventType.SCORE_REPORTED: lambda d, _: f"Score: {d['score']}",
    EventType.PLAYER_STAND: lambda d, _: f"You stand on {d['score']}",
    EventType.PLAYER_BUSTS: lambda d, _: f"Bust! {d['score']} is over 21",
    EventType.GAME_ENDED: _render_game_ended,
    EventType.INVALID_COMMAND: lambda d, _: (
        f"Error: unrecognized command '{d['command']}', enter 'draw' or 'stand'"
    ),
    EventType.PILE_EMPTY: lambda d, _: "Error: the dealer pile is empty, no card drawn",
    EventType.INVALID_ACTION: lambda d, _: f"Error: {d['message']}",
}


def render_event(event: GameEvent, ace_token: str = "1") -> str | None:
    """
    Turn a game event into console text.

    Returns:
        The message, or None for events that are not shown
    """
    renderer = _RENDERERS.get(event.event_type)
    if renderer is None:
        return None
    return renderer(event.data, ace_token)


def connect(game: TwentyOneGame, boundary: IOBoundary, ace_token: str = "1") -> None:
    """Report every event the game emits through the boundary."""

    def on_event(event: GameEvent) -> None:
        message = render_event(event, ace_token)
        if message is not None:
            boundary.report(message)

    game.subscribe(on_event)

"""Twenty-one round engine with state machine."""

from dataclasses import dataclass, field
from enum import Enum
from random import Random
from typing import Callable

from transitions import EventData, Machine

from config import GameConfig
from twentyone.cards import CardRegistry, Pile
from twentyone.dealing import build_standard_deck, draw, shuffle
from twentyone.errors import EmptyPileError, InvariantViolation, UnrecognizedCommand
from twentyone.game.events import EventEmitter, EventType, GameEvent
from twentyone.game.state import GameState, is_valid_transition
from twentyone.hand import Hand
from twentyone.logging_utils import get_logger

log = get_logger("twentyone.engine")


class Command(Enum):
    """Commands accepted while waiting for input."""

    DRAW = "draw"
    STAND = "stand"


def parse_command(line: str) -> Command:
    """
    Turn a line of input into a command.

    Surrounding whitespace is ignored; matching is case-sensitive.

    Raises:
        UnrecognizedCommand: for anything other than 'draw' or 'stand'
    """
    token = line.strip()
    try:
        return Command(token)
    except ValueError:
        raise UnrecognizedCommand(token) from None


class GameResult(Enum):
    """Final result of a round."""

    WIN = "win"
    LOSE = "lose"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GameOutcome:
    """Final score and result of a finished round."""

    score: int
    result: GameResult


@dataclass
class Round:
    """Everything one play-through owns: the card arena, the draw pile and both hands."""

    registry: CardRegistry
    dealer_pile: Pile
    player: Hand = field(default_factory=lambda: Hand("player"))
    computer: Hand = field(default_factory=lambda: Hand("computer"))

    @property
    def hands(self) -> list[Hand]:
        """Return every hand that is scored."""
        return [self.player, self.computer]

    @property
    def total_cards(self) -> int:
        """Return the number of cards that exist in this round."""
        return len(self.registry)

    @property
    def cards_in_play(self) -> int:
        """Return the number of cards currently held by the piles and hands."""
        return len(self.dealer_pile) + sum(len(hand) for hand in self.hands)

    def check_conservation(self) -> None:
        """
        Verify that every card is held by exactly one pile.

        Raises:
            InvariantViolation: if a card was lost or duplicated
        """
        if self.cards_in_play != self.total_cards:
            raise InvariantViolation(
                f"{self.cards_in_play} cards in play, expected {self.total_cards}"
            )

        seen: set[int] = set()
        for pile in [self.dealer_pile, *(hand.pile for hand in self.hands)]:
            for card_id in pile:
                if card_id in seen:
                    raise InvariantViolation(f"Card handle {card_id} held twice")
                seen.add(card_id)


class TwentyOneGame:
    """
    Single-round twenty-one engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin", "source": "setup", "dest": "input"},
        {"trigger": "take_card", "source": "input", "dest": "checking"},
        {"trigger": "hold", "source": "input", "dest": "game_over"},
        {"trigger": "continue_round", "source": "checking", "dest": "input"},
        {"trigger": "bust", "source": "checking", "dest": "game_over"},
    ]

    def __init__(
        self,
        game_config: GameConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new round engine.

        Args:
            game_config: Deck settings (read from the environment if not provided)
            rng: Random number generator for reproducible shuffles
        """
        self.config = game_config or GameConfig()
        self.rng = rng or Random(self.config.seed)
        self.round: Round | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="setup",
            auto_transitions=False,
            model_attribute="_machine_state",
            send_event=True,
            before_state_change="_check_transition",
            after_state_change="_log_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def is_over(self) -> bool:
        """Check if the round has reached its terminal state."""
        return self.state == GameState.GAME_OVER

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _check_transition(self, event: EventData) -> None:
        source = GameState[event.transition.source.upper()]
        dest = GameState[event.transition.dest.upper()]
        if not is_valid_transition(source, dest):
            raise InvariantViolation(f"Transition {source.name} -> {dest.name} is not allowed")

    def _log_state(self, event: EventData) -> None:
        log.debug(f"State -> {self.state.name} (trigger {event.event.name})")

    def _require_round(self) -> Round:
        if self.round is None:
            raise InvariantViolation("No round has been set up")
        return self.round

    def setup(self) -> Round:
        """
        Build and shuffle the deck, create empty hands and wait for input.

        Setup happens once; later calls report an invalid action and
        return the existing round.
        """
        if self.state != GameState.SETUP:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Round is already set up",
                state=self.state.name,
            )
            return self._require_round()

        registry = CardRegistry()
        dealer_pile = build_standard_deck(registry, num_decks=self.config.num_decks)
        shuffle(dealer_pile, self.rng)

        self.round = Round(registry=registry, dealer_pile=dealer_pile)
        self.round.check_conservation()

        self.events.emit_new(EventType.ROUND_STARTED, cards=len(dealer_pile))
        self.begin()
        return self.round

    def prompt(self) -> None:
        """Ask the boundary for the next command."""
        if self.state != GameState.INPUT:
            return
        self.events.emit_new(EventType.PROMPT, commands=[c.value for c in Command])

    def handle_command(self, line: str) -> bool:
        """
        Apply one line of player input.

        Args:
            line: Raw input text

        Returns:
            True if the command advanced the state machine
        """
        self.events.emit_new(EventType.COMMAND_RECEIVED, text=line)

        if self.state != GameState.INPUT:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Not waiting for a command",
                state=self.state.name,
            )
            return False

        try:
            command = parse_command(line)
        except UnrecognizedCommand as e:
            log.info(str(e))
            self.events.emit_new(EventType.INVALID_COMMAND, command=e.command)
            return False

        if command == Command.DRAW:
            return self._draw_for_player()

        self.events.emit_new(EventType.PLAYER_STAND, score=self._require_round().player.score)
        self.hold()
        self._finish()
        return True

    def _draw_for_player(self) -> bool:
        rnd = self._require_round()
        try:
            card_id = draw(rnd.dealer_pile, rnd.player.pile)
        except EmptyPileError as e:
            log.info(str(e))
            self.events.emit_new(EventType.PILE_EMPTY, pile=e.pile_name)
            return False

        rnd.check_conservation()
        self.events.emit_new(
            EventType.CARD_DRAWN,
            card_id=card_id,
            hand=rnd.player.owner,
            cards_remaining=len(rnd.dealer_pile),
        )
        self.take_card()
        return True

    def check(self) -> bool:
        """
        Rescore every hand and decide whether the round goes on.

        Returns:
            True if the player may keep playing
        """
        if self.state != GameState.CHECKING:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Nothing to check",
                state=self.state.name,
            )
            return False

        rnd = self._require_round()
        for hand in rnd.hands:
            hand.rescore(rnd.registry)

        player = rnd.player
        for card_id in player:
            self.events.emit_new(
                EventType.CARD_SHOWN,
                card=rnd.registry.resolve(card_id),
                hand=player.owner,
            )
        self.events.emit_new(
            EventType.SCORE_REPORTED,
            score=player.score,
            soft=player.is_soft,
            hand=player.owner,
        )

        if player.busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, score=player.score)
            self.bust()
            self._finish()
            return False

        self.continue_round()
        return True

    def _finish(self) -> None:
        outcome = self.outcome
        if outcome is None:
            raise InvariantViolation("Round finished without reaching game over")
        log.info(f"Round over: score={outcome.score} result={outcome.result}")
        self.events.emit_new(
            EventType.GAME_ENDED,
            score=outcome.score,
            result=outcome.result,
        )

    @property
    def outcome(self) -> GameOutcome | None:
        """Return the final score and result once the round is over."""
        if not self.is_over or self.round is None:
            return None
        player = self.round.player
        result = GameResult.LOSE if player.busted else GameResult.WIN
        return GameOutcome(score=player.score, result=result)

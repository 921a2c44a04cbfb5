"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_decks() -> int:
    """Parse TWENTYONE_DECKS environment variable."""
    decks = os.getenv("TWENTYONE_DECKS", "1").strip()
    try:
        return int(decks)
    except ValueError:
        raise ValueError(f"TWENTYONE_DECKS must be a whole number, got {decks!r}") from None


def _parse_seed() -> int | None:
    """Parse TWENTYONE_SEED environment variable."""
    seed = os.getenv("TWENTYONE_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Deck configuration for a round."""

    num_decks: int = field(default_factory=_parse_decks)
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        """Validate deck settings."""
        if self.num_decks < 1 or self.num_decks > 8:
            raise ValueError("num_decks must be between 1 and 8")


@dataclass(frozen=True)
class DisplayConfig:
    """How cards are shown at the console."""

    # Token printed for rank 1
    ace_token: str = field(
        default_factory=lambda: os.getenv("TWENTYONE_ACE_TOKEN", "1")
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper()
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config() -> AppConfig:
    """
    Read the configuration from the environment.

    Called when a value is needed rather than at import, so a bad
    environment variable surfaces as a ValueError the caller can report.
    """
    return AppConfig()

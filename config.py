"""Configuration management with environment variable support."""

import os
import secrets
from dataclasses import dataclass, field


def _env_list(name: str, default: str) -> list[str]:
    """Split a comma-separated environment variable, dropping blanks."""
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass(frozen=True)
class GameConfig:
    """Table defaults shared by the console and the HTTP API."""

    starting_chips: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_STARTING_CHIPS", "100"))
    )
    default_bet: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DEFAULT_BET", "5"))
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class HttpConfig:
    """
    Settings for the HTTP table.

    ``rate_limit`` is a slowapi limit string such as ``"60/minute"``; an
    empty value turns limiting off. Session ids are signed with
    ``secret_key`` and a table is forgotten ``session_ttl`` seconds after
    its last request.
    """

    allowed_origins: list[str] = field(
        default_factory=lambda: _env_list("BLACKJACK_CORS_ORIGINS", "http://localhost:8000")
    )
    rate_limit: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_RATE_LIMIT", "60/minute").strip()
    )
    secret_key: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_SECRET_KEY") or secrets.token_urlsafe(32)
    )
    session_ttl: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_SESSION_TTL", "3600"))
    )

    @property
    def rate_limit_enabled(self) -> bool:
        return bool(self.rate_limit)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    http: HttpConfig = field(default_factory=HttpConfig)


# Global configuration instance
config = AppConfig()

"""Configuration management for the demo application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class SequenceConfig:
    """Settings used when running the demonstration scenarios."""

    demo_limit: int = 10
    batch_size: int = 4
    seed: int = 42
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "SequenceConfig":
        """Load configuration from environment variables.

        - LAZY_SEQUENCES_DEMO_LIMIT: prefix size for infinite sequences
        - LAZY_SEQUENCES_BATCH_SIZE: values per DataFrame batch
        - LAZY_SEQUENCES_SEED: seed for the random and fake streams
        - LAZY_SEQUENCES_VERBOSE: enable debug logging
        """
        return cls(
            demo_limit=_env_int("LAZY_SEQUENCES_DEMO_LIMIT", "10"),
            batch_size=_env_int("LAZY_SEQUENCES_BATCH_SIZE", "4"),
            seed=_env_int("LAZY_SEQUENCES_SEED", "42"),
            verbose=_env_bool("LAZY_SEQUENCES_VERBOSE", "false"),
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.demo_limit <= 0:
            raise ValueError("demo_limit must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")


def get_config() -> SequenceConfig:
    """Get demo configuration."""
    return SequenceConfig.from_env()

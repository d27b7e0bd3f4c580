"""
Configuration management for the command gate.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class Config:
    """Command gate configuration settings."""

    # Debug
    DEBUG: bool = False

    # Circuit breaker for failing commands
    MAX_ERRORS_PER_MINUTE: int = 10
    CIRCUIT_BREAK_SECONDS: float = 60.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            DEBUG=os.getenv("DEBUG", "false").lower() == "true",
            MAX_ERRORS_PER_MINUTE=int(os.getenv("MAX_ERRORS_PER_MINUTE", "10")),
            CIRCUIT_BREAK_SECONDS=float(os.getenv("CIRCUIT_BREAK_SECONDS", "60")),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.MAX_ERRORS_PER_MINUTE <= 0:
            raise ValueError("MAX_ERRORS_PER_MINUTE must be positive")
        if self.CIRCUIT_BREAK_SECONDS <= 0:
            raise ValueError("CIRCUIT_BREAK_SECONDS must be positive")


# Global config instance
config = Config.from_env()

"""Configuration settings for VocabTrainer."""
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables from .env file
load_dotenv(BASE_DIR / ".env")

DEFAULT_API_URL = "http://localhost:3000/api"
APPEARANCE_MODES = ("dark", "light", "system")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_float(name: str, default: str) -> float:
    raw = _env(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class ApiSettings:
    """Backend connection settings."""
    url: str = field(default_factory=lambda: _env("VOCAB_API_URL", DEFAULT_API_URL))
    timeout: float = field(default_factory=lambda: _env_float("VOCAB_API_TIMEOUT", "10"))


@dataclass
class UiSettings:
    """Window settings."""
    appearance_mode: str = field(
        default_factory=lambda: _env("VOCAB_APPEARANCE_MODE", "dark").lower()
    )
    color_theme: str = "blue"


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    api: ApiSettings = field(default_factory=ApiSettings)
    ui: UiSettings = field(default_factory=UiSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if not self.api.url.startswith(("http://", "https://")):
            raise ValueError("VOCAB_API_URL must start with http:// or https://")

        if not math.isfinite(self.api.timeout) or self.api.timeout <= 0:
            raise ValueError("VOCAB_API_TIMEOUT must be a positive number")

        if self.ui.appearance_mode not in APPEARANCE_MODES:
            raise ValueError(
                f"VOCAB_APPEARANCE_MODE must be one of {', '.join(APPEARANCE_MODES)}"
            )

        if self.logging.level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")


def get_settings() -> Settings:
    """Read settings from the environment and validate them."""
    settings = Settings()
    settings.validate()
    return settings

"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from twentyone.rules import RuleSet


def _env_flag(name: str, default: str) -> bool:
    """Parse a true/false environment variable."""
    return os.getenv(name, default).strip().lower() == "true"


def _parse_seed() -> int | None:
    """Parse TWENTYONE_SEED; unset or blank means an unseeded shuffle."""
    raw = os.getenv("TWENTYONE_SEED", "").strip()
    if not raw:
        return None
    return int(raw)


def _parse_log_level() -> str:
    """Parse LOG_LEVEL, dropping to DEBUG when TWENTYONE_DEBUG is on."""
    if _env_flag("TWENTYONE_DEBUG", "false"):
        return "DEBUG"
    return os.getenv("LOG_LEVEL", "WARNING").strip().upper()


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("TWENTYONE_DEBUG", "false"))
    log_level: str = field(default_factory=_parse_log_level)
    seed: int | None = field(default_factory=_parse_seed)
    clear_screen: bool = field(default_factory=lambda: _env_flag("TWENTYONE_CLEAR_SCREEN", "true"))

    rules: RuleSet = field(default_factory=RuleSet)


# Global configuration instance
config = AppConfig()

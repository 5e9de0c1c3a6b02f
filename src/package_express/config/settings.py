"""
Centralized settings for Package Express.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings with fixed shipping limits."""

    # Shipping limits
    max_weight: float = 50.0
    max_dimensions: float = 50.0  # width + height + length

    # Quote formula: (width * height * length * weight) / cost_divisor
    cost_divisor: float = 100.0

    # Diagnostics only, the console transcript is unaffected
    log_level: str = "WARNING"

    @classmethod
    def load(cls) -> 'Settings':
        """Load the default settings. There are no environment or file overrides."""
        return cls()


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings

"""Configuration management for the GloBE Lexicon."""

from .config_manager import ConfigurationManager
from .models import (
    ConfigurationError,
    LexiconConfig,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "ConfigurationError",
    "LexiconConfig",
    "ValidationResult",
]

"""Data models for configuration management."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.enums import SourceDescriptor


@dataclass
class LexiconConfig:
    """
    Settings for loading and browsing the lexicon dataset.

    The column layout itself is fixed by SourceDescriptor and is not
    configurable; only how the file is read is.
    """
    dataset_path: Optional[str] = None
    encoding: str = "utf-8-sig"
    delimiter: str = ","
    header_rows: int = 3
    min_columns: int = 13
    strict_columns: bool = True
    default_active_source: str = SourceDescriptor.MODELE_FR.key
    default_compare_source: str = SourceDescriptor.MODELE_EN.key
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def active_source(self) -> SourceDescriptor:
        return SourceDescriptor.from_key(self.default_active_source)

    @property
    def compare_source(self) -> SourceDescriptor:
        return SourceDescriptor.from_key(self.default_compare_source)


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result

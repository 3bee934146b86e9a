"""Exceptions raised while loading the lexicon dataset.

Every failure carries a short `code` so the pipeline and the HTTP layer
can report why no data is available without parsing the message.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional


@dataclass
class LoadError(Exception):
    """
    Base exception for dataset loading errors.

    Attributes:
        message: Human-readable error description.
        file_path: Dataset that failed to load, if known.
        location: Byte offset or data row the failure points at.
        details: Extra values specific to the failure.
    """
    code: ClassVar[str] = "load_failed"

    message: str
    file_path: Optional[str] = None
    location: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        super().__init__(str(self))

    def __str__(self) -> str:
        text = self.message
        if self.file_path:
            text = f"{text} ({self.file_path}"
            text += f", {self.location})" if self.location else ")"
        elif self.location:
            text = f"{text} ({self.location})"
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "file_path": self.file_path,
            "location": self.location,
            "details": dict(self.details),
        }


@dataclass
class DatasetNotFoundError(LoadError):
    """Raised when the dataset file does not exist."""
    code: ClassVar[str] = "not_found"


@dataclass
class DatasetUnreadableError(LoadError):
    """Raised when the dataset path exists but cannot be read as a file."""
    code: ClassVar[str] = "unreadable"


@dataclass
class DatasetCorruptedError(LoadError):
    """
    Raised when the dataset cannot be decoded.

    Covers bytes that are invalid in the configured encoding as well as
    CSV content the reader rejects.
    """
    code: ClassVar[str] = "corrupted"

    def get_recovery_suggestions(self) -> list[str]:
        """Return suggestions for recovering from this error."""
        suggestions = [
            "Check that the file was exported as CSV and not as a spreadsheet",
            "Re-export the file using UTF-8 encoding",
        ]
        encoding = self.details.get("encoding")
        if encoding:
            suggestions.append(f"Verify the file really is encoded as {encoding}")
        return suggestions


@dataclass
class DatasetFormatError(LoadError):
    """
    Raised when a data row does not have the expected shape.

    The location names the 1-based data row (header rows excluded).
    """
    code: ClassVar[str] = "bad_format"

    @property
    def expected_columns(self) -> int:
        return int(self.details.get("expected_columns", 0))

    @property
    def actual_columns(self) -> int:
        return int(self.details.get("actual_columns", 0))

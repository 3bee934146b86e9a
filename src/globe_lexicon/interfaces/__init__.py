"""Abstract interfaces for the GloBE Lexicon."""

from .loader import IRecordLoader

__all__ = [
    "IRecordLoader",
]

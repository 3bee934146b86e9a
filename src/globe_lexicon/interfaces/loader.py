"""Record loader interface for the GloBE Lexicon."""

from abc import ABC, abstractmethod
from typing import List

from ..models.glossary import Row


class IRecordLoader(ABC):
    """
    Abstract interface for tabular record loading.

    Implementations decode a raw dataset into ordered rows of text
    cells, with the header block already removed.
    """

    @abstractmethod
    def load(self, file_path: str) -> List[Row]:
        """
        Load the data rows of a dataset file.

        Args:
            file_path: Path to the dataset file.

        Returns:
            Data rows in file order, header rows excluded.

        Raises:
            LoadError: If the dataset is missing, undecodable or malformed.
        """
        pass

    @abstractmethod
    def parse_text(self, text: str, file_path: str = "") -> List[Row]:
        """
        Decode already-read dataset text into data rows.

        Args:
            text: Full dataset content.
            file_path: Optional origin, used in error messages only.

        Returns:
            Data rows in order, header rows excluded.
        """
        pass

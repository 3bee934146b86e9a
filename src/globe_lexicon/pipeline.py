"""Lexicon loading pipeline for the GloBE Lexicon.

This module wires the record loader and the term table builder into a
one-shot load. A failed load is reported once through LoadResult and
is never retried by the pipeline itself.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config.models import LexiconConfig
from .interfaces.loader import IRecordLoader
from .loaders.csv_loader import CSVRecordLoader
from .loaders.exceptions import LoadError
from .loaders.table_builder import build_term_table
from .models.glossary import TermRecord


logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Result of a lexicon load."""

    success: bool
    table: List[TermRecord] = field(default_factory=list)
    row_count: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    processing_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def dropped_count(self) -> int:
        return self.row_count - len(self.table)


class LexiconPipeline:
    """
    Loads the lexicon dataset into an in-memory term table.

    The table is built once; later calls to `load` return the cached
    result, whether it succeeded or failed.
    """

    def __init__(
        self,
        config: Optional[LexiconConfig] = None,
        loader: Optional[IRecordLoader] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Lexicon configuration (defaults used if not provided).
            loader: Optional record loader (CSV loader built from config
                if not provided).
        """
        self.config = config or LexiconConfig()
        self._loader = loader or CSVRecordLoader(
            encoding=self.config.encoding,
            delimiter=self.config.delimiter,
            header_rows=self.config.header_rows,
            min_columns=self.config.min_columns,
            strict_columns=self.config.strict_columns,
        )
        self._result: Optional[LoadResult] = None

    @classmethod
    def failed(cls, error: str, config: Optional[LexiconConfig] = None) -> "LexiconPipeline":
        """Build a pipeline whose load has already failed with `error`."""
        pipeline = cls(config=config)
        pipeline._result = LoadResult(success=False, errors=[error])
        return pipeline

    @property
    def result(self) -> Optional[LoadResult]:
        return self._result

    @property
    def table(self) -> List[TermRecord]:
        """Loaded term table; empty until a successful load."""
        if self._result is None:
            return []
        return self._result.table

    def load(self) -> LoadResult:
        """
        Load the configured dataset, once.

        Returns:
            LoadResult; on failure `success` is False and `errors`
            holds the reason.
        """
        if self._result is not None:
            return self._result

        self._result = self._run()
        return self._result

    def reload(self) -> LoadResult:
        """Discard the cached table and load the dataset again."""
        self._result = None
        return self.load()

    def _run(self) -> LoadResult:
        start_time = time.time()
        dataset_path = self.config.dataset_path

        if not dataset_path:
            message = "No dataset configured"
            logger.error(message)
            return LoadResult(success=False, errors=[message])

        try:
            rows = self._loader.load(dataset_path)
        except LoadError as e:
            logger.error(f"Failed to load lexicon dataset: {e}")
            return LoadResult(
                success=False,
                errors=[str(e)],
                processing_time=time.time() - start_time,
                metadata={"error": e.to_dict()},
            )

        table = build_term_table(rows)
        result = LoadResult(
            success=True,
            table=table,
            row_count=len(rows),
            processing_time=time.time() - start_time,
            metadata={"dataset_path": dataset_path},
        )

        if not table:
            result.warnings.append("Dataset contains no terms")
            logger.warning(f"Dataset contains no terms: {dataset_path}")

        logger.info(
            f"Lexicon loaded: {len(table)} terms from {len(rows)} rows "
            f"in {result.processing_time:.2f}s"
        )
        return result

"""Configuration Manager implementation for the GloBE Lexicon.

This module loads, validates and exports the LexiconConfig from a JSON
file, a dictionary, or environment variables.
"""

import codecs
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..models.enums import SourceDescriptor
from .models import ConfigurationError, LexiconConfig, ValidationResult

logger = logging.getLogger(__name__)

ENV_DATASET = "GLOBE_LEXICON_DATASET"
ENV_ENCODING = "GLOBE_LEXICON_ENCODING"
ENV_STRICT = "GLOBE_LEXICON_STRICT"

_TRUTHY = {"1", "true", "yes", "y"}


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


class ConfigurationManager:
    """
    Manager for lexicon configuration.

    Handles loading, validation, and export of the LexiconConfig.
    """

    def __init__(self, config: Optional[LexiconConfig] = None):
        self._configuration = config or LexiconConfig()
        self._is_loaded = config is not None

    @property
    def configuration(self) -> LexiconConfig:
        """Get the current configuration."""
        return self._configuration

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    def load_config(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> ValidationResult:
        """
        Load and validate a configuration.

        Unknown keys are reported as warnings and ignored. Keys absent
        from the source keep their default value.

        Args:
            source: JSON file path or dictionary.

        Returns:
            ValidationResult with any warnings.

        Raises:
            ConfigurationError: If validation fails.
        """
        raw_data = self._parse_source(source)
        if not isinstance(raw_data, dict):
            raise ConfigurationError("Configuration must be a JSON object")

        result = self.validate(raw_data)
        if not result.is_valid:
            raise ConfigurationError(
                "Lexicon configuration validation failed",
                validation_result=result
            )

        known = {k: v for k, v in raw_data.items() if k in self._field_names()}
        self._configuration = LexiconConfig(**known)
        self._is_loaded = True

        for warning in result.warnings:
            logger.warning(warning)

        return result

    def load_from_env(self, environ: Optional[Mapping[str, str]] = None) -> ValidationResult:
        """
        Overlay environment variables onto the current configuration.

        Reads GLOBE_LEXICON_DATASET, GLOBE_LEXICON_ENCODING and
        GLOBE_LEXICON_STRICT; unset variables leave the field untouched.
        """
        env = os.environ if environ is None else environ
        data = self.to_dict()

        if env.get(ENV_DATASET):
            data["dataset_path"] = env[ENV_DATASET]
        if env.get(ENV_ENCODING):
            data["encoding"] = env[ENV_ENCODING]
        if env.get(ENV_STRICT) is not None:
            data["strict_columns"] = _is_truthy(env[ENV_STRICT])

        return self.load_config(data)

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        """Validate a raw configuration dictionary."""
        result = ValidationResult(is_valid=True)
        prefix = "Lexicon config"

        for key in data:
            if key not in self._field_names():
                result.add_warning(f"{prefix}: Unknown field '{key}' ignored")

        dataset_path = data.get("dataset_path")
        if dataset_path is not None:
            if not isinstance(dataset_path, str) or not dataset_path.strip():
                result.add_error(f"{prefix}: 'dataset_path' must be a non-empty string")
            elif not Path(dataset_path).exists():
                result.add_warning(f"{prefix}: dataset file not found: {dataset_path}")

        if "encoding" in data:
            encoding = data["encoding"]
            if not isinstance(encoding, str):
                result.add_error(f"{prefix}: 'encoding' must be a string")
            else:
                try:
                    codecs.lookup(encoding)
                except LookupError:
                    result.add_error(f"{prefix}: unknown encoding '{encoding}'")

        if "delimiter" in data:
            delimiter = data["delimiter"]
            if not isinstance(delimiter, str) or len(delimiter) != 1:
                result.add_error(f"{prefix}: 'delimiter' must be a single character")

        for int_field, minimum in (("header_rows", 0), ("min_columns", 1)):
            if int_field not in data:
                continue
            value = data[int_field]
            if not isinstance(value, int) or isinstance(value, bool):
                result.add_error(f"{prefix}: '{int_field}' must be an integer")
            elif value < minimum:
                result.add_error(f"{prefix}: '{int_field}' must be >= {minimum}")

        if "strict_columns" in data and not isinstance(data["strict_columns"], bool):
            result.add_error(f"{prefix}: 'strict_columns' must be a boolean")

        if "metadata" in data and not isinstance(data["metadata"], dict):
            result.add_error(f"{prefix}: 'metadata' must be an object")

        result = result.merge(self._validate_sources(data))
        return result

    def _validate_sources(self, data: Dict[str, Any]) -> ValidationResult:
        """Validate the default source pair."""
        result = ValidationResult(is_valid=True)
        defaults = LexiconConfig()
        active = data.get("default_active_source", defaults.default_active_source)
        compare = data.get("default_compare_source", defaults.default_compare_source)

        valid_keys = [s.key for s in SourceDescriptor]
        for name, key in (
            ("default_active_source", active),
            ("default_compare_source", compare),
        ):
            if key not in valid_keys:
                result.add_error(
                    f"Lexicon config: '{name}' must be one of {valid_keys}"
                )

        if result.is_valid and active == compare:
            result.add_error(
                "Lexicon config: default active and comparison sources must differ"
            )

        return result

    def to_dict(self) -> Dict[str, Any]:
        """Export the current configuration as a dictionary."""
        config = self._configuration
        return {
            "dataset_path": config.dataset_path,
            "encoding": config.encoding,
            "delimiter": config.delimiter,
            "header_rows": config.header_rows,
            "min_columns": config.min_columns,
            "strict_columns": config.strict_columns,
            "default_active_source": config.default_active_source,
            "default_compare_source": config.default_compare_source,
            "metadata": dict(config.metadata),
        }

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """Save the current configuration to a JSON file."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._configuration = LexiconConfig()
        self._is_loaded = False

    @staticmethod
    def _field_names() -> set:
        return set(LexiconConfig.__dataclass_fields__)

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Any:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                try:
                    return json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigurationError(f"Invalid JSON in {path}: {e}")

        return source

"""
Translation run configuration.

A run is configured once, before the first element is translated, and the
resulting ``TranslationConfig`` is handed to the resource factory. It is
frozen: the source-identifier toggle cannot change mid-run.

Usage:
    from core.config import TranslationConfig, load_config

    config = load_config("translator.json")
    config = TranslationConfig(preserve_source_ids=False)
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from constants import LabelConfig, NamespaceConfig

logger = logging.getLogger(__name__)

_KEY_ALIASES = {
    "keep_ids": "preserve_source_ids",
}


@dataclass(frozen=True)
class TranslationConfig:
    """
    Settings for one translation run.

    Attributes:
        preserve_source_ids: Annotate declared nodes with their original
            XMI identifier (``uml:id``).
        namespace: Namespace prefix of every node address.
        label_language: Language tag of node labels.
    """
    preserve_source_ids: bool = True
    namespace: str = NamespaceConfig.XMI_NS
    label_language: str = LabelConfig.DEFAULT_LANGUAGE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranslationConfig":
        """
        Build a configuration from a plain dictionary.

        Unknown keys are ignored with a warning.

        Raises:
            ValueError: If a value has the wrong type.
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            key = _KEY_ALIASES.get(key, key)
            if key not in cls.__dataclass_fields__:
                logger.warning(f"Ignoring unknown configuration key '{key}'")
                continue
            values[key] = value

        preserve = values.get("preserve_source_ids", True)
        if not isinstance(preserve, bool):
            raise ValueError(
                f"preserve_source_ids must be a boolean, got {type(preserve).__name__}"
            )
        for key in ("namespace", "label_language"):
            if key in values and (not isinstance(values[key], str) or not values[key]):
                raise ValueError(f"{key} must be a non-empty string")

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "preserve_source_ids": self.preserve_source_ids,
            "namespace": self.namespace,
            "label_language": self.label_language,
        }


def load_config(config_path: Union[str, Path]) -> TranslationConfig:
    """
    Load a translation configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        The parsed configuration.

    Raises:
        ValueError: If config_path is empty or the file is not a JSON object.
        FileNotFoundError: If the configuration file doesn't exist.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be an object: {path}")

    logger.debug(f"Loaded configuration from {path}")
    return TranslationConfig.from_dict(data)

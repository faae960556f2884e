"""Reading YAML documents whose root is a mapping.

Settings files and event scripts both go through this reader; callers wrap
``YamlFileError`` into their own error type.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class YamlFileError(Exception):
    """Raised when a YAML document is missing, malformed, or not a mapping."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


def parse_mapping(text: str, path: str | None = None) -> dict[str, Any]:
    """Parse YAML text that must hold a mapping.

    An empty document parses to an empty mapping.

    Raises:
        YamlFileError: If the text is not valid YAML or its root is not a mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise YamlFileError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise YamlFileError(
            f"Expected a mapping at the document root, got {type(data).__name__}", path
        )
    return data


def read_mapping(path: str | Path) -> dict[str, Any]:
    """Read a YAML file that must hold a mapping.

    Raises:
        YamlFileError: If the file is absent, unreadable, or not a YAML mapping.
    """
    path = Path(path)
    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise YamlFileError(f"{reason}: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise YamlFileError(f"Cannot read file: {e}", str(path)) from e

    logger.debug("Read %d characters from %s", len(text), path)
    return parse_mapping(text, str(path))

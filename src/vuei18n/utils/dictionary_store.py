"""
Load and save flat key -> default value dictionaries stored as JSON.
"""

import json
from pathlib import Path
from typing import Dict

from vuei18n.utils.file_writer import atomic_write


class DictionaryError(ValueError):
    """Raised when a dictionary file is not a flat JSON object of strings."""


def parse_dictionary(content: str, source: str = "<string>") -> Dict[str, str]:
    """
    Parse dictionary JSON text.

    Args:
        content: JSON text
        source: Name used in error messages

    Returns:
        Mapping of translation key to default value

    Raises:
        DictionaryError: If the text is not valid JSON, the top level is not an
            object, or any value is not a string
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise DictionaryError(f"Failed to parse JSON in {source}: {e}") from e

    if not isinstance(data, dict):
        raise DictionaryError(f"Expected a JSON object at the top level of {source}, got {type(data).__name__}")

    for key, value in data.items():
        if not isinstance(value, str):
            raise DictionaryError(f"Value for key {key!r} in {source} must be a string, got {type(value).__name__}")

    return data


def load_dictionary(file_path: Path) -> Dict[str, str]:
    """
    Load a dictionary from a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Mapping of translation key to default value

    Raises:
        FileNotFoundError: If the file does not exist
        DictionaryError: If the file content is not a valid dictionary
    """
    with open(file_path, "r", encoding="utf-8") as f:
        content = f.read()

    return parse_dictionary(content, str(file_path))


def dump_dictionary(data: Dict[str, str]) -> str:
    """Serialize a dictionary with keys in ascending order and a trailing newline."""
    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def save_dictionary(data: Dict[str, str], file_path: Path) -> None:
    """
    Write a dictionary to a JSON file, replacing it atomically.

    Args:
        data: Mapping of translation key to default value
        file_path: Output file path
    """
    atomic_write(file_path, dump_dictionary(data))

"""
Translation key scanner for Vue/JS/TS sources.

Keys are found by pattern matching on raw text rather than by parsing, so a
call that appears inside a comment or a string literal is picked up as well.
"""

import re
import sys
from pathlib import Path
from typing import Dict, List, Optional

from vuei18n.data_models.scan_result import ScanResult
from vuei18n.utils.file_finder import find_source_files_iter


def clean_key(key: str) -> str:
    """Replace undecodable source bytes in a key with U+FFFD so it can be saved as UTF-8 JSON."""
    return key.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class KeyScanner:
    """
    Collects translation keys referenced through t('key') or $t('key') calls.

    Each key is recorded once with its best known default value: the existing
    dictionary's value when it is non-empty, otherwise an empty string.
    """

    # t('key'), $t("key", {...}); arguments after the key are ignored
    CALL_PATTERN = re.compile(r"""(?<![\w$])(\$t|t)\(\s*['"]([^'"]+)['"]""")

    def __init__(self, existing: Optional[Dict[str, str]] = None):
        """
        Initialize the scanner.

        Args:
            existing: Previously saved dictionary used to carry values forward
        """
        self.existing: Dict[str, str] = existing if existing is not None else {}
        self.keys: Dict[str, str] = {}
        self.processed_count = 0
        self.skipped_files: List[Path] = []

    @classmethod
    def extract_keys(cls, content: str) -> List[str]:
        """
        Extract distinct translation keys from text, in order of first appearance.

        Args:
            content: Source text

        Returns:
            List of keys
        """
        keys: Dict[str, None] = {}
        for match in cls.CALL_PATTERN.finditer(content):
            keys.setdefault(clean_key(match.group(2)), None)
        return list(keys)

    def scan_content(self, content: str) -> None:
        """Merge the keys found in one file's text into the running mapping."""
        for key in self.extract_keys(content):
            if key in self.keys:
                continue
            self.keys[key] = self.existing.get(key, "")

    def scan_file(self, file_path: Path) -> bool:
        """
        Scan a single file.

        Files that cannot be opened are reported on stderr and skipped. Bytes
        that are not valid UTF-8 do not stop the scan.

        Returns:
            True if the file was scanned
        """
        try:
            with open(file_path, "r", encoding="utf-8", errors="surrogateescape") as f:
                content = f.read()
        except OSError as e:
            print(f"Warning: Failed to read {file_path}: {e}", file=sys.stderr)
            self.skipped_files.append(file_path)
            return False

        self.scan_content(content)
        self.processed_count += 1
        return True

    def scan_directory(self, directory: Path, exclude_dirs: Optional[List[str]] = None) -> Dict[str, str]:
        """
        Scan every source file below a directory.

        Args:
            directory: Root directory to scan
            exclude_dirs: Directory names to skip

        Returns:
            Mapping of discovered key to best known default value

        Raises:
            ValueError: If directory doesn't exist or is not a directory
        """
        for file_path in find_source_files_iter(directory, exclude_dirs):
            self.scan_file(file_path)
        return self.keys


def reconcile(found: Dict[str, str], existing: Dict[str, str]) -> ScanResult:
    """
    Reconcile discovered keys against the existing dictionary.

    Args:
        found: Discovered keys with their best known values
        existing: Previously saved dictionary (empty if there was none)

    Returns:
        ScanResult with the new dictionary in ascending key order, the keys that
        are no longer referenced and the keys that are new
    """
    dictionary: Dict[str, str] = {}
    for key in sorted(found):
        existing_value = existing.get(key, "")
        dictionary[key] = existing_value if existing_value != "" else found[key]

    deleted_keys = sorted(key for key in existing if key not in found)
    added_keys = sorted(key for key in found if key not in existing)

    return ScanResult(dictionary, deleted_keys, added_keys)

"""
Scan result data class.
"""

from typing import Dict, List


class ScanResult:
    """Outcome of reconciling discovered keys against an existing dictionary."""

    def __init__(self, dictionary: Dict[str, str], deleted_keys: List[str], added_keys: List[str]):
        """
        Initialize a scan result.

        Args:
            dictionary: Reconciled dictionary, keys in ascending order
            deleted_keys: Keys of the old dictionary no longer referenced
            added_keys: Referenced keys missing from the old dictionary
        """
        self.dictionary = dictionary
        self.deleted_keys = deleted_keys
        self.added_keys = added_keys

    @property
    def key_count(self) -> int:
        return len(self.dictionary)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"ScanResult(keys={self.key_count}, added={len(self.added_keys)}, deleted={len(self.deleted_keys)})"

"""
Default value injection for translation calls inside template attributes.

Only calls found in the value of v-html, :placeholder and :label attributes are
touched. Like the key scanner, this works on raw text, not on a parsed template.
"""

import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from vuei18n.utils.file_finder import find_source_files_iter
from vuei18n.utils.file_writer import atomic_write


class RewriteError(RuntimeError):
    """Raised when a source file cannot be read or written back."""


# Characters that open a string literal already passed as an argument
LITERAL_QUOTES = ("'", '"', "`")


def format_default_value(value: str) -> str:
    """
    Format a dictionary value as a JavaScript string literal.

    Values containing markup become template literals with double quotes turned
    into single quotes, so they cannot close the surrounding attribute value.
    Everything else becomes a single-quoted literal.

    Args:
        value: Default value from the dictionary

    Returns:
        Literal source text
    """
    if "<" in value:
        return "`" + value.replace('"', "'") + "`"
    return "'" + value.replace("'", "\\'") + "'"


class CallRewriter:
    """Appends dictionary default values to translation calls in template attributes."""

    ATTRIBUTE_PATTERN = re.compile(r"""(v-html|:placeholder|:label)=["']([^"']*(?<![\w$])\$?t\(.*?\))["']""", re.IGNORECASE)
    CALL_PATTERN = re.compile(r"""(?<![\w$])(\$t|t)\(['"]([^'"]+)['"](,\s*([^)]*))?\)""")

    def __init__(self, dictionary: Dict[str, str]):
        """
        Initialize the rewriter.

        Args:
            dictionary: Mapping of translation key to default value
        """
        self.dictionary = dictionary

    def rewrite_call(self, match: "re.Match[str]") -> Optional[str]:
        """
        Build the replacement for a single call.

        Returns:
            New call text, or None if the call is left as it is
        """
        func_name = match.group(1)
        key = match.group(2)
        param = match.group(4) or ""

        if key not in self.dictionary:
            return None

        default_value = format_default_value(self.dictionary[key])

        if param == "":
            return f"{func_name}('{key}', {default_value})"
        if not param.startswith(LITERAL_QUOTES):
            return f"{func_name}('{key}', {default_value}, {param})"
        return None

    def rewrite_content(self, content: str) -> Tuple[str, bool]:
        """
        Rewrite every eligible call in a file's text.

        Args:
            content: Source text

        Returns:
            Tuple of (new text, whether anything changed)
        """
        modified = False

        def replace_call(match: "re.Match[str]") -> str:
            nonlocal modified
            replacement = self.rewrite_call(match)
            if replacement is None:
                return match.group(0)
            modified = True
            return replacement

        def replace_attribute(match: "re.Match[str]") -> str:
            return self.CALL_PATTERN.sub(replace_call, match.group(0))

        new_content = self.ATTRIBUTE_PATTERN.sub(replace_attribute, content)
        return new_content, modified

    def rewrite_file(self, file_path: Path, dry_run: bool = False) -> bool:
        """
        Rewrite a single file in place if any call changed.

        Args:
            file_path: Source file
            dry_run: Report the change without writing

        Returns:
            True if the file was (or would be) modified

        Raises:
            RewriteError: If the file cannot be read or written
        """
        try:
            with open(file_path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
                content = f.read()
        except OSError as e:
            raise RewriteError(f"Failed to read file {file_path}: {e}") from e

        new_content, modified = self.rewrite_content(content)
        if not modified:
            return False

        if not dry_run:
            try:
                atomic_write(file_path, new_content, newline="", errors="surrogateescape")
            except OSError as e:
                raise RewriteError(f"Failed to write modified content to file {file_path}: {e}") from e

        return True

    def rewrite_directory_iter(self, directory: Path, exclude_dirs: Optional[List[str]] = None, dry_run: bool = False) -> Iterator[Path]:
        """
        Rewrite every source file below a directory (iterator version).

        Stops at the first file that cannot be read or written; files modified
        before that point stay modified.

        Args:
            directory: Root directory
            exclude_dirs: Directory names to skip
            dry_run: Report changes without writing

        Yields:
            Each modified file, in traversal order

        Raises:
            ValueError: If directory doesn't exist or is not a directory
            RewriteError: If a file cannot be read or written
        """
        for file_path in find_source_files_iter(directory, exclude_dirs):
            if self.rewrite_file(file_path, dry_run=dry_run):
                yield file_path

    def rewrite_directory(self, directory: Path, exclude_dirs: Optional[List[str]] = None, dry_run: bool = False) -> List[Path]:
        """Rewrite every source file below a directory and return the modified files."""
        return list(self.rewrite_directory_iter(directory, exclude_dirs, dry_run=dry_run))

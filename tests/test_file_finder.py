"""
Tests for source file discovery.
"""

import tempfile
import unittest
from pathlib import Path

from vuei18n.utils.file_finder import find_source_files, is_source_file


class TestFindSourceFiles(unittest.TestCase):
    """Test recursive discovery by extension."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        for name in ["a.js", "b.ts", "c.vue", "d.jsx", "e.py", "f.json", "g.d.ts.map", "sub/h.vue", "node_modules/lib/i.js"]:
            path = self.root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")
        # A directory that looks like a source file is not yielded
        (self.root / "folder.js").mkdir()

    def tearDown(self):
        self.tmp.cleanup()

    def relative(self, files):
        return [f.relative_to(self.root).as_posix() for f in files]

    def test_extensions_and_recursion(self):
        files = find_source_files(self.root)
        self.assertEqual(self.relative(files), ["a.js", "b.ts", "c.vue", "d.jsx", "node_modules/lib/i.js", "sub/h.vue"])

    def test_exclude_dirs(self):
        files = find_source_files(self.root, exclude_dirs=["node_modules"])
        self.assertEqual(self.relative(files), ["a.js", "b.ts", "c.vue", "d.jsx", "sub/h.vue"])

    def test_missing_directory(self):
        with self.assertRaises(ValueError):
            find_source_files(self.root / "missing")

    def test_not_a_directory(self):
        with self.assertRaises(ValueError):
            find_source_files(self.root / "a.js")

    def test_is_source_file(self):
        self.assertTrue(is_source_file(Path("App.vue")))
        self.assertTrue(is_source_file(Path("index.d.ts")))
        self.assertFalse(is_source_file(Path("style.css")))
        self.assertFalse(is_source_file(Path("types.tsx")))


if __name__ == "__main__":
    unittest.main()

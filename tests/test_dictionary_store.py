"""
Tests for dictionary JSON loading and saving.
"""

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from vuei18n.utils.dictionary_store import DictionaryError, dump_dictionary, load_dictionary, parse_dictionary, save_dictionary


class TestParseDictionary(unittest.TestCase):
    """Test validation of dictionary JSON."""

    def test_flat_object(self):
        self.assertEqual(parse_dictionary('{"a": "1", "b": ""}'), {"a": "1", "b": ""})

    def test_invalid_json(self):
        with self.assertRaises(DictionaryError):
            parse_dictionary('{"a": ')

    def test_top_level_not_object(self):
        with self.assertRaises(DictionaryError):
            parse_dictionary('["a"]')

    def test_non_string_value(self):
        with self.assertRaises(DictionaryError) as ctx:
            parse_dictionary('{"a": "1", "nested": {"b": "2"}}')
        self.assertIn("nested", str(ctx.exception))

    def test_error_is_value_error(self):
        self.assertTrue(issubclass(DictionaryError, ValueError))


class TestDictionaryFiles(unittest.TestCase):
    """Test reading and writing dictionary files."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_dictionary(self.root / "missing.json")

    def test_save_sorted_with_newline(self):
        path = self.root / "lang.json"
        save_dictionary({"b": "2", "a": "1"}, path)
        self.assertEqual(path.read_text(encoding="utf-8"), '{\n  "a": "1",\n  "b": "2"\n}\n')

    def test_non_ascii_kept(self):
        self.assertEqual(dump_dictionary({"title": "Xin chào"}), '{\n  "title": "Xin chào"\n}\n')

    def test_empty_dictionary(self):
        self.assertEqual(dump_dictionary({}), "{}\n")

    def test_round_trip(self):
        path = self.root / "lang.json"
        data = {"greeting": "Hello", "bye": "", "html": "<b>x</b>"}
        save_dictionary(data, path)
        self.assertEqual(load_dictionary(path), data)

    def test_no_temp_files_left(self):
        path = self.root / "lang.json"
        save_dictionary({"a": "1"}, path)
        save_dictionary({"a": "2"}, path)
        self.assertEqual([p.name for p in self.root.iterdir()], ["lang.json"])

    def test_symlinked_file_target_updated(self):
        shared = self.root / "shared"
        shared.mkdir()
        target = shared / "real.json"
        target.write_text("{}", encoding="utf-8")
        link = self.root / "lang.json"
        link.symlink_to(target)

        save_dictionary({"a": "1"}, link)

        self.assertTrue(link.is_symlink())
        self.assertEqual(load_dictionary(target), {"a": "1"})

    def test_write_failure_keeps_old_file(self):
        path = self.root / "lang.json"
        path.write_text('{"a": "1"}', encoding="utf-8")

        with mock.patch("vuei18n.utils.file_writer.os.replace", side_effect=OSError(28, "No space left on device")):
            with self.assertRaises(OSError):
                save_dictionary({"b": "2"}, path)

        self.assertEqual(path.read_text(encoding="utf-8"), '{"a": "1"}')
        self.assertEqual([p.name for p in self.root.iterdir()], ["lang.json"])


if __name__ == "__main__":
    unittest.main()

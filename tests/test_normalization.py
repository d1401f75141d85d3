import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_ats.normalize import non_empty_lines, normalize_text  # noqa: E402


class NormalizationTests(unittest.TestCase):
    def test_line_endings_are_unified(self):
        self.assertEqual(normalize_text("a\r\nb\rc"), "a\nb\nc")

    def test_non_printable_characters_are_dropped(self):
        self.assertEqual(normalize_text("a\x00béc\x7f"), "abc")

    def test_blank_line_runs_and_inline_spaces_collapse(self):
        self.assertEqual(normalize_text("a\n\n\n\nb"), "a\n\nb")
        self.assertEqual(normalize_text("a   \t b"), "a b")

    def test_outer_whitespace_is_trimmed(self):
        self.assertEqual(normalize_text("  \n Jane Doe \n\n"), "Jane Doe")

    def test_garbage_input_never_raises(self):
        self.assertEqual(normalize_text(None), "")
        self.assertEqual(normalize_text(b"\x00\x01".decode("latin-1")), "")
        garbled = bytes(range(256)).decode("latin-1")
        self.assertTrue(all(ch in "\t\n" or 0x20 <= ord(ch) <= 0x7E for ch in normalize_text(garbled)))

    def test_non_empty_lines_strips_and_skips_blanks(self):
        self.assertEqual(non_empty_lines(" Jane \n\n Doe "), ["Jane", "Doe"])


if __name__ == "__main__":
    unittest.main()

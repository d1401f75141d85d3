import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_ats.core.scoring_config import (  # noqa: E402
    get_scoring_config,
    get_scoring_value,
    load_scoring_config,
)


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        self.assertEqual(get_scoring_value("weights.keywords"), 60)
        self.assertEqual(get_scoring_value("score.base"), 35)
        self.assertEqual(get_scoring_value("limits.missing_keywords"), 12)

    def test_missing_paths_fall_back_to_default(self):
        self.assertEqual(get_scoring_value("weights.unknown", 7), 7)
        self.assertEqual(get_scoring_value("weights.keywords.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))

    def test_config_is_read_only_and_cached(self):
        config = get_scoring_config()
        self.assertIs(config, get_scoring_config())
        with self.assertRaises(TypeError):
            config["score"] = {}  # type: ignore[index]

    def test_invalid_files_raise_runtime_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "absent.yaml"
            with self.assertRaises(RuntimeError):
                load_scoring_config(missing)

            broken = Path(tmp) / "broken.yaml"
            broken.write_text("score: [1, 2\n", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_scoring_config(broken)

            listing = Path(tmp) / "list.yaml"
            listing.write_text("- 1\n- 2\n", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_scoring_config(listing)


if __name__ == "__main__":
    unittest.main()

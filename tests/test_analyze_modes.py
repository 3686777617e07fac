import io
import os
import sys
import unittest
from unittest.mock import patch

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)
sys.path.insert(0, os.path.join(ROOT, "scripts"))

import analyze_modes


class TestAnalyzeModesCli(unittest.TestCase):
    def _run(self, argv):
        with patch("sys.stdout", new_callable=io.StringIO) as out, \
             patch("sys.stderr", new_callable=io.StringIO) as err:
            code = analyze_modes.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_rotation_table(self):
        code, out, _ = self._run(["1", "2", "3", "4", "5", "6", "7"])
        self.assertEqual(code, 0)
        for name in ("Ionian", "Dorian", "Locrian"):
            self.assertIn(name, out)

    def test_single(self):
        code, out, _ = self._run(["1", "3", "5", "--single"])
        self.assertEqual(code, 0)
        self.assertIn("Ionian no2 no4 no6 no7", out)
        self.assertNotIn("ROTATIONS", out)

    def test_notes_with_tonic(self):
        code, out, _ = self._run(["--notes", "A", "C", "E", "--tonic", "A", "--single"])
        self.assertEqual(code, 0)
        self.assertIn("Dorian no2 no4 no6 no7b", out)

    def test_catalog(self):
        code, out, _ = self._run(["--notes", "C", "E", "G", "--catalog"])
        self.assertEqual(code, 0)
        self.assertIn("Major Altered", out)

    def test_invalid_degree(self):
        code, _, err = self._run(["1", "9"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid scale degree: '9'", err)

    def test_degrees_and_notes_together(self):
        code, _, err = self._run(["1", "--notes", "C"])
        self.assertEqual(code, 1)
        self.assertIn("not both", err)

    def test_empty_selection_message(self):
        with patch("analyze_modes.analyze_all_rotations", return_value=[]) as mock_rot:
            code, out, _ = self._run(["1"])
        mock_rot.assert_called_once_with(["1"])
        self.assertEqual(code, 0)
        self.assertIn("empty selection", out)


if __name__ == "__main__":
    unittest.main()

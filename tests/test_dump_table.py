from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
sys.path.append(str(Path(__file__).resolve().parents[1] / "tools"))

from dump_table import dump_table


class DumpTableTests(unittest.TestCase):
    def test_one_line_per_element(self) -> None:
        lines = dump_table(12)
        self.assertEqual(len(lines), 12)
        self.assertTrue(lines[0].startswith("  1 "))
        self.assertTrue(lines[0].endswith(": 1s[↿]"))

    def test_single_element_shortened(self) -> None:
        lines = dump_table(30, shorten=True, element="26")
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].endswith(": [Ar] 3d6 4s2"))

    def test_unknown_element(self) -> None:
        with self.assertRaises(SystemExit):
            dump_table(5, element="40")


if __name__ == "__main__":
    unittest.main()

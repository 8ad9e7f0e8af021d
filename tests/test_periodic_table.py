from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from orbfill.chem.elements import load_reference_data
from orbfill.chem.periodic_table import (
    InvalidAtomicNumber,
    PeriodicTable,
    create_element,
    table_position,
)


SAMPLE_REFERENCE = [
    {"symbol": "H", "name": "Hydrogen", "localizedName": "Vodík"},
    {"symbol": "He", "name": "Helium", "localizedName": "Helium"},
    {"symbol": "Li", "name": "Lithium", "localizedName": "Lithium"},
    {"symbol": "Be", "name": "Beryllium", "localizedName": "Beryllium"},
    {"symbol": "B", "name": "Boron", "localizedName": "Bor"},
    {"symbol": "C", "name": "Carbon", "localizedName": "Uhlík"},
    {"symbol": "N", "name": "Nitrogen", "localizedName": "Dusík"},
    {"symbol": "O", "name": "Oxygen", "localizedName": "Kyslík"},
    {"symbol": "F", "name": "Fluorine", "localizedName": "Fluor"},
    {"symbol": "Ne", "name": "Neon", "localizedName": "Neon"},
]


class ElementTests(unittest.TestCase):
    def test_invalid_atomic_numbers(self) -> None:
        for bad in (-1, 1.5, "3", None, True):
            with self.assertRaises(InvalidAtomicNumber):
                create_element(bad, SAMPLE_REFERENCE)

    def test_invalid_atomic_number_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            create_element(-1, SAMPLE_REFERENCE)

    def test_integral_float_is_accepted(self) -> None:
        element = create_element(3.0, SAMPLE_REFERENCE)
        self.assertEqual(element.atomic_number, 3)
        self.assertIsInstance(element.atomic_number, int)
        self.assertEqual(element.symbol, "Li")

    def test_reference_fields(self) -> None:
        element = create_element(8, SAMPLE_REFERENCE)
        self.assertEqual(element.symbol, "O")
        self.assertEqual(element.name, "Oxygen")
        self.assertEqual(element.localized_name, "Kyslík")
        self.assertFalse(element.is_placeholder)
        self.assertEqual(element.electron_configuration.electrons, 8)

    def test_placeholder_for_missing_reference(self) -> None:
        element = create_element(11, SAMPLE_REFERENCE)
        self.assertTrue(element.is_placeholder)
        self.assertEqual((element.symbol, element.name, element.localized_name), ("Unk", "Unknown", "Neznámý"))
        self.assertEqual(element.electron_configuration.electrons, 11)

    def test_zero(self) -> None:
        element = create_element(0, SAMPLE_REFERENCE)
        self.assertTrue(element.is_placeholder)
        self.assertEqual(len(element.electron_configuration), 0)

    def test_string_form(self) -> None:
        self.assertEqual(str(create_element(1, SAMPLE_REFERENCE)), "H: 1s[↿]")
        self.assertEqual(create_element(9, SAMPLE_REFERENCE).notation(shorten=True), "F: [He] 2s2 2p5")


class PeriodicTableTests(unittest.TestCase):
    def test_every_slot_populated(self) -> None:
        table = PeriodicTable(10, SAMPLE_REFERENCE)
        self.assertEqual(len(table), 10)
        for index in range(10):
            self.assertEqual(table[index].atomic_number, index + 1)
        self.assertEqual([e.symbol for e in table][:3], ["H", "He", "Li"])

    def test_longer_than_reference(self) -> None:
        table = PeriodicTable(12, SAMPLE_REFERENCE)
        self.assertEqual(table[11].atomic_number, 12)
        self.assertTrue(table[11].is_placeholder)

    def test_empty_table(self) -> None:
        self.assertEqual(len(PeriodicTable(0, SAMPLE_REFERENCE)), 0)

    def test_invalid_length(self) -> None:
        for bad in (-1, 2.5, "3"):
            with self.assertRaises(ValueError):
                PeriodicTable(bad, SAMPLE_REFERENCE)

    def test_register_overwrites(self) -> None:
        table = PeriodicTable(3, SAMPLE_REFERENCE)
        replacement = create_element(2, [])
        table.register(replacement)
        self.assertIs(table[1], replacement)
        self.assertEqual(len(table), 3)

    def test_register_out_of_range(self) -> None:
        table = PeriodicTable(3, SAMPLE_REFERENCE)
        with self.assertRaises(IndexError):
            table.register(create_element(4, SAMPLE_REFERENCE))
        with self.assertRaises(IndexError):
            table.register(create_element(0, SAMPLE_REFERENCE))

    def test_lookup(self) -> None:
        table = PeriodicTable(10, SAMPLE_REFERENCE)
        self.assertEqual(table.by_atomic_number(6).symbol, "C")
        self.assertEqual(table.by_symbol("ne").atomic_number, 10)
        with self.assertRaises(KeyError):
            table.by_symbol("Xx")
        with self.assertRaises(KeyError):
            table.by_atomic_number(11)

    def test_default_reference(self) -> None:
        if not load_reference_data():
            self.skipTest("element data provider unavailable")
        table = PeriodicTable(20)
        self.assertEqual(table[0].symbol, "H")
        self.assertEqual(table[0].localized_name, "Vodík")
        self.assertEqual(table.by_symbol("Ca").atomic_number, 20)


class TablePositionTests(unittest.TestCase):
    def position(self, z: int):
        return table_position(create_element(z, []))

    def test_s_and_p_blocks(self) -> None:
        self.assertEqual(self.position(1), (0, 0))
        self.assertEqual(self.position(2), (0, 17))
        self.assertEqual(self.position(4), (1, 1))
        self.assertEqual(self.position(5), (1, 12))
        self.assertEqual(self.position(10), (1, 17))
        self.assertEqual(self.position(118), (6, 17))

    def test_d_block(self) -> None:
        self.assertEqual(self.position(21), (3, 2))
        self.assertEqual(self.position(26), (3, 7))
        self.assertEqual(self.position(30), (3, 11))
        self.assertEqual(self.position(71), (5, 2))

    def test_f_block(self) -> None:
        self.assertEqual(self.position(57), (8, 2))
        self.assertEqual(self.position(70), (8, 15))
        self.assertEqual(self.position(89), (9, 2))

    def test_no_position(self) -> None:
        self.assertIsNone(self.position(0))

    def test_positions_unique(self) -> None:
        cells = [self.position(z) for z in range(1, 119)]
        self.assertEqual(len(set(cells)), 118)


if __name__ == "__main__":
    unittest.main()

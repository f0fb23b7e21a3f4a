import unittest

from strprep.mapping import MappingTable
from strprep.profiles import CASE_FOLDING
from strprep.profiles import MAP_TO_NOTHING


class TestMappingTable(unittest.TestCase):
    def setUp(self):
        self.table = MappingTable([
            (0xDF, (0x73, 0x73)),
            (0x41, (0x61,)),
            (0xAD, ()),
        ])

    def test_map(self):
        self.assertEqual(self.table.map(0x41), (0x61,))
        self.assertEqual(self.table.map(0xDF), (0x73, 0x73))
        self.assertEqual(self.table.map(0xAD), ())
        self.assertIsNone(self.table.map(0x42))
        self.assertIsNone(self.table.map(0x10FFFF))
        self.assertIsNone(self.table.map(0))

    def test_sorted(self):
        self.assertEqual([cp for cp, _ in self.table], [0x41, 0xAD, 0xDF])
        self.assertEqual(len(self.table), 3)

    def test_contains(self):
        self.assertIn(0xAD, self.table)
        self.assertNotIn(0x61, self.table)

    def test_duplicate_keys(self):
        with self.assertRaises(ValueError):
            MappingTable([(0x41, (0x61,)), (0x41, (0x62,))])

    def test_invalid_codepoint(self):
        with self.assertRaises(ValueError):
            MappingTable([(0x110000, (0x61,))])

    def test_case_folding_table(self):
        self.assertEqual(len(CASE_FOLDING), 1371)
        self.assertEqual(CASE_FOLDING.map(ord("A")), (ord("a"),))
        self.assertEqual(CASE_FOLDING.map(0x00DF), (0x73, 0x73))
        self.assertEqual(CASE_FOLDING.map(0x0130), (0x69, 0x0307))
        self.assertEqual(CASE_FOLDING.map(0x037A), (0x20, 0x03B9))
        self.assertEqual(CASE_FOLDING.map(0x10400), (0x10428,))
        self.assertEqual(CASE_FOLDING.map(0x1D7BB), (0x03C3,))
        self.assertIsNone(CASE_FOLDING.map(ord("a")))

    def test_map_to_nothing_table(self):
        for codepoint in (0x00AD, 0x034F, 0x180B, 0x200D, 0xFE0F, 0xFEFF):
            self.assertTrue(MAP_TO_NOTHING.contains(codepoint))

        self.assertFalse(MAP_TO_NOTHING.contains(0x200E))

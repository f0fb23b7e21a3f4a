import unittest

from strprep.ranges import RangeTable


class TestRangeTable(unittest.TestCase):
    def setUp(self):
        self.table = RangeTable([(10, 20), (30, 40)])

    def test_contains(self):
        self.assertFalse(self.table.contains(9))
        self.assertTrue(self.table.contains(10))
        self.assertTrue(self.table.contains(15))
        self.assertTrue(self.table.contains(20))
        self.assertFalse(self.table.contains(21))
        self.assertFalse(self.table.contains(25))
        self.assertTrue(self.table.contains(30))
        self.assertTrue(self.table.contains(40))
        self.assertFalse(self.table.contains(41))

    def test_contains_operator(self):
        self.assertIn(10, self.table)
        self.assertNotIn(25, self.table)
        self.assertNotIn("a", self.table)

    def test_search(self):
        self.assertEqual(self.table.search(15), 0)
        self.assertEqual(self.table.search(30), 1)
        self.assertEqual(self.table.search(40), 1)
        self.assertEqual(self.table.search(5), -1)
        self.assertEqual(self.table.search(25), -2)
        self.assertEqual(self.table.search(45), -3)

    def test_empty_table(self):
        table = RangeTable()
        self.assertEqual(table.search(0), -1)
        self.assertEqual(table.search(0x10FFFF), -1)
        self.assertFalse(table.contains(0))
        self.assertEqual(len(table), 0)

    def test_single_codepoint_ranges(self):
        table = RangeTable([(0x40, 0x40), (0x3000, 0x3000)])
        self.assertTrue(table.contains(0x40))
        self.assertFalse(table.contains(0x3F))
        self.assertFalse(table.contains(0x41))
        self.assertTrue(table.contains(0x3000))

    def test_invalid_ranges(self):
        tests = [
            [(30, 40), (10, 20)],
            [(10, 20), (20, 30)],
            [(20, 10)],
            [(-1, 5)],
            [(0x10FFFF, 0x110000)],
        ]

        for ranges in tests:
            with self.assertRaises(ValueError):
                RangeTable(ranges)

    def test_union(self):
        table = RangeTable.union(RangeTable([(1, 5)]),
                                 RangeTable([(6, 8), (20, 30)]),
                                 RangeTable([(25, 40)]))
        self.assertEqual(list(table), [(1, 8), (20, 40)])

    def test_union_keeps_gaps(self):
        table = RangeTable.union(self.table, RangeTable([(50, 60)]))
        self.assertEqual(list(table), [(10, 20), (30, 40), (50, 60)])

    def test_from_codepoints(self):
        table = RangeTable.from_codepoints([3, 1, 2, 10, 2])
        self.assertEqual(list(table), [(1, 3), (10, 10)])

    def test_equality(self):
        self.assertEqual(self.table, RangeTable([(10, 20), (30, 40)]))
        self.assertNotEqual(self.table, RangeTable([(10, 20)]))
        self.assertEqual(hash(self.table),
                         hash(RangeTable([(10, 20), (30, 40)])))

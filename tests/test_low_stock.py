import unittest

from fakes import item

from stockmetrics.core.low_stock import find_low_stock, find_out_of_stock, is_low_stock


class LowStockTest(unittest.TestCase):
    def test_boundary_is_inclusive(self):
        self.assertTrue(is_low_stock(10, 10))
        self.assertTrue(is_low_stock(9, 10))
        self.assertFalse(is_low_stock(11, 10))

    def test_filter_keeps_input_order(self):
        items = [
            item(1, "At point", reorder_point=10),
            item(2, "Above", reorder_point=10),
            item(3, "Below", reorder_point=10),
        ]
        quantities = {1: 10, 2: 11, 3: 9}
        results = find_low_stock(items, quantities)
        self.assertEqual([entry.id for entry in results], [1, 3])
        self.assertEqual(results[0].current_quantity, 10)
        self.assertEqual(results[0].effective_reorder_point, 10)

    def test_missing_reorder_point_uses_default(self):
        items = [item(1, "No threshold"), item(2, "Zero threshold", reorder_point=0)]
        results = find_low_stock(items, {1: 4, 2: 4}, default_reorder_point=5)
        self.assertEqual([entry.id for entry in results], [1])
        self.assertEqual(results[0].effective_reorder_point, 5)

    def test_out_of_stock_and_oversold_flags(self):
        items = [
            item(1, "Empty", reorder_point=3),
            item(2, "Oversold", reorder_point=3),
            item(3, "Low", reorder_point=3),
            item(4, "Never stocked", reorder_point=3),
        ]
        results = find_low_stock(items, {1: 0, 2: -2, 3: 1})
        flags = {entry.id: (entry.out_of_stock, entry.oversold) for entry in results}
        self.assertEqual(flags[1], (True, False))
        self.assertEqual(flags[2], (False, True))
        self.assertEqual(flags[3], (False, False))
        self.assertEqual(flags[4], (True, False))
        self.assertEqual([entry.id for entry in find_out_of_stock(results)], [1, 4])


if __name__ == "__main__":
    unittest.main()

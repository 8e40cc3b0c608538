import unittest

from kanban.Indicator import Indicator, indicatorsFor, indicatorsForBoard, tailIndicator
from kanban.Resolver import DISTANCE_OFFSET, nearestFromPositions, resolveNearest
from kanban.Store import DEFAULT_COLUMNS, TAIL_SENTINEL, Card, Store


def layout_from(positions):
    return lambda ind: positions[ind.beforeId]


class IndicatorRegistryTestCase(unittest.TestCase):
    def test_one_indicator_per_card_then_tail(self):
        store = Store.fromSeed()
        indicators = indicatorsFor(store, "todo")
        self.assertEqual(["5", "6", "7", TAIL_SENTINEL], [i.beforeId for i in indicators])
        self.assertTrue(all(i.column == "todo" for i in indicators))
        self.assertTrue(indicators[-1].isTail())
        self.assertFalse(any(i.highlighted for i in indicators))

    def test_empty_column_has_only_tail(self):
        self.assertEqual((tailIndicator("done"),), indicatorsFor(Store(), "done"))

    def test_board_registry_covers_every_column(self):
        board = indicatorsForBoard(Store.fromSeed(), DEFAULT_COLUMNS)
        self.assertEqual({"backlog", "todo", "doing", "done"}, set(board))
        self.assertEqual(5, len(board["backlog"]))
        self.assertEqual(2, len(board["done"]))


class NearestIndicatorTestCase(unittest.TestCase):
    def test_tail_fallback_when_pointer_below_everything(self):
        store = Store([Card("a", "A", "c"), Card("b", "B", "c")])
        indicators = indicatorsFor(store, "c")
        topOf = layout_from({"a": 10, "b": 60, TAIL_SENTINEL: 110})
        resolved = resolveNearest(500, indicators, topOf, offset=50)
        self.assertTrue(resolved.isTail())
        self.assertEqual("c", resolved.column)

    def test_tail_fallback_without_tail_in_list(self):
        indicators = [Indicator("c", "a"), Indicator("c", "b"), Indicator("c", "d")]
        topOf = layout_from({"a": 10, "b": 60, "d": 110})
        resolved = resolveNearest(500, indicators, topOf, offset=50)
        self.assertEqual(tailIndicator("c"), resolved)

    def test_boundary_flip_at_adjusted_midpoint(self):
        indicators = [Indicator("c", "a")]
        topOf = layout_from({"a": 100})
        self.assertEqual("a", resolveNearest(149, indicators, topOf, offset=50).beforeId)
        self.assertTrue(resolveNearest(151, indicators, topOf, offset=50).isTail())
        self.assertTrue(resolveNearest(150, indicators, topOf, offset=50).isTail())

    def test_picks_nearest_indicator_below_pointer(self):
        store = Store([Card("a", "A", "c"), Card("b", "B", "c"), Card("d", "D", "c")])
        indicators = indicatorsFor(store, "c")
        topOf = layout_from({"a": 0, "b": 100, "d": 200, TAIL_SENTINEL: 300})
        self.assertEqual("a", resolveNearest(10, indicators, topOf).beforeId)
        self.assertEqual("b", resolveNearest(60, indicators, topOf).beforeId)
        self.assertEqual("d", resolveNearest(160, indicators, topOf).beforeId)
        self.assertTrue(resolveNearest(260, indicators, topOf).isTail())

    def test_ties_keep_first_found(self):
        self.assertEqual(0, nearestFromPositions(10, [40, 40, 90], offset=0))

    def test_positions_scan_returns_none_below_all(self):
        self.assertIsNone(nearestFromPositions(500, [10, 60, 110], offset=DISTANCE_OFFSET))
        self.assertEqual(1, nearestFromPositions(100, [10, 60, 110], offset=DISTANCE_OFFSET))
        self.assertEqual(2, nearestFromPositions(115, [10, 60, 110], offset=DISTANCE_OFFSET))

    def test_empty_indicator_list_returns_tail(self):
        with self.assertLogs("kanban.Resolver", level="ERROR"):
            resolved = resolveNearest(10, [], lambda ind: 0, column="todo")
        self.assertEqual(tailIndicator("todo"), resolved)


if __name__ == "__main__":
    unittest.main()

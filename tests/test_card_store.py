import unittest

from kanban.Store import DEFAULT_CARDS, TAIL_SENTINEL, Card, Store


def ids(cards):
    return [c.id for c in cards]


class CardStoreTestCase(unittest.TestCase):
    def setUp(self):
        self.store = Store.fromSeed()

    def test_seed_has_ten_cards_in_four_columns(self):
        self.assertEqual(10, len(self.store))
        self.assertEqual(["1", "2", "3", "4"], ids(self.store.cardsInColumn("backlog")))
        self.assertEqual(["5", "6", "7"], ids(self.store.cardsInColumn("todo")))
        self.assertEqual(["8", "9"], ids(self.store.cardsInColumn("doing")))
        self.assertEqual(["10"], ids(self.store.cardsInColumn("done")))

    def test_seed_titles_are_kept_verbatim(self):
        self.assertEqual("Research  about Mongo DB", self.store.findCard("5").title)
        self.assertEqual("React Hooks done.", self.store.findCard("10").title)

    def test_cards_in_column_preserves_store_order(self):
        store = Store([
            Card("a", "A", "x"),
            Card("b", "B", "y"),
            Card("c", "C", "x"),
            Card("d", "D", "y"),
            Card("e", "E", "x"),
        ])
        self.assertEqual(["a", "c", "e"], ids(store.cardsInColumn("x")))
        self.assertEqual(["b", "d"], ids(store.cardsInColumn("y")))
        self.assertEqual([], ids(store.cardsInColumn("z")))

    def test_cross_column_move_relabels_column(self):
        moved = self.store.moveCard("3", "todo", "6")
        card = moved.findCard("3")
        self.assertEqual("todo", card.column)
        self.assertEqual("Complete Tasks related hooks", card.title)
        order = ids(moved.allCards())
        self.assertEqual(order.index("6") - 1, order.index("3"))
        self.assertEqual(["5", "3", "6", "7"], ids(moved.cardsInColumn("todo")))
        self.assertEqual(["1", "2", "4"], ids(moved.cardsInColumn("backlog")))

    def test_move_before_itself_is_noop(self):
        moved = self.store.moveCard("3", "backlog", "3")
        self.assertIs(self.store, moved)
        moved = self.store.moveCard("3", "todo", "3")
        self.assertEqual(self.store, moved)
        self.assertEqual("backlog", moved.findCard("3").column)

    def test_move_to_current_slot_keeps_store(self):
        self.assertIs(self.store, self.store.moveCard("1", "backlog", "2"))
        self.assertIs(self.store, self.store.moveCard("10", "done", TAIL_SENTINEL))
        moved = self.store.moveCard("1", "todo", "2")
        self.assertIsNot(self.store, moved)
        self.assertEqual("todo", moved.findCard("1").column)

    def test_move_to_tail_appends_to_global_store(self):
        moved = self.store.moveCard("1", "done", TAIL_SENTINEL)
        self.assertEqual("1", moved.allCards()[-1].id)
        self.assertEqual(["10", "1"], ids(moved.cardsInColumn("done")))

    def test_move_within_column_reorders(self):
        moved = self.store.moveCard("4", "backlog", "2")
        self.assertEqual(["1", "4", "2", "3"], ids(moved.cardsInColumn("backlog")))

    def test_move_unknown_card_or_target_is_noop(self):
        self.assertIs(self.store, self.store.moveCard("missing", "todo", "6"))
        self.assertIs(self.store, self.store.moveCard("3", "todo", "stale"))

    def test_move_is_deterministic(self):
        first = self.store.moveCard("8", "backlog", "2")
        second = self.store.moveCard("8", "backlog", "2")
        self.assertEqual(first, second)
        self.assertEqual(ids(first.allCards()), ids(second.allCards()))

    def test_operations_do_not_touch_original(self):
        before = list(self.store.allCards())
        self.store.moveCard("3", "todo", "6")
        self.store.removeCard("7")
        self.store.addCard("done", "x", cardId="new")
        self.assertEqual(before, list(self.store.allCards()))

    def test_remove_card_removes_exactly_one(self):
        removed = self.store.removeCard("7")
        self.assertEqual(9, len(removed))
        self.assertIsNone(removed.findCard("7"))
        expected = [c for c in DEFAULT_CARDS if c.id != "7"]
        self.assertEqual(expected, list(removed.allCards()))

    def test_remove_unknown_card_is_noop(self):
        self.assertIs(self.store, self.store.removeCard("404"))

    def test_add_card_appends_to_end(self):
        added = self.store.addCard("backlog", "Write tests", cardId="11")
        self.assertEqual(Card("11", "Write tests", "backlog"), added.allCards()[-1])
        self.assertEqual(["1", "2", "3", "4", "11"], ids(added.cardsInColumn("backlog")))

    def test_add_card_generates_unique_ids(self):
        store = Store().addCard("todo", "a").addCard("todo", "b")
        a, b = store.allCards()
        self.assertTrue(a.id)
        self.assertNotEqual(a.id, b.id)


if __name__ == "__main__":
    unittest.main()

import unittest

from kanban.CommandLine import RowLayout
from kanban.Events import BoardEvent, CardAdded, CardDiscarded, CardMoved, DragCancelled
from kanban.Session import DragController
from kanban.Store import TAIL_SENTINEL, Store
from kanban_ui.adapter import BoardAdapter


class BoardAdapterTestCase(unittest.TestCase):
    def test_snapshot_idle_board(self):
        controller = DragController()
        vm = BoardAdapter.snapshot(controller)
        self.assertEqual(["backlog", "todo", "doing", "done"], [c.id for c in vm.columns])
        self.assertEqual([4, 3, 2, 1], [c.card_count for c in vm.columns])
        self.assertEqual("In progress", vm.column("doing").title)
        self.assertEqual("#60a5fa", vm.column("todo").accent)
        self.assertFalse(vm.discard_armed)
        self.assertIsNone(vm.dragging_card_id)
        todo = vm.column("todo")
        self.assertEqual(["5", "6", "7", TAIL_SENTINEL], [i.before_id for i in todo.indicators])
        self.assertFalse(any(i.highlighted for c in vm.columns for i in c.indicators))

    def test_snapshot_empty_store(self):
        vm = BoardAdapter.snapshot(DragController(store=Store()))
        for col in vm.columns:
            self.assertEqual(0, col.card_count)
            self.assertEqual(1, len(col.indicators))
        self.assertIsNone(vm.column("archive"))

    def test_snapshot_during_drag(self):
        controller = DragController()
        controller.setLayoutProvider(RowLayout(controller))
        controller.startDrag("8")
        controller.dragOver("done", 20)
        controller.discardOver()
        vm = BoardAdapter.snapshot(controller)
        self.assertEqual("8", vm.dragging_card_id)
        self.assertTrue(vm.discard_armed)
        self.assertTrue(vm.column("done").highlighted)
        self.assertFalse(vm.column("doing").highlighted)
        self.assertEqual([True, False], [i.highlighted for i in vm.column("done").indicators])
        self.assertEqual([True, False], [c.dragging for c in vm.column("doing").cards])

    def test_event_mapping(self):
        move_evt = BoardAdapter.event_to_animation(CardMoved("3", "backlog", "todo", "6"))
        discard_evt = BoardAdapter.event_to_animation(CardDiscarded("7", "todo"))
        add_evt = BoardAdapter.event_to_animation(CardAdded("11", "done"))
        cancel_evt = BoardAdapter.event_to_animation(DragCancelled("2"))
        other_evt = BoardAdapter.event_to_animation(BoardEvent())

        self.assertEqual("MOVE", move_evt.type)
        self.assertEqual("todo", move_evt.payload["dest"])
        self.assertEqual("DISCARD", discard_evt.type)
        self.assertEqual("ADD", add_evt.type)
        self.assertEqual("CANCEL", cancel_evt.type)
        self.assertEqual("UNKNOWN", other_evt.type)


if __name__ == "__main__":
    unittest.main()

from kanban.Indicator import Indicator
from kanban_ui.ui_config import (
    ADD_BUTTON_HEIGHT,
    CARD_HEIGHT,
    COLUMN_GAP_RATIO,
    COLUMN_WIDTH_RATIO,
    DISCARD_TOP_GAP,
    HEADER_HEIGHT,
    INDICATOR_HEIGHT,
    SIDE_MARGIN_RATIO,
    SLOT_STEP,
    TOP_MARGIN_RATIO,
)
from kanban_ui.view_model import BoardViewModel


def _contains(rect, x, y):
    x1, y1, x2, y2 = rect
    return x1 <= x <= x2 and y1 <= y <= y2


class BoardLayout:
    """
    Screen geometry of the board. Calling the layout with an indicator returns
    that indicator's top edge, which makes it the controller's layout provider.
    Card order comes from the last view model passed to update().
    """

    def __init__(self, width=1200, height=760, column_ids=()):
        self.width = width
        self.height = height
        self.column_ids = tuple(column_ids)
        self.card_ids = {cid: () for cid in self.column_ids}

    def __call__(self, indicator: Indicator) -> float:
        return self.indicator_top(indicator)

    def update(self, vm: BoardViewModel):
        self.column_ids = tuple(col.id for col in vm.columns)
        self.card_ids = {col.id: tuple(card.id for card in col.cards) for col in vm.columns}

    def resize(self, width, height):
        self.width = width
        self.height = height

    def column_width(self):
        return self.width * COLUMN_WIDTH_RATIO

    def column_origin(self, col_idx):
        gap = self.width * COLUMN_GAP_RATIO
        x = self.width * SIDE_MARGIN_RATIO + col_idx * (self.column_width() + gap)
        y = self.height * TOP_MARGIN_RATIO
        return x, y

    def column_index(self, column_id):
        if column_id not in self.column_ids:
            return None
        return self.column_ids.index(column_id)

    def column_rect(self, column_id):
        idx = self.column_index(column_id)
        if idx is None:
            return None
        x, y = self.column_origin(idx)
        return x, y, x + self.column_width(), self.height

    def slot_top(self, slot_idx):
        _, y = self.column_origin(0)
        return y + HEADER_HEIGHT + slot_idx * SLOT_STEP

    def slot_index(self, column_id, before_id):
        ids = self.card_ids.get(column_id, ())
        if before_id in ids:
            return ids.index(before_id)
        return len(ids)

    def indicator_top(self, indicator: Indicator) -> float:
        return self.slot_top(self.slot_index(indicator.column, indicator.beforeId))

    def indicator_rect(self, column_id, slot_idx):
        x, _ = self.column_origin(self.column_index(column_id))
        top = self.slot_top(slot_idx)
        return x, top + 2, x + self.column_width(), top + INDICATOR_HEIGHT - 2

    def card_rect(self, column_id, card_idx):
        x, _ = self.column_origin(self.column_index(column_id))
        top = self.slot_top(card_idx) + INDICATOR_HEIGHT
        return x, top, x + self.column_width(), top + CARD_HEIGHT

    def add_button_rect(self, column_id):
        x, _ = self.column_origin(self.column_index(column_id))
        top = self.slot_top(len(self.card_ids.get(column_id, ()))) + INDICATOR_HEIGHT + 4
        return x, top, x + self.column_width(), top + ADD_BUTTON_HEIGHT

    def discard_rect(self):
        x, y = self.column_origin(len(self.column_ids))
        size = self.column_width()
        top = y + DISCARD_TOP_GAP
        return x, top, x + size, top + size

    def find_column(self, x, y):
        for column_id in self.column_ids:
            if _contains(self.column_rect(column_id), x, y):
                return column_id
        return None

    def find_card(self, x, y):
        column_id = self.find_column(x, y)
        if column_id is None:
            return None
        for idx, card_id in enumerate(self.card_ids.get(column_id, ())):
            if _contains(self.card_rect(column_id, idx), x, y):
                return card_id
        return None

    def find_add_button(self, x, y):
        for column_id in self.column_ids:
            if _contains(self.add_button_rect(column_id), x, y):
                return column_id
        return None

    def is_point_in_discard(self, x, y):
        return _contains(self.discard_rect(), x, y)

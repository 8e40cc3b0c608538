from dataclasses import dataclass

from kanban.Store import TAIL_SENTINEL, Store


@dataclass(frozen=True)
class Indicator:
    """
    An insertion point drawn before a card, or at the end of a column when
    beforeId is the tail sentinel.
    """
    column: str
    beforeId: str
    highlighted: bool = False

    def isTail(self):
        return self.beforeId == TAIL_SENTINEL

    def sameSlot(self, other):
        return other is not None and self.column == other.column and self.beforeId == other.beforeId


def tailIndicator(columnId):
    return Indicator(columnId, TAIL_SENTINEL)


def indicatorsFor(store: Store, columnId):
    indicators = [Indicator(columnId, card.id) for card in store.cardsInColumn(columnId)]
    indicators.append(tailIndicator(columnId))
    return tuple(indicators)


def indicatorsForBoard(store: Store, columns):
    return {column.id: indicatorsFor(store, column.id) for column in columns}

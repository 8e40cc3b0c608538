import logging
import uuid
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

TAIL_SENTINEL = "-1"


@dataclass(frozen=True)
class Card:
    id: str
    title: str
    column: str

    def __str__(self):
        return f"{self.id}:{self.title}"


@dataclass(frozen=True)
class Column:
    id: str
    title: str
    accent: str


DEFAULT_COLUMNS = (
    Column("backlog", "Backlog", "#facc15"),
    Column("todo", "TODO", "#60a5fa"),
    Column("doing", "In progress", "#fdba74"),
    Column("done", "Complete", "#fca5a5"),
)

DEFAULT_CARDS = (
    # backlog
    Card("1", "Look into rendering concept", "backlog"),
    Card("2", "Practice React Hooks", "backlog"),
    Card("3", "Complete Tasks related hooks", "backlog"),
    Card("4", "Practice Posters", "backlog"),
    # todo
    Card("5", "Research  about Mongo DB", "todo"),
    Card("6", "Create a 3D Landing Page", "todo"),
    Card("7", "Linkedin Optimization", "todo"),
    # doing
    Card("8", "Framer Motions task-2", "doing"),
    Card("9", "Practicing framermotion", "doing"),
    # done
    Card("10", "React Hooks done.", "done"),
)


def newCardId():
    return uuid.uuid4().hex


class Store:
    """
    The ordered sequence of every card on the board.

    A column's display order is the store order filtered by column, so all
    insertions happen in this one flat sequence. Instances never change:
    each operation returns a new store, or the same store when it is a no-op.
    """

    def __init__(self, cards=()):
        self.cards: tuple = tuple(cards)

    @staticmethod
    def fromSeed(cards=DEFAULT_CARDS):
        return Store(cards)

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __eq__(self, other):
        if not isinstance(other, Store):
            return NotImplemented
        return self.cards == other.cards

    def __hash__(self):
        return hash(self.cards)

    def __repr__(self):
        return f"Store({list(self.cards)!r})"

    def allCards(self):
        return self.cards

    def cardsInColumn(self, columnId):
        return tuple(c for c in self.cards if c.column == columnId)

    def findCard(self, cardId):
        for card in self.cards:
            if card.id == cardId:
                return card
        return None

    def indexOf(self, cardId):
        for i, card in enumerate(self.cards):
            if card.id == cardId:
                return i
        return -1

    def moveCard(self, cardId, targetColumn, beforeCardId=TAIL_SENTINEL):
        card = self.findCard(cardId)
        if card is None:
            logger.debug("moveCard: card %s is not on the board", cardId)
            return self
        moved = replace(card, column=targetColumn)
        rest = [c for c in self.cards if c.id != cardId]

        if beforeCardId == TAIL_SENTINEL:
            rest.append(moved)
        else:
            insertAt = -1
            for i, c in enumerate(rest):
                if c.id == beforeCardId:
                    insertAt = i
                    break
            if insertAt == -1:
                # Covers dropping a card onto its own former slot.
                logger.debug("moveCard: no card %s to insert %s before", beforeCardId, cardId)
                return self
            rest.insert(insertAt, moved)

        # Same order and same column: keep the store so callers see a no-op.
        if tuple(rest) == self.cards:
            logger.debug("moveCard: %s is already at that slot", cardId)
            return self
        return Store(rest)

    def removeCard(self, cardId):
        if self.findCard(cardId) is None:
            logger.debug("removeCard: card %s is not on the board", cardId)
            return self
        return Store(c for c in self.cards if c.id != cardId)

    def addCard(self, columnId, title, cardId=None):
        if cardId is None:
            cardId = newCardId()
        return Store(self.cards + (Card(cardId, title, columnId),))

import logging
from dataclasses import replace

from kanban.Discard import DiscardZone
from kanban.Events import CardAdded, CardDiscarded, CardMoved, DragCancelled
from kanban.Indicator import indicatorsFor, tailIndicator
from kanban.Interface import Interface
from kanban.Resolver import DISTANCE_OFFSET, resolveNearest
from kanban.Store import DEFAULT_COLUMNS, Store

logger = logging.getLogger(__name__)


class DragSession:
    def __init__(self, draggedCardId, originColumn):
        self.draggedCardId = draggedCardId
        self.originColumn = originColumn
        self.highlightedColumns = set()
        # What a drop target reads to learn which card is being carried.
        self.payload = {"cardId": draggedCardId}

    def isColumnHighlighted(self, columnId):
        return columnId in self.highlightedColumns


class DragController:
    """
    start*** / drag*** / drop*** : gesture signals from the host UI.
    The controller owns the store reference, the session and every highlight;
    the store itself is only ever replaced, never edited.
    """

    def __init__(self, store: Store = None, columns=DEFAULT_COLUMNS, layout=None, offset=DISTANCE_OFFSET):
        self.store: Store = store if store is not None else Store.fromSeed()
        self.columns = tuple(columns)
        self.layout = layout  # indicator -> top edge
        self.offset = offset
        self.interface = Interface()
        self.discardZone = DiscardZone()

        self.session: DragSession = None
        self.highlighted = {}  # column id -> resolved indicator

    def registerInterface(self, interface):
        self.interface = interface
        interface.controller = self

    def setLayoutProvider(self, layout):
        self.layout = layout

    def start(self):
        self.interface.onStart()

    # -------------------- render boundary --------------------
    def columnIds(self):
        return tuple(c.id for c in self.columns)

    def hasColumn(self, columnId):
        return columnId in self.columnIds()

    def allCards(self):
        return self.store.allCards()

    def cardsInColumn(self, columnId):
        return self.store.cardsInColumn(columnId)

    def indicatorsFor(self, columnId):
        current = self.highlighted.get(columnId)
        out = []
        for ind in indicatorsFor(self.store, columnId):
            if ind.sameSlot(current):
                ind = replace(ind, highlighted=True)
            out.append(ind)
        return tuple(out)

    def isColumnHighlighted(self, columnId):
        return self.session is not None and self.session.isColumnHighlighted(columnId)

    @property
    def discardArmed(self):
        return self.discardZone.armed

    def isDragging(self):
        return self.session is not None

    def draggedCardId(self):
        if self.session is None:
            return None
        return self.session.draggedCardId

    # -------------------- gestures --------------------
    def startDrag(self, cardId) -> bool:
        if self.session is not None:
            logger.debug("startDrag(%s) ignored, %s is already being dragged", cardId, self.session.draggedCardId)
            return False
        card = self.store.findCard(cardId)
        if card is None:
            logger.debug("startDrag: card %s is not on the board", cardId)
            return False
        self.session = DragSession(card.id, card.column)
        self.highlighted.clear()
        self.interface.onHighlightChanged()
        return True

    def dragOver(self, columnId, pointerY):
        if self.session is None or not self.hasColumn(columnId):
            return None
        self.session.highlightedColumns.add(columnId)
        resolved = self.resolve(columnId, pointerY)
        self.highlighted[columnId] = resolved
        logger.debug("drag over %s at y=%s -> before %s", columnId, pointerY, resolved.beforeId)
        self.interface.onHighlightChanged()
        return resolved

    def dragLeave(self, columnId):
        if self.session is None:
            return
        self.session.highlightedColumns.discard(columnId)
        self.highlighted.pop(columnId, None)
        self.interface.onHighlightChanged()

    def discardOver(self) -> bool:
        armed = self.discardZone.hover(self.session)
        self.interface.onHighlightChanged()
        return armed

    def discardLeave(self):
        self.discardZone.leave()
        self.interface.onHighlightChanged()

    def drop(self, columnId, pointerY=None) -> bool:
        if self.session is None:
            return False
        if not self.hasColumn(columnId):
            logger.warning("drop on unknown column %s, cancelling drag", columnId)
            self.cancel()
            return False

        if pointerY is not None:
            target = self.resolve(columnId, pointerY)
        else:
            target = self.highlighted.get(columnId) or tailIndicator(columnId)

        session = self.endSession()
        old = self.store
        self.store = old.moveCard(session.draggedCardId, columnId, target.beforeId)
        if self.store is old:
            self.interface.onHighlightChanged()
            return False
        logger.info("moved card %s from %s to %s before %s",
                    session.draggedCardId, session.originColumn, columnId, target.beforeId)
        self.interface.onEvent(CardMoved(session.draggedCardId, session.originColumn, columnId, target.beforeId))
        return True

    def dropOnDiscard(self) -> bool:
        if self.session is None:
            self.discardZone.leave()
            return False
        old = self.store
        self.store = self.discardZone.receive(old, self.session)
        session = self.endSession()
        if self.store is old:
            self.interface.onHighlightChanged()
            return False
        self.interface.onEvent(CardDiscarded(session.draggedCardId, session.originColumn))
        return True

    def cancel(self):
        if self.session is None:
            self.clearHighlights()
            return
        session = self.endSession()
        logger.debug("drag of %s cancelled", session.draggedCardId)
        self.interface.onEvent(DragCancelled(session.draggedCardId))

    def addCard(self, columnId, title, cardId=None):
        if not self.hasColumn(columnId):
            logger.warning("addCard: unknown column %s", columnId)
            return None
        self.store = self.store.addCard(columnId, title, cardId)
        card = self.store.allCards()[-1]
        logger.info("added card %s to %s", card.id, columnId)
        self.interface.onEvent(CardAdded(card.id, columnId))
        return card

    # -------------------- helpers --------------------
    def resolve(self, columnId, pointerY):
        if self.layout is None:
            raise RuntimeError("layout provider is not registered")
        # No caching: layout and store may both have changed since the last tick.
        return resolveNearest(pointerY, indicatorsFor(self.store, columnId), self.layout, self.offset, columnId)

    def clearHighlights(self):
        self.highlighted.clear()
        self.discardZone.leave()
        if self.session is not None:
            self.session.highlightedColumns.clear()

    def endSession(self):
        self.clearHighlights()
        session = self.session
        self.session = None
        return session

import logging

logger = logging.getLogger(__name__)


class DiscardZone:
    """Drop target that deletes the card it receives. Idle or armed, nothing else."""

    def __init__(self):
        self.armed = False

    def hover(self, session):
        self.armed = session is not None
        return self.armed

    def leave(self):
        self.armed = False

    def receive(self, store, session):
        self.armed = False
        if session is None:
            return store
        cardId = session.payload["cardId"]
        logger.info("discarding card %s", cardId)
        return store.removeCard(cardId)

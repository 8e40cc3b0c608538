import logging

from kanban.Session import DragController

logger = logging.getLogger(__name__)


def normalize_title(text):
    if text is None:
        return None
    title = str(text).strip()
    if not title:
        return None
    return title


def submit_new_card(controller: DragController, column_id: str, text) -> bool:
    """Validate the form text and append a new card to the column."""
    title = normalize_title(text)
    if title is None:
        logger.debug("Rejected empty card title for %s", column_id)
        return False
    return controller.addCard(column_id, title) is not None

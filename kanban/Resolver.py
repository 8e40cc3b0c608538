import logging

from kanban.Indicator import tailIndicator

logger = logging.getLogger(__name__)

# Roughly half a card below an indicator's top edge, so the insertion point
# flips when the pointer crosses the middle of a card.
DISTANCE_OFFSET = 50


def nearestFromPositions(pointerY, positions, offset=DISTANCE_OFFSET):
    """
    :param positions: top edges of the indicators, in display order
    :return: index of the nearest indicator still below the pointer, or None
    """
    best = None
    bestDelta = float("-inf")
    for i, top in enumerate(positions):
        delta = pointerY - (top + offset)
        if delta < 0 and delta > bestDelta:
            best = i
            bestDelta = delta
    return best


def resolveNearest(pointerY, indicators, topOf, offset=DISTANCE_OFFSET, column=None):
    """
    Pick the indicator the dragged card would be inserted at.

    :param topOf: layout provider, maps an indicator to its current top edge
    :param column: used to build a tail sentinel when the list has none
    """
    indicators = tuple(indicators)
    if not indicators:
        logger.error("no indicators to resolve against in column %s", column)
        return tailIndicator(column)
    if column is None:
        column = indicators[0].column

    idx = nearestFromPositions(pointerY, [topOf(ind) for ind in indicators], offset)
    if idx is not None:
        return indicators[idx]
    for ind in reversed(indicators):
        if ind.isTail():
            return ind
    return tailIndicator(column)

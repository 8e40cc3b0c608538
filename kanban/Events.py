class BoardEvent:
    """A committed change of the board, reported to the interface."""

    def describe(self) -> str:
        return type(self).__name__


class CardMoved(BoardEvent):
    def __init__(self, cardId, src: str, dest: str, beforeId: str):
        self.cardId = cardId
        self.src = src
        self.dest = dest
        self.beforeId = beforeId

    def describe(self):
        return f"moved {self.cardId} from {self.src} to {self.dest}"


class CardDiscarded(BoardEvent):
    def __init__(self, cardId, column: str):
        self.cardId = cardId
        self.column = column

    def describe(self):
        return f"discarded {self.cardId}"


class CardAdded(BoardEvent):
    def __init__(self, cardId, column: str):
        self.cardId = cardId
        self.column = column

    def describe(self):
        return f"added {self.cardId} to {self.column}"


class DragCancelled(BoardEvent):
    def __init__(self, cardId):
        self.cardId = cardId

    def describe(self):
        return f"cancelled drag of {self.cardId}"

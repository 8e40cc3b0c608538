from kanban.Events import BoardEvent


class Interface:

    def __init__(self):
        self.controller = None

    def onStart(self):
        pass

    def onEvent(self, event: BoardEvent):
        """
        Invoked after the store has been replaced, or a drag was cancelled.
        :param event:
        :return:
        """
        self.notifyRedraw()
        pass

    def onHighlightChanged(self):
        """
        Invoked when column or indicator highlights change without a store change.
        :return:
        """
        self.notifyRedraw()
        pass

    def notifyRedraw(self):
        pass

from kanban.Events import BoardEvent, CardAdded, CardDiscarded, CardMoved, DragCancelled
from kanban.Session import DragController
from kanban_ui.view_model import AnimationEvent, BoardViewModel, CardView, ColumnView, IndicatorView


class BoardAdapter:
    """Bridges the drag controller state/events to a renderer-friendly model."""

    @staticmethod
    def snapshot(controller: DragController) -> BoardViewModel:
        dragging = controller.draggedCardId()
        columns = []
        for column in controller.columns:
            cards = tuple(
                CardView(id=card.id, title=card.title, column=card.column, dragging=card.id == dragging)
                for card in controller.cardsInColumn(column.id)
            )
            indicators = tuple(
                IndicatorView(column=ind.column, before_id=ind.beforeId, highlighted=ind.highlighted)
                for ind in controller.indicatorsFor(column.id)
            )
            columns.append(
                ColumnView(
                    id=column.id,
                    title=column.title,
                    accent=column.accent,
                    highlighted=controller.isColumnHighlighted(column.id),
                    cards=cards,
                    indicators=indicators,
                )
            )
        return BoardViewModel(
            columns=tuple(columns),
            discard_armed=controller.discardArmed,
            dragging_card_id=dragging,
        )

    @staticmethod
    def event_to_animation(event: BoardEvent) -> AnimationEvent:
        if isinstance(event, CardMoved):
            return AnimationEvent(
                type="MOVE",
                payload={"card": event.cardId, "src": event.src, "dest": event.dest, "before": event.beforeId},
            )
        if isinstance(event, CardDiscarded):
            return AnimationEvent(
                type="DISCARD",
                payload={"card": event.cardId, "column": event.column},
            )
        if isinstance(event, CardAdded):
            return AnimationEvent(
                type="ADD",
                payload={"card": event.cardId, "column": event.column},
            )
        if isinstance(event, DragCancelled):
            return AnimationEvent(
                type="CANCEL",
                payload={"card": event.cardId},
            )
        return AnimationEvent(type="UNKNOWN", payload={"event": type(event).__name__})

from dataclasses import dataclass


@dataclass(frozen=True)
class CardView:
    id: str
    title: str
    column: str
    dragging: bool


@dataclass(frozen=True)
class IndicatorView:
    column: str
    before_id: str
    highlighted: bool


@dataclass(frozen=True)
class ColumnView:
    id: str
    title: str
    accent: str
    highlighted: bool
    cards: tuple[CardView, ...]
    indicators: tuple[IndicatorView, ...]

    @property
    def card_count(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class BoardViewModel:
    columns: tuple[ColumnView, ...]
    discard_armed: bool
    dragging_card_id: str | None

    def column(self, column_id):
        for col in self.columns:
            if col.id == column_id:
                return col
        return None


@dataclass(frozen=True)
class AnimationEvent:
    type: str
    payload: dict

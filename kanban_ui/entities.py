from dataclasses import dataclass

from kanban_ui.view_model import CardView


@dataclass
class DragState:
    card: CardView
    anchor_x: float
    anchor_y: float
    x: float
    y: float
    hover_column: str | None = None
    hover_discard: bool = False


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    born: float
    ttl: float
    size: float
    color: str

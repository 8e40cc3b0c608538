import logging
import math
import random
import time
from pathlib import Path
from tkinter import BOTH, Canvas, Tk, simpledialog

from kanban.Interface import Interface
from kanban.Session import DragController
from kanban_ui.adapter import BoardAdapter
from kanban_ui.add_card import submit_new_card
from kanban_ui.board_export import export_board_png
from kanban_ui.board_layout import BoardLayout
from kanban_ui.card_face import CardFaceRenderer
from kanban_ui.entities import DragState, Particle
from kanban_ui.settings_store import load_settings, save_settings
from kanban_ui.ui_config import (
    BOARD,
    CARD_HEIGHT,
    FONT_SCALE_FACTOR,
    FONT_SCALE_ORDER,
    FPS_MS,
    HEADER_HEIGHT,
    HELP,
    THEMES,
    THEME_ORDER,
)

logger = logging.getLogger(__name__)

EXPORT_PATH = Path.cwd() / "kanban_board.png"


class BoardTkInterface(Interface):
    HELP_LINES = (
        "Drag a card to reorder it, drop it on another column to move it,",
        "or drop it on the trash to delete it.",
        "",
        "Esc  cancel the current drag",
        "T    cycle theme",
        "F    cycle font size",
        "E    export the board as PNG",
        "H    show / hide this help",
    )

    def __init__(self, width=1200, height=760):
        super().__init__()
        self.width = width
        self.height = height
        self.root = None
        self.canvas = None
        self.stage = BOARD

        self.vm = None
        self.message = ""
        self.theme_name = "Meadow"
        self.font_scale = "Normal"
        self.distance_offset = 50
        self.log_level = "WARNING"

        self.layout = BoardLayout(width, height)
        self.drag = None
        self.particles = []
        self.card_renderer = CardFaceRenderer()
        self.needs_redraw = True
        self.load_persisted_settings()

    def run(self):
        self.root = Tk()
        self.root.title("Kanban")
        self.root.resizable(True, True)
        self.canvas = Canvas(self.root, width=self.width, height=self.height, highlightthickness=0, bd=0)
        self.canvas.pack(expand=1, fill=BOTH)

        self.root.bind("<Configure>", self.on_resize)
        self.root.bind("<Button-1>", self.on_press)
        self.root.bind("<B1-Motion>", self.on_drag)
        self.root.bind("<ButtonRelease-1>", self.on_release)
        self.root.bind("<FocusOut>", self.on_focus_out)
        self.root.bind("<Key>", self.on_key)
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        if self.controller is None:
            self.start_board()
        self.tick()
        self.root.mainloop()

    @property
    def theme(self):
        return THEMES[self.theme_name]

    def load_persisted_settings(self):
        settings = load_settings()
        self.theme_name = settings["theme_name"]
        self.font_scale = settings["font_scale"]
        self.distance_offset = int(settings["distance_offset"])
        self.log_level = settings["log_level"]

    def persist_settings(self):
        save_settings(
            {
                "theme_name": self.theme_name,
                "font_scale": self.font_scale,
                "distance_offset": str(self.distance_offset),
                "log_level": self.log_level,
            }
        )

    def start_board(self, store=None):
        controller = DragController(store=store, layout=self.layout, offset=self.distance_offset)
        controller.registerInterface(self)
        self.drag = None
        self.particles.clear()
        controller.start()
        return controller

    def refresh_view(self):
        self.vm = BoardAdapter.snapshot(self.controller)
        self.layout.update(self.vm)

    def request_redraw(self):
        self.needs_redraw = True

    def fs(self, base):
        factor = FONT_SCALE_FACTOR[self.font_scale]
        return max(8, int(base * factor))

    def cycle_value(self, order, current):
        idx = order.index(current)
        return order[(idx + 1) % len(order)]

    def on_close(self):
        self.cancel_drag()
        self.persist_settings()
        self.root.destroy()

    # -------------------- board callbacks --------------------
    def onStart(self):
        self.refresh_view()
        self.message = "Drag cards between columns, or onto the trash to delete them."
        self.request_redraw()

    def onEvent(self, event):
        self.refresh_view()
        animation = BoardAdapter.event_to_animation(event)
        if animation.type == "MOVE":
            self.message = f"Moved card to {self.column_title(animation.payload['dest'])}."
        elif animation.type == "DISCARD":
            self.message = "Card deleted."
            x1, y1, x2, y2 = self.layout.discard_rect()
            self.spawn_spark_shower((x1 + x2) * 0.5, (y1 + y2) * 0.5, 24)
        elif animation.type == "ADD":
            self.message = f"Added card to {self.column_title(animation.payload['column'])}."
        elif animation.type == "CANCEL":
            self.message = "Move cancelled."
        super().onEvent(event)

    def onHighlightChanged(self):
        self.refresh_view()
        super().onHighlightChanged()

    def notifyRedraw(self):
        self.request_redraw()

    def column_title(self, column_id):
        if self.vm is not None:
            col = self.vm.column(column_id)
            if col is not None:
                return col.title
        return column_id

    # -------------------- input --------------------
    def on_resize(self, event):
        if event.widget is not self.root:
            return
        if event.width == self.width and event.height == self.height:
            return
        self.width = max(640, int(event.width))
        self.height = max(420, int(event.height))
        self.layout.resize(self.width, self.height)
        self.request_redraw()

    def on_key(self, event):
        key = event.keysym.lower()
        if self.stage == HELP:
            self.stage = BOARD
            self.request_redraw()
            return
        if key == "escape":
            self.cancel_drag()
        elif key == "h":
            self.stage = HELP
        elif key == "t":
            self.theme_name = self.cycle_value(THEME_ORDER, self.theme_name)
            self.persist_settings()
        elif key == "f":
            self.font_scale = self.cycle_value(FONT_SCALE_ORDER, self.font_scale)
            self.persist_settings()
        elif key == "e":
            self.export_snapshot()
        self.request_redraw()

    def on_focus_out(self, event):
        # Losing focus mid-drag loses the pointer grab.
        self.cancel_drag()

    def on_press(self, event):
        if self.stage == HELP:
            self.stage = BOARD
            self.request_redraw()
            return
        if self.vm is None or self.drag is not None:
            return

        column_id = self.layout.find_add_button(event.x, event.y)
        if column_id is not None:
            self.prompt_add_card(column_id)
            return

        card_id = self.layout.find_card(event.x, event.y)
        if card_id is None:
            return
        if not self.controller.startDrag(card_id):
            return
        card = next(c for col in self.vm.columns for c in col.cards if c.id == card_id)
        col_id = card.column
        idx = self.layout.card_ids[col_id].index(card_id)
        x1, y1, _, _ = self.layout.card_rect(col_id, idx)
        self.drag = DragState(
            card=card,
            anchor_x=event.x - x1,
            anchor_y=event.y - y1,
            x=x1,
            y=y1,
        )
        self.message = f"Dragging \"{card.title}\"..."
        self.request_redraw()

    def on_drag(self, event):
        if self.drag is None:
            return
        self.drag.x = event.x - self.drag.anchor_x
        self.drag.y = event.y - self.drag.anchor_y
        self.update_hover(event.x, event.y)
        self.request_redraw()

    def on_release(self, event):
        if self.drag is None:
            return
        self.update_hover(event.x, event.y)
        released = self.drag
        self.drag = None

        if released.hover_column is not None:
            if not self.controller.drop(released.hover_column, event.y):
                self.message = "Card stays where it was."
        elif released.hover_discard:
            self.controller.dropOnDiscard()
        else:
            self.controller.cancel()
        self.request_redraw()

    def update_hover(self, x, y):
        drag = self.drag
        column_id = self.layout.find_column(x, y)
        in_discard = self.layout.is_point_in_discard(x, y)

        if drag.hover_column is not None and drag.hover_column != column_id:
            self.controller.dragLeave(drag.hover_column)
        if drag.hover_discard and not in_discard:
            self.controller.discardLeave()
        drag.hover_column = column_id
        drag.hover_discard = in_discard

        if column_id is not None:
            self.controller.dragOver(column_id, y)
        elif in_discard:
            self.controller.discardOver()

    def cancel_drag(self):
        if self.drag is None and (self.controller is None or not self.controller.isDragging()):
            return
        self.drag = None
        self.controller.cancel()
        self.request_redraw()

    def prompt_add_card(self, column_id):
        text = simpledialog.askstring("Add card", "Add new task...", parent=self.root)
        if text is None:
            # Dialog dismissed.
            return
        if not submit_new_card(self.controller, column_id, text):
            self.message = "A card needs a title."
            self.request_redraw()

    def export_snapshot(self, path=EXPORT_PATH):
        if self.vm is None:
            return None
        out = export_board_png(self.vm, self.layout, self.theme, path)
        self.message = f"Saved snapshot to {out.name}."
        return out

    # -------------------- frame loop --------------------
    def tick(self):
        self.update_effects()
        if self.needs_redraw or self.particles:
            self.draw()
            self.needs_redraw = False
        self.root.after(FPS_MS, self.tick)

    def update_effects(self):
        now = time.time()
        alive = []
        for p in self.particles:
            if now - p.born > p.ttl:
                continue
            p.x += p.vx
            p.y += p.vy
            p.vy += 0.12
            alive.append(p)
        self.particles = alive

    def spawn_spark_shower(self, x, y, count, speed=(0.8, 2.6), ttl=(0.35, 0.7)):
        now = time.time()
        colors = self.theme["particle"]
        for _ in range(count):
            angle = random.uniform(0, math.tau)
            mag = random.uniform(speed[0], speed[1])
            self.particles.append(
                Particle(
                    x=x + random.uniform(-10, 10),
                    y=y + random.uniform(-10, 10),
                    vx=math.cos(angle) * mag,
                    vy=math.sin(angle) * mag - 1.2,
                    born=now,
                    ttl=random.uniform(ttl[0], ttl[1]),
                    size=random.uniform(1.6, 3.8),
                    color=random.choice(colors),
                )
            )

    # -------------------- drawing --------------------
    def draw(self):
        if self.canvas is None:
            return
        c = self.canvas
        c.delete("all")
        theme = self.theme
        c.create_rectangle(0, 0, self.width, self.height, fill=theme["bg_base"], width=0)
        if self.vm is None:
            return

        for col_idx, col in enumerate(self.vm.columns):
            self.draw_column(c, col_idx, col)
        self.card_renderer.draw_discard(
            c, self.layout.discard_rect(), theme, self.vm.discard_armed, FONT_SCALE_FACTOR[self.font_scale]
        )
        self.draw_drag_ghost(c)
        self.draw_particles(c)
        c.create_text(16, self.height - 12, anchor="sw", text=self.message, fill=theme["hud_subtext"], font=f"Helvetica {self.fs(11)}")
        c.create_text(self.width - 16, self.height - 12, anchor="se", text="H: help", fill=theme["hud_subtext"], font=f"Helvetica {self.fs(10)}")
        if self.stage == HELP:
            self.draw_help(c)

    def draw_column(self, c, col_idx, col):
        theme = self.theme
        x, y = self.layout.column_origin(col_idx)
        cw = self.layout.column_width()
        if col.highlighted:
            c.create_rectangle(x, y + HEADER_HEIGHT, x + cw, self.height - 28, fill=theme["column_active"], width=0)
        c.create_text(x, y + 4, anchor="nw", text=col.title, fill=col.accent, font=f"Helvetica {self.fs(12)} bold")
        c.create_text(x + cw, y + 4, anchor="ne", text=str(col.card_count), fill=theme["hud_text"], font=f"Helvetica {self.fs(11)}")

        for idx, card in enumerate(col.cards):
            x1, y1, x2, y2 = self.layout.card_rect(col.id, idx)
            self.card_renderer.draw_card(
                c, x1, y1, x2, y2, card.title, theme, FONT_SCALE_FACTOR[self.font_scale], dragging=card.dragging
            )
        for slot_idx, ind in enumerate(col.indicators):
            self.card_renderer.draw_indicator(c, self.layout.indicator_rect(col.id, slot_idx), theme, ind.highlighted)

        bx1, by1, _, by2 = self.layout.add_button_rect(col.id)
        c.create_text(bx1 + 8, (by1 + by2) * 0.5, anchor="w", text="Add card +", fill=theme["hud_subtext"], font=f"Helvetica {self.fs(10)}")

    def draw_drag_ghost(self, c):
        if self.drag is None:
            return
        cw = self.layout.column_width()
        self.card_renderer.draw_card(
            c,
            self.drag.x,
            self.drag.y,
            self.drag.x + cw,
            self.drag.y + CARD_HEIGHT,
            self.drag.card.title,
            self.theme,
            FONT_SCALE_FACTOR[self.font_scale],
            ghost=True,
        )

    def draw_particles(self, c):
        for p in self.particles:
            r = p.size
            c.create_oval(p.x - r, p.y - r, p.x + r, p.y + r, fill=p.color, width=0)

    def draw_help(self, c):
        theme = self.theme
        w, h = self.width * 0.5, 40 + 26 * len(self.HELP_LINES)
        x1, y1 = (self.width - w) * 0.5, (self.height - h) * 0.5
        c.create_rectangle(x1, y1, x1 + w, y1 + h, fill=theme["card_fill"], outline=theme["card_border"], width=2)
        for i, line in enumerate(self.HELP_LINES):
            c.create_text(x1 + 24, y1 + 24 + i * 26, anchor="nw", text=line, fill=theme["hud_text"], font=f"Helvetica {self.fs(12)}")


def main():
    settings = load_settings()
    logging.basicConfig(level=settings["log_level"], format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    BoardTkInterface().run()


if __name__ == '__main__':
    main()

import textwrap

MAX_TITLE_LINES = 3


def wrap_title(title, width_px, font_px):
    """Split a title into at most MAX_TITLE_LINES lines that fit width_px."""
    chars = max(4, int(width_px / max(1.0, font_px * 0.6)))
    lines = textwrap.wrap(title, width=chars) or [""]
    if len(lines) > MAX_TITLE_LINES:
        lines = lines[:MAX_TITLE_LINES]
        lines[-1] = lines[-1][: max(1, chars - 1)] + "…"
    return lines


class CardFaceRenderer:
    def draw_card(self, canvas, x1, y1, x2, y2, title, theme, font_scale, dragging=False, ghost=False):
        def fs(base):
            return max(8, int(base * font_scale))

        fill = theme["card_dragging"] if dragging else theme["card_fill"]
        outline = theme["indicator"] if ghost else theme["card_border"]
        width = 2 if ghost else 1
        dash = (3, 2) if dragging and not ghost else None
        canvas.create_rectangle(x1, y1, x2, y2, fill=fill, outline=outline, width=width, dash=dash)

        font_px = fs(11)
        lines = wrap_title(title, (x2 - x1) - 24, font_px)
        canvas.create_text(
            x1 + 12,
            y1 + 12,
            anchor="nw",
            text="\n".join(lines),
            fill=theme["card_text"],
            font=f"Helvetica {font_px}",
        )

    def draw_indicator(self, canvas, rect, theme, highlighted):
        if not highlighted:
            return
        x1, y1, x2, y2 = rect
        canvas.create_rectangle(x1, y1, x2, y2, fill=theme["indicator"], width=0)

    def draw_discard(self, canvas, rect, theme, armed, font_scale):
        def fs(base):
            return max(8, int(base * font_scale))

        x1, y1, x2, y2 = rect
        outline = theme["discard_armed"] if armed else theme["discard_idle"]
        canvas.create_rectangle(x1, y1, x2, y2, fill=theme["discard_fill"], outline=outline, width=2)
        cx, cy = (x1 + x2) * 0.5, (y1 + y2) * 0.5
        if armed:
            canvas.create_text(cx, cy, text="🔥", fill=theme["discard_armed_text"], font=f"Helvetica {fs(36)}")
        else:
            canvas.create_text(cx, cy, text="🗑", fill=theme["discard_idle"], font=f"Helvetica {fs(30)}")

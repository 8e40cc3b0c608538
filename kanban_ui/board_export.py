import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from kanban_ui.board_layout import BoardLayout
from kanban_ui.card_face import wrap_title
from kanban_ui.ui_config import HEADER_HEIGHT
from kanban_ui.view_model import BoardViewModel

logger = logging.getLogger(__name__)

FONT_PX = 14


def get_font(size):
    for name in ("DejaVuSans.ttf", "Arial.ttf", "Helvetica.ttc"):
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


def render_board_image(vm: BoardViewModel, layout: BoardLayout, theme: dict) -> Image.Image:
    width, height = int(layout.width), int(layout.height)
    img = Image.new("RGB", (width, height), theme["bg_base"])
    draw = ImageDraw.Draw(img)
    font = get_font(FONT_PX)

    for col_idx, col in enumerate(vm.columns):
        x, y = layout.column_origin(col_idx)
        cw = layout.column_width()
        if col.highlighted:
            draw.rectangle((x, y, x + cw, height), fill=theme["column_active"])
        draw.text((x + 4, y + 6), col.title, fill=col.accent, font=font)
        count = str(col.card_count)
        draw.text((x + cw - 8 * len(count) - 4, y + 6), count, fill=theme["hud_text"], font=font)
        draw.line((x, y + HEADER_HEIGHT - 4, x + cw, y + HEADER_HEIGHT - 4), fill=col.accent, width=1)

        for idx, card in enumerate(col.cards):
            x1, y1, x2, y2 = layout.card_rect(col.id, idx)
            fill = theme["card_dragging"] if card.dragging else theme["card_fill"]
            draw.rectangle((x1, y1, x2, y2), fill=fill, outline=theme["card_border"])
            lines = wrap_title(card.title, (x2 - x1) - 24, FONT_PX)
            draw.multiline_text((x1 + 12, y1 + 10), "\n".join(lines), fill=theme["card_text"], font=font)

        for slot_idx, ind in enumerate(col.indicators):
            if ind.highlighted:
                draw.rectangle(layout.indicator_rect(col.id, slot_idx), fill=theme["indicator"])

    x1, y1, x2, y2 = layout.discard_rect()
    outline = theme["discard_armed"] if vm.discard_armed else theme["discard_idle"]
    draw.rectangle((x1, y1, x2, y2), fill=theme["discard_fill"], outline=outline, width=2)
    label = "BURN" if vm.discard_armed else "TRASH"
    draw.text(((x1 + x2) / 2 - 4 * len(label), (y1 + y2) / 2 - FONT_PX / 2), label, fill=outline, font=font)
    return img


def export_board_png(vm: BoardViewModel, layout: BoardLayout, theme: dict, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_board_image(vm, layout, theme).save(path, format="PNG")
    logger.info("Exported board snapshot to %s", path)
    return path

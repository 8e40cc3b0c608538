BOARD = 1
HELP = 2

SIDE_MARGIN_RATIO = 0.04
COLUMN_WIDTH_RATIO = 0.17
COLUMN_GAP_RATIO = 0.012
TOP_MARGIN_RATIO = 0.08
FPS_MS = 16

# Slot geometry in pixels. An indicator sits directly above its card, so a
# card's vertical midpoint is INDICATOR_HEIGHT + CARD_HEIGHT / 2 = 50 below
# the indicator top, matching the default drop offset.
HEADER_HEIGHT = 32
INDICATOR_HEIGHT = 8
CARD_HEIGHT = 84
SLOT_STEP = INDICATOR_HEIGHT + CARD_HEIGHT
ADD_BUTTON_HEIGHT = 28
DISCARD_TOP_GAP = 40

MIN_DISTANCE_OFFSET = 10
MAX_DISTANCE_OFFSET = 200

LOG_LEVEL_ORDER = ("DEBUG", "INFO", "WARNING", "ERROR")
THEME_ORDER = ("Meadow", "Forest", "Ocean")
FONT_SCALE_ORDER = ("Small", "Normal", "Large", "X-Large", "Huge")
FONT_SCALE_FACTOR = {
    "Small": 0.95,
    "Normal": 1.1,
    "Large": 1.25,
    "X-Large": 1.45,
    "Huge": 1.7,
}

THEMES = {
    "Meadow": {
        "bg_base": "#389448",
        "hud_text": "#daf1de",
        "hud_subtext": "#c3e6c9",
        "column_active": "#2f7a3c",
        "card_fill": "#2a6f36",
        "card_border": "#daf1de",
        "card_text": "#daf1de",
        "card_dragging": "#3f8a4b",
        "indicator": "#a78bfa",
        "discard_fill": "#2a6f36",
        "discard_idle": "#daf1de",
        "discard_armed": "#991b1b",
        "discard_armed_text": "#ef4444",
        "particle": ["#fde68a", "#f97316", "#ef4444", "#fbbf24"],
    },
    "Forest": {
        "bg_base": "#1b4332",
        "hud_text": "#f1f5f9",
        "hud_subtext": "#d1fae5",
        "column_active": "#244636",
        "card_fill": "#2d6a4f",
        "card_border": "#a7f3d0",
        "card_text": "#f1f5f9",
        "card_dragging": "#40916c",
        "indicator": "#fde047",
        "discard_fill": "#2d6a4f",
        "discard_idle": "#a7f3d0",
        "discard_armed": "#ef4444",
        "discard_armed_text": "#fca5a5",
        "particle": ["#f8fafc", "#fde68a", "#fb923c", "#ef4444"],
    },
    "Ocean": {
        "bg_base": "#0b2545",
        "hud_text": "#e0f2fe",
        "hud_subtext": "#bae6fd",
        "column_active": "#123552",
        "card_fill": "#1f4f73",
        "card_border": "#7dd3fc",
        "card_text": "#e0f2fe",
        "card_dragging": "#0369a1",
        "indicator": "#38bdf8",
        "discard_fill": "#1f4f73",
        "discard_idle": "#7dd3fc",
        "discard_armed": "#fb7185",
        "discard_armed_text": "#fda4af",
        "particle": ["#e0f2fe", "#fda4af", "#fb7185", "#fcd34d"],
    },
}

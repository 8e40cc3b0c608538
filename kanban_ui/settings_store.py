import configparser
import logging
from pathlib import Path

from kanban_ui.ui_config import (
    FONT_SCALE_ORDER,
    LOG_LEVEL_ORDER,
    MAX_DISTANCE_OFFSET,
    MIN_DISTANCE_OFFSET,
    THEME_ORDER,
)

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path(__file__).with_name("settings.ini")

DEFAULT_SETTINGS = {
    "theme_name": "Meadow",
    "font_scale": "Normal",
    "distance_offset": "50",
    "log_level": "WARNING",
}


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update(settings)

    if data["theme_name"] not in THEME_ORDER:
        data["theme_name"] = DEFAULT_SETTINGS["theme_name"]
    if data["font_scale"] not in FONT_SCALE_ORDER:
        data["font_scale"] = DEFAULT_SETTINGS["font_scale"]

    try:
        offset = int(data["distance_offset"])
    except (TypeError, ValueError):
        offset = int(DEFAULT_SETTINGS["distance_offset"])
    if offset < MIN_DISTANCE_OFFSET:
        offset = MIN_DISTANCE_OFFSET
    if offset > MAX_DISTANCE_OFFSET:
        offset = MAX_DISTANCE_OFFSET
    data["distance_offset"] = str(offset)

    level = str(data["log_level"]).strip().upper()
    if level not in LOG_LEVEL_ORDER:
        level = DEFAULT_SETTINGS["log_level"]
    data["log_level"] = level
    return {k: data[k] for k in DEFAULT_SETTINGS}


def load_settings():
    # Values are plain strings; a stray "%" must not be read as interpolation.
    parser = configparser.ConfigParser(interpolation=None)
    if not SETTINGS_PATH.exists():
        return dict(DEFAULT_SETTINGS)
    try:
        parser.read(SETTINGS_PATH, encoding="utf-8")
        if "ui" not in parser:
            return dict(DEFAULT_SETTINGS)
        raw = {key: parser["ui"].get(key, default) for key, default in DEFAULT_SETTINGS.items()}
    except (configparser.Error, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, e)
        return dict(DEFAULT_SETTINGS)
    return _sanitize(raw)


def save_settings(settings):
    data = _sanitize(settings)
    parser = configparser.ConfigParser(interpolation=None)
    parser["ui"] = data
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with SETTINGS_PATH.open("w", encoding="utf-8") as f:
        parser.write(f)

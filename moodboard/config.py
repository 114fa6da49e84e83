# moodboard/config.py
import os

APP_TITLE = "Mood Dashboard"
APP_ICON = "📈"

DEFAULT_EXPORT_PATH = "data/entries.json"

MOOD_MIN = 1
MOOD_MAX = 100
DEFAULT_DAYS = 7

# Trend chart canvas (plot area = canvas minus padding on every side)
CHART_WIDTH = 720
CHART_HEIGHT = 360
CHART_PADDING = 48

def export_path() -> str:
    return os.getenv("MOODBOARD_EXPORT") or DEFAULT_EXPORT_PATH

def log_level() -> str:
    return os.getenv("MOODBOARD_LOG_LEVEL") or "INFO"

def log_json() -> bool:
    return (os.getenv("MOODBOARD_LOG_JSON") or "").strip().lower() in {"1", "true", "yes", "on"}

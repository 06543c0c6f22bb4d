# frontend/config.py
import os

from config.config import settings

# --- API ---
API_BASE = os.environ.get("KIOSK_API_BASE", "http://localhost:8000/api/v1")
CATALOG_URL = f"{API_BASE}/catalog"
BRANDING_URL = f"{API_BASE}/branding"
CHAT_URL = f"{API_BASE}/chat"
TRANSCRIBE_URL = f"{API_BASE}/voice/transcribe"
REQUEST_TIMEOUT = 60

# --- APP SETTINGS ---
APP_TITLE = "Product Showcase"
WINDOW_SIZE = "1280x800"
IDLE_TIMEOUT = settings.IDLE_TIME_MS            # until idle_time.txt arrives from the API
SESSION_WARNING = settings.SESSION_WARNING_MS
SESSION_TIMEOUT = settings.SESSION_TIMEOUT_MS

# --- FONTS ---
FONT_FAMILY = "Inter"

# --- COLORS ---
# Defaults; Branding/config.json overrides them at startup (see apply_branding)
BG_COLOR = "#F8FAFC"
CARD_BG = "#FFFFFF"
BORDER_COLOR = "#E2E8F0"

PRIMARY = "#0F172A"
PRIMARY_HOVER = "#1E293B"
ACCENT = "#0EA5E9"
DANGER = "#EF4444"
MUTED = "#64748B"

USER_BUBBLE_COLOR = "#0F172A"
USER_TEXT_COLOR = "#FFFFFF"
AI_BUBBLE_COLOR = "#FFFFFF"
TEXT_COLOR_DARK = "#1E293B"
TEXT_COLOR_LIGHT = "#475569"

IDLE_BG = "#000000"

# --- CATALOG GRID ---
TILE_SIZE = (220, 160)
GRID_COLUMNS = 4


def apply_branding(branding: dict) -> None:
    """Overwrite the color/font defaults above with the branding payload."""
    global PRIMARY, PRIMARY_HOVER, BG_COLOR, CARD_BG, TEXT_COLOR_DARK, TEXT_COLOR_LIGHT
    global USER_BUBBLE_COLOR, FONT_FAMILY

    colors = branding.get("colors") or {}
    PRIMARY = colors.get("primary") or PRIMARY
    PRIMARY_HOVER = colors.get("primaryHover") or PRIMARY_HOVER
    BG_COLOR = colors.get("bgPrimary") or BG_COLOR
    CARD_BG = colors.get("bgSecondary") or CARD_BG
    TEXT_COLOR_DARK = colors.get("textPrimary") or TEXT_COLOR_DARK
    TEXT_COLOR_LIGHT = colors.get("textSecondary") or TEXT_COLOR_LIGHT
    USER_BUBBLE_COLOR = PRIMARY

    font = branding.get("font") or {}
    FONT_FAMILY = font.get("family") or FONT_FAMILY

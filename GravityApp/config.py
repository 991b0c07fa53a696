import os
from pathlib import Path

WORDS_PER_DAY = 20
PROGRESS_KEY = "gravity_learned_ids"

RES_DIR = Path(__file__).resolve().parent / "res"
WORDS_FILE = Path(os.environ.get("GRAVITY_WORDS_FILE") or RES_DIR / "words.json")
PROGRESS_FILE = Path(os.environ.get("GRAVITY_PROGRESS_FILE") or RES_DIR / "gravity_progress.json")

# first existing file wins; needed for the Chinese translations on the cards
FONT_CANDIDATES = (
    RES_DIR / "fonts" / "NotoSansSC-Regular.ttf",
    RES_DIR / "fonts" / "NotoSansCJK-Regular.ttc",
)

WINDOW_SIZE = (800, 1000)

THEME = {
    "bg": (0.07, 0.08, 0.10, 1),
    "surface": (0.12, 0.14, 0.18, 1),
    "text": (0.95, 0.98, 1, 1),
    "muted": (0.78, 0.82, 0.88, 1),
    "primary": (0.20, 0.52, 0.90, 1),
    "success": (0.25, 0.65, 0.38, 1),
    "warning": (0.93, 0.65, 0.25, 1),
    "danger": (0.85, 0.32, 0.35, 1),
    "closeButton": (0.5, 0.5, 0.5, 1),
}

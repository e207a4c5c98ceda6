import os
from pathlib import Path

from .models import SemanticKey

# --- URLs ---
SOURCE_URL = os.environ.get(
    "SANTOS_LINEUP_SOURCE_URL",
    "https://www.portodesantos.com.br/informacoes-operacionais/operacoes-portuarias/"
    "navegacao-e-movimento-de-navios/navios-esperados-carga/",
)
USER_AGENT = "Mozilla/5.0 (santos-lineup)"

# --- File Paths ---
DATA_DIR = Path("data")
JSON_DIR = DATA_DIR / "json"
LINEUP_JSON_FILE = JSON_DIR / "lineup.json"
LINEUP_CSV_FILE = DATA_DIR / "lineup.csv"

# --- Fetch Parameters ---
TIMEOUT = 30  # seconds for the whole upstream request
CHUNK_SIZE = 8192
DEFAULT_ENCODING = "utf-8"

# --- Logging ---
LOG_LEVEL = os.environ.get("SANTOS_LINEUP_LOG_LEVEL", "INFO").upper()

# --- Pipeline Parameters ---
MIN_FILLED_CELLS = 12  # inclusive
LOCAL_UTC_OFFSET_MINUTES = -180  # Santos wall clock, no DST

# Bounds for splitting "18310.5" style cells into length and draft
MAX_LENGTH_M = 500
MAX_DRAFT_M = 30

# Positional layout of the headerless page, current revision (operation column present)
FALLBACK_LAYOUT = (
    SemanticKey.SHIP,
    SemanticKey.FLAG,
    SemanticKey.LENGTH_DRAFT,
    SemanticKey.NAV,
    SemanticKey.ARRIVAL,
    SemanticKey.OPERATION,
    SemanticKey.AGENCY,
    SemanticKey.NOTICE,
    SemanticKey.GOODS,
    SemanticKey.WEIGHT,
    SemanticKey.VOYAGE,
    SemanticKey.DUV,
    SemanticKey.DUV_CLASS,
    SemanticKey.PIER,
    SemanticKey.TERMINAL,
)

# Older revision: same ordering with the operation slot left blank
FALLBACK_LAYOUT_NO_OPERATION = tuple(
    None if key is SemanticKey.OPERATION else key for key in FALLBACK_LAYOUT
)

LAYOUTS = {
    "current": FALLBACK_LAYOUT,
    "legacy": FALLBACK_LAYOUT_NO_OPERATION,
}


# --- Initial Setup ---
def setup_directories():
    """Create necessary directories if they don't exist."""
    DATA_DIR.mkdir(exist_ok=True)
    JSON_DIR.mkdir(exist_ok=True)

"""Configuration: env, data file, catalog credentials, client defaults."""
import os
from pathlib import Path

# Base paths (project root = parent of moviefaves package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so OMDB_API_KEY etc. are set
from dotenv import load_dotenv

load_dotenv(BASE_DIR / ".env")

DATA_DIR = BASE_DIR / "data"
FAVORITES_PATH = Path(os.getenv("MOVIEFAVES_DATA_FILE", str(DATA_DIR / "data.json")))
PUBLIC_DIR = Path(os.getenv("MOVIEFAVES_PUBLIC_DIR", str(BASE_DIR / "public")))

# API
API_HOST = os.getenv("MOVIEFAVES_HOST", "0.0.0.0")
API_PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("MOVIEFAVES_LOG_LEVEL", "INFO").upper()

# Movie catalog (OMDb-compatible)
OMDB_BASE_URL = os.getenv("OMDB_BASE_URL", "https://www.omdbapi.com/")
OMDB_API_KEY = os.getenv("OMDB_API_KEY", "")
HTTP_TIMEOUT_SEC = float(os.getenv("MOVIEFAVES_HTTP_TIMEOUT", "10"))

# Client
SERVER_URL = os.getenv("MOVIEFAVES_SERVER_URL", f"http://localhost:{API_PORT}")
PAGE_SIZE = 10  # catalog returns at most 10 results per page
CONFIRMATION_DISMISS_SEC = 3.0


def ensure_data_dir() -> None:
    FAVORITES_PATH.parent.mkdir(parents=True, exist_ok=True)

from __future__ import annotations
from pathlib import Path
from typing import Optional
import os
import secrets

from dotenv import load_dotenv

APP_DIR = Path(__file__).parent

# Load .env early; real environment variables win
load_dotenv(dotenv_path=APP_DIR / ".env", override=False)

BACKEND_URL = os.getenv("BACKEND_URL", "")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

def _to_float(x) -> Optional[float]:
    if x in (None, ""): return None
    try: return float(x)
    except ValueError: return None

BACKEND_TIMEOUT = _to_float(os.getenv("BACKEND_TIMEOUT"))

def public_backend_url() -> str:
    """Base address as the browser sees it ("" means same-origin)."""
    return BACKEND_URL.rstrip("/")

def backend_base_url() -> str:
    """
    Base address for server-side calls. With no BACKEND_URL the backend is
    assumed to share our origin, so we resolve it to our own bind address.
    """
    if BACKEND_URL:
        return BACKEND_URL.rstrip("/")
    host = "127.0.0.1" if HOST in ("0.0.0.0", "") else HOST
    return f"http://{host}:{PORT}"

# Signs the visitor cookie. Unset means a per-process key: visitor state is
# in memory anyway, so a restart dropping sessions loses nothing extra.
SESSION_SECRET = os.getenv("SESSION_SECRET") or secrets.token_hex(32)

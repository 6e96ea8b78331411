# config.py
import os
import dotenv
from pathlib import Path

# ========== Load environment ==========
dotenv.load_dotenv()

FLASK_PORT = int(os.getenv("FLASK_PORT", 3000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Google Books credential. APIKEY is the name older .env files used.
GOOGLE_BOOKS_API_KEY = os.getenv("GOOGLE_BOOKS_API_KEY") or os.getenv("APIKEY") or None

# Seconds. A timed out lookup behaves like "not found".
LOOKUP_TIMEOUT_S = float(os.getenv("LOOKUP_TIMEOUT_S", "5") or "5")
SEARCH_LIMIT = int(os.getenv("SEARCH_LIMIT", "5") or "5")

# Path of the JSON document holding the whole catalog
LIBRARY_FILE = Path(os.getenv("LIBRARY_FILE", "data/books.json")).resolve()

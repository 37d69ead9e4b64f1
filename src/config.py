"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = PROJECT_ROOT / "output"
MAILBOX_PATH = DATA_DIR / "mailbox.json"

# Ensure directories exist
DATA_DIR.mkdir(parents=True, exist_ok=True)
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

# Database (SQL mail store)
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'webmail.db'}")
DEFAULT_ACCOUNT_ID = int(os.getenv("DEFAULT_ACCOUNT_ID", "1"))

# Thread rendering
SNIPPET_LENGTH = int(os.getenv("SNIPPET_LENGTH", "160"))
AVATAR_URL_TEMPLATE = os.getenv(
    "AVATAR_URL_TEMPLATE",
    "https://www.gravatar.com/avatar/{hash}?d=identicon",
)
# Older than ~6 months (and not this year) shows the full numeric date
FULL_DATE_AFTER_SECONDS = 15552000

# Logging
LOG_DIR = OUTPUT_DIR / "logs"
LOG_FILE = LOG_DIR / "app.jsonl"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"

# Ensure log directory exists
LOG_DIR.mkdir(parents=True, exist_ok=True)

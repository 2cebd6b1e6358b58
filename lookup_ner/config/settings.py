"""
Environment settings loaded from .env file.
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- NLP Models ---
SPACY_MODEL: str = os.getenv("SPACY_MODEL", "en_core_web_sm")
LEMMATIZER_ENABLED: bool = os.getenv("LEMMATIZER_ENABLED", "true").lower() == "true"

# --- Snapshots ---
_snapshot_indent = os.getenv("SNAPSHOT_INDENT", "")
SNAPSHOT_INDENT: Optional[int] = int(_snapshot_indent) if _snapshot_indent else None

"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Decoded documents longer than this are truncated before extraction
MAX_CV_CHARS: int = int(os.getenv("MAX_CV_CHARS", "50000"))

# Job title shown on first load and used when the title input is blank
DEFAULT_JOB_TITLE: str = "Senior Accountant"

# Upload types accepted by the front end (extensions, no dot)
SUPPORTED_UPLOAD_TYPES: list = ["pdf", "doc", "docx", "txt"]

# /classboard/core/config.py

"""
Central configuration for the Classboard backend.

Values come from plain environment variables, optionally seeded from a local
`.env` file. Every setting has a default suitable for local development.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./classboard.db")

# --- Fetch Orchestrator ---
# Upper bound, in seconds, for the whole fan-out of filtered reads behind one report.
REPORT_READ_TIMEOUT_SECONDS = float(os.getenv("REPORT_READ_TIMEOUT_SECONDS", "10"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# --- HTTP ---
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

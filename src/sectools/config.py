"""
Runtime configuration, read from the environment (and a local .env file).
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- API server ---
API_KEY = os.getenv("API_KEY")
API_SERVER_HOST = os.getenv("API_SERVER_HOST", "127.0.0.1")
API_SERVER_PORT = int(os.getenv("API_SERVER_PORT", 8080))
CORS_ALLOW_ORIGINS: List[str] = [
    origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
]

# --- Port scanner ---
SCAN_MAX_CONCURRENCY = int(os.getenv("SCAN_MAX_CONCURRENCY", 50))
SCAN_MAX_PORTS = int(os.getenv("SCAN_MAX_PORTS", 1000))
SCAN_DEFAULT_TIMEOUT = int(os.getenv("SCAN_DEFAULT_TIMEOUT", 2))
SCAN_MAX_TIMEOUT = int(os.getenv("SCAN_MAX_TIMEOUT", 10))

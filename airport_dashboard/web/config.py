"""
Configuration for the airport dashboard web server.

Values come from environment variables, with development defaults.
"""

import os
from typing import List


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# Server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))

# CORS Configuration
ALLOWED_ORIGINS = _split(os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:3000,http://localhost:5173,http://localhost:8000,http://127.0.0.1:8000",
))

# Trusted Hosts Configuration
ALLOWED_HOSTS = _split(os.getenv(
    "ALLOWED_HOSTS",
    "localhost,127.0.0.1,testserver",
))

# Input Validation Limits
MAX_ID_LENGTH = 64
MAX_NAME_LENGTH = 200

# Security Headers
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

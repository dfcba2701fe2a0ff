import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Persistence endpoint (required)
DATABASE_URL = os.getenv("DATABASE_URL")

# Identity provider configuration
# PEM encoded RSA public key used to verify session tokens (required).
# Escaped newlines ("\n") are accepted so the key can live on one .env line.
IDENTITY_PROVIDER_PUBLIC_KEY = os.getenv("IDENTITY_PROVIDER_PUBLIC_KEY")
# Optional: when set, the token "iss" claim must match exactly
IDENTITY_PROVIDER_ISSUER = os.getenv("IDENTITY_PROVIDER_ISSUER")

# Calendar dates ("today", week and month windows) are computed in this zone
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "America/New_York")

# Default take-limit for list queries when the caller sends no limit
RECORD_LIST_LIMIT = int(os.getenv("RECORD_LIST_LIMIT", "100"))

# Frontend origins allowed by CORS
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000",
).split(",")

SECURITY_HEADERS_ENABLED = os.getenv("SECURITY_HEADERS_ENABLED", "true").lower() == "true"


def missing_required_settings() -> list[str]:
    """Names of required settings that are absent from the environment"""
    missing = []
    if not DATABASE_URL:
        missing.append("DATABASE_URL")
    if not IDENTITY_PROVIDER_PUBLIC_KEY:
        missing.append("IDENTITY_PROVIDER_PUBLIC_KEY")
    return missing

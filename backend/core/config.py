"""
Configuration management for the transcript service backend.
Loads configuration from environment variables and .env file.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
# Look for .env file in the project root or backend directory
BACKEND_DIR = Path(__file__).parent.parent
PROJECT_ROOT = BACKEND_DIR.parent
ENV_FILE = PROJECT_ROOT / ".env"

if ENV_FILE.exists():
    load_dotenv(ENV_FILE)
else:
    backend_env = BACKEND_DIR / ".env"
    if backend_env.exists():
        load_dotenv(backend_env)

# YouTube endpoints
YOUTUBE_WATCH_URL = os.getenv(
    "YOUTUBE_WATCH_URL", "https://www.youtube.com/watch?v={video_id}"
)
YOUTUBE_THUMBNAIL_URL = os.getenv(
    "YOUTUBE_THUMBNAIL_URL", "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"
)
YOUTUBE_USER_AGENT = os.getenv(
    "YOUTUBE_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
)

# Outbound HTTP (applies to the watch page and the caption payload)
HTTP_TIMEOUT_SEC = float(os.getenv("HTTP_TIMEOUT_SEC", "15"))

# Caption track preference
PREFERRED_CAPTION_LANGUAGE = os.getenv("PREFERRED_CAPTION_LANGUAGE", "en")

# Transcript search
SEARCH_CONTEXT_CHARS = int(os.getenv("SEARCH_CONTEXT_CHARS", "50"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API configuration
API_V1_PREFIX = "/api/v1"
# CORS origins can be comma-separated list in env var
CORS_ORIGINS_STR = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS = [origin.strip() for origin in CORS_ORIGINS_STR.split(",") if origin.strip()]

import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Spotify OAuth application
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID", "your-client-id")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET", "your-client-secret")
SPOTIFY_REDIRECT_URI = os.getenv(
    "SPOTIFY_REDIRECT_URI", "http://localhost:8000/api/spotify/callback"
)

# Server-side sessions
SESSION_SECRET = os.getenv("SESSION_SECRET", "spotify-study-timer-secret")
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "studybeats.sid")
SESSION_MAX_AGE_SECONDS = int(os.getenv("SESSION_MAX_AGE_SECONDS", str(7 * 24 * 60 * 60)))
SESSION_PRUNE_INTERVAL_SECONDS = int(os.getenv("SESSION_PRUNE_INTERVAL_SECONDS", str(24 * 60 * 60)))
SESSION_COOKIE_SECURE = os.getenv("ENVIRONMENT") == "production"

# Client-local key-value storage (session history)
LOCAL_STORAGE_PATH = os.getenv("LOCAL_STORAGE_PATH", ".studybeats/local_storage.json")

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

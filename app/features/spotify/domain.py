"""Domain models and errors for the Spotify session proxy"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


SPOTIFY_SCOPES = [
    "user-read-private",
    "user-read-email",
    "user-read-playback-state",
    "user-modify-playback-state",
    "playlist-read-private",
    "playlist-read-collaborative",
    "streaming",
]


class SpotifyToken(BaseModel):
    """OAuth credentials held in the server-side session only"""
    access_token: str
    refresh_token: Optional[str] = None
    expires_at: int  # epoch milliseconds

    def is_expired(self, now_ms: int) -> bool:
        return now_ms >= self.expires_at


class Track(BaseModel):
    """Read-only projection of a Spotify track"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    artists: List[str] = []
    album_art: str = Field(default="", alias="albumArt")
    uri: str


class Playlist(BaseModel):
    """Read-only projection of a Spotify playlist"""
    id: str
    name: str


class SpotifyError(Exception):
    """Base error for the Spotify proxy, carries the HTTP status to surface"""
    status_code = 500
    default_message = "Spotify request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAuthenticatedError(SpotifyError):
    status_code = 401
    default_message = "Not authenticated with Spotify"


class TokenExpiredError(SpotifyError):
    status_code = 401
    default_message = "Spotify session expired, please reconnect"


class AuthExchangeError(SpotifyError):
    status_code = 500
    default_message = "Authentication failed"


class UpstreamError(SpotifyError):
    status_code = 502
    default_message = "Spotify API request failed"


class PlaylistEmptyError(SpotifyError):
    status_code = 404
    default_message = "Playlist has no tracks"

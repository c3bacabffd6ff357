"""Spotify session proxy feature module"""

from app.features.spotify.api import router, spotify_error_handler
from app.features.spotify.client import SpotifyClient
from app.features.spotify.service import SpotifyService
from app.features.spotify.domain import (
    SPOTIFY_SCOPES,
    SpotifyToken,
    Track,
    Playlist,
    SpotifyError,
    NotAuthenticatedError,
    TokenExpiredError,
    AuthExchangeError,
    UpstreamError,
    PlaylistEmptyError,
)

__all__ = [
    "router",
    "spotify_error_handler",
    "SpotifyClient",
    "SpotifyService",
    "SPOTIFY_SCOPES",
    "SpotifyToken",
    "Track",
    "Playlist",
    "SpotifyError",
    "NotAuthenticatedError",
    "TokenExpiredError",
    "AuthExchangeError",
    "UpstreamError",
    "PlaylistEmptyError",
]

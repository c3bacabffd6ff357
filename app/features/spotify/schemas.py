"""Request and response schemas for the Spotify proxy API"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.features.spotify.domain import Playlist, Track


class SpotifyAuthResponse(BaseModel):
    """Token endpoint payload returned by accounts.spotify.com"""
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: Optional[str] = None
    scope: str = ""


class ConnectionStatusResponse(BaseModel):
    connected: bool


class AuthUrlResponse(BaseModel):
    url: str


class PlaylistListResponse(BaseModel):
    playlists: List[Playlist]


class CurrentlyPlayingResponse(BaseModel):
    track: Optional[Track] = None


class PlayRequest(BaseModel):
    """Request model for picking a break track from a playlist"""
    model_config = ConfigDict(populate_by_name=True)

    playlist_id: str = Field(alias="playlistId", min_length=1)


class PlayResponse(BaseModel):
    """
    The chosen track and its playlist.

    Nothing is started on any Spotify device; the client opens the track.
    """
    success: bool
    track: Track
    playlist: Playlist

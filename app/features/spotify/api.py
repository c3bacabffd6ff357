"""Spotify session proxy endpoints"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from app.config import SPOTIFY_CLIENT_ID, SPOTIFY_CLIENT_SECRET, SPOTIFY_REDIRECT_URI
from app.infra.session_store import SessionData
from app.middleware.session import get_session
from app.features.spotify.client import SpotifyClient
from app.features.spotify.domain import AuthExchangeError, SpotifyError
from app.features.spotify.service import SpotifyService
from app.features.spotify.schemas import (
    AuthUrlResponse,
    ConnectionStatusResponse,
    CurrentlyPlayingResponse,
    PlaylistListResponse,
    PlayRequest,
    PlayResponse,
)

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/spotify", tags=["spotify"])


def get_spotify_client() -> SpotifyClient:
    return SpotifyClient(SPOTIFY_CLIENT_ID, SPOTIFY_CLIENT_SECRET)


def get_spotify_service(
    session: SessionData = Depends(get_session),
    client: SpotifyClient = Depends(get_spotify_client),
) -> SpotifyService:
    return SpotifyService(
        client=client,
        session=session,
        client_id=SPOTIFY_CLIENT_ID,
        redirect_uri=SPOTIFY_REDIRECT_URI,
    )


def get_authenticated_spotify_service(
    service: SpotifyService = Depends(get_spotify_service),
) -> SpotifyService:
    """Same as get_spotify_service but rejects sessions without a usable token"""
    service.require_token()
    return service


async def spotify_error_handler(request: Request, exc: SpotifyError) -> JSONResponse:
    """Render proxy errors as {"message": ...} with the error's status"""
    logger.warning(f"{request.method} {request.url.path} failed: {exc.status_code} {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@router.get("/status", response_model=ConnectionStatusResponse)
async def get_connection_status(service: SpotifyService = Depends(get_spotify_service)):
    """Whether this browser session holds a Spotify token"""
    return {"connected": service.is_connected()}


@router.get("/auth-url", response_model=AuthUrlResponse)
async def get_auth_url(service: SpotifyService = Depends(get_spotify_service)):
    """Spotify authorization URL to redirect the user to"""
    return {"url": service.build_auth_url()}


@router.get("/callback")
async def spotify_callback(
    code: Optional[str] = None,
    state: Optional[str] = None,
    service: SpotifyService = Depends(get_spotify_service),
):
    """
    OAuth redirect target. Exchanges the code, stores the token in the
    session and sends the browser back to the app.

    The state parameter is accepted but not checked against anything.
    """
    if not code:
        return PlainTextResponse("Authorization code missing", status_code=400)

    try:
        await service.handle_callback(code)
    except AuthExchangeError as e:
        logger.error(f"Spotify auth error: {e}")
        return PlainTextResponse("Authentication failed", status_code=500)

    return RedirectResponse("/", status_code=302)


@router.get("/playlists", response_model=PlaylistListResponse)
async def list_playlists(service: SpotifyService = Depends(get_spotify_service)):
    """The user's playlists (first 50)"""
    return {"playlists": await service.list_playlists()}


@router.get("/currently-playing", response_model=CurrentlyPlayingResponse)
async def get_currently_playing(service: SpotifyService = Depends(get_spotify_service)):
    """The active track, or null when nothing is playing"""
    return {"track": await service.currently_playing()}


@router.post("/play", response_model=PlayResponse)
async def play_from_playlist(
    request: PlayRequest,
    service: SpotifyService = Depends(get_authenticated_spotify_service),
):
    """Choose a break track from a playlist. Does not start device playback."""
    track, playlist = await service.play_from_playlist(request.playlist_id)
    return {"success": True, "track": track, "playlist": playlist}

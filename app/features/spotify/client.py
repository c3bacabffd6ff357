"""Thin async client for the Spotify accounts service and Web API"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from app.features.spotify.domain import (
    AuthExchangeError,
    Playlist,
    Track,
    UpstreamError,
)
from app.features.spotify.schemas import SpotifyAuthResponse

logger = logging.getLogger(__name__)

SPOTIFY_AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"
REQUEST_TIMEOUT_SECONDS = 10.0


def _to_track(item: Dict[str, Any]) -> Track:
    try:
        images = (item.get("album") or {}).get("images") or []
        return Track(
            id=item["id"],
            name=item["name"],
            artists=[a["name"] for a in item.get("artists") or [] if a.get("name")],
            album_art=images[0]["url"] if images else "",
            uri=item["uri"],
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        logger.error(f"Unexpected Spotify track payload: {e!r}")
        raise UpstreamError("Unexpected track data from Spotify")


class SpotifyClient:
    """
    One-shot calls against Spotify. No retries: any non-2xx status or
    transport failure raises immediately.

    A custom httpx transport can be injected (e.g. httpx.MockTransport in tests).
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._transport = transport

    def _http(self, **kwargs) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=REQUEST_TIMEOUT_SECONDS,
            **kwargs,
        )

    async def exchange_code(self, code: str, redirect_uri: str) -> SpotifyAuthResponse:
        """
        Exchange an authorization code for tokens.

        Raises:
            AuthExchangeError: if Spotify rejects the code or the reply is malformed
        """
        try:
            async with self._http() as client:
                response = await client.post(
                    SPOTIFY_TOKEN_URL,
                    data={
                        "grant_type": "authorization_code",
                        "code": code,
                        "redirect_uri": redirect_uri,
                    },
                    auth=(self._client_id, self._client_secret),
                )
        except httpx.HTTPError as e:
            logger.error(f"Spotify token request failed: {e}")
            raise AuthExchangeError()

        if response.is_error:
            logger.error(f"Spotify token error: {response.status_code} - {response.text}")
            raise AuthExchangeError()

        try:
            return SpotifyAuthResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unexpected Spotify token payload: {e}")
            raise AuthExchangeError()

    async def _get(
        self,
        access_token: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """GET a Web API resource. Returns None for 204 No Content."""
        try:
            async with self._http(base_url=SPOTIFY_API_BASE_URL) as client:
                response = await client.get(
                    path,
                    params=params,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logger.error(f"Spotify request to {path} failed: {e}")
            raise UpstreamError()

        if response.is_error:
            logger.error(f"Spotify API error on {path}: {response.status_code} - {response.text}")
            raise UpstreamError(f"Spotify API error: {response.status_code}")

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from Spotify on {path}: {e}")
            raise UpstreamError()

    async def get_playlists(self, access_token: str, limit: int = 50) -> List[Playlist]:
        data = await self._get(access_token, "/me/playlists", {"limit": limit}) or {}
        return [
            Playlist(id=item["id"], name=item["name"])
            for item in data.get("items", [])
            if item
        ]

    async def get_currently_playing(self, access_token: str) -> Optional[Track]:
        data = await self._get(access_token, "/me/player/currently-playing")
        if not data:
            return None
        item = data.get("item")
        # episodes and ads come back without a track item, local files without an id
        if not item or item.get("type", "track") != "track" or not item.get("id"):
            return None
        return _to_track(item)

    async def get_playlist_tracks(
        self,
        access_token: str,
        playlist_id: str,
        limit: int = 10,
    ) -> List[Track]:
        data = await self._get(
            access_token, f"/playlists/{playlist_id}/tracks", {"limit": limit}
        ) or {}
        tracks = []
        for entry in data.get("items", []):
            item = (entry or {}).get("track")
            # local files and removed tracks have no id
            if item and item.get("id"):
                tracks.append(_to_track(item))
        return tracks

    async def get_playlist(self, access_token: str, playlist_id: str) -> Playlist:
        data = await self._get(
            access_token, f"/playlists/{playlist_id}", {"fields": "id,name"}
        )
        if not data:
            raise UpstreamError("Spotify returned an empty playlist response")
        return Playlist(id=data.get("id", playlist_id), name=data["name"])

"""Business logic for the Spotify session proxy"""

import logging
import random
import secrets
import string
from typing import Callable, List, Optional, Tuple
from urllib.parse import urlencode

from app.infra.session_store import SessionData
from app.features.spotify.client import SPOTIFY_AUTHORIZE_URL, SpotifyClient
from app.features.spotify.domain import (
    SPOTIFY_SCOPES,
    NotAuthenticatedError,
    Playlist,
    PlaylistEmptyError,
    SpotifyToken,
    TokenExpiredError,
    Track,
)
from app.utils.datetime_helper import now_ms

logger = logging.getLogger(__name__)

SESSION_TOKEN_KEY = "spotify_token"
STATE_LENGTH = 13
PLAYLIST_LIMIT = 50
TRACK_SAMPLE_LIMIT = 10

_STATE_ALPHABET = string.ascii_lowercase + string.digits


def generate_state(length: int = STATE_LENGTH) -> str:
    return "".join(secrets.choice(_STATE_ALPHABET) for _ in range(length))


class SpotifyService:
    """
    Spotify operations scoped to one browser session.

    The access token lives only in the session. There is no refresh: once
    the token expires every gated call fails until the user reconnects.
    """

    def __init__(
        self,
        client: SpotifyClient,
        session: SessionData,
        client_id: str,
        redirect_uri: str,
        clock: Callable[[], int] = now_ms,
        rng: Optional[random.Random] = None,
    ):
        self._client = client
        self._session = session
        self._client_id = client_id
        self._redirect_uri = redirect_uri
        self._clock = clock
        self._rng = rng or random.Random()

    def is_connected(self) -> bool:
        return self._session.get(SESSION_TOKEN_KEY) is not None

    def build_auth_url(self) -> str:
        """
        Authorization-code flow URL with the fixed scope set.

        The state parameter is random but is not kept for later comparison.
        """
        params = {
            "client_id": self._client_id,
            "response_type": "code",
            "redirect_uri": self._redirect_uri,
            "scope": " ".join(SPOTIFY_SCOPES),
            "state": generate_state(),
        }
        return f"{SPOTIFY_AUTHORIZE_URL}?{urlencode(params)}"

    async def handle_callback(self, code: str) -> SpotifyToken:
        """
        Exchange the authorization code and store the token in the session.

        Raises:
            AuthExchangeError: if the upstream exchange fails
        """
        auth = await self._client.exchange_code(code, self._redirect_uri)
        token = SpotifyToken(
            access_token=auth.access_token,
            refresh_token=auth.refresh_token,
            expires_at=self._clock() + auth.expires_in * 1000,
        )
        self._session.set(SESSION_TOKEN_KEY, token.model_dump())
        logger.info("Spotify token stored in session")
        return token

    def require_token(self) -> SpotifyToken:
        raw = self._session.get(SESSION_TOKEN_KEY)
        if raw is None:
            raise NotAuthenticatedError()
        token = SpotifyToken.model_validate(raw)
        if token.is_expired(self._clock()):
            logger.info("Spotify token expired, re-authentication required")
            raise TokenExpiredError()
        return token

    async def list_playlists(self) -> List[Playlist]:
        token = self.require_token()
        return await self._client.get_playlists(token.access_token, limit=PLAYLIST_LIMIT)

    async def currently_playing(self) -> Optional[Track]:
        token = self.require_token()
        return await self._client.get_currently_playing(token.access_token)

    async def play_from_playlist(self, playlist_id: str) -> Tuple[Track, Playlist]:
        """
        Pick a random track among the first tracks of a playlist.

        No playback command is sent to Spotify; the caller gets the chosen
        track and the playlist it came from.

        Raises:
            PlaylistEmptyError: if the playlist has no usable tracks
            UpstreamError: if any Spotify call fails
        """
        token = self.require_token()

        tracks = await self._client.get_playlist_tracks(
            token.access_token, playlist_id, limit=TRACK_SAMPLE_LIMIT
        )
        if not tracks:
            raise PlaylistEmptyError(f"Playlist {playlist_id} has no tracks")

        track = self._rng.choice(tracks[:TRACK_SAMPLE_LIMIT])
        playlist = await self._client.get_playlist(token.access_token, playlist_id)

        logger.info(f"Selected track {track.id} from playlist {playlist.id}")
        return track, playlist

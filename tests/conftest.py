"""Shared fixtures: isolated storage, fresh sessions and a fake Spotify"""
import json
import re
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient

import app.infra.local_storage as local_storage_module
from app.infra.local_storage import LocalStorage
from app.infra.session_store import reset_session_store
from app.features.spotify.api import get_spotify_client
from app.features.spotify.client import SpotifyClient
from app.main import app


def make_track(track_id: str, name: str = None, artist: str = "Lo-Fi Collective") -> dict:
    return {
        "id": track_id,
        "name": name or f"Track {track_id}",
        "type": "track",
        "artists": [{"name": artist}],
        "album": {"images": [{"url": f"https://img.example/{track_id}.jpg"}]},
        "uri": f"spotify:track:{track_id}",
    }


class FakeSpotify:
    """httpx.MockTransport handler standing in for accounts.spotify.com and api.spotify.com"""

    def __init__(self):
        self.token_status = 200
        self.expires_in = 3600
        self.api_status = 200
        self.playlists = [
            {"id": "playlist1", "name": "Study Beats"},
            {"id": "playlist2", "name": "Focus Music"},
        ]
        self.playlist_tracks = {
            "playlist1": [make_track(f"t{i}") for i in range(1, 16)],
            "playlist2": [make_track("only")],
            "empty": [],
        }
        self.currently_playing = None
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.url.host == "accounts.spotify.com" and path == "/api/token":
            if self.token_status != 200:
                return httpx.Response(self.token_status, json={"error": "invalid_grant"})
            form = parse_qs(request.content.decode())
            return httpx.Response(200, json={
                "access_token": f"access-{form['code'][0]}",
                "token_type": "Bearer",
                "expires_in": self.expires_in,
                "refresh_token": "refresh-token",
                "scope": "playlist-read-private",
            })

        if self.api_status != 200:
            return httpx.Response(self.api_status, json={"error": {"status": self.api_status}})

        if path == "/v1/me/playlists":
            return httpx.Response(200, json={"items": self.playlists})

        if path == "/v1/me/player/currently-playing":
            if self.currently_playing is None:
                return httpx.Response(204)
            return httpx.Response(200, json={"is_playing": True, "item": self.currently_playing})

        match = re.fullmatch(r"/v1/playlists/([^/]+)/tracks", path)
        if match:
            limit = int(request.url.params.get("limit", "100"))
            tracks = self.playlist_tracks.get(match.group(1), [])[:limit]
            return httpx.Response(200, json={"items": [{"track": t} for t in tracks]})

        match = re.fullmatch(r"/v1/playlists/([^/]+)", path)
        if match:
            playlist = next((p for p in self.playlists if p["id"] == match.group(1)), None)
            if playlist is None:
                return httpx.Response(404, json={"error": {"status": 404}})
            return httpx.Response(200, content=json.dumps(playlist))

        return httpx.Response(404)

    def paths(self):
        return [r.url.path for r in self.requests]


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def fake_spotify():
    return FakeSpotify()


@pytest.fixture
def client(storage, fake_spotify, monkeypatch):
    reset_session_store()
    monkeypatch.setattr(local_storage_module, "_local_storage", storage)
    app.dependency_overrides[get_spotify_client] = lambda: SpotifyClient(
        "test-client-id", "test-client-secret", transport=httpx.MockTransport(fake_spotify)
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    reset_session_store()


@pytest.fixture
def connected_client(client):
    response = client.get("/api/spotify/callback", params={"code": "abc"}, follow_redirects=False)
    assert response.status_code == 302
    return client

import io
import os
import random
from unittest.mock import MagicMock

# Keep test runs from writing log files
os.environ["LOG_FILE"] = ""

import pytest
from werkzeug.datastructures import FileStorage

from youtube_uploader.config import YouTubeConfig

CREDENTIAL_ENV_VARS = [
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "GOOGLE_REDIRECT_URI",
    "YOUTUBE_REFRESH_TOKEN",
]


@pytest.fixture
def seeded_rng():
    """Return a deterministic random source for title tones"""
    return random.Random(42)


@pytest.fixture
def youtube_config():
    """Return a fully populated YouTube configuration"""
    return YouTubeConfig(
        client_id="client-id.apps.googleusercontent.com",
        client_secret="client-secret",
        redirect_uri="http://localhost:8085/",
        refresh_token="refresh-token",
        chunk_size=256 * 1024,
    )


@pytest.fixture
def credential_env(monkeypatch):
    """Set every credential environment variable"""
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.setenv(name, f"value-for-{name.lower()}")
    return monkeypatch


def make_youtube_client(response=None, error=None):
    """Build a mock YouTube service whose insert().execute() returns or raises"""
    youtube = MagicMock()
    insert_request = youtube.videos.return_value.insert.return_value
    if error is not None:
        insert_request.execute.side_effect = error
    else:
        insert_request.execute.return_value = response
    return youtube


@pytest.fixture
def youtube_client():
    """Return a mock YouTube service that echoes back video ID abc123"""
    return make_youtube_client(response={"id": "abc123"})


@pytest.fixture
def video_file():
    """Return a small multipart video part"""
    return FileStorage(
        stream=io.BytesIO(b"\x00\x00\x00\x18ftypmp42" + b"\x00" * 64),
        filename="clip.mp4",
        content_type="video/mp4",
    )


@pytest.fixture
def empty_video_file():
    """Return a zero-length multipart video part"""
    return FileStorage(
        stream=io.BytesIO(b""), filename="empty.mp4", content_type="video/mp4"
    )

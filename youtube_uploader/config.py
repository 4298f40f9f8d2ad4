"""
YouTube Configuration Module
Holds the OAuth credentials of the single upload channel and upload settings.
"""

import os
from dataclasses import dataclass, fields
from typing import List, Optional

from dotenv import load_dotenv

from app.config import settings

SCOPES = ["https://www.googleapis.com/auth/youtube.upload"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

# Credential field -> environment variable
REQUIRED_ENV_VARS = {
    "client_id": "GOOGLE_CLIENT_ID",
    "client_secret": "GOOGLE_CLIENT_SECRET",
    "redirect_uri": "GOOGLE_REDIRECT_URI",
    "refresh_token": "YOUTUBE_REFRESH_TOKEN",
}


@dataclass
class YouTubeConfig:
    """YouTube API configuration."""

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None
    refresh_token: Optional[str] = None
    category_id: str = "22"  # People & Blogs
    upload_timeout: int = 300
    chunk_size: int = 10 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "YouTubeConfig":
        """Load configuration from environment variables."""
        load_dotenv()

        return cls(
            client_id=os.getenv("GOOGLE_CLIENT_ID"),
            client_secret=os.getenv("GOOGLE_CLIENT_SECRET"),
            redirect_uri=os.getenv("GOOGLE_REDIRECT_URI"),
            refresh_token=os.getenv("YOUTUBE_REFRESH_TOKEN"),
            category_id=settings.YOUTUBE_CATEGORY_ID,
            upload_timeout=settings.UPLOAD_TIMEOUT_SECONDS,
            chunk_size=settings.UPLOAD_CHUNK_SIZE,
        )

    def missing_fields(self) -> List[str]:
        """Return the environment names of every unset credential value."""
        return [
            REQUIRED_ENV_VARS[f.name]
            for f in fields(self)
            if f.name in REQUIRED_ENV_VARS and not getattr(self, f.name)
        ]

    def validate(self) -> bool:
        """Validate the configuration."""
        return not self.missing_fields()

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks
        return (
            f"YouTubeConfig(client_id={self.client_id!r}, "
            f"redirect_uri={self.redirect_uri!r}, category_id={self.category_id!r}, "
            f"upload_timeout={self.upload_timeout}, chunk_size={self.chunk_size})"
        )

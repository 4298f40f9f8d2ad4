import logging

import google_auth_httplib2
import httplib2
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from app.errors import ConfigurationError

from .config import SCOPES, TOKEN_URI, YouTubeConfig

logger = logging.getLogger(__name__)


class UploadCredentialFactory:
    """Builds an authenticated YouTube client for the configured channel."""

    def __init__(self, config: YouTubeConfig):
        self.config = config

    def get_credentials(self) -> Credentials:
        """
        Build OAuth credentials from the channel's refresh token.

        The access token is fetched lazily on the first API call.

        Raises:
            ConfigurationError: Naming every missing configuration value
        """
        missing = self.config.missing_fields()
        if missing:
            logger.error(f"Missing YouTube configuration: {', '.join(missing)}")
            raise ConfigurationError(missing=missing)

        return Credentials(
            None,  # No access token until the first refresh
            refresh_token=self.config.refresh_token,
            token_uri=TOKEN_URI,
            client_id=self.config.client_id,
            client_secret=self.config.client_secret,
            scopes=SCOPES,
        )

    def build(self):
        """Get a YouTube API service instance bound to the configured channel."""
        credentials = self.get_credentials()

        http = google_auth_httplib2.AuthorizedHttp(
            credentials, http=httplib2.Http(timeout=self.config.upload_timeout)
        )
        youtube = build("youtube", "v3", http=http, cache_discovery=False)
        logger.debug("YouTube client built")
        return youtube

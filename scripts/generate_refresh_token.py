"""
Run the OAuth consent flow once and print the refresh token for YOUTUBE_REFRESH_TOKEN.
"""

import sys
from pathlib import Path
from urllib.parse import urlparse

from google_auth_oauthlib.flow import InstalledAppFlow

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from youtube_uploader.config import SCOPES, TOKEN_URI, YouTubeConfig  # noqa: E402

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"


def main():
    """Generate a refresh token for the upload channel."""
    config = YouTubeConfig.from_env()
    missing = [
        name for name in config.missing_fields() if name != "YOUTUBE_REFRESH_TOKEN"
    ]
    if missing:
        print(f"Error: missing environment variables: {', '.join(missing)}")
        return False

    redirect = urlparse(config.redirect_uri)
    if redirect.hostname not in ("localhost", "127.0.0.1"):
        print(f"Error: GOOGLE_REDIRECT_URI must point at localhost, got {config.redirect_uri}")
        return False

    try:
        flow = InstalledAppFlow.from_client_config(
            {
                "web": {
                    "client_id": config.client_id,
                    "client_secret": config.client_secret,
                    "auth_uri": AUTH_URI,
                    "token_uri": TOKEN_URI,
                    "redirect_uris": [config.redirect_uri],
                }
            },
            SCOPES,
        )

        # prompt=consent makes Google issue a refresh token every time
        credentials = flow.run_local_server(
            host=redirect.hostname,
            port=redirect.port or 80,
            access_type="offline",
            prompt="consent",
        )
    except Exception as e:
        print(f"Error generating token: {e}")
        return False

    if not credentials.refresh_token:
        print("Error: Google did not return a refresh token")
        return False

    print("Add this to your .env file:")
    print(f"YOUTUBE_REFRESH_TOKEN={credentials.refresh_token}")
    return True


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)

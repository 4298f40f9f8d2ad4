"""Configuration module for the YouTube metadata studio."""

import os

# Load environment variables
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass  # dotenv not available


class Settings:
    """Application settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.environ.get("LOG_FILE", "metadata_studio.log")

    # Upload tunables
    UPLOAD_TIMEOUT_SECONDS: int = int(
        os.environ.get("UPLOAD_TIMEOUT_SECONDS", "300")
    )  # 5 minutes
    UPLOAD_CHUNK_SIZE: int = int(
        os.environ.get("UPLOAD_CHUNK_SIZE", str(10 * 1024 * 1024))
    )
    MAX_UPLOAD_BYTES: int = int(
        os.environ.get("MAX_UPLOAD_BYTES", str(2 * 1024 * 1024 * 1024))
    )
    YOUTUBE_CATEGORY_ID: str = os.environ.get(
        "YOUTUBE_CATEGORY_ID", "22"
    )  # People & Blogs

    # Server
    PORT: int = int(os.environ.get("PORT", "8080"))

    # Override settings with environment variables
    def __init__(self):
        """Initialize settings from environment variables."""
        for key, value in os.environ.items():
            if hasattr(self, key):
                attr_type = type(getattr(self, key))
                if attr_type == bool:
                    setattr(self, key, value.lower() == "true")
                elif attr_type == int:
                    setattr(self, key, int(value))
                elif attr_type == float:
                    setattr(self, key, float(value))
                else:
                    setattr(self, key, value)


# Create a singleton instance
settings = Settings()

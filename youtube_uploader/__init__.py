"""
YouTube Uploader Module for the metadata studio
Builds the channel's authenticated client and uploads videos to it.
"""

from .config import YouTubeConfig
from .credentials import UploadCredentialFactory
from .uploader import UploadRequest, UploadResult, YouTubeUploader, parse_tags

__all__ = [
    "YouTubeConfig",
    "UploadCredentialFactory",
    "UploadRequest",
    "UploadResult",
    "YouTubeUploader",
    "parse_tags",
]

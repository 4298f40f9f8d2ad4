"""
YouTube Uploader Module
Streams an in-memory video payload to YouTube with its metadata.
"""

import io
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from app.errors import UploadError, ValidationError
from app.services.keyword_sanitizer import split_comma_list

from .config import YouTubeConfig

logger = logging.getLogger(__name__)

MAX_UPLOAD_TAGS = 15
DEFAULT_TITLE = "Untitled Upload"
DEFAULT_PRIVACY = "private"
DEFAULT_MIME_TYPE = "video/*"
PRIVACY_STATUSES = ("public", "unlisted", "private")
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


@dataclass
class UploadRequest:
    """A video payload and the metadata to publish it with."""

    video: Optional[bytes]
    mime_type: str = DEFAULT_MIME_TYPE
    title: str = DEFAULT_TITLE
    description: str = ""
    privacy_status: str = DEFAULT_PRIVACY
    tags: Optional[str] = None

    @classmethod
    def from_fields(
        cls,
        video: Optional[bytes],
        mime_type: Optional[str] = None,
        title: Optional[str] = None,
        description: Optional[str] = None,
        privacy_status: Optional[str] = None,
        tags: Optional[str] = None,
    ) -> "UploadRequest":
        """Build a request from raw form values, applying defaults to blanks."""
        return cls(
            video=video,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            title=title or DEFAULT_TITLE,
            description=description or "",
            privacy_status=privacy_status or DEFAULT_PRIVACY,
            tags=tags,
        )


@dataclass
class UploadResult:
    """Identifier and watch URL of an uploaded video."""

    video_id: Optional[str] = None

    @property
    def video_url(self) -> Optional[str]:
        if not self.video_id:
            return None
        return WATCH_URL.format(video_id=self.video_id)

    def to_dict(self) -> Dict[str, Any]:
        body = {}
        if self.video_id:
            body["videoId"] = self.video_id
            body["videoUrl"] = self.video_url
        return body


def parse_tags(raw: Optional[str]) -> List[str]:
    """Split a comma-separated tag field, keeping at most 15 tags."""
    return split_comma_list(raw, MAX_UPLOAD_TAGS)


def _http_error_message(error: HttpError) -> str:
    reason = getattr(error, "reason", None) or error._get_reason()
    return reason or str(error)


class YouTubeUploader:
    """Validates upload requests and performs the insert call."""

    def __init__(self, config: Optional[YouTubeConfig] = None):
        self.config = config or YouTubeConfig()

    def validate(self, request: UploadRequest) -> None:
        if request.video is None:
            raise ValidationError("Video file is required.")
        if len(request.video) == 0:
            raise ValidationError("Uploaded file is empty.")
        if request.privacy_status not in PRIVACY_STATUSES:
            raise ValidationError(
                f"privacyStatus must be one of: {', '.join(PRIVACY_STATUSES)}"
            )

    def build_body(self, request: UploadRequest) -> Dict[str, Any]:
        tags = parse_tags(request.tags)

        snippet = {
            "title": request.title,
            "description": request.description,
            "categoryId": self.config.category_id,
        }
        if tags:
            snippet["tags"] = tags

        return {
            "snippet": snippet,
            "status": {
                "privacyStatus": request.privacy_status,
                "selfDeclaredMadeForKids": False,
            },
        }

    def upload(self, request: UploadRequest, youtube) -> UploadResult:
        """
        Upload a video to YouTube.

        Args:
            request: Video payload and metadata
            youtube: Authenticated YouTube API service

        Returns:
            UploadResult, empty when the platform returned no identifier

        Raises:
            ValidationError: If the payload is missing or empty
            UploadError: If the platform call fails
        """
        self.validate(request)
        body = self.build_body(request)

        # Wrapped once; resumable chunks keep the transport from copying it whole
        media = MediaIoBaseUpload(
            io.BytesIO(request.video),
            mimetype=request.mime_type,
            chunksize=self.config.chunk_size,
            resumable=True,
        )

        logger.info(
            f"Uploading {len(request.video)} bytes as '{request.title}' "
            f"({request.privacy_status})"
        )

        try:
            insert_request = youtube.videos().insert(
                part=",".join(body.keys()), body=body, media_body=media
            )
            response = insert_request.execute(num_retries=0)
        except HttpError as e:
            message = _http_error_message(e)
            logger.error(f"YouTube API error: {message}")
            raise UploadError(message) from e
        except Exception as e:
            logger.error(f"Upload failed: {str(e)}")
            raise UploadError(str(e) or None) from e

        video_id = (response or {}).get("id")
        result = UploadResult(video_id=video_id)
        if video_id:
            logger.info(f"Video uploaded successfully! Video ID: {video_id}")
            logger.info(f"Watch it here: {result.video_url}")
        else:
            logger.warning("Upload finished without a video ID")
        return result

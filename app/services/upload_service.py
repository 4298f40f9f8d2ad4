"""Service wiring channel credentials and the YouTube uploader together."""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from app.errors import UploadError, error_response
from youtube_uploader import (
    UploadCredentialFactory,
    UploadRequest,
    YouTubeConfig,
    YouTubeUploader,
)

logger = logging.getLogger(__name__)


def parse_upload_form(form: Mapping[str, str], files: Mapping[str, Any]) -> UploadRequest:
    """
    Build an UploadRequest from multipart form fields.

    The video part is read fully into memory here.

    Args:
        form: Text fields (title, description, tags, privacyStatus)
        files: File parts, keyed by field name

    Returns:
        UploadRequest with defaults applied
    """
    video_file = files.get("video")
    video = None
    mime_type = None
    if video_file is not None:
        video = video_file.read()
        mime_type = getattr(video_file, "mimetype", None)

    return UploadRequest.from_fields(
        video=video,
        mime_type=mime_type,
        title=form.get("title"),
        description=form.get("description"),
        privacy_status=form.get("privacyStatus"),
        tags=form.get("tags"),
    )


class UploadService:
    """Handles upload requests for the configured channel."""

    def __init__(
        self,
        config_loader: Callable[[], YouTubeConfig] = YouTubeConfig.from_env,
        uploader: Optional[YouTubeUploader] = None,
    ):
        self._config_loader = config_loader
        self._uploader = uploader

    def upload(self, form: Mapping[str, str], files: Mapping[str, Any]) -> Dict[str, Any]:
        config = self._config_loader()
        # Rebuilt per call; config values do not change at runtime
        youtube = UploadCredentialFactory(config).build()

        request = parse_upload_form(form, files)
        uploader = self._uploader or YouTubeUploader(config)
        return uploader.upload(request, youtube).to_dict()

    def handle(
        self, form: Mapping[str, str], files: Mapping[str, Any]
    ) -> Tuple[Dict[str, Any], int]:
        """
        Handle a multipart upload request.

        Returns:
            Tuple of (response body, HTTP status)
        """
        try:
            return self.upload(form, files), 200
        except Exception as e:
            logger.error(f"YouTube upload error: {str(e)}")
            return error_response(e, fallback=UploadError.default_message)

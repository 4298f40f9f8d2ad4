"""Service for validating metadata requests and generating suggestions."""

import logging
from typing import Any, Dict, Optional, Tuple

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from app.errors import InternalError, ValidationError, error_response
from app.services.keyword_sanitizer import sanitize_keywords
from app.services.metadata_synthesizer import GeneratedMetadata, MetadataSynthesizer

logger = logging.getLogger(__name__)


class MetadataRequest(BaseModel):
    """Request body for metadata generation."""

    model_config = ConfigDict(str_strip_whitespace=True)

    topic: str = Field(..., min_length=3, max_length=180)
    keywords: Optional[str] = None


def parse_metadata_request(payload: Any) -> MetadataRequest:
    """
    Validate a decoded JSON body against MetadataRequest.

    Raises:
        ValidationError: With the first validation failure message
    """
    try:
        return MetadataRequest.model_validate(payload)
    except pydantic.ValidationError as e:
        first = e.errors()[0] if e.errors() else None
        if first is None:
            raise ValidationError() from e
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first['msg']}" if location else first["msg"]
        raise ValidationError(message) from e


class MetadataService:
    """Validates inbound requests and runs the metadata synthesizer."""

    def __init__(self, synthesizer: Optional[MetadataSynthesizer] = None):
        self.synthesizer = synthesizer or MetadataSynthesizer()

    def generate(self, payload: Any) -> GeneratedMetadata:
        request = parse_metadata_request(payload)
        keywords = sanitize_keywords(request.keywords)

        try:
            return self.synthesizer.synthesize(request.topic, keywords)
        except Exception as e:
            raise InternalError(str(e) or None) from e

    def handle(self, payload: Any) -> Tuple[Dict[str, Any], int]:
        """
        Handle a metadata generation request.

        Args:
            payload: Decoded JSON request body

        Returns:
            Tuple of (response body, HTTP status)
        """
        try:
            metadata = self.generate(payload)
        except ValidationError as e:
            logger.warning(f"Rejected metadata request: {e.message}")
            return error_response(e)
        except Exception as e:
            logger.error(f"Metadata generation error: {str(e)}", exc_info=True)
            return error_response(e, fallback=InternalError.default_message)

        logger.info(f"Generated metadata: {metadata.title}")
        return metadata.to_dict(), 200

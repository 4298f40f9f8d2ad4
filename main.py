# YouTube Metadata Studio
# Drafts video metadata from a topic and uploads videos to the configured channel.
import logging
import os
from datetime import datetime

from flask import Flask, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from app.config import settings
from app.services.metadata_service import MetadataService
from app.services.upload_service import UploadService
from logger_config import setup_logger

logger = logging.getLogger(__name__)


def configure_logging():
    """Attach handlers to the application's logger namespaces."""
    for name in ("app", "youtube_uploader", __name__):
        setup_logger(name)


def create_app(metadata_service=None, upload_service=None):
    """
    Create the Flask application.

    Args:
        metadata_service: MetadataService instance, built when omitted
        upload_service: UploadService instance, built when omitted

    Returns:
        Flask: Configured application
    """
    configure_logging()

    flask_app = Flask(__name__)
    flask_app.config["MAX_CONTENT_LENGTH"] = settings.MAX_UPLOAD_BYTES

    metadata_service = metadata_service or MetadataService()
    upload_service = upload_service or UploadService()

    @flask_app.errorhandler(RequestEntityTooLarge)
    def request_too_large(error):
        limit_mb = settings.MAX_UPLOAD_BYTES // (1024 * 1024)
        logger.warning(f"Rejected request larger than {limit_mb} MB")
        return jsonify({"error": f"Request exceeds the {limit_mb} MB limit."}), 413

    @flask_app.route("/health")
    def health_check():
        """Health check endpoint."""
        return jsonify({"status": "healthy", "timestamp": datetime.now().isoformat()})

    @flask_app.route("/api/metadata", methods=["POST"])
    def generate_metadata():
        """Suggest a title, description and tags for a topic."""
        payload = request.get_json(silent=True)
        body, status = metadata_service.handle(payload)
        return jsonify(body), status

    @flask_app.route("/api/upload", methods=["POST"])
    def upload():
        """Upload a video with its metadata to the configured channel."""
        body, status = upload_service.handle(request.form, request.files)
        return jsonify(body), status

    return flask_app


app = create_app()

# Expose WSGI application for Gunicorn
application = app

# Main execution logic
if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="YouTube Metadata Studio")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", settings.PORT)),
        help="Port to run Flask server on",
    )
    args = parser.parse_args()

    logger.info(f"Starting Flask server on port {args.port}...")
    app.run(host="0.0.0.0", port=args.port, debug=False)

# Deployment command (the request timeout must cover UPLOAD_TIMEOUT_SECONDS):
#
# gunicorn main:application --bind 0.0.0.0:$PORT --timeout 330

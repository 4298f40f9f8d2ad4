from unittest.mock import patch

from app.services.upload_service import UploadService, parse_upload_form
from youtube_uploader import UploadCredentialFactory, YouTubeConfig

from conftest import make_youtube_client


def _service(config):
    return UploadService(config_loader=lambda: config)


def test_handle_returns_video_id_and_url(youtube_config, youtube_client, video_file):
    with patch.object(UploadCredentialFactory, "build", return_value=youtube_client):
        body, status = _service(youtube_config).handle(
            {"title": "My Clip", "tags": "a, b", "privacyStatus": "public"},
            {"video": video_file},
        )

    assert status == 200
    assert body == {
        "videoId": "abc123",
        "videoUrl": "https://www.youtube.com/watch?v=abc123",
    }
    snippet = youtube_client.videos.return_value.insert.call_args.kwargs["body"]["snippet"]
    assert snippet["title"] == "My Clip"
    assert snippet["tags"] == ["a", "b"]


def test_handle_without_identifier_is_success(youtube_config, video_file):
    youtube = make_youtube_client(response={"kind": "youtube#video"})

    with patch.object(UploadCredentialFactory, "build", return_value=youtube):
        body, status = _service(youtube_config).handle({}, {"video": video_file})

    assert status == 200
    assert body == {}


def test_handle_missing_configuration(video_file):
    body, status = _service(YouTubeConfig()).handle({}, {"video": video_file})

    assert status == 500
    assert body["error"] == (
        "Missing environment variables: GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, "
        "GOOGLE_REDIRECT_URI, YOUTUBE_REFRESH_TOKEN"
    )


def test_handle_missing_video(youtube_config, youtube_client):
    with patch.object(UploadCredentialFactory, "build", return_value=youtube_client):
        body, status = _service(youtube_config).handle({"title": "x"}, {})

    assert status == 400
    assert body == {"error": "Video file is required."}
    youtube_client.videos.assert_not_called()


def test_handle_empty_video(youtube_config, youtube_client, empty_video_file):
    with patch.object(UploadCredentialFactory, "build", return_value=youtube_client):
        body, status = _service(youtube_config).handle({}, {"video": empty_video_file})

    assert status == 400
    assert body == {"error": "Uploaded file is empty."}
    youtube_client.videos.assert_not_called()


def test_handle_platform_failure(youtube_config, video_file):
    youtube = make_youtube_client(error=TimeoutError("The read operation timed out"))

    with patch.object(UploadCredentialFactory, "build", return_value=youtube):
        body, status = _service(youtube_config).handle({}, {"video": video_file})

    assert status == 500
    assert body == {"error": "The read operation timed out"}


def test_parse_upload_form_applies_defaults(video_file):
    request = parse_upload_form({"title": "", "description": ""}, {"video": video_file})

    assert request.title == "Untitled Upload"
    assert request.description == ""
    assert request.privacy_status == "private"
    assert request.mime_type == "video/mp4"
    assert request.video.startswith(b"\x00\x00\x00\x18ftyp")
    assert request.tags is None

"""
Tests for the frontend API client.
"""

import pytest
from unittest.mock import MagicMock, patch

from meeting_notes.frontend.api_client import ApiClient, ApiError


def make_response(payload, ok=True):
    response = MagicMock()
    response.ok = ok
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def client():
    return ApiClient("http://localhost:8000")


@pytest.fixture
def result_payload():
    return {
        "utterances": [{"speaker": "A", "text": "Hello"}],
        "summary": None,
        "actionItems": None,
        "topics": None,
        "lemurAvailable": False,
        "summaryAvailable": False,
        "topicsAvailable": False,
    }


@patch("meeting_notes.frontend.api_client.requests.post")
def test_transcribe_url(mock_post, client, result_payload):
    mock_post.return_value = make_response(result_payload)

    result = client.transcribe_url("https://example.com/a.mp3")

    mock_post.assert_called_once_with(
        "http://localhost:8000/api/transcribe", json={"url": "https://example.com/a.mp3"}
    )
    assert result.utterances[0].speaker == "A"
    assert not result.lemur_available


@patch("meeting_notes.frontend.api_client.requests.post")
def test_transcribe_file(mock_post, client, result_payload):
    mock_post.return_value = make_response(result_payload)

    client.transcribe_file("meeting.mp3", b"audio bytes")

    assert mock_post.call_args[1]["files"] == {"file": ("meeting.mp3", b"audio bytes")}


@patch("meeting_notes.frontend.api_client.requests.post")
def test_summarize(mock_post, client):
    mock_post.return_value = make_response({"summary": "A short greeting."})

    assert client.summarize("Speaker A: Hello") == "A short greeting."
    mock_post.assert_called_once_with(
        "http://localhost:8000/api/summarize", json={"text": "Speaker A: Hello"}
    )


@patch("meeting_notes.frontend.api_client.requests.post")
def test_error_message_is_surfaced(mock_post, client):
    mock_post.return_value = make_response({"error": "No audio URL provided."}, ok=False)

    with pytest.raises(ApiError, match="No audio URL provided."):
        client.transcribe_url("")


@patch("meeting_notes.frontend.api_client.requests.post")
def test_error_without_body(mock_post, client):
    mock_post.return_value = make_response(ValueError("no json"), ok=False)

    with pytest.raises(ApiError, match="Something went wrong"):
        client.summarize("text")

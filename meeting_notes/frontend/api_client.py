"""
API client for communicating with the meeting notes backend.
"""

import requests
from typing import Any, Dict
from urllib.parse import urljoin

from meeting_notes.config import config
from meeting_notes.models.schemas import TranscriptResult


class ApiError(Exception):
    """Error message returned by the backend."""


class ApiClient:
    """Client for interacting with the meeting notes API."""

    def __init__(self, base_url: str = config.PUBLIC_URL):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def _handle(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok:
            raise ApiError(data.get("error") or "Something went wrong")
        return data

    def transcribe_url(self, url: str) -> TranscriptResult:
        """
        Transcribe audio from a URL or YouTube link.

        Args:
            url: Audio URL

        Returns:
            TranscriptResult
        """
        response = requests.post(self._url("transcribe"), json={"url": url})
        return TranscriptResult.model_validate(self._handle(response))

    def transcribe_file(self, filename: str, data: bytes) -> TranscriptResult:
        """
        Upload and transcribe an audio file.

        Args:
            filename: Name of the uploaded file
            data: File content

        Returns:
            TranscriptResult
        """
        response = requests.post(
            self._url("transcribe"),
            files={"file": (filename, data)},
        )
        return TranscriptResult.model_validate(self._handle(response))

    def summarize(self, text: str) -> str:
        """
        Summarize transcript text with the chat model.

        Args:
            text: Transcript text

        Returns:
            Summary text
        """
        response = requests.post(self._url("summarize"), json={"text": text})
        return self._handle(response)["summary"]

"""
Resolution of request inputs into an audio URL the transcriber can fetch.
"""

import asyncio
from typing import Optional

from meeting_notes.core.transcriber import AudioTranscriber
from meeting_notes.core.youtube_downloader import YouTubeDownloader, is_youtube_url
from meeting_notes.models.schemas import AudioSource
from meeting_notes.utils.error_handling import InputValidationError
from meeting_notes.utils.logger import logging


class AudioSourceResolver:
    """Turns a URL, YouTube link or uploaded binary into one audio reference."""

    def __init__(self, transcriber: AudioTranscriber, downloader: Optional[YouTubeDownloader] = None):
        self.transcriber = transcriber
        self.downloader = downloader or YouTubeDownloader()

    @staticmethod
    def validate(source: AudioSource):
        """
        Reject a source that carries neither a file nor a URL.

        Raises:
            InputValidationError: before any external call is attempted
        """
        if source.data is not None or source.filename is not None:
            if not source.data:
                raise InputValidationError("No file provided.")
            return
        if not source.url or not source.url.strip():
            raise InputValidationError("No audio URL provided.")

    def resolve_youtube(self, url: str) -> str:
        """Download a YouTube video's audio, upload it, and return the upload URL."""
        with self.downloader.download(url) as audio_path:
            data = audio_path.read_bytes()
            return self.transcriber.upload(data, filename=audio_path.name)

    async def resolve(self, source: AudioSource) -> str:
        """
        Resolve a request input into an audio URL.

        Args:
            source: URL or uploaded binary

        Returns:
            URL to hand to the transcription service
        """
        self.validate(source)

        if source.data:
            return await asyncio.to_thread(self.transcriber.upload, source.data, source.filename)

        url = source.url.strip()
        if is_youtube_url(url):
            logging.info(f"Resolving YouTube source: {url}")
            return await asyncio.to_thread(self.resolve_youtube, url)

        return url

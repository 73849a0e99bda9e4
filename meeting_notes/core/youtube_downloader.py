"""
YouTube audio downloader module.

Audio is extracted by the external ``yt-dlp`` command into the system temp
directory and removed again as soon as the caller is done with it.
"""

import os
import subprocess
import tempfile
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional
from urllib.parse import urlparse, parse_qs

from meeting_notes.config import config
from meeting_notes.utils.error_handling import DownloadError
from meeting_notes.utils.logger import logging

YOUTUBE_HOSTS = {"youtube.com", "www.youtube.com", "m.youtube.com", "music.youtube.com"}
YOUTU_BE_HOSTS = {"youtu.be", "www.youtu.be"}
YOUTUBE_PATH_PREFIXES = ("/shorts/", "/embed/", "/live/", "/v/")


def is_youtube_url(url: str) -> bool:
    """Check whether a URL points at a YouTube video."""
    try:
        parsed_url = urlparse(url.strip())
    except ValueError:
        return False

    hostname = (parsed_url.hostname or "").lower()
    if hostname in YOUTU_BE_HOSTS:
        return len(parsed_url.path.strip("/")) > 0
    if hostname in YOUTUBE_HOSTS:
        if parsed_url.path == "/watch":
            return bool(parse_qs(parsed_url.query).get("v"))
        return parsed_url.path.startswith(YOUTUBE_PATH_PREFIXES)
    return False


@contextmanager
def temporary_audio_path(directory: Optional[str] = None) -> Iterator[Path]:
    """
    Reserve a unique file path for a download and delete it on exit.

    The file and the ``.part`` file yt-dlp leaves behind on an interrupted
    download are both removed, whether the block completes or raises.
    """
    directory = directory or tempfile.gettempdir()
    path = Path(directory) / f"meeting-notes-{uuid.uuid4().hex}.audio"
    try:
        yield path
    finally:
        for candidate in (path, path.with_name(path.name + ".part")):
            try:
                candidate.unlink()
                logging.debug(f"Removed temporary file: {candidate}")
            except FileNotFoundError:
                pass


class YouTubeDownloader:
    """Class to handle downloading the audio track of YouTube videos."""

    def __init__(
        self,
        executable: str = config.YTDLP_PATH,
        timeout: int = config.DOWNLOAD_TIMEOUT,
        temp_dir: Optional[str] = None,
    ):
        """
        Initialize the downloader.

        Args:
            executable: Name or path of the yt-dlp binary
            timeout: Seconds before the download is abandoned
            temp_dir: Directory for downloads (system temp dir if None)
        """
        self.executable = executable
        self.timeout = timeout
        self.temp_dir = temp_dir

    def _build_command(self, url: str, output_path: Path):
        return [
            self.executable,
            "-f", "bestaudio",
            "--no-playlist",
            "--no-progress",
            "-o", str(output_path),
            url,
        ]

    def download_audio(self, url: str, output_path: Path) -> Path:
        """
        Download the best audio track of a video to ``output_path``.

        Raises:
            DownloadError: on timeout, missing binary, non-zero exit or
                when no file was written
        """
        logging.info(f"Downloading audio from YouTube: {url}")
        try:
            result = subprocess.run(
                self._build_command(url, output_path),
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise DownloadError(f"YouTube download timed out after {self.timeout} seconds.")
        except FileNotFoundError:
            raise DownloadError(f"YouTube downloader '{self.executable}' is not installed.")

        if result.returncode != 0:
            details = (result.stderr or "").strip().splitlines()
            reason = details[-1] if details else f"exit code {result.returncode}"
            raise DownloadError(f"Failed to download YouTube audio: {reason}")

        if not os.path.isfile(output_path):
            raise DownloadError("Failed to download YouTube audio: no output file was produced.")

        logging.info(f"Audio saved to: {output_path}")
        return output_path

    @contextmanager
    def download(self, url: str) -> Iterator[Path]:
        """
        Download a video's audio into a temporary file.

        Usage::

            with downloader.download(url) as path:
                data = path.read_bytes()

        The file is deleted when the block exits, including on failure.
        """
        with temporary_audio_path(self.temp_dir) as path:
            yield self.download_audio(url, path)

"""
Configuration settings for the meeting notes application.
"""

import os
from typing import Dict, Optional
from pathlib import Path
from dotenv import load_dotenv

from meeting_notes.utils.logger import logging


# Ensure environment variables are loaded
load_dotenv()

PLACEHOLDER_KEYS = {"", "YOUR_API_KEY_HERE"}


def read_secret(name: str) -> Optional[str]:
    """Read an API key from the environment, treating placeholders as unset."""
    value = os.getenv(name)
    if value is None or value.strip() in PLACEHOLDER_KEYS:
        return None
    return value.strip()


def read_flag(name: str, default: bool) -> bool:
    """Read a boolean toggle from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Meeting Notes Generator"
    APP_VERSION = "0.2.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()

    # API keys
    ASSEMBLYAI_API_KEY = read_secret("ASSEMBLYAI_API_KEY")
    OPENAI_API_KEY = read_secret("OPENAI_API_KEY")

    # Transcription options
    SPEECH_MODEL = os.getenv("ASSEMBLYAI_SPEECH_MODEL", "universal")
    ENABLE_SUMMARIZATION = read_flag("ASSEMBLYAI_SUMMARIZATION", True)
    ENABLE_AUTO_CHAPTERS = read_flag("ASSEMBLYAI_AUTO_CHAPTERS", True)
    LEMUR_FINAL_MODEL = os.getenv("LEMUR_FINAL_MODEL")

    # Chat completion summarizer
    DEFAULT_SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "gpt-4o-mini")
    SUMMARY_MODEL_PROVIDER = os.getenv("SUMMARY_MODEL_PROVIDER", "openai")
    CHAT_SUMMARY_FALLBACK = read_flag("CHAT_SUMMARY_FALLBACK", True)

    # YouTube downloads
    YTDLP_PATH = os.getenv("YTDLP_PATH", "yt-dlp")
    DOWNLOAD_TIMEOUT = int(os.getenv("YOUTUBE_DOWNLOAD_TIMEOUT", "300"))

    OUTPUT_FILENAME = "notes-output.md"
    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # Validate required environment variables
        if not cls.ASSEMBLYAI_API_KEY:
            logging.warning(
                "ASSEMBLYAI_API_KEY environment variable not set. "
                "Set it in the .env file or environment variables."
            )
        if not cls.OPENAI_API_KEY:
            logging.warning(
                "OPENAI_API_KEY environment variable not set. "
                "Chat model summarization will be unavailable."
            )

    @classmethod
    def get_api_keys(cls) -> Dict[str, bool]:
        """Report which vendor credentials are configured."""
        return {
            "assemblyai": bool(cls.ASSEMBLYAI_API_KEY),
            "openai": bool(cls.OPENAI_API_KEY),
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()

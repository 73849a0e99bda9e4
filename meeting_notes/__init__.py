"""
Meeting Notes Generator.

This application transcribes meeting audio with speaker labels and generates
summaries, action items and topics using hosted speech and language models.
"""

from meeting_notes.config import config

__version__ = config.APP_VERSION

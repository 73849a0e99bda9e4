"""
Configuration for pytest tests.
"""

import os

# Credentials must exist before meeting_notes.config is imported
os.environ.setdefault("ASSEMBLYAI_API_KEY", "test_assemblyai_key")
os.environ.setdefault("OPENAI_API_KEY", "test_openai_key")
os.environ["ENVIRONMENT"] = "development"

from types import SimpleNamespace
from unittest.mock import MagicMock

import assemblyai as aai
import pytest

from meeting_notes.models.schemas import TranscriptResult, Utterance


def make_transcript(
    utterances=(("A", "Hello"), ("B", "Hi there")),
    summary=None,
    chapters=(),
    status="completed",
    transcript_id="tr_123",
):
    """Build a stand-in for a completed assemblyai.Transcript."""
    transcript = MagicMock(spec=aai.Transcript)
    transcript.id = transcript_id
    transcript.status = status
    transcript.error = None
    transcript.utterances = [SimpleNamespace(speaker=s, text=t) for s, t in utterances]
    transcript.summary = summary
    transcript.chapters = [SimpleNamespace(headline=h) for h in chapters]
    return transcript


@pytest.fixture
def transcript():
    """Return a completed two-speaker transcript."""
    return make_transcript()


@pytest.fixture
def utterances():
    """Return the utterances of a short conversation."""
    return [Utterance(speaker="A", text="Hello"), Utterance(speaker="B", text="Hi there")]


@pytest.fixture
def full_result(utterances):
    """Return a result with every analysis available."""
    return TranscriptResult(
        utterances=utterances,
        summary="The team greeted each other.",
        action_items="- Send the agenda",
        topics="- Greetings",
        lemur_available=True,
        summary_available=True,
        topics_available=True,
    )


@pytest.fixture
def transcript_only_result(utterances):
    """Return a result without any analysis."""
    return TranscriptResult(utterances=utterances)


@pytest.fixture
def transcript_factory():
    """Return the factory for completed transcripts."""
    return make_transcript

"""
Tests for the transcript summarizer module.
"""

import pytest
from unittest.mock import patch

from langchain_core.documents import Document
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from meeting_notes.config import config
from meeting_notes.core.summarizer import TranscriptSummarizer
from meeting_notes.models.schemas import SummaryConfig
from meeting_notes.utils.error_handling import (
    ConfigurationError,
    InputValidationError,
    SummarizationError,
)


@pytest.fixture
def mock_init_chat_model():
    """Fixture to replace the chat model with a scripted fake."""
    with patch("meeting_notes.core.summarizer.init_chat_model") as mock_init_model:
        mock_init_model.return_value = FakeListChatModel(
            responses=["This is a summarized transcript of the meeting."]
        )
        yield mock_init_model


@pytest.fixture
def summary_config():
    """Fixture to create a SummaryConfig object."""
    return SummaryConfig(
        model="gpt-4o-mini",
        model_provider="openai",
        temperature=0.3,
        max_tokens=500,
    )


def test_init_summarizer(summary_config):
    """Test initializing the summarizer."""
    summarizer = TranscriptSummarizer(summary_config, api_key="test_key")
    assert summarizer.api_key == "test_key"


def test_init_summarizer_without_key(summary_config):
    """A missing key is a configuration error."""
    with patch.object(config, "OPENAI_API_KEY", None):
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            TranscriptSummarizer(summary_config)


def test_summarize_short_transcript(mock_init_chat_model, summary_config):
    """A short transcript is summarized in one call."""
    summarizer = TranscriptSummarizer(summary_config, api_key="test_key")
    summary = summarizer.summarize("Speaker A: Hello\nSpeaker B: Hi there")

    assert summary == "This is a summarized transcript of the meeting."
    mock_init_chat_model.assert_called_once_with(
        model="gpt-4o-mini",
        model_provider="openai",
        temperature=0.3,
        max_tokens=500,
        api_key="test_key",
    )


@patch("meeting_notes.core.summarizer.RecursiveCharacterTextSplitter.split_documents")
def test_summarize_long_transcript(mock_split_docs, mock_init_chat_model, summary_config):
    """A long transcript is summarized per chunk and then combined."""
    mock_split_docs.return_value = [
        Document(page_content="Speaker A: First half of the meeting."),
        Document(page_content="Speaker B: Second half of the meeting."),
    ]
    mock_init_chat_model.return_value = FakeListChatModel(
        responses=["First part summary.", "Second part summary.", "Combined summary."]
    )

    summarizer = TranscriptSummarizer(summary_config, api_key="test_key")
    summary = summarizer.summarize("Speaker A: a really long meeting " * 100)

    assert summary == "Combined summary."


def test_summarize_empty_text(mock_init_chat_model, summary_config):
    """Empty text is rejected before the model is called."""
    summarizer = TranscriptSummarizer(summary_config, api_key="test_key")

    with pytest.raises(InputValidationError, match="No transcript text provided."):
        summarizer.summarize("   ")

    mock_init_chat_model.assert_not_called()


def test_summarize_empty_response(mock_init_chat_model, summary_config):
    """A blank model answer is reported instead of returned."""
    mock_init_chat_model.return_value = FakeListChatModel(responses=["  "])

    summarizer = TranscriptSummarizer(summary_config, api_key="test_key")

    with pytest.raises(SummarizationError, match="No summary was generated."):
        summarizer.summarize("Speaker A: Hello")


def test_summarize_vendor_error(mock_init_chat_model, summary_config):
    """Vendor failures keep the vendor's message."""
    mock_init_chat_model.side_effect = ValueError("Incorrect API key provided")

    summarizer = TranscriptSummarizer(summary_config, api_key="test_key")

    with pytest.raises(SummarizationError, match="Incorrect API key provided"):
        summarizer.summarize("Speaker A: Hello")

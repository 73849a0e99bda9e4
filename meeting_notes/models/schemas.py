"""
Data models for the meeting notes application.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from meeting_notes.config import config


class ProgressStep(str, Enum):
    """Stages reported while a request is processed."""
    IDLE = "idle"
    UPLOADING = "uploading"
    TRANSCRIBING = "transcribing"
    ANALYZING = "analyzing"


class Utterance(BaseModel):
    """One contiguous speech segment attributed to a single speaker."""
    speaker: str
    text: str

    model_config = ConfigDict(frozen=True)


class AudioSource(BaseModel):
    """Raw input of a transcription request: a URL or an uploaded binary."""
    url: Optional[str] = None
    data: Optional[bytes] = None
    filename: Optional[str] = None


class TranscriptionConfig(BaseModel):
    """Configuration for transcription operations."""
    speech_model: Optional[str] = config.SPEECH_MODEL
    speaker_labels: bool = True
    summarization: bool = config.ENABLE_SUMMARIZATION
    summary_type: str = "paragraph"
    auto_chapters: bool = config.ENABLE_AUTO_CHAPTERS
    language_code: Optional[str] = None


class SummaryConfig(BaseModel):
    """Configuration for chat model summarization."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    model_provider: str = config.SUMMARY_MODEL_PROVIDER
    temperature: float = 0.3
    max_tokens: int = 500
    chunk_size: int = 100000
    chunk_overlap: int = 1000


class AnalysisResult(BaseModel):
    """Summary, action items and topics derived from a transcript."""
    summary: Optional[str] = None
    action_items: Optional[str] = None
    topics: Optional[str] = None
    lemur_available: bool = False
    summary_available: bool = False
    topics_available: bool = False


class TranscriptResult(BaseModel):
    """Everything produced for one transcription request."""
    utterances: List[Utterance] = []
    summary: Optional[str] = None
    action_items: Optional[str] = None
    topics: Optional[str] = None
    lemur_available: bool = False
    summary_available: bool = False
    topics_available: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_analysis(cls, utterances: List[Utterance], analysis: AnalysisResult) -> "TranscriptResult":
        return cls(utterances=utterances, **analysis.model_dump())

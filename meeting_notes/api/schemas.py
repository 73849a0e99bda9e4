from pydantic import BaseModel
from typing import Optional


class TranscribeRequest(BaseModel):
    """Model for JSON transcription requests."""
    url: Optional[str] = None


class SummarizeRequest(BaseModel):
    """Model for chat model summarization requests."""
    text: Optional[str] = None


class SummarizeResponse(BaseModel):
    """Model for summarization responses."""
    summary: str


class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str

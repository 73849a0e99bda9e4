"""
API routes for the meeting notes application.
"""

import json
import asyncio

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from meeting_notes.api.schemas import (
    ErrorResponse,
    SummarizeRequest,
    SummarizeResponse,
    TranscribeRequest,
)
from meeting_notes.core.audio_source import AudioSourceResolver
from meeting_notes.core.pipeline import MeetingNotesPipeline
from meeting_notes.core.summarizer import TranscriptSummarizer
from meeting_notes.models.schemas import AudioSource, TranscriptResult
from meeting_notes.utils.error_handling import ConfigurationError, InputValidationError
from meeting_notes.utils.logger import logging

router = APIRouter(prefix="/api", tags=["meeting-notes"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def get_pipeline(request: Request) -> MeetingNotesPipeline:
    """Dependency returning the pipeline built at startup."""
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        raise ConfigurationError("ASSEMBLYAI_API_KEY is not configured on the server.")
    return pipeline


def get_summarizer(request: Request) -> TranscriptSummarizer:
    """Dependency returning the chat model summarizer built at startup."""
    summarizer = getattr(request.app.state, "summarizer", None)
    if summarizer is None:
        raise ConfigurationError("OPENAI_API_KEY is not configured on the server.")
    return summarizer


async def read_audio_source(request: Request) -> AudioSource:
    """Read either a multipart file upload or a ``{"url": ...}`` JSON body."""
    content_type = request.headers.get("content-type", "")

    if "multipart/form-data" in content_type:
        form = await request.form()
        upload = form.get("file")
        if upload is None or isinstance(upload, str):
            raise InputValidationError("No file provided.")
        data = await upload.read()
        return AudioSource(data=data, filename=upload.filename)

    try:
        body = await request.json()
        payload = TranscribeRequest.model_validate(body)
    except (json.JSONDecodeError, ValidationError):
        raise InputValidationError("No audio URL provided.")
    return AudioSource(url=payload.url)


@router.post("/transcribe", response_model=TranscriptResult, responses=ERROR_RESPONSES)
async def transcribe(
    request: Request,
    pipeline: MeetingNotesPipeline = Depends(get_pipeline),
):
    """
    Transcribe an audio file or URL and generate meeting notes.

    - Multipart requests must carry the audio in a ``file`` field
    - JSON requests must carry ``{"url": ...}``; YouTube links are downloaded first
    """
    source = await read_audio_source(request)
    AudioSourceResolver.validate(source)
    result = await pipeline.run(source)
    logging.info(
        f"Transcribed {len(result.utterances)} utterances "
        f"(lemur={result.lemur_available}, summary={result.summary_available}, "
        f"topics={result.topics_available})"
    )
    return result


@router.post("/summarize", response_model=SummarizeResponse, responses=ERROR_RESPONSES)
async def summarize(
    summarize_request: SummarizeRequest,
    summarizer: TranscriptSummarizer = Depends(get_summarizer),
):
    """Summarize transcript text with the chat completion model."""
    text = summarize_request.text
    if not text or not text.strip():
        raise InputValidationError("No transcript text provided.")

    summary = await asyncio.to_thread(summarizer.summarize, text)
    return SummarizeResponse(summary=summary)

"""
FastAPI application for the meeting notes generator.
"""

import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from meeting_notes.config import config
from meeting_notes.api.routes import router
from meeting_notes.core.pipeline import MeetingNotesPipeline, build_pipeline, build_summarizer
from meeting_notes.core.summarizer import TranscriptSummarizer
from meeting_notes.utils.error_handling import register_exception_handlers
from meeting_notes.utils.logger import logging


def create_app(
    pipeline: Optional[MeetingNotesPipeline] = None,
    summarizer: Optional[TranscriptSummarizer] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Vendor clients are built once here from the configuration, unless they
    are passed in, and handed to the routes through ``app.state``.

    Args:
        pipeline: Transcription pipeline (built from config if None)
        summarizer: Chat model summarizer (built from config if None)
    """
    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="An API for transcribing meetings and generating notes",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if summarizer is None:
        summarizer = build_summarizer()
    if pipeline is None:
        pipeline = build_pipeline(summarizer=summarizer)

    app.state.summarizer = summarizer
    app.state.pipeline = pipeline
    logging.info(
        f"Services ready (transcription={pipeline is not None}, "
        f"chat summarization={summarizer is not None})"
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    register_exception_handlers(app)

    # Include API router
    app.include_router(router)

    # Root
    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "description": "Meeting Notes Generator API",
        }

    return app


app = create_app()

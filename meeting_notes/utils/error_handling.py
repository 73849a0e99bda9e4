"""
Centralized error handling for the application.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from meeting_notes.utils.logger import logging


class MeetingNotesError(Exception):
    """Base class for errors reported to the caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(MeetingNotesError):
    """A required server credential or setting is missing."""

    status_code = 500


class InputValidationError(MeetingNotesError):
    """The request is missing its file, URL or text."""

    status_code = 400


class TranscriptionError(MeetingNotesError):
    """The transcription service reported an error status."""


class DownloadError(MeetingNotesError):
    """The YouTube downloader timed out, failed or produced no file."""


class SummarizationError(MeetingNotesError):
    """The chat model failed or returned nothing."""


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    """Build the uniform ``{"error": message}`` response."""
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI):
    """
    Convert every failure at the request boundary into an error response.

    Args:
        app: FastAPI application to attach the handlers to
    """

    @app.exception_handler(MeetingNotesError)
    async def meeting_notes_error_handler(request: Request, exc: MeetingNotesError):
        if exc.status_code >= 500:
            logging.error(f"{request.url.path} failed: {exc.message}")
        else:
            logging.info(f"{request.url.path} rejected: {exc.message}")
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request.") if errors else "Invalid request."
        return error_response(message, 400)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.exception(f"Unexpected error on {request.url.path}")
        return error_response(str(exc) or "An unexpected error occurred.", 500)

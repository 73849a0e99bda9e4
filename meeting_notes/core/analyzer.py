"""
Module for analysing completed transcripts.

Summary, action items and topics are requested from LeMUR as three
independent tasks. Each one either yields text or ``None``; a failing task
never affects its siblings. Missing results are then filled from the
transcription service's built-in summary and auto chapters, and finally from
the chat model summarizer.
"""

import asyncio
from typing import Any, Callable, Dict, Optional

import assemblyai as aai

from meeting_notes.config import config
from meeting_notes.core import prompts
from meeting_notes.core.summarizer import TranscriptSummarizer
from meeting_notes.models.schemas import AnalysisResult
from meeting_notes.utils.logger import logging


async def attempt_all(attempts: Dict[str, Callable[[], Any]]) -> Dict[str, Optional[Any]]:
    """
    Run blocking calls concurrently and wait until every one has settled.

    Args:
        attempts: Mapping of a name to a zero-argument callable

    Returns:
        Mapping of the same names to each call's result, or ``None`` where
        the call raised
    """
    names = list(attempts)
    results = await asyncio.gather(
        *(asyncio.to_thread(attempts[name]) for name in names),
        return_exceptions=True,
    )

    settled = {}
    for name, result in zip(names, results):
        if isinstance(result, Exception):
            logging.warning(f"{name} unavailable: {result}")
            settled[name] = None
        elif isinstance(result, BaseException):
            raise result
        else:
            settled[name] = result
    return settled


def _clean(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = text.strip()
    return text or None


def chapters_as_topics(transcript) -> Optional[str]:
    """Render auto chapter headlines as a bullet list."""
    headlines = [c.headline for c in (transcript.chapters or []) if c.headline]
    if not headlines:
        return None
    return "\n".join(f"- {headline}" for headline in headlines)


class TranscriptAnalyzer:
    """Class to derive summary, action items and topics from a transcript."""

    def __init__(
        self,
        summarizer: Optional[TranscriptSummarizer] = None,
        lemur_final_model: Optional[str] = config.LEMUR_FINAL_MODEL,
    ):
        """
        Initialize the analyzer.

        Args:
            summarizer: Chat model summarizer used when no other summary exists
            lemur_final_model: LeMUR model name (service default if None)
        """
        self.summarizer = summarizer
        self.lemur_final_model = lemur_final_model

    def ask_lemur(self, transcript, prompt: str) -> Optional[str]:
        """Run one LeMUR task against a completed transcript."""
        kwargs = {}
        if self.lemur_final_model:
            kwargs["final_model"] = aai.LemurModel(self.lemur_final_model)
        result = transcript.lemur.task(prompt, **kwargs)
        return _clean(result.response)

    async def analyze(self, transcript, transcript_text: str = "") -> AnalysisResult:
        """
        Analyse a completed transcript.

        Args:
            transcript: Completed ``assemblyai.Transcript``
            transcript_text: Speaker-tagged plain text, used by the chat
                model fallback

        Returns:
            AnalysisResult with availability flags set
        """
        lemur = await attempt_all({
            "LeMUR summary": lambda: self.ask_lemur(transcript, prompts.summary_prompt),
            "LeMUR action items": lambda: self.ask_lemur(transcript, prompts.action_items_prompt),
            "LeMUR topics": lambda: self.ask_lemur(transcript, prompts.topics_prompt),
        })
        summary = lemur["LeMUR summary"]
        action_items = lemur["LeMUR action items"]
        topics = lemur["LeMUR topics"]
        lemur_available = any(value is not None for value in lemur.values())

        if not lemur_available:
            logging.info("LeMUR analysis unavailable, falling back to built-in results")

        # Fallback to built-in summarization and auto chapters
        if summary is None:
            summary = _clean(transcript.summary)
        if topics is None:
            topics = chapters_as_topics(transcript)

        if summary is None and self.summarizer is not None and transcript_text.strip():
            fallback = await attempt_all({
                "Chat model summary": lambda: self.summarizer.summarize(transcript_text),
            })
            summary = fallback["Chat model summary"]

        return AnalysisResult(
            summary=summary,
            action_items=action_items,
            topics=topics,
            lemur_available=lemur_available,
            summary_available=summary is not None,
            topics_available=topics is not None,
        )

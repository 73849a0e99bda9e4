"""
Request pipeline: resolve the audio source, transcribe, analyse.
"""

import asyncio
from typing import Callable, Optional

from meeting_notes.config import config
from meeting_notes.core.analyzer import TranscriptAnalyzer
from meeting_notes.core.audio_source import AudioSourceResolver
from meeting_notes.core.presentation import format_transcript_text
from meeting_notes.core.summarizer import TranscriptSummarizer
from meeting_notes.core.transcriber import AudioTranscriber
from meeting_notes.models.schemas import (
    AudioSource,
    ProgressStep,
    TranscriptionConfig,
    TranscriptResult,
)
from meeting_notes.utils.logger import logging

ProgressCallback = Callable[[ProgressStep], None]


class MeetingNotesPipeline:
    """Runs one transcription request from input to TranscriptResult."""

    def __init__(
        self,
        transcriber: AudioTranscriber,
        analyzer: TranscriptAnalyzer,
        resolver: Optional[AudioSourceResolver] = None,
    ):
        self.transcriber = transcriber
        self.analyzer = analyzer
        self.resolver = resolver or AudioSourceResolver(transcriber)

    async def run(
        self, source: AudioSource, on_progress: Optional[ProgressCallback] = None
    ) -> TranscriptResult:
        """
        Process one audio source.

        Progress moves through uploading, transcribing and analyzing and
        always returns to idle, whether the request succeeds or fails.

        Args:
            source: URL or uploaded binary
            on_progress: Called with each ProgressStep as it starts

        Returns:
            TranscriptResult with utterances, analysis and availability flags
        """
        def report(step: ProgressStep):
            if on_progress is not None:
                on_progress(step)

        AudioSourceResolver.validate(source)

        try:
            report(ProgressStep.UPLOADING)
            audio_url = await self.resolver.resolve(source)

            report(ProgressStep.TRANSCRIBING)
            transcript = await asyncio.to_thread(self.transcriber.transcribe, audio_url)
            utterances = self.transcriber.get_utterances(transcript)
            logging.info(f"Transcript has {len(utterances)} utterances")

            report(ProgressStep.ANALYZING)
            analysis = await self.analyzer.analyze(transcript, format_transcript_text(utterances))

            return TranscriptResult.from_analysis(utterances, analysis)
        finally:
            report(ProgressStep.IDLE)


def build_summarizer(api_key: Optional[str] = None) -> Optional[TranscriptSummarizer]:
    """Build the chat model summarizer, or None when no key is configured."""
    api_key = api_key or config.OPENAI_API_KEY
    if not api_key:
        return None
    return TranscriptSummarizer(api_key=api_key)


def build_pipeline(
    api_key: Optional[str] = None,
    summarizer: Optional[TranscriptSummarizer] = None,
) -> Optional[MeetingNotesPipeline]:
    """
    Build the pipeline from configuration.

    Returns:
        The pipeline, or None when the transcription credential is missing
    """
    api_key = api_key or config.ASSEMBLYAI_API_KEY
    if not api_key:
        return None

    transcriber = AudioTranscriber(TranscriptionConfig(), api_key=api_key)
    fallback = summarizer if config.CHAT_SUMMARY_FALLBACK else None
    return MeetingNotesPipeline(transcriber, TranscriptAnalyzer(summarizer=fallback))

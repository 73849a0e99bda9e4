"""
Module for transcribing audio with speaker diarization using AssemblyAI.
"""

from io import BytesIO
from typing import List, Optional

import assemblyai as aai

from meeting_notes.config import config
from meeting_notes.models.schemas import TranscriptionConfig, Utterance
from meeting_notes.utils.error_handling import ConfigurationError, TranscriptionError
from meeting_notes.utils.logger import logging


def resolve_speech_model(name: str):
    """
    Map a configured speech model name onto the SDK enum.

    Raises:
        ConfigurationError: if the installed SDK does not know the model
    """
    try:
        return aai.SpeechModel(name)
    except ValueError:
        supported = ", ".join(model.value for model in aai.SpeechModel)
        raise ConfigurationError(
            f"Unsupported ASSEMBLYAI_SPEECH_MODEL '{name}'. Supported values: {supported}."
        )


class AudioTranscriber:
    """Class to handle audio upload and transcription operations."""

    def __init__(
        self, transcription_config: TranscriptionConfig, api_key: Optional[str] = None
    ):
        """
        Initialize the transcriber with API key.

        Args:
            transcription_config: Options sent with every transcription job
            api_key: AssemblyAI API key (if None, taken from the configuration)
        """
        self.transcription_config = transcription_config
        self.api_key = api_key or config.ASSEMBLYAI_API_KEY
        if not self.api_key:
            raise ConfigurationError("ASSEMBLYAI_API_KEY is not configured on the server.")

        self.speech_model = None
        if transcription_config.speech_model:
            self.speech_model = resolve_speech_model(transcription_config.speech_model)

        self.client = aai.Client(settings=aai.Settings(api_key=self.api_key))
        self.transcriber = aai.Transcriber(client=self.client)

    def _build_config(self):
        options = self.transcription_config
        kwargs = {
            "speaker_labels": options.speaker_labels,
            "auto_chapters": options.auto_chapters,
        }
        if options.language_code:
            kwargs["language_code"] = options.language_code
        if self.speech_model is not None:
            kwargs["speech_model"] = self.speech_model
        if options.summarization:
            kwargs["summarization"] = True
            kwargs["summary_type"] = aai.SummarizationType(options.summary_type)
        return aai.TranscriptionConfig(**kwargs)

    def upload(self, data: bytes, filename: Optional[str] = None) -> str:
        """
        Upload audio bytes to the AssemblyAI staging endpoint.

        Args:
            data: Raw audio content
            filename: Original file name, only used for logging

        Returns:
            The vendor-side URL of the uploaded audio
        """
        logging.info(f"Uploading {len(data)} bytes of audio ({filename or 'unnamed'})")
        upload_url = self.transcriber.upload_file(BytesIO(data))
        logging.info("Upload complete.")
        return upload_url

    def transcribe(self, audio_url: str):
        """
        Transcribe audio with speaker labels and wait for the job to finish.

        Args:
            audio_url: Public or previously uploaded audio URL

        Returns:
            The completed ``assemblyai.Transcript``

        Raises:
            TranscriptionError: if the service reports an error status
        """
        logging.info("Submitting transcription job with speaker diarization")
        transcript = self.transcriber.transcribe(audio_url, config=self._build_config())

        if transcript.status == aai.TranscriptStatus.error:
            raise TranscriptionError(f"Transcription failed: {transcript.error}")

        logging.info(f"Transcription complete: {transcript.id}")
        return transcript

    @staticmethod
    def get_utterances(transcript) -> List[Utterance]:
        """Extract the speaker-tagged utterances in conversation order."""
        return [
            Utterance(speaker=u.speaker, text=u.text)
            for u in (transcript.utterances or [])
        ]

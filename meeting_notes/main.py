"""
Command line entry point for the meeting notes generator.
"""

import os
import sys
import asyncio
import argparse
from pathlib import Path
from dotenv import load_dotenv

from meeting_notes.config import config
from meeting_notes.core.markdown_export import generate_markdown, save_markdown
from meeting_notes.core.pipeline import build_pipeline, build_summarizer
from meeting_notes.models.schemas import AudioSource, ProgressStep, TranscriptResult
from meeting_notes.utils.error_handling import MeetingNotesError
from meeting_notes.utils.logger import logging

LEMUR_UNAVAILABLE_MESSAGE = (
    "  LeMUR is not available on your plan.\n"
    "  Upgrade at https://www.assemblyai.com/dashboard to enable\n"
    "  AI-generated summaries, action items, and topics.\n"
    "  Saving transcript-only output.\n"
)


def is_url(value: str) -> bool:
    return value.startswith("http://") or value.startswith("https://")


def divider(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def load_source(value: str) -> AudioSource:
    """Build an AudioSource from a URL or a local file path."""
    if is_url(value):
        return AudioSource(url=value)
    path = Path(value)
    return AudioSource(data=path.read_bytes(), filename=path.name)


def print_progress(step: ProgressStep):
    if step == ProgressStep.TRANSCRIBING:
        print(divider("TRANSCRIBING AUDIO"))
        print("\n  Speaker diarization: enabled")
        print("  Please wait...\n")
    elif step == ProgressStep.ANALYZING:
        print(divider("GENERATING MEETING NOTES WITH LeMUR"))
        print("\n  Analyzing transcript...\n")


def print_result(result: TranscriptResult):
    """Print the transcript and analysis sections."""
    print(divider("TRANSCRIPT (by speaker)"))
    print()
    for utterance in result.utterances:
        print(f"  Speaker {utterance.speaker}: {utterance.text}")

    if not result.lemur_available:
        print()
        print(LEMUR_UNAVAILABLE_MESSAGE)

    if result.summary_available:
        print(divider("MEETING SUMMARY"))
        print(f"\n{result.summary}\n")

    if result.action_items:
        print(divider("ACTION ITEMS"))
        print(f"\n{result.action_items}\n")

    if result.topics_available:
        print(divider("TOPICS DISCUSSED"))
        print(f"\n{result.topics}\n")


def generate_meeting_notes(source: str, output_file: str = config.OUTPUT_FILENAME) -> TranscriptResult:
    """
    Transcribe an audio URL or local file, analyse it and save Markdown notes.

    Args:
        source: Audio URL, YouTube link or local file path
        output_file: Path of the Markdown file to write

    Returns:
        TranscriptResult
    """
    pipeline = build_pipeline(summarizer=build_summarizer())
    if pipeline is None:
        raise MeetingNotesError(
            "Missing API key. Set ASSEMBLYAI_API_KEY in your .env file.\n"
            "  Get a free key at https://www.assemblyai.com/dashboard/signup"
        )

    if not is_url(source) and not os.path.isfile(source):
        raise MeetingNotesError(f"File not found: {source}")

    print(divider("SOURCE"))
    print(f"\n  {source}")

    result = asyncio.run(pipeline.run(load_source(source), on_progress=print_progress))
    print_result(result)

    save_markdown(generate_markdown(result), output_file)
    print(divider("SAVED"))
    print(f"\n  Output written to {output_file}\n")
    return result


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Meeting Notes Generator")
    parser.add_argument("source", help="Audio URL, YouTube link or local file path")
    parser.add_argument("--output", default=config.OUTPUT_FILENAME,
                        help="Output file path for the Markdown notes")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    try:
        generate_meeting_notes(args.source, args.output)
    except MeetingNotesError as e:
        print(f"\nError: {e.message}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logging.exception("Meeting notes generation failed")
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
